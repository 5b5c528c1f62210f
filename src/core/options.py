"""
CompositorOptions — configuration for one compositor instance.

Defaults follow the behaviour users of the TypeScript twoslash
integration expect: only ``ts``/``tsx`` blocks, only when the block
meta contains ``twoslash``, JSDoc rendered, strict ES2022 compiler
settings.
"""
from __future__ import annotations

import copy
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Union

# Fields an equality policy may compare.
EQUALITY_FIELDS: frozenset[str] = frozenset({"line", "start", "character", "length", "text"})

DEFAULT_TRIGGER = re.compile(r"\btwoslash\b")

DEFAULT_COMPILER_OPTIONS: Mapping[str, Any] = MappingProxyType({
    "strict": True,
    "target": "ES2022",
    "exactOptionalPropertyTypes": True,
    "downlevelIteration": True,
    "skipLibCheck": True,
    "lib": ["ES2022", "DOM", "DOM.Iterable"],
    "noEmit": True,
})


@dataclass(frozen=True, slots=True)
class CompositorOptions:
    """
    Attributes:
        explicit_trigger:    ``True`` → the block meta must match
                             ``\\btwoslash\\b``; a compiled pattern → the
                             meta must match it; ``False`` → every block in
                             an enabled language is processed.
        languages:           Languages the compositor handles.
        include_jsdoc:       Render documentation bodies and JSDoc tags.
        compiler_options:    Overrides merged over
                             :data:`DEFAULT_COMPILER_OPTIONS`.
        query_equality:      Fields compared when matching a hover
                             against a query.
        diagnostic_equality: Fields compared when matching a hover
                             against a diagnostic.
        font_size:           Used for pixel offsets of static boxes.
        char_width:          Character width in pixels at font size 16.
    """
    explicit_trigger: Union[bool, re.Pattern] = True
    languages: frozenset[str] = frozenset({"ts", "tsx"})
    include_jsdoc: bool = True
    compiler_options: Mapping[str, Any] = field(default_factory=dict)
    query_equality: frozenset[str] = frozenset({"line", "text"})
    diagnostic_equality: frozenset[str] = frozenset({"line", "start", "length", "character"})
    font_size: int = 16
    char_width: int = 8

    def __post_init__(self):
        for name in ("query_equality", "diagnostic_equality"):
            unknown = set(getattr(self, name)) - EQUALITY_FIELDS
            if unknown:
                raise ValueError(
                    f"Unknown equality field(s) in {name}: {', '.join(sorted(unknown))}"
                )

    @property
    def trigger(self) -> re.Pattern:
        if isinstance(self.explicit_trigger, re.Pattern):
            return self.explicit_trigger
        return DEFAULT_TRIGGER

    def should_transform(self, language: str, meta: str = "") -> bool:
        """Whether a block in *language* with *meta* gets processed."""
        if language not in self.languages:
            return False
        if self.explicit_trigger is False:
            return True
        return bool(self.trigger.search(meta or ""))

    def merged_compiler_options(self) -> dict[str, Any]:
        """Defaults overlaid with ``compiler_options``, as a fresh deep copy."""
        return copy.deepcopy({**DEFAULT_COMPILER_OPTIONS, **self.compiler_options})

    def text_width(self, chars: int) -> float:
        """Pixel width of *chars* monospace characters."""
        return chars * self.char_width * (self.font_size / 16)
