"""
SourceLine — one line of a code block in the host document.

The compositor reads and rewrites ``text`` and attaches annotations; it
never creates lines.  ``index`` is the line's current 0-based position
and is reassigned by :class:`SourceDocument` after every deletion, so
there are never gaps.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.annotation import Annotation


@dataclass(slots=True)
class SourceLine:
    """
    Mutable representation of one source line.

    Attributes:
        line_id:     Stable UUID, survives deletions of other lines.
        index:       Current 0-based position inside the owning document.
        text:        Current text of the line (no trailing newline).
        annotations: Annotations attached so far, in attachment order.
    """
    line_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    index: int = 0
    text: str = ""
    annotations: list[Annotation] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.text)
