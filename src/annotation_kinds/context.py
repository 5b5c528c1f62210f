from __future__ import annotations

from dataclasses import dataclass, field

from core.document import SourceDocument
from core.interfaces import IMarkupRenderer
from core.options import CompositorOptions


@dataclass(slots=True)
class NormalizeContext:
    """Everything a fact normalizer may read.

    ``document`` is the post-cut, post-reconciliation document; fact
    lines resolve against it.
    """
    document: SourceDocument
    renderer: IMarkupRenderer
    options: CompositorOptions = field(default_factory=CompositorOptions)

    @property
    def include_jsdoc(self) -> bool:
        return self.options.include_jsdoc

    def margin_left(self, chars: int) -> str:
        return f"{self.options.text_width(chars):g}px"
