from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from core.annotation_kind import AnnotationKind, BLOCK_KINDS
from core.facts import SemanticFact
from core.render_node import RenderNode


@dataclass(frozen=True, slots=True)
class Annotation:
    """
    Render-ready form of a semantic fact, anchored to a column range.

    Attributes:
        kind:         What the annotation shows.  May differ from
                      ``fact.kind`` after overlap resolution (a hover
                      demoted to ``STATIC``).
        line:         0-based target line in the post-cut document.
        column_start: First column covered.
        column_end:   One past the last column covered.
        node:         Display tree; contains ``SLOT`` where the source
                      text goes.
        fact:         The fact this annotation was built from.
        payload:      Kind-specific resolved payload (cleaned type text,
                      severity, completion items, tag info).
    """
    kind: AnnotationKind
    line: int
    column_start: int
    column_end: int
    node: RenderNode
    fact: SemanticFact
    payload: Any = None

    @property
    def is_block(self) -> bool:
        return self.kind in BLOCK_KINDS

    def replace(self, **changes: Any) -> Annotation:
        return dataclasses.replace(self, **changes)
