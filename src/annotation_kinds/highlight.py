from __future__ import annotations

from annotation_kinds.context import NormalizeContext
from core.annotation import Annotation
from core.annotation_kind import AnnotationKind
from core.facts import HighlightFact
from core.render_node import SLOT, h


def normalize_highlight(fact: HighlightFact, ctx: NormalizeContext) -> Annotation | None:
    if ctx.document.get_line(fact.line) is None:
        return None
    return Annotation(
        kind=AnnotationKind.HIGHLIGHT,
        line=fact.line,
        column_start=fact.character,
        column_end=fact.character + fact.length,
        node=h("span.twoslash-highlighted", [SLOT]),
        fact=fact,
    )
