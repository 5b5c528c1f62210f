"""
Query annotations — the static type box printed under a ``// ^?`` query.

The box is attached past the end of the line's text, indented so it
lines up with the queried identifier.
"""
from __future__ import annotations

from annotation_kinds.context import NormalizeContext
from annotation_kinds.type_info import build_type_info, render_type_info
from core.annotation import Annotation
from core.annotation_kind import AnnotationKind
from core.facts import QueryFact
from core.render_node import SLOT, h


def normalize_query(fact: QueryFact, ctx: NormalizeContext) -> Annotation | None:
    line = ctx.document.get_line(fact.line)
    if line is None:
        return None

    info = build_type_info(fact.text, fact.docs, fact.tags, ctx)
    node = h("span.twoslash-noline", [
        SLOT,
        h("div.twoslash-static", {"style": {"margin-left": ctx.margin_left(fact.character)}}, [
            h("div.twoslash-static-container.not-content", render_type_info(info, ctx)),
        ]),
    ])

    end_of_text = len(line.text)
    return Annotation(
        kind=AnnotationKind.QUERY,
        line=fact.line,
        column_start=end_of_text,
        column_end=end_of_text + fact.length,
        node=node,
        fact=fact,
        payload=info,
    )
