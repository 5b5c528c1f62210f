"""
Hover annotations — inline popups with type information.

A hover covers ``[character, character + length)`` on its line.  When
a query on the same line already shows the same type, the overlap
resolver calls :func:`demote_to_static` so the identifier keeps its
position but loses the floating popup.
"""
from __future__ import annotations

from annotation_kinds.context import NormalizeContext
from annotation_kinds.type_info import build_type_info, render_type_info
from core.annotation import Annotation
from core.annotation_kind import AnnotationKind
from core.facts import HoverFact
from core.render_node import SLOT, h


def normalize_hover(fact: HoverFact, ctx: NormalizeContext) -> Annotation | None:
    if ctx.document.get_line(fact.line) is None:
        return None

    info = build_type_info(fact.text, fact.docs, fact.tags, ctx)
    popup = h("div.twoslash-popup-container.not-content", render_type_info(info, ctx))
    node = h("span.twoslash", [h("span.twoslash-hover", [popup, SLOT])])

    return Annotation(
        kind=AnnotationKind.HOVER,
        line=fact.line,
        column_start=fact.character,
        column_end=fact.character + fact.length,
        node=node,
        fact=fact,
        payload=info,
    )


def demote_to_static(annotation: Annotation) -> Annotation:
    """Same span and payload, rendered in place without a popup."""
    return annotation.replace(
        kind=AnnotationKind.STATIC,
        node=h("span.twoslash-noline", [SLOT]),
    )
