"""
Completion annotations — the candidate list shown at a ``// ^|`` cursor.

The span starts at the anchor (the cursor column minus the prefix the
user already typed) and runs to the cursor, so an empty prefix gives an
empty span.  Only the first :data:`MAX_COMPLETION_ITEMS` candidates are
kept, in the analyzer's order.
"""
from __future__ import annotations

from dataclasses import dataclass

from annotation_kinds.context import NormalizeContext
from annotation_kinds.icons import completion_icon
from core.annotation import Annotation
from core.annotation_kind import AnnotationKind
from core.facts import CompletionEntry, CompletionFact
from core.render_node import SLOT, RenderNode, h

MAX_COMPLETION_ITEMS = 5
DEPRECATED_MODIFIER = "deprecated"


@dataclass(frozen=True, slots=True)
class CompletionItem:
    name: str
    kind: str
    icon: RenderNode
    is_deprecated: bool = False


def is_deprecated(kind_modifiers: str | None) -> bool:
    if not kind_modifiers:
        return False
    return DEPRECATED_MODIFIER in (m.strip() for m in kind_modifiers.split(","))


def to_item(entry: CompletionEntry) -> CompletionItem:
    kind, icon = completion_icon(entry.kind)
    return CompletionItem(
        name=entry.name,
        kind=kind,
        icon=icon,
        is_deprecated=is_deprecated(entry.kind_modifiers),
    )


def completion_span(fact: CompletionFact) -> tuple[int, int]:
    """Return ``(column_start, column_end)`` for a completion."""
    anchor = fact.character - len(fact.completions_prefix)
    return anchor, fact.character


def _render_item(item: CompletionItem, index: int, prefix: str) -> RenderNode:
    classes = []
    if item.is_deprecated:
        classes.append("twoslash-completion-item-deprecated")
    if index:
        classes.append("twoslash-completion-item-separator")

    matched = prefix if prefix and item.name.startswith(prefix) else ""
    return h("div.twoslash-completion-item", {"class": " ".join(classes)}, [
        h("span.twoslash-completion-icon", {"class": item.kind}, [item.icon]),
        h("span.twoslash-completion-name", [
            h("span.twoslash-completion-name-matched", matched),
            h("span.twoslash-completion-name-unmatched", item.name[len(matched):]),
        ]),
    ])


def normalize_completion(fact: CompletionFact, ctx: NormalizeContext) -> Annotation | None:
    if ctx.document.get_line(fact.line) is None:
        return None

    items = tuple(to_item(entry) for entry in fact.completions[:MAX_COMPLETION_ITEMS])
    column_start, column_end = completion_span(fact)
    node = h("span", [
        SLOT,
        h("span.twoslash-cursor", " "),
        h("div.twoslash-completion", {"style": {"margin-left": ctx.margin_left(column_start)}}, [
            h("div.twoslash-completion-container", [
                _render_item(item, i, fact.completions_prefix) for i, item in enumerate(items)
            ]),
        ]),
    ])

    return Annotation(
        kind=AnnotationKind.COMPLETION,
        line=fact.line,
        column_start=column_start,
        column_end=column_end,
        node=node,
        fact=fact,
        payload=items,
    )
