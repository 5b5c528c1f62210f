"""
Custom tag annotations — ``// @log: …``, ``// @warn: …`` and friends.

The tag's target line is resolved in this order:

1. the tag's declared line, if its text ends with the literal tag
   comment (a tag written after code on the same line),
2. the first surviving line whose text ends with that comment,
3. the tag's declared line, if it exists,
4. the nearest existing line searching forward, then backward.

If the document has no lines at all the tag is dropped.  The box spans
the whole line.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from annotation_kinds.context import NormalizeContext
from annotation_kinds.icons import custom_tag_icon
from core.annotation import Annotation
from core.annotation_kind import AnnotationKind
from core.document import SourceDocument
from core.facts import TagFact
from core.render_node import SLOT, h
from core.source_line import SourceLine

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TagStyle:
    title: str
    css_class: str


TAG_STYLES: dict[str, TagStyle] = {
    "warn": TagStyle("Warning", "twoslash-custom-level-warning"),
    "annotate": TagStyle("Message", "twoslash-custom-level-suggestion"),
    "log": TagStyle("Log", "twoslash-custom-level-message"),
    "error": TagStyle("Error", "twoslash-custom-level-error"),
}


def tag_style(name: str) -> TagStyle:
    return TAG_STYLES.get(name, TAG_STYLES["error"])


def _tag_comment(fact: TagFact) -> str:
    return f"// @{fact.name}: {fact.text}" if fact.text else f"// @{fact.name}"


def resolve_tag_line(document: SourceDocument, fact: TagFact) -> SourceLine | None:
    comment = _tag_comment(fact)
    declared = document.get_line(fact.line)
    if declared is not None and declared.text.rstrip().endswith(comment):
        return declared

    for line in document.lines:
        if line.text.rstrip().endswith(comment):
            return line

    if declared is not None:
        return declared

    forward = range(max(fact.line + 1, 0), len(document))
    backward = range(min(fact.line - 1, len(document) - 1), -1, -1)
    for candidates in (forward, backward):
        if candidates:
            logger.debug("Tag @%s: line %d missing, using %d", fact.name, fact.line, candidates[0])
            return document[candidates[0]]
    return None


def normalize_tag(fact: TagFact, ctx: NormalizeContext) -> Annotation | None:
    line = resolve_tag_line(ctx.document, fact)
    if line is None:
        logger.debug("Tag @%s dropped: document has no lines", fact.name)
        return None

    style = tag_style(fact.name)
    node = h("span.twoslash.twocustom", [
        h("div.twoslash-custom-box", {"class": style.css_class}, [
            h("span.twoslash-custom-box-icon", [custom_tag_icon(fact.name)]),
            h("span.twoslash-custom-box-content", [
                h("span.twoslash-custom-box-content-title", f"{style.title}:"),
                h("span.twoslash-custom-box-content-message", f" {fact.text}"),
            ]),
        ]),
        SLOT,
    ])

    return Annotation(
        kind=AnnotationKind.TAG,
        line=line.index,
        column_start=0,
        column_end=len(line.text),
        node=node,
        fact=fact,
        payload=style,
    )
