from __future__ import annotations

from enum import Enum


class AnnotationKind(Enum):
    """
    Kind of a semantic fact, and of the annotation produced from it.

    ``STATIC`` never comes from the analyzer: it is what a hover turns
    into when a query on the same line already shows its type.
    """
    HOVER = "hover"
    QUERY = "query"
    STATIC = "static"
    DIAGNOSTIC = "diagnostic"
    COMPLETION = "completion"
    HIGHLIGHT = "highlight"
    TAG = "tag"


# Kinds the analyzer can report.
FACT_KINDS: tuple[AnnotationKind, ...] = (
    AnnotationKind.HOVER,
    AnnotationKind.QUERY,
    AnnotationKind.DIAGNOSTIC,
    AnnotationKind.COMPLETION,
    AnnotationKind.HIGHLIGHT,
    AnnotationKind.TAG,
)

# Attachment order per line; later attachments wrap earlier ones.
EMIT_ORDER: tuple[AnnotationKind, ...] = (
    AnnotationKind.DIAGNOSTIC,
    AnnotationKind.HOVER,
    AnnotationKind.STATIC,
    AnnotationKind.QUERY,
    AnnotationKind.COMPLETION,
    AnnotationKind.HIGHLIGHT,
    AnnotationKind.TAG,
)

# Block-level decorations: composed alongside, never removed on overlap.
BLOCK_KINDS: frozenset[AnnotationKind] = frozenset({
    AnnotationKind.DIAGNOSTIC,
    AnnotationKind.TAG,
})
