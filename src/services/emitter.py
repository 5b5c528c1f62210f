"""
Attachment emitter — attach resolved annotations to their lines.

Per line, annotations are attached in :data:`EMIT_ORDER` (diagnostics,
hovers/static/queries, completions, highlights, tags); the sort is
stable, so annotations of one kind keep their resolved order.  Later
attachments wrap earlier ones when rendered.

Overlaps between annotations of the same kind are expected to have
been removed by the overlap resolver; the emitter does not check.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable

from core.annotation import Annotation
from core.annotation_kind import EMIT_ORDER
from core.document import SourceDocument

logger = logging.getLogger(__name__)

EMIT_RANK = {kind: rank for rank, kind in enumerate(EMIT_ORDER)}


def emit_order(annotations: Iterable[Annotation]) -> list[Annotation]:
    return sorted(annotations, key=lambda a: EMIT_RANK[a.kind])


def emit(document: SourceDocument, line: int, annotations: Iterable[Annotation]) -> None:
    """Attach *annotations* to the line at position *line*."""
    for annotation in emit_order(annotations):
        document.add_annotation(line, annotation)


def emit_all(document: SourceDocument, annotations: Iterable[Annotation]) -> int:
    """Attach every annotation to its own line; returns the count attached."""
    by_line: dict[int, list[Annotation]] = defaultdict(list)
    for annotation in annotations:
        by_line[annotation.line].append(annotation)

    count = 0
    for line in sorted(by_line):
        emit(document, line, by_line[line])
        count += len(by_line[line])
    logger.debug("Attached %d annotation(s) to %d line(s)", count, len(by_line))
    return count
