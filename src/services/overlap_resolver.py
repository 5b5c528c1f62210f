"""
Overlap resolver — decide which annotation wins where facts coincide.

Annotations are resolved per line.  For every hover, the first rule
that matches applies and later rules are skipped:

1. A query on the line describes the same fact (``query_policy``,
   default ``{line, text}``) → the hover is demoted to ``STATIC`` (no
   popup; the query's box already shows the type).
2. A diagnostic on the line describes the same fact
   (``diagnostic_policy``, default ``{line, start, length, character}``)
   → the hover is dropped.
3. The hover covers a completion's start column → the hover is dropped,
   and if it started left of the completion, the completion's start is
   moved to the hover's start.

Afterwards exact duplicates of inline annotations (same kind, span and
fact) are collapsed.  Diagnostics and tags are never removed.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Optional

from annotation_kinds.hover import demote_to_static
from core.annotation import Annotation
from core.annotation_kind import AnnotationKind
from core.facts import SemanticFact
from core.options import EQUALITY_FIELDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EqualityPolicy:
    """Which fact fields must match for two facts to count as the same.

    ``text`` is skipped whenever either side is a completion, which has
    no comparable text.
    """
    fields: frozenset[str]

    def __post_init__(self):
        unknown = set(self.fields) - EQUALITY_FIELDS
        if unknown:
            raise ValueError(f"Unknown equality field(s): {', '.join(sorted(unknown))}")

    def same_fact(self, a: SemanticFact, b: SemanticFact) -> bool:
        has_completion = AnnotationKind.COMPLETION in (a.kind, b.kind)
        for name in self.fields:
            if name == "text" and has_completion:
                continue
            if getattr(a, name, None) != getattr(b, name, None):
                return False
        return True


QUERY_EQUALITY = EqualityPolicy(frozenset({"line", "text"}))
DIAGNOSTIC_EQUALITY = EqualityPolicy(frozenset({"line", "start", "length", "character"}))


def _covers_completion_start(hover: Annotation, completion: Annotation) -> bool:
    if hover.column_start == completion.column_start:
        return True
    return hover.column_start < completion.column_start < hover.column_end


def _drop_duplicates(annotations: list[Annotation]) -> list[Annotation]:
    seen: set[tuple] = set()
    unique: list[Annotation] = []
    for annotation in annotations:
        if not annotation.is_block:
            key = (annotation.kind, annotation.column_start, annotation.column_end, annotation.fact)
            if key in seen:
                logger.debug("Dropped duplicate %s on line %d", annotation.kind.value, annotation.line)
                continue
            seen.add(key)
        unique.append(annotation)
    return unique


def resolve_line(
    annotations: list[Annotation],
    query_policy: EqualityPolicy = QUERY_EQUALITY,
    diagnostic_policy: EqualityPolicy = DIAGNOSTIC_EQUALITY,
) -> list[Annotation]:
    """Resolve the annotations of a single line, keeping their order."""
    queries = [a for a in annotations if a.kind is AnnotationKind.QUERY]
    diagnostics = [a for a in annotations if a.kind is AnnotationKind.DIAGNOSTIC]
    completion_slots = [i for i, a in enumerate(annotations) if a.kind is AnnotationKind.COMPLETION]
    slots: list[Optional[Annotation]] = list(annotations)

    for i, hover in enumerate(annotations):
        if hover.kind is not AnnotationKind.HOVER:
            continue

        if any(query_policy.same_fact(hover.fact, q.fact) for q in queries):
            logger.debug("Hover on line %d shown statically (query)", hover.line)
            slots[i] = demote_to_static(hover)
            continue

        if any(diagnostic_policy.same_fact(hover.fact, d.fact) for d in diagnostics):
            logger.debug("Hover on line %d dropped (diagnostic)", hover.line)
            slots[i] = None
            continue

        for j in completion_slots:
            completion = slots[j]
            if completion is None or not _covers_completion_start(hover, completion):
                continue
            logger.debug("Hover on line %d dropped (completion)", hover.line)
            slots[i] = None
            if hover.column_start < completion.column_start:
                slots[j] = completion.replace(column_start=hover.column_start)
            break

    return _drop_duplicates([a for a in slots if a is not None])


def resolve(
    annotations: Iterable[Annotation],
    query_policy: EqualityPolicy = QUERY_EQUALITY,
    diagnostic_policy: EqualityPolicy = DIAGNOSTIC_EQUALITY,
) -> list[Annotation]:
    """Resolve all annotations, grouped per line in ascending line order."""
    by_line: dict[int, list[Annotation]] = defaultdict(list)
    for annotation in annotations:
        by_line[annotation.line].append(annotation)

    resolved: list[Annotation] = []
    for line in sorted(by_line):
        resolved.extend(resolve_line(by_line[line], query_policy, diagnostic_policy))
    return resolved
