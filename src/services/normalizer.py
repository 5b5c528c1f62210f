"""
Fact normalizer — turn analyzer facts into annotations.

Dispatch goes through the kind registry, so every fact kind is handled
by exactly one normalizer.  Facts whose line did not survive the cuts
produce no annotation.
"""
from __future__ import annotations

import logging
from typing import Iterable

import infrastructure.registrations  # noqa: F401  (side-effect: populates the registry)
from annotation_kinds.context import NormalizeContext
from core.annotation import Annotation
from core.facts import SemanticFact
from infrastructure.registry import get_handler

logger = logging.getLogger(__name__)


def normalize(fact: SemanticFact, ctx: NormalizeContext) -> Annotation | None:
    return get_handler(fact.kind).normalize(fact, ctx)


def normalize_all(facts: Iterable[SemanticFact], ctx: NormalizeContext) -> list[Annotation]:
    """Normalize *facts* in order, skipping those without a target line."""
    annotations: list[Annotation] = []
    for fact in facts:
        annotation = normalize(fact, ctx)
        if annotation is None:
            logger.debug("Dropped %s fact on line %d: line not in document",
                         fact.kind.value, fact.line)
            continue
        annotations.append(annotation)
    return annotations
