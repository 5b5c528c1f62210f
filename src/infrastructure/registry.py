"""
Registry — maps each fact kind to the handler that normalizes it.

Adding a new fact kind requires:
1. Add an enum value to ``AnnotationKind`` (and to ``FACT_KINDS``)
2. Add the fact dataclass to the ``SemanticFact`` union
3. Write a normalizer module under ``annotation_kinds``
4. Add one ``register()`` call in ``registrations.py``

``ensure_complete()`` fails loudly if step 4 was forgotten, so the
kind → handler dispatch stays exhaustive.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, TYPE_CHECKING

from core.annotation_kind import AnnotationKind, FACT_KINDS

if TYPE_CHECKING:
    from annotation_kinds.context import NormalizeContext
    from core.annotation import Annotation

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class FactKindHandler(Generic[T]):
    """Functions that know how to handle one fact kind.

    Generic over the fact type ``T`` (e.g. ``HoverFact``).  The registry
    erases this parameter so callers after ``get_handler()`` operate on
    ``Any``.
    """
    normalize: Callable[[T, "NormalizeContext"], Optional["Annotation"]]


_handlers: dict[AnnotationKind, FactKindHandler[Any]] = {}


def register(kind: AnnotationKind, handler: FactKindHandler[Any]) -> None:
    """Register a handler for a fact kind.  Raises on duplicates."""
    if kind not in FACT_KINDS:
        raise ValueError(f"{kind!r} is not a fact kind")
    if kind in _handlers:
        raise ValueError(f"Handler already registered for {kind!r}")
    _handlers[kind] = handler


def get_handler(kind: AnnotationKind) -> FactKindHandler[Any]:
    """Look up the handler for a fact kind.  Raises on missing."""
    try:
        return _handlers[kind]
    except KeyError:
        raise ValueError(
            f"No handler registered for {kind!r}. "
            f"Did you forget to add a register() call in registrations.py?"
        ) from None


def ensure_complete() -> None:
    """Raise ``ValueError`` unless every fact kind has a handler."""
    missing = [kind.value for kind in FACT_KINDS if kind not in _handlers]
    if missing:
        raise ValueError(f"No handler registered for fact kind(s): {', '.join(missing)}")
