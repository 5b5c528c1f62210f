"""
Semantic facts — the analyzer's output, one immutable record per fact.

The set of fact types is closed: :data:`SemanticFact` is the union of
the six classes below, and each class carries its :class:`AnnotationKind`
as ``kind`` so dispatch never needs ``isinstance``.

Positions:
    ``line``      0-based line in the analyzer's rewritten code
    ``character`` 0-based column on that line
    ``length``    number of characters covered
    ``start``     absolute offset into the rewritten code
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from core.annotation_kind import AnnotationKind

# (tag name, tag value) as reported for JSDoc tags
DocTag = tuple[str, Optional[str]]


@dataclass(frozen=True, slots=True)
class _TypeInfoFact:
    line: int
    character: int
    length: int
    start: int = 0
    text: str = ""
    docs: Optional[str] = None
    tags: tuple[DocTag, ...] = ()


@dataclass(frozen=True, slots=True)
class HoverFact(_TypeInfoFact):
    """Type information for an identifier, shown as a popup."""
    kind: ClassVar[AnnotationKind] = AnnotationKind.HOVER


@dataclass(frozen=True, slots=True)
class QueryFact(_TypeInfoFact):
    """Type information requested with an extraction marker (``// ^?``)."""
    kind: ClassVar[AnnotationKind] = AnnotationKind.QUERY


@dataclass(frozen=True, slots=True)
class DiagnosticFact:
    line: int
    character: int
    length: int
    start: int = 0
    text: str = ""
    code: Union[int, str, None] = None
    level: Optional[str] = None
    kind: ClassVar[AnnotationKind] = AnnotationKind.DIAGNOSTIC


@dataclass(frozen=True, slots=True)
class CompletionEntry:
    """One completion candidate.  ``kind_modifiers`` is comma-separated."""
    name: str
    kind: Optional[str] = None
    kind_modifiers: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CompletionFact:
    line: int
    character: int
    length: int = 0
    start: int = 0
    completions: tuple[CompletionEntry, ...] = ()
    completions_prefix: str = ""
    kind: ClassVar[AnnotationKind] = AnnotationKind.COMPLETION


@dataclass(frozen=True, slots=True)
class HighlightFact:
    line: int
    character: int
    length: int
    start: int = 0
    text: str = ""
    kind: ClassVar[AnnotationKind] = AnnotationKind.HIGHLIGHT


@dataclass(frozen=True, slots=True)
class TagFact:
    """A free-form comment tag such as ``// @log: message``."""
    line: int
    name: str
    text: str = ""
    character: int = 0
    length: int = 0
    start: int = 0
    kind: ClassVar[AnnotationKind] = AnnotationKind.TAG


SemanticFact = Union[
    HoverFact, QueryFact, DiagnosticFact, CompletionFact, HighlightFact, TagFact,
]


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Everything the static analyzer returns for one block.

    Fact lists keep the analyzer's order; :meth:`facts` iterates them in
    a fixed kind order so processing is deterministic.
    """
    code: str
    hovers: tuple[HoverFact, ...] = ()
    queries: tuple[QueryFact, ...] = ()
    errors: tuple[DiagnosticFact, ...] = ()
    completions: tuple[CompletionFact, ...] = ()
    highlights: tuple[HighlightFact, ...] = ()
    tags: tuple[TagFact, ...] = ()

    def facts(self) -> list[SemanticFact]:
        return [
            *self.hovers,
            *self.queries,
            *self.errors,
            *self.completions,
            *self.highlights,
            *self.tags,
        ]
