from core.annotation_kind import AnnotationKind, BLOCK_KINDS, EMIT_ORDER, FACT_KINDS
from core.source_line import SourceLine
from core.document import MutationRecord, SourceDocument
from core.errors import AnalyzerOutputError, CompositorError, MarkupRenderError
from core.facts import (
    AnalysisResult,
    CompletionEntry,
    CompletionFact,
    DiagnosticFact,
    HighlightFact,
    HoverFact,
    QueryFact,
    SemanticFact,
    TagFact,
)
from core.render_node import SLOT, RenderNode, Slot, h
from core.annotation import Annotation
from core.options import CompositorOptions
from core.interfaces import IMarkupRenderer, IStaticAnalyzer

__all__ = [
    "AnnotationKind",
    "BLOCK_KINDS",
    "EMIT_ORDER",
    "FACT_KINDS",
    "SourceLine",
    "MutationRecord",
    "SourceDocument",
    "AnalyzerOutputError",
    "CompositorError",
    "MarkupRenderError",
    "AnalysisResult",
    "CompletionEntry",
    "CompletionFact",
    "DiagnosticFact",
    "HighlightFact",
    "HoverFact",
    "QueryFact",
    "SemanticFact",
    "TagFact",
    "SLOT",
    "RenderNode",
    "Slot",
    "h",
    "Annotation",
    "CompositorOptions",
    "IMarkupRenderer",
    "IStaticAnalyzer",
]
