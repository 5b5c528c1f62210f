"""
Central wiring — register the normalizer for every fact kind.

To add a new fact kind, add one ``register()`` call below.
This module is imported (as a side-effect) by ``services.normalizer``
to ensure handlers are available before first use.
"""
from core.annotation_kind import AnnotationKind
from infrastructure.registry import register, ensure_complete, FactKindHandler

from annotation_kinds.hover import normalize_hover
from annotation_kinds.query import normalize_query
from annotation_kinds.diagnostic import normalize_diagnostic
from annotation_kinds.completion import normalize_completion
from annotation_kinds.highlight import normalize_highlight
from annotation_kinds.tag import normalize_tag


register(AnnotationKind.HOVER, FactKindHandler(normalize=normalize_hover))
register(AnnotationKind.QUERY, FactKindHandler(normalize=normalize_query))
register(AnnotationKind.DIAGNOSTIC, FactKindHandler(normalize=normalize_diagnostic))
register(AnnotationKind.COMPLETION, FactKindHandler(normalize=normalize_completion))
register(AnnotationKind.HIGHLIGHT, FactKindHandler(normalize=normalize_highlight))
register(AnnotationKind.TAG, FactKindHandler(normalize=normalize_tag))

ensure_complete()
