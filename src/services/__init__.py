from services.compositor_service import CodeBlock, CompositorService
from services.includes import IncludesCache, parse_include_meta
from services.overlap_resolver import EqualityPolicy, resolve, resolve_line
from services.reconciler import reconcile
from services.normalizer import normalize, normalize_all
from services.emitter import emit, emit_all, emit_order

__all__ = [
    "CodeBlock",
    "CompositorService",
    "IncludesCache",
    "parse_include_meta",
    "EqualityPolicy",
    "resolve",
    "resolve_line",
    "reconcile",
    "normalize",
    "normalize_all",
    "emit",
    "emit_all",
    "emit_order",
]
