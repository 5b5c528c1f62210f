from annotation_kinds.context import NormalizeContext
from annotation_kinds.type_info import TypeInfo, clean_type_text
from annotation_kinds.hover import normalize_hover, demote_to_static
from annotation_kinds.query import normalize_query
from annotation_kinds.diagnostic import Severity, normalize_diagnostic, severity_for
from annotation_kinds.completion import CompletionItem, MAX_COMPLETION_ITEMS, normalize_completion
from annotation_kinds.highlight import normalize_highlight
from annotation_kinds.tag import normalize_tag, resolve_tag_line

__all__ = [
    "NormalizeContext",
    "TypeInfo",
    "clean_type_text",
    "normalize_hover",
    "demote_to_static",
    "normalize_query",
    "Severity",
    "normalize_diagnostic",
    "severity_for",
    "CompletionItem",
    "MAX_COMPLETION_ITEMS",
    "normalize_completion",
    "normalize_highlight",
    "normalize_tag",
    "resolve_tag_line",
]
