from infrastructure.registry import FactKindHandler, register, get_handler, ensure_complete
from infrastructure.markdown_renderer import MarkdownRenderer
from infrastructure.analyzer_io import load_analysis

__all__ = [
    "FactKindHandler",
    "register",
    "get_handler",
    "ensure_complete",
    "MarkdownRenderer",
    "load_analysis",
]
