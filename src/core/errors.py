"""
Base error hierarchy for the annotation compositor.

Everything raised on purpose by this code inherits from
``CompositorError`` so callers can catch a single base type.
"""
from __future__ import annotations


class CompositorError(Exception):
    """Base class for all compositor errors."""


class MarkupRenderError(CompositorError):
    """Raised when documentation markup cannot be turned into a node tree.

    This is the only error that aborts processing of a block; it is
    never wrapped on its way out.
    """


class AnalyzerOutputError(CompositorError):
    """Raised when the analyzer's output does not match the expected shape."""
