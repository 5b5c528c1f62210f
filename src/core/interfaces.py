"""
Contracts for the compositor's external collaborators.

- IStaticAnalyzer: turns source text into rewritten text + facts
- IMarkupRenderer: turns documentation markup into display nodes

The compositor depends on these protocols, never on a concrete
analyzer or renderer.
"""
from __future__ import annotations

from typing import Any, Mapping, Protocol

from core.facts import AnalysisResult
from core.render_node import Child


class IStaticAnalyzer(Protocol):
    """Runs the static-analysis pass over one block of source."""

    def analyze(
        self,
        code: str,
        language: str,
        compiler_options: Mapping[str, Any],
    ) -> AnalysisResult: ...


class IMarkupRenderer(Protocol):
    """
    Renders documentation text.  Failures raise
    :class:`core.errors.MarkupRenderError` and are not caught by the
    compositor.
    """

    def render(self, text: str) -> list[Child]: ...

    def render_inline(self, text: str) -> list[Child]: ...

    def is_single_paragraph(self, text: str) -> bool: ...
