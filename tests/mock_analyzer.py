"""Shared test doubles for the static analyzer and markup renderer."""
from typing import Any, Mapping, Optional

from core.errors import MarkupRenderError
from core.facts import AnalysisResult
from core.render_node import Child, h
from markers import classify


class MockStaticAnalyzer:
    """
    A configurable stub that satisfies the IStaticAnalyzer protocol.

    By default the analyzer echoes the code back without its marker
    lines and reports no facts; tests set ``.result`` to control output.
    Every call is recorded in ``.calls``.
    """

    def __init__(self, result: Optional[AnalysisResult] = None):
        self.result: Optional[AnalysisResult] = result
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def analyze(
        self,
        code: str,
        language: str,
        compiler_options: Mapping[str, Any],
    ) -> AnalysisResult:
        self.calls.append((code, language, dict(compiler_options)))
        if self.result is not None:
            return self.result
        stripped = [line for line in code.split("\n") if classify(line) is None]
        return AnalysisResult(code="\n".join(stripped))


class PlainRenderer:
    """Renders documentation as a single paragraph of plain text."""

    def __init__(self):
        self.rendered: list[str] = []

    def render(self, text: str) -> list[Child]:
        self.rendered.append(text)
        return [h("p", text)]

    def render_inline(self, text: str) -> list[Child]:
        self.rendered.append(text)
        return [text]

    def is_single_paragraph(self, text: str) -> bool:
        return "\n\n" not in text


class FailingRenderer(PlainRenderer):
    """Raises MarkupRenderError for every render call."""

    def render(self, text: str) -> list[Child]:
        raise MarkupRenderError(f"cannot render {text!r}")

    def render_inline(self, text: str) -> list[Child]:
        raise MarkupRenderError(f"cannot render {text!r}")
