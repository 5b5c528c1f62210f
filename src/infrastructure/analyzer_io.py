"""
Analyzer I/O — load the static analyzer's JSON output into facts.

The accepted shape is the twoslash result object::

    {
      "code": "...rewritten source...",
      "hovers":      [{"line", "character", "length", "start", "text", "docs", "tags"}],
      "queries":     [...same as hovers...],
      "errors":      [{"line", "character", "length", "start", "text", "code", "level"}],
      "completions": [{"line", "character", "length", "start",
                       "completions": [{"name", "kind", "kindModifiers"}],
                       "completionsPrefix"}],
      "highlights":  [{"line", "character", "length", "start", "text"}],
      "tags":        [{"line", "name", "text"}]
    }

Alternatively all facts may come in a single ``"nodes"`` list, each
with a ``"type"`` of ``hover | query | error | completion | highlight |
tag``.  Unknown keys are ignored; missing or mistyped required keys
raise :class:`AnalyzerOutputError`.
"""
from __future__ import annotations

import json
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.errors import AnalyzerOutputError
from core.facts import (
    AnalysisResult,
    CompletionEntry,
    CompletionFact,
    DiagnosticFact,
    HighlightFact,
    HoverFact,
    QueryFact,
    TagFact,
)


class _Node(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    line: int
    character: int = 0
    length: int = 0
    start: int = 0


class TypeInfoNode(_Node):
    text: str = ""
    docs: Optional[str] = None
    # [name] or [name, value]
    tags: list[list[Optional[str]]] = Field(default_factory=list)

    def doc_tags(self) -> tuple[tuple[str, Optional[str]], ...]:
        return tuple(
            (str(tag[0]), tag[1] if len(tag) > 1 else None) for tag in self.tags if tag and tag[0]
        )

    def to_hover(self) -> HoverFact:
        return HoverFact(self.line, self.character, self.length, self.start,
                         self.text, self.docs, self.doc_tags())

    def to_query(self) -> QueryFact:
        return QueryFact(self.line, self.character, self.length, self.start,
                         self.text, self.docs, self.doc_tags())


class ErrorNode(_Node):
    text: str = ""
    code: Union[int, str, None] = None
    level: Optional[str] = None

    def to_fact(self) -> DiagnosticFact:
        return DiagnosticFact(self.line, self.character, self.length, self.start,
                              self.text, self.code, self.level)


class CompletionEntryNode(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    kind: Optional[str] = None
    kind_modifiers: Optional[str] = Field(default=None, alias="kindModifiers")


class CompletionNode(_Node):
    completions: list[CompletionEntryNode] = Field(default_factory=list)
    completions_prefix: str = Field(default="", alias="completionsPrefix")

    def to_fact(self) -> CompletionFact:
        entries = tuple(
            CompletionEntry(e.name, e.kind, e.kind_modifiers) for e in self.completions
        )
        return CompletionFact(self.line, self.character, self.length, self.start,
                              entries, self.completions_prefix)


class HighlightNode(_Node):
    text: str = ""

    def to_fact(self) -> HighlightFact:
        return HighlightFact(self.line, self.character, self.length, self.start, self.text)


class TagNode(_Node):
    name: str
    text: Optional[str] = None

    def to_fact(self) -> TagFact:
        return TagFact(self.line, self.name, self.text or "",
                       self.character, self.length, self.start)


class AnalyzerOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    code: str
    hovers: list[TypeInfoNode] = Field(default_factory=list)
    queries: list[TypeInfoNode] = Field(default_factory=list)
    errors: list[ErrorNode] = Field(default_factory=list)
    completions: list[CompletionNode] = Field(default_factory=list)
    highlights: list[HighlightNode] = Field(default_factory=list)
    tags: list[TagNode] = Field(default_factory=list)

    def to_result(self) -> AnalysisResult:
        return AnalysisResult(
            code=self.code,
            hovers=tuple(n.to_hover() for n in self.hovers),
            queries=tuple(n.to_query() for n in self.queries),
            errors=tuple(n.to_fact() for n in self.errors),
            completions=tuple(n.to_fact() for n in self.completions),
            highlights=tuple(n.to_fact() for n in self.highlights),
            tags=tuple(n.to_fact() for n in self.tags),
        )


# "nodes" entry type → AnalyzerOutput list name
_NODE_LISTS = {
    "hover": "hovers",
    "query": "queries",
    "error": "errors",
    "completion": "completions",
    "highlight": "highlights",
    "tag": "tags",
}


def _split_nodes(payload: dict[str, Any]) -> dict[str, Any]:
    nodes = payload.get("nodes")
    if nodes is None:
        return payload
    grouped: dict[str, Any] = {
        k: list(v) if isinstance(v, list) else v for k, v in payload.items() if k != "nodes"
    }
    for node in nodes:
        target = _NODE_LISTS.get(node.get("type", "")) if isinstance(node, dict) else None
        if target is not None:
            grouped.setdefault(target, []).append(node)
    return grouped


def load_analysis(payload: Union[str, bytes, dict[str, Any]]) -> AnalysisResult:
    """Parse analyzer output (JSON text or decoded dict) into an AnalysisResult."""
    try:
        data = json.loads(payload) if isinstance(payload, (str, bytes)) else payload
    except json.JSONDecodeError as exc:
        raise AnalyzerOutputError(f"Analyzer output is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise AnalyzerOutputError("Analyzer output must be a JSON object")

    try:
        output = AnalyzerOutput.model_validate(_split_nodes(data))
    except ValidationError as exc:
        raise AnalyzerOutputError(f"Invalid analyzer output: {exc}") from exc
    return output.to_result()
