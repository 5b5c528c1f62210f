"""
Diagnostic annotations — error boxes printed below the offending line.

Severity is taken from the analyzer's ``level``; anything unknown or
missing is treated as an error.
"""
from __future__ import annotations

from dataclasses import dataclass

from annotation_kinds.context import NormalizeContext
from core.annotation import Annotation
from core.annotation_kind import AnnotationKind
from core.facts import DiagnosticFact
from core.render_node import SLOT, h


@dataclass(frozen=True, slots=True)
class Severity:
    level: str
    label: str
    css_class: str


SEVERITIES: dict[str, Severity] = {
    "error": Severity("error", "Error", "twoslash-error-level-error"),
    "warning": Severity("warning", "Warning", "twoslash-error-level-warning"),
    "suggestion": Severity("suggestion", "Suggestion", "twoslash-error-level-suggestion"),
    "message": Severity("message", "Message", "twoslash-error-level-message"),
}


def severity_for(level: str | None) -> Severity:
    return SEVERITIES.get(level or "", SEVERITIES["error"])


def diagnostic_title(fact: DiagnosticFact, severity: Severity) -> str:
    if fact.code not in (None, ""):
        return f"{severity.label} ts({fact.code}) ― "
    return f"{severity.label} ― "


def normalize_diagnostic(fact: DiagnosticFact, ctx: NormalizeContext) -> Annotation | None:
    line = ctx.document.get_line(fact.line)
    if line is None:
        return None

    severity = severity_for(fact.level)
    node = h("span.twoslash.twoerror", [
        SLOT,
        h("div.twoslash-error-box", {"class": severity.css_class}, [
            h("span.twoslash-error-box-icon"),
            h("span.twoslash-error-box-content", [
                h("span.twoslash-error-box-content-title", diagnostic_title(fact, severity)),
                h("span.twoslash-error-box-content-message", fact.text),
            ]),
        ]),
    ])

    end_of_text = len(line.text)
    return Annotation(
        kind=AnnotationKind.DIAGNOSTIC,
        line=fact.line,
        column_start=end_of_text,
        column_end=end_of_text + fact.length,
        node=node,
        fact=fact,
        payload=severity,
    )
