import pytest

from annotation_kinds.context import NormalizeContext
from annotation_kinds.diagnostic import diagnostic_title, normalize_diagnostic, severity_for
from core.annotation_kind import AnnotationKind
from core.document import SourceDocument
from core.facts import DiagnosticFact
from tests.mock_analyzer import PlainRenderer


@pytest.fixture
def ctx() -> NormalizeContext:
    doc = SourceDocument(['const n: number = "x"'])
    return NormalizeContext(document=doc, renderer=PlainRenderer())


def _fact(**kw) -> DiagnosticFact:
    kw.setdefault("line", 0)
    kw.setdefault("character", 6)
    kw.setdefault("length", 1)
    kw.setdefault("text", "Type 'string' is not assignable to type 'number'.")
    return DiagnosticFact(**kw)


class TestSeverity:

    @pytest.mark.parametrize("level,label", [
        ("error", "Error"),
        ("warning", "Warning"),
        ("suggestion", "Suggestion"),
        ("message", "Message"),
        (None, "Error"),
        ("fatal", "Error"),
    ])
    def test_labels(self, level, label):
        assert severity_for(level).label == label

    def test_title_with_code(self):
        assert diagnostic_title(_fact(code=2322), severity_for("error")) == "Error ts(2322) ― "

    def test_title_without_code(self):
        assert diagnostic_title(_fact(), severity_for("warning")) == "Warning ― "


class TestNormalizeDiagnostic:

    def test_attached_at_end_of_text(self, ctx):
        annotation = normalize_diagnostic(_fact(code=2322), ctx)
        assert annotation.kind is AnnotationKind.DIAGNOSTIC
        assert annotation.is_block
        assert (annotation.column_start, annotation.column_end) == (21, 22)

    def test_box_contents(self, ctx):
        annotation = normalize_diagnostic(_fact(code=2322, level="warning"), ctx)
        box = annotation.node.find("twoslash-error-box")
        assert box.has_class("twoslash-error-level-warning")
        assert annotation.node.find("twoslash-error-box-content-title").text_content() == "Warning ts(2322) ― "
        assert annotation.node.find("twoslash-error-box-content-message").text_content().startswith("Type 'string'")
        assert annotation.payload.level == "warning"

    def test_missing_line(self, ctx):
        assert normalize_diagnostic(_fact(line=3), ctx) is None
