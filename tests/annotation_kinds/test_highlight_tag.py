import pytest

from annotation_kinds.context import NormalizeContext
from annotation_kinds.highlight import normalize_highlight
from annotation_kinds.tag import normalize_tag, resolve_tag_line, tag_style
from core.annotation_kind import AnnotationKind
from core.document import SourceDocument
from core.facts import HighlightFact, TagFact
from core.render_node import SLOT
from tests.mock_analyzer import PlainRenderer


def _ctx(*texts: str) -> NormalizeContext:
    return NormalizeContext(document=SourceDocument(texts), renderer=PlainRenderer())


# ===========================================================
# Highlight
# ===========================================================

class TestNormalizeHighlight:

    def test_uses_character_for_columns(self):
        fact = HighlightFact(line=0, character=6, length=5, start=99)
        annotation = normalize_highlight(fact, _ctx("const value = 1"))
        assert annotation.kind is AnnotationKind.HIGHLIGHT
        assert (annotation.column_start, annotation.column_end) == (6, 11)
        assert annotation.node.classes == ("twoslash-highlighted",)
        assert annotation.node.children == [SLOT]

    def test_missing_line(self):
        assert normalize_highlight(HighlightFact(1, 0, 1), _ctx("x")) is None


# ===========================================================
# Tag line resolution
# ===========================================================

class TestResolveTagLine:

    def test_line_ending_with_tag_comment_wins(self):
        doc = SourceDocument(["a()", "b() // @log: hello"])
        assert resolve_tag_line(doc, TagFact(line=0, name="log", text="hello")).index == 1

    def test_declared_line_with_same_comment_wins(self):
        doc = SourceDocument(["a() // @log: x", "b() // @log: x"])
        assert resolve_tag_line(doc, TagFact(line=1, name="log", text="x")).index == 1
        assert resolve_tag_line(doc, TagFact(line=0, name="log", text="x")).index == 0

    def test_declared_line(self):
        doc = SourceDocument(["a()", "b()"])
        assert resolve_tag_line(doc, TagFact(line=1, name="log", text="hello")).index == 1

    def test_falls_back_backward_past_end(self):
        doc = SourceDocument(["a()", "b()", "c()"])
        assert resolve_tag_line(doc, TagFact(line=5, name="warn", text="x")).index == 2

    def test_falls_back_forward_before_start(self):
        doc = SourceDocument(["a()", "b()"])
        assert resolve_tag_line(doc, TagFact(line=-1, name="warn", text="x")).index == 0

    def test_empty_document(self):
        assert resolve_tag_line(SourceDocument(), TagFact(line=0, name="log")) is None


# ===========================================================
# normalize_tag
# ===========================================================

class TestNormalizeTag:

    def test_spans_whole_line(self):
        annotation = normalize_tag(TagFact(line=0, name="log", text="hi"), _ctx("console.log(1)"))
        assert annotation.kind is AnnotationKind.TAG
        assert annotation.is_block
        assert (annotation.line, annotation.column_start, annotation.column_end) == (0, 0, 14)

    @pytest.mark.parametrize("name,title,css_class", [
        ("log", "Log", "twoslash-custom-level-message"),
        ("warn", "Warning", "twoslash-custom-level-warning"),
        ("error", "Error", "twoslash-custom-level-error"),
        ("annotate", "Message", "twoslash-custom-level-suggestion"),
        ("note", "Error", "twoslash-custom-level-error"),
    ])
    def test_styles(self, name, title, css_class):
        style = tag_style(name)
        assert (style.title, style.css_class) == (title, css_class)

    def test_box_contents(self):
        annotation = normalize_tag(TagFact(line=0, name="warn", text="careful"), _ctx("x()"))
        node = annotation.node
        assert node.find("twoslash-custom-box").has_class("twoslash-custom-level-warning")
        assert node.find("twoslash-custom-box-content-title").text_content() == "Warning:"
        assert node.find("twoslash-custom-box-content-message").text_content() == " careful"
        icon = node.find("twoslash-custom-box-icon").children[0]
        assert icon.properties["data-icon"] == "warn"
        assert node.children[-1] is SLOT

    def test_unknown_tag_uses_error_icon(self):
        annotation = normalize_tag(TagFact(line=0, name="note", text="x"), _ctx("x()"))
        icon = annotation.node.find("twoslash-custom-box-icon").children[0]
        assert icon.properties["data-icon"] == "error"

    def test_dropped_on_empty_document(self):
        assert normalize_tag(TagFact(line=0, name="log"), _ctx()) is None
