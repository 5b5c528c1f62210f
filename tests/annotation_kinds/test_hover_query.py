import pytest

from annotation_kinds.context import NormalizeContext
from annotation_kinds.hover import demote_to_static, normalize_hover
from annotation_kinds.query import normalize_query
from core.annotation_kind import AnnotationKind
from core.document import SourceDocument
from core.errors import MarkupRenderError
from core.facts import HoverFact, QueryFact
from core.render_node import SLOT
from tests.mock_analyzer import FailingRenderer, PlainRenderer


@pytest.fixture
def ctx() -> NormalizeContext:
    doc = SourceDocument(["const value = 1", "value.toFixed()"])
    return NormalizeContext(document=doc, renderer=PlainRenderer())


# ===========================================================
# Hover
# ===========================================================

class TestNormalizeHover:

    def test_span_covers_identifier(self, ctx):
        fact = HoverFact(line=0, character=6, length=5, text="const value: 1")
        annotation = normalize_hover(fact, ctx)
        assert annotation.kind is AnnotationKind.HOVER
        assert (annotation.line, annotation.column_start, annotation.column_end) == (0, 6, 11)
        assert annotation.fact is fact
        assert annotation.payload.type_text == "const value: 1"

    def test_node_shape(self, ctx):
        annotation = normalize_hover(HoverFact(0, 6, 5, text="const value: 1"), ctx)
        node = annotation.node
        assert node.classes == ("twoslash",)
        hover = node.children[0]
        assert hover.has_class("twoslash-hover")
        assert hover.children[0].has_class("twoslash-popup-container")
        assert hover.children[1] is SLOT

    def test_missing_line(self, ctx):
        assert normalize_hover(HoverFact(5, 0, 1, text="x"), ctx) is None

    def test_docs_render_failure_propagates(self):
        ctx = NormalizeContext(document=SourceDocument(["x"]), renderer=FailingRenderer())
        with pytest.raises(MarkupRenderError):
            normalize_hover(HoverFact(0, 0, 1, text="const x: 1", docs="boom"), ctx)

    def test_demote_to_static(self, ctx):
        hover = normalize_hover(HoverFact(0, 6, 5, text="const value: 1"), ctx)
        static = demote_to_static(hover)
        assert static.kind is AnnotationKind.STATIC
        assert (static.column_start, static.column_end) == (6, 11)
        assert static.node.classes == ("twoslash-noline",)
        assert static.node.children == [SLOT]
        assert static.payload == hover.payload


# ===========================================================
# Query
# ===========================================================

class TestNormalizeQuery:

    def test_attached_past_end_of_text(self, ctx):
        fact = QueryFact(line=0, character=6, length=5, text="const value: 1")
        annotation = normalize_query(fact, ctx)
        assert annotation.kind is AnnotationKind.QUERY
        assert (annotation.column_start, annotation.column_end) == (15, 20)

    def test_box_is_indented_to_character(self, ctx):
        annotation = normalize_query(QueryFact(0, 6, 5, text="const value: 1"), ctx)
        box = annotation.node.find("twoslash-static")
        assert box.properties["style"] == {"margin-left": "48px"}
        assert annotation.node.find("twoslash-static-container").has_class("not-content")
        assert annotation.node.children[0] is SLOT

    def test_missing_line(self, ctx):
        assert normalize_query(QueryFact(2, 0, 1, text="x"), ctx) is None
