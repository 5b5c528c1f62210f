import pytest

from annotation_kinds.completion import (
    MAX_COMPLETION_ITEMS,
    completion_span,
    is_deprecated,
    normalize_completion,
    to_item,
)
from annotation_kinds.context import NormalizeContext
from annotation_kinds.icons import completion_icon
from core.annotation_kind import AnnotationKind
from core.document import SourceDocument
from core.facts import CompletionEntry, CompletionFact
from core.render_node import SLOT
from tests.mock_analyzer import PlainRenderer

_ENTRIES = (
    CompletionEntry("toFixed", "method"),
    CompletionEntry("toString", "method"),
    CompletionEntry("toLocaleString", "method", "deprecated"),
    CompletionEntry("toPrecision", "method"),
    CompletionEntry("valueOf", "method"),
    CompletionEntry("constructor", "property"),
    CompletionEntry("extra", "keyword"),
    CompletionEntry("hasOwnProperty", "method"),
    CompletionEntry("isPrototypeOf", "method"),
    CompletionEntry("propertyIsEnumerable", "method"),
    CompletionEntry("toExponential", "method"),
    CompletionEntry("__proto__", "property"),
)


@pytest.fixture
def ctx() -> NormalizeContext:
    return NormalizeContext(document=SourceDocument(["value.to"]), renderer=PlainRenderer())


def _fact(**kw) -> CompletionFact:
    kw.setdefault("line", 0)
    kw.setdefault("character", 8)
    kw.setdefault("completions", _ENTRIES)
    kw.setdefault("completions_prefix", "to")
    return CompletionFact(**kw)


# ===========================================================
# Items
# ===========================================================

class TestCompletionItems:

    @pytest.mark.parametrize("modifiers,expected", [
        (None, False),
        ("", False),
        ("deprecated", True),
        ("optional, deprecated", True),
        ("deprecatedish", False),
    ])
    def test_is_deprecated(self, modifiers, expected):
        assert is_deprecated(modifiers) is expected

    def test_known_kind_icon(self):
        name, svg = completion_icon("method")
        assert name == "method"
        assert svg.tag == "svg"
        assert svg.properties["data-icon"] == "method"

    def test_unknown_kind_falls_back_to_property(self):
        assert completion_icon("keyword")[0] == "property"
        assert completion_icon(None)[0] == "property"

    def test_icons_are_not_shared(self):
        assert completion_icon("class")[1] is not completion_icon("class")[1]

    def test_to_item(self):
        item = to_item(CompletionEntry("toLocaleString", "method", "deprecated"))
        assert (item.name, item.kind, item.is_deprecated) == ("toLocaleString", "method", True)


# ===========================================================
# normalize_completion
# ===========================================================

class TestNormalizeCompletion:

    def test_span_from_anchor_to_cursor(self):
        assert completion_span(_fact()) == (6, 8)

    def test_empty_prefix_gives_empty_span(self):
        assert completion_span(_fact(character=6, completions_prefix="")) == (6, 6)

    def test_truncated_to_max_items(self, ctx):
        assert len(_ENTRIES) == 12
        annotation = normalize_completion(_fact(), ctx)
        assert annotation.kind is AnnotationKind.COMPLETION
        assert len(annotation.payload) == MAX_COMPLETION_ITEMS
        assert [item.name for item in annotation.payload] == [e.name for e in _ENTRIES[:5]]

    def test_fewer_than_max_items(self, ctx):
        annotation = normalize_completion(_fact(completions=_ENTRIES[:2]), ctx)
        assert len(annotation.payload) == 2

    def test_rendered_items(self, ctx):
        annotation = normalize_completion(_fact(), ctx)
        node = annotation.node
        assert node.children[0] is SLOT
        assert node.find("twoslash-cursor") is not None
        items = node.find_all("twoslash-completion-item")
        assert len(items) == 5
        assert not items[0].has_class("twoslash-completion-item-separator")
        assert all(item.has_class("twoslash-completion-item-separator") for item in items[1:])
        assert items[2].has_class("twoslash-completion-item-deprecated")
        assert items[0].find("twoslash-completion-name-matched").text_content() == "to"
        assert items[0].find("twoslash-completion-name-unmatched").text_content() == "Fixed"

    def test_unmatched_prefix_is_not_highlighted(self, ctx):
        annotation = normalize_completion(_fact(), ctx)
        value_of = annotation.node.find_all("twoslash-completion-item")[4]
        assert value_of.find("twoslash-completion-name-matched").text_content() == ""
        assert value_of.find("twoslash-completion-name-unmatched").text_content() == "valueOf"

    def test_box_indented_to_anchor(self, ctx):
        annotation = normalize_completion(_fact(), ctx)
        box = annotation.node.find("twoslash-completion")
        assert box.properties["style"] == {"margin-left": "48px"}

    def test_missing_line(self, ctx):
        assert normalize_completion(_fact(line=1), ctx) is None
