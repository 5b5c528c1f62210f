"""
Type-info helpers shared by hover and query annotations.

The analyzer reports type text the way the language service prints it,
e.g. ``(property) Foo.bar: string`` or ``interface Foo\\nimport Foo``.
:func:`clean_type_text` strips that boilerplate and re-adds a ``type``
or ``function`` keyword when the remainder is a bare signature, so the
popup reads like a declaration.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from annotation_kinds.context import NormalizeContext
from core.facts import DocTag
from core.render_node import RenderNode, h

LEADING_ROLE_RE = re.compile(r"^\(([\w-]+)\)\s+", re.MULTILINE)
TRAILING_IMPORT_RE = re.compile(r"\nimport .*\Z")
BARE_HEADER_RE = re.compile(r"^(interface|namespace) \w+$", re.MULTILINE)
TYPE_SIGNATURE_RE = re.compile(r"^[A-Z]\w*(<[^>]*>)?:")
CALL_SIGNATURE_RE = re.compile(r"^\w*\(")

# Tag names whose value reads as a definition (rendered with a dash).
DEFINITION_TAG_RE = re.compile(r"\b(param|returns|type|template)\b")

JSDOC_TAGS: frozenset[str] = frozenset({
    "param", "returns", "return", "type", "template", "typedef",
    "property", "prop", "deprecated", "example", "see", "throws",
    "default", "defaultValue", "since", "remarks", "link", "version",
    "author",
})

TAG_SEPARATOR = " ― "


@dataclass(frozen=True, slots=True)
class TypeInfo:
    """Resolved payload of a hover or query.

    ``type_text`` is empty when cleanup leaves nothing to show.
    ``doc_tags`` only holds allow-listed tags, and is empty when JSDoc
    rendering is off.
    """
    type_text: str
    docs: str | None = None
    doc_tags: tuple[DocTag, ...] = ()


def clean_type_text(text: str) -> str:
    content = LEADING_ROLE_RE.sub("", text)
    content = TRAILING_IMPORT_RE.sub("", content)
    content = BARE_HEADER_RE.sub("", content).strip()

    if TYPE_SIGNATURE_RE.match(content):
        content = f"type {content}"
    elif CALL_SIGNATURE_RE.match(content):
        content = f"function {content}"
    return content


def build_type_info(
    text: str,
    docs: str | None,
    tags: tuple[DocTag, ...],
    ctx: NormalizeContext,
) -> TypeInfo:
    if not ctx.include_jsdoc:
        return TypeInfo(clean_type_text(text))
    kept = tuple(tag for tag in tags if tag[0] in JSDOC_TAGS)
    return TypeInfo(clean_type_text(text), docs or None, kept)


def render_type_info(info: TypeInfo, ctx: NormalizeContext) -> list[RenderNode]:
    """Render the type line, docs body and tag list of *info*.

    Markup rendering errors propagate to the caller.
    """
    nodes: list[RenderNode] = []
    if info.type_text:
        nodes.append(h("code.twoslash-popup-code", [
            h("span.twoslash-popup-code-type", info.type_text),
        ]))
    if info.docs:
        nodes.append(h("div.twoslash-popup-docs", ctx.renderer.render(info.docs)))
    if info.doc_tags:
        nodes.append(h("div.twoslash-popup-docs.twoslash-popup-docs-tags", [
            _render_doc_tag(name, value, ctx) for name, value in info.doc_tags
        ]))
    return nodes


def _render_doc_tag(name: str, value: str | None, ctx: NormalizeContext) -> RenderNode:
    children: list = [h("span.twoslash-popup-docs-tag-name", f"@{name}")]
    if value:
        definition = DEFINITION_TAG_RE.search(name) and ctx.renderer.is_single_paragraph(value)
        children.append(TAG_SEPARATOR if definition else " ")
        children.append(h("span.twoslash-popup-docs-tag-value", ctx.renderer.render_inline(value)))
    return h("p", children)
