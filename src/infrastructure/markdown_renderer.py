"""
MarkdownRenderer — the documentation renderer used for hover/query docs.

Documentation comes from JSDoc, so ``{@link Target}`` references are
flattened to ``Target`` first.  The text is then parsed with
markdown-it (CommonMark plus tables and strikethrough) and the syntax
tree is converted to :class:`RenderNode` children.

Raw HTML inside documentation is kept as text, never as markup.  Any
syntax node the converter does not know raises
:class:`MarkupRenderError`.
"""
from __future__ import annotations

import re

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from core.errors import MarkupRenderError
from core.render_node import Child, RenderNode, h

JSDOC_LINK_RE = re.compile(r"\{@link ([^}]*)\}")

# Syntax-tree node types that map 1:1 onto an element with the same tag.
_ELEMENT_TYPES = frozenset({
    "paragraph", "heading", "blockquote", "bullet_list", "ordered_list",
    "list_item", "em", "strong", "s", "link",
    "table", "thead", "tbody", "tr", "th", "td",
})


class MarkdownRenderer:
    """Renders Markdown documentation into display nodes."""

    def __init__(self, md: MarkdownIt | None = None) -> None:
        self._md = md or MarkdownIt("commonmark").enable(["table", "strikethrough"])

    # ------------------------------------------------------------------
    # IMarkupRenderer
    # ------------------------------------------------------------------

    def render(self, text: str) -> list[Child]:
        return self._convert(self._parse(text))

    def render_inline(self, text: str) -> list[Child]:
        """Like :meth:`render`, but a lone paragraph is unwrapped."""
        children = self.render(text)
        if len(children) == 1 and isinstance(children[0], RenderNode) and children[0].tag == "p":
            return children[0].children
        return children

    def is_single_paragraph(self, text: str) -> bool:
        root = self._parse(text)
        return len(root.children) == 1 and root.children[0].type == "paragraph"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _parse(self, text: str) -> SyntaxTreeNode:
        return SyntaxTreeNode(self._md.parse(JSDOC_LINK_RE.sub(r"\1", text)))

    def _convert_children(self, node: SyntaxTreeNode) -> list[Child]:
        out: list[Child] = []
        for child in node.children:
            out.extend(self._convert(child))
        return out

    def _convert(self, node: SyntaxTreeNode) -> list[Child]:
        kind = node.type
        if kind in ("root", "inline"):
            return self._convert_children(node)
        if kind == "text":
            return [node.content]
        if kind == "softbreak":
            return ["\n"]
        if kind == "hardbreak":
            return [h("br")]
        if kind == "code_inline":
            return [h("code", node.content)]
        if kind in ("fence", "code_block"):
            lang = (node.info or "").strip().split(" ")[0]
            props = {"class": f"language-{lang}"} if lang else {}
            return [h("pre", [h("code", props, node.content)])]
        if kind == "hr":
            return [h("hr")]
        if kind in ("html_inline", "html_block"):
            return [node.content]
        if kind == "image":
            alt = "".join(c for c in self._convert_children(node) if isinstance(c, str))
            return [h("img", {"src": node.attrs.get("src", ""), "alt": alt})]
        if kind == "paragraph" and node.hidden:
            # tight list items
            return self._convert_children(node)
        if kind in _ELEMENT_TYPES:
            props = {k: v for k, v in node.attrs.items()}
            return [h(node.tag, props, self._convert_children(node))]
        raise MarkupRenderError(f"Unsupported markup element: {kind!r}")
