"""
RenderNode — the display tree handed to the downstream renderer.

Nodes are plain element records (tag, classes, properties, children)
with text children as ``str``.  The :data:`SLOT` sentinel marks where
the annotated source text is placed when the downstream renderer wraps
it, so an annotation's tree reads like its final markup::

    h("span.twoslash-highlighted", [SLOT])

:func:`h` mirrors the hyperscript helper used by HTML tree libraries:
``h("div.a.b", {"style": ...}, [children])``.  Nested lists in the
children are flattened and ``None`` entries are skipped.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Union


@dataclass(frozen=True, slots=True)
class Slot:
    """Placeholder for the wrapped source text."""

    def __repr__(self) -> str:
        return "SLOT"


SLOT = Slot()


@dataclass(slots=True)
class RenderNode:
    tag: str
    classes: tuple[str, ...] = ()
    properties: dict[str, Any] = field(default_factory=dict)
    children: list[Child] = field(default_factory=list)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def iter_nodes(self) -> Iterator[RenderNode]:
        """Depth-first iteration over this node and all element descendants."""
        yield self
        for child in self.children:
            if isinstance(child, RenderNode):
                yield from child.iter_nodes()

    def find_all(self, class_name: str) -> list[RenderNode]:
        return [node for node in self.iter_nodes() if node.has_class(class_name)]

    def find(self, class_name: str) -> RenderNode | None:
        found = self.find_all(class_name)
        return found[0] if found else None

    def text_content(self) -> str:
        """Concatenated text of all descendants (slots contribute nothing)."""
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, str):
                parts.append(child)
            elif isinstance(child, RenderNode):
                parts.append(child.text_content())
        return "".join(parts)

    def has_slot(self) -> bool:
        return any(
            child is SLOT or (isinstance(child, RenderNode) and child.has_slot())
            for child in self.children
        )


Child = Union[RenderNode, str, Slot]


def _flatten(items: Any, out: list[Child]) -> None:
    if items is None:
        return
    if isinstance(items, (RenderNode, str, Slot)):
        out.append(items)
        return
    for item in items:
        _flatten(item, out)


def h(selector: str, *args: Any) -> RenderNode:
    """Build a :class:`RenderNode` from a ``tag.class.class`` selector.

    Accepted call shapes::

        h("span.a")
        h("span.a", children)
        h("span.a", properties, children)

    A ``class`` entry in *properties* is split on whitespace and merged
    into the node's classes.
    """
    tag, *classes = selector.split(".")
    properties: dict[str, Any] = {}
    children: Any = None

    if len(args) == 1:
        if isinstance(args[0], Mapping):
            properties = dict(args[0])
        else:
            children = args[0]
    elif len(args) == 2:
        properties = dict(args[0] or {})
        children = args[1]
    elif args:
        raise ValueError(f"h() takes at most 2 positional arguments after the selector, got {len(args)}")

    extra = properties.pop("class", None)
    if extra:
        classes.extend(c for c in str(extra).split() if c)

    flat: list[Child] = []
    _flatten(children, flat)
    return RenderNode(tag=tag or "div", classes=tuple(classes), properties=properties, children=flat)
