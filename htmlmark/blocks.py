"""Rewrites of block structure that Markdown cannot express directly."""

from __future__ import annotations

import enum
from typing import Callable

from .dom import (
    Node,
    NodeType,
    all_child_nodes,
    get_next_neighbor_element,
    get_next_neighbor_node,
    get_next_neighbor_node_excluding_own_child,
    node_name,
    remove_node,
    wrap_node,
)

LIST_END_COMMENT_DATA = "THE END"


class _Structure(enum.Enum):
    NONE = ""
    CONTAINER_BLOCK = "container_block"
    LEAF_BLOCK = "leaf_block"
    INLINE = "inline"


_CONTAINER_BLOCKS = frozenset(
    ["#document", "html", "head", "body", "blockquote", "ul", "ol", "li"]
)
_LEAF_BLOCKS = frozenset(["hr", "pre", "h1", "h2", "h3", "h4", "h5", "h6"])
_INLINES = frozenset(
    ["#text", "span", "code", "b", "strong", "i", "em", "a", "img", "br"]
)


def _markdown_structure(name: str) -> _Structure:
    if name in _CONTAINER_BLOCKS:
        return _Structure.CONTAINER_BLOCK
    if name in _LEAF_BLOCKS:
        return _Structure.LEAF_BLOCK
    if name in _INLINES:
        return _Structure.INLINE
    return _Structure.NONE


def _heading_alternative(node: Node) -> None:
    node.data = "strong"
    node.parent.insert_before(Node(NodeType.ELEMENT, "br"), node.next_sibling)


def _blockquote_alternative(node: Node) -> None:
    node.parent.insert_before(Node(NodeType.TEXT, ' "'), node)
    node.data = "span"
    node.parent.insert_before(Node(NodeType.TEXT, '" '), node.next_sibling)


def _pre_alternative(node: Node) -> None:
    node.data = "code"


def _hr_alternative(node: Node) -> None:
    remove_node(node)


_ALTERNATIVES: dict[str, Callable[[Node], None]] = {
    "h1": _heading_alternative,
    "h2": _heading_alternative,
    "h3": _heading_alternative,
    "h4": _heading_alternative,
    "h5": _heading_alternative,
    "h6": _heading_alternative,
    "blockquote": _blockquote_alternative,
    "pre": _pre_alternative,
    "hr": _hr_alternative,
}


def leaf_block_alternatives(doc: Node) -> None:
    """Replace blocks inside leaf blocks or inline content by inline alternatives."""

    def visit(node: Node, inside_leaf: bool, inside_inline: bool) -> None:
        name = node_name(node)
        structure = _markdown_structure(name)
        is_block = structure in (_Structure.CONTAINER_BLOCK, _Structure.LEAF_BLOCK)
        if is_block and (inside_leaf or inside_inline):
            alternative = _ALTERNATIVES.get(name)
            if alternative is not None:
                alternative(node)
            else:
                node.data = "span"

        if structure is _Structure.LEAF_BLOCK:
            inside_leaf = True
        if structure is _Structure.INLINE:
            inside_inline = True

        # Children are visited last to first so that siblings inserted
        # by an alternative are not visited.
        for child in reversed(all_child_nodes(node)):
            visit(child, inside_leaf, inside_inline)

    visit(doc, False, False)


def _is_list(node: Node) -> bool:
    return node_name(node) in ("ul", "ol")


def _next_is_list(start: Node) -> bool:
    node = get_next_neighbor_node_excluding_own_child(start)
    while node is not None:
        name = node_name(node)
        if name in ("ul", "ol"):
            return True
        if name == "li":
            return False
        if name == "#comment" and node.data == LIST_END_COMMENT_DATA:
            return False
        # Text between two lists already separates them.
        if node.type is NodeType.TEXT:
            return False
        if name == "hr":
            return False
        node = get_next_neighbor_node(node)
    return False


def add_list_end_comments(doc: Node) -> None:
    """Insert a comment after a list that is followed by another list."""
    node: Node | None = doc
    while node is not None:
        if _is_list(node) and _next_is_list(node):
            comment = Node(NodeType.COMMENT, LIST_END_COMMENT_DATA)
            node.parent.insert_before(comment, node.next_sibling)
        node = get_next_neighbor_element(node)


def move_list_items(node: Node) -> None:
    """Move content of a list that is not inside an "li" into the previous "li"."""
    if node.type is NodeType.ELEMENT and node.data in ("ol", "ul"):
        previous_li: Node | None = None
        for child in all_child_nodes(node):
            if child.type is NodeType.ELEMENT and child.data == "li":
                previous_li = child
            elif child.type is NodeType.TEXT and child.data.strip() == "":
                continue
            elif previous_li is not None:
                node.remove_child(child)
                previous_li.append_child(child)
            else:
                previous_li = wrap_node(child, Node(NodeType.ELEMENT, "li"))

    for child in node.children():
        move_list_items(child)