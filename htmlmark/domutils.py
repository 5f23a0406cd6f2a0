"""Rewrites of the HTML node tree that prepare it for Markdown output."""

from __future__ import annotations

from typing import Callable

from .dom import (
    Node,
    NodeType,
    all_child_nodes,
    all_nodes,
    get_next_neighbor_element,
    get_next_neighbor_node,
    get_next_neighbor_node_excluding_own_child,
    get_prev_neighbor_node,
    get_prev_neighbor_node_excluding_own_child,
    name_is_block_node,
    node_name,
    remove_node,
    unwrap_node,
)

Predicate = Callable[[Node], bool]
PairPredicate = Callable[[Node, Node], bool]


def _next_text_node(start: Node) -> Node | None:
    """Find the text node that follows ``start``, looking through spans."""
    node = get_next_neighbor_node_excluding_own_child(start)
    while node is not None:
        if node.type is NodeType.TEXT:
            return node
        if node_name(node) != "span":
            return None
        # A span has no special meaning, so it is looked through.
        node = get_next_neighbor_node(node)
    return None


def _prev_text_node(start: Node) -> Node | None:
    """Find the text node that precedes ``start``, looking through spans."""
    node = get_prev_neighbor_node_excluding_own_child(start)
    while node is not None:
        if node.type is NodeType.TEXT:
            return node
        if node_name(node) != "span":
            return None
        node = get_prev_neighbor_node(node)
    return None


def _first_child_match(start: Node, match: Predicate) -> Node | None:
    node = start.first_child
    while node is not None:
        if node_name(node) == "span":
            node = get_next_neighbor_node(node)
        elif match(node):
            return node
        else:
            return None
    return None


def _last_child_match(start: Node, match: Predicate) -> Node | None:
    node = start.last_child
    while node is not None:
        if node_name(node) == "span":
            node = get_prev_neighbor_node(node)
        elif match(node):
            return node
        else:
            return None
    return None


def add_space(doc: Node, is_outer_node: Predicate, is_inner_node: Predicate) -> None:
    """Add a space to the text around an outer node that starts or ends with an inner node."""
    node: Node | None = doc
    while node is not None:
        if is_outer_node(node):
            if _first_child_match(node, is_inner_node) is not None:
                prev = _prev_text_node(node)
                if prev is not None:
                    prev.data += " "
            if _last_child_match(node, is_inner_node) is not None:
                following = _next_text_node(node)
                if following is not None:
                    following.data = " " + following.data
        node = get_next_neighbor_element(node)


def _collect_adjacent_nodes(node: Node, match: Predicate) -> list[Node]:
    collected: list[Node] = []
    current = node.next_sibling
    while current is not None:
        if node_name(current) == "span":
            current = get_next_neighbor_node(current)
        elif match(current):
            collected.append(current)
            current = get_next_neighbor_node_excluding_own_child(current)
        else:
            break
    return collected


def _merge_children(destination: Node, nodes: list[Node]) -> None:
    for node in nodes:
        for child in all_child_nodes(node):
            remove_node(child)
            destination.append_child(child)
        remove_node(node)


def merge_adjacent(doc: Node, match: Predicate) -> None:
    """Move the content of directly following matching nodes into the first one."""
    node: Node | None = doc
    while node is not None:
        if match(node):
            _merge_children(node, _collect_adjacent_nodes(node, match))
        node = get_next_neighbor_element(node)


def merge_adjacent_text_nodes(node: Node | None) -> None:
    """Join text nodes that are direct siblings, throughout the subtree."""
    if node is None:
        return
    prev: Node | None = None
    for child in all_child_nodes(node):
        if child.type is NodeType.TEXT and prev is not None and prev.type is NodeType.TEXT:
            prev.data += child.data
            node.remove_child(child)
        else:
            merge_adjacent_text_nodes(child)
            prev = child


def _has_same_type_ancestor(node: Node, match: PairPredicate) -> bool:
    if not match(node, node):
        return False
    parent = node.parent
    while parent is not None:
        if match(node, parent):
            return True
        parent = parent.parent
    return False


def remove_redundant(doc: Node, match: PairPredicate) -> None:
    """Unwrap nodes that already have a matching ancestor."""
    for node in all_nodes(doc):
        if _has_same_type_ancestor(node, match):
            unwrap_node(node)


def _is_fake_span(node: Node) -> bool:
    if node_name(node) != "span":
        return False
    return any(name_is_block_node(node_name(inner)) for inner in all_nodes(node))


def rename_fake_spans(doc: Node) -> None:
    """Rename every "span" that contains a block element to "div"."""
    if _is_fake_span(doc):
        doc.data = "div"
    for child in doc.children():
        rename_fake_spans(child)


def swap_tags_of_nodes(node1: Node, node2: Node) -> None:
    """Exchange tag name and attributes of two elements, keeping their places."""
    if node1.type is not NodeType.ELEMENT or node2.type is not NodeType.ELEMENT:
        raise ValueError("swap only works with element nodes")
    node1.data, node2.data = node2.data, node1.data
    node1.attr, node2.attr = node2.attr, node1.attr


def _is_empty_text(node: Node) -> bool:
    return node.type is NodeType.TEXT and node.data.strip() == ""


def swap_tags(doc: Node, is_outer_node: Predicate, is_inner_node: Predicate) -> None:
    """Swap an outer node with its only meaningful child when that child is an inner node."""
    if is_outer_node(doc):
        children = [child for child in doc.children() if not _is_empty_text(child)]
        if len(children) == 1 and is_inner_node(children[0]):
            swap_tags_of_nodes(doc, children[0])
            return
    for child in doc.children():
        swap_tags(child, is_outer_node, is_inner_node)


def _has_text_child_nodes(start: Node) -> bool:
    return any(node.type is NodeType.TEXT and node.data for node in all_nodes(start))


def remove_empty_code(doc: Node) -> None:
    """Remove "code" elements that hold no text."""
    node: Node | None = doc
    while node is not None:
        if node_name(node) == "code" and not _has_text_child_nodes(node):
            following = get_next_neighbor_node_excluding_own_child(node)
            remove_node(node)
            node = following
            continue
        node = get_next_neighbor_node(node)