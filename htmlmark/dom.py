"""A small HTML node tree with parsing, navigation and a text representation."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator
from xml.dom import Node as _MiniNode

import html5lib


class NodeType(enum.Enum):
    """The kind of a node in the tree."""

    ERROR = 0
    TEXT = 1
    DOCUMENT = 2
    ELEMENT = 3
    COMMENT = 4
    DOCTYPE = 5


@dataclass
class Attribute:
    """An attribute of an element."""

    key: str
    val: str
    namespace: str = ""


@dataclass(eq=False)
class Node:
    """A node linked to its parent, children and siblings."""

    type: NodeType
    data: str = ""
    attr: list[Attribute] = field(default_factory=list)
    namespace: str = ""
    parent: Node | None = field(default=None, repr=False)
    first_child: Node | None = field(default=None, repr=False)
    last_child: Node | None = field(default=None, repr=False)
    prev_sibling: Node | None = field(default=None, repr=False)
    next_sibling: Node | None = field(default=None, repr=False)

    def children(self) -> Iterator[Node]:
        """Yield the direct children in order."""
        child = self.first_child
        while child is not None:
            following = child.next_sibling
            yield child
            child = following

    def append_child(self, child: Node) -> None:
        """Add ``child`` as the last child."""
        self.insert_before(child, None)

    def insert_before(self, child: Node, reference: Node | None) -> None:
        """Insert ``child`` before ``reference``, or at the end if it is None."""
        if child.parent is not None or child.prev_sibling or child.next_sibling:
            raise ValueError("the node to insert is still attached")
        if reference is not None and reference.parent is not self:
            raise ValueError("the reference node is not a child of this node")
        if reference is None:
            prev = self.last_child
            self.last_child = child
        else:
            prev = reference.prev_sibling
            reference.prev_sibling = child
        if prev is None:
            self.first_child = child
        else:
            prev.next_sibling = child
        child.parent = self
        child.prev_sibling = prev
        child.next_sibling = reference

    def remove_child(self, child: Node) -> None:
        """Detach ``child`` from this node."""
        if child.parent is not self:
            raise ValueError("the node is not a child of this node")
        if child.prev_sibling is None:
            self.first_child = child.next_sibling
        else:
            child.prev_sibling.next_sibling = child.next_sibling
        if child.next_sibling is None:
            self.last_child = child.prev_sibling
        else:
            child.next_sibling.prev_sibling = child.prev_sibling
        child.parent = child.prev_sibling = child.next_sibling = None


_SPECIAL_NAMES = {
    NodeType.TEXT: "#text",
    NodeType.DOCUMENT: "#document",
    NodeType.COMMENT: "#comment",
    NodeType.DOCTYPE: "#doctype",
}

_BLOCK_NAMES = frozenset(
    """address article aside blockquote body details dialog dd div dl dt
    fieldset figcaption figure footer form h1 h2 h3 h4 h5 h6 head header
    hgroup hr html li main nav ol p pre section table tbody thead tfoot tr
    td th ul""".split()
)


def node_name(node: Node) -> str:
    """Return the tag name of an element, or a "#" name for other nodes."""
    if node.type is NodeType.ELEMENT:
        return node.data
    return _SPECIAL_NAMES.get(node.type, "")


def name_is_block_node(name: str) -> bool:
    """Return True if ``name`` is the tag name of a block element."""
    return name in _BLOCK_NAMES


def _convert(source) -> Node | None:
    kind = source.nodeType
    if kind == _MiniNode.ELEMENT_NODE:
        node = Node(
            NodeType.ELEMENT,
            source.tagName,
            [Attribute(key, val) for key, val in source.attributes.items()],
        )
    elif kind == _MiniNode.TEXT_NODE:
        return Node(NodeType.TEXT, source.data)
    elif kind == _MiniNode.COMMENT_NODE:
        return Node(NodeType.COMMENT, source.data)
    elif kind == _MiniNode.DOCUMENT_TYPE_NODE:
        return Node(NodeType.DOCTYPE, source.name or "")
    elif kind == _MiniNode.DOCUMENT_NODE:
        node = Node(NodeType.DOCUMENT)
    else:
        return None
    for child in source.childNodes:
        converted = _convert(child)
        if converted is not None:
            node.append_child(converted)
    return node


def parse(markup: str, start_from: str = "body") -> Node:
    """Parse ``markup`` and return the first node named ``start_from``.

    Raises LookupError if there is no such node.
    """
    start_from = start_from or "body"
    tree = html5lib.parse(markup.strip(), treebuilder="dom", namespaceHTMLElements=False)
    document = _convert(tree)
    for node in all_nodes(document):
        if node_name(node) == start_from:
            return node
    raise LookupError(f"could not find a node named {start_from!r}")


def _quote(text: str) -> str:
    escapes = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r",
               "\a": "\\a", "\b": "\\b", "\f": "\\f", "\v": "\\v"}
    parts = []
    for char in text:
        if char in escapes:
            parts.append(escapes[char])
        elif char.isprintable():
            parts.append(char)
        elif ord(char) < 0x80:
            parts.append(f"\\x{ord(char):02x}")
        elif ord(char) < 0x10000:
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(f"\\U{ord(char):08x}")
    return '"' + "".join(parts) + '"'


def _label(node: Node) -> str:
    name = node_name(node)
    if node.type in (NodeType.TEXT, NodeType.COMMENT):
        return f"{name} {_quote(node.data)}"
    if node.attr:
        attrs = " ".join(f"{a.key}={_quote(a.val)}" for a in node.attr)
        return f"{name} ({attrs})"
    return name


def render_representation(node: Node) -> str:
    """Render the subtree as an indented tree of names, one node per line."""
    lines: list[str] = []

    def visit(current: Node, depth: int) -> None:
        if depth == 0:
            lines.append(_label(current))
        else:
            lines.append("│ " * (depth - 1) + "├─" + _label(current))
        for child in current.children():
            visit(child, depth + 1)

    visit(node, 1 if node.parent is not None else 0)
    return "\n".join(lines) + "\n"


def all_child_nodes(node: Node) -> list[Node]:
    """Return the direct children as a list."""
    return list(node.children())


def all_nodes(node: Node) -> list[Node]:
    """Return ``node`` and all its descendants in document order."""
    result = [node]
    for child in node.children():
        result.extend(all_nodes(child))
    return result


def remove_node(node: Node) -> None:
    """Detach ``node`` from its parent, if it has one."""
    if node.parent is not None:
        node.parent.remove_child(node)


def unwrap_node(node: Node) -> None:
    """Replace ``node`` by its children."""
    parent = node.parent
    if parent is None:
        return
    for child in all_child_nodes(node):
        node.remove_child(child)
        parent.insert_before(child, node)
    parent.remove_child(node)


def wrap_node(node: Node, wrapper: Node) -> Node:
    """Put ``wrapper`` where ``node`` is and move ``node`` into it."""
    parent = node.parent
    if parent is not None:
        parent.insert_before(wrapper, node)
        parent.remove_child(node)
    wrapper.append_child(node)
    return wrapper


def get_next_neighbor_node_excluding_own_child(node: Node) -> Node | None:
    """Return the next node in document order that is not inside ``node``."""
    current: Node | None = node
    while current is not None:
        if current.next_sibling is not None:
            return current.next_sibling
        current = current.parent
    return None


def get_next_neighbor_node(node: Node) -> Node | None:
    """Return the next node in document order."""
    if node.first_child is not None:
        return node.first_child
    return get_next_neighbor_node_excluding_own_child(node)


def get_prev_neighbor_node_excluding_own_child(node: Node) -> Node | None:
    """Return the previous sibling of ``node`` or of its nearest ancestor."""
    current: Node | None = node
    while current is not None:
        if current.prev_sibling is not None:
            return current.prev_sibling
        current = current.parent
    return None


def get_prev_neighbor_node(node: Node) -> Node | None:
    """Step backwards: into the last child first, then to earlier siblings."""
    if node.last_child is not None:
        return node.last_child
    return get_prev_neighbor_node_excluding_own_child(node)


def get_next_neighbor_element(node: Node) -> Node | None:
    """Return the next element node in document order."""
    current = get_next_neighbor_node(node)
    while current is not None and current.type is not NodeType.ELEMENT:
        current = get_next_neighbor_node(current)
    return current