import pytest

from htmlmark.dom import Attribute, Node, NodeType, all_child_nodes, node_name, parse
from htmlmark.domutils import (
    add_space,
    merge_adjacent,
    merge_adjacent_text_nodes,
    remove_empty_code,
    remove_redundant,
    rename_fake_spans,
    swap_tags,
    swap_tags_of_nodes,
)


def _tree(node):
    """Describe a node as nested tuples: leaves as (name, data)."""
    name = node_name(node)
    if name in ("#text", "#comment"):
        return (name, node.data)
    label = name + "".join(f" {a.key}={a.val}" for a in node.attr)
    return (label, [_tree(child) for child in all_child_nodes(node)])


def T(text):
    return ("#text", text)


def E(label, *kids):
    return (label, list(kids))


def body(*kids):
    return E("body", *kids)


def _is_bold_or_italic(node):
    return node_name(node) in ("strong", "b", "em", "i")


# - - - - - - - - add_space - - - - - - - - #

ADD_SPACE_CASES = {
    "before_after": (
        "before<strong><code>inline code</code></strong>after",
        body(T("before "), E("strong", E("code", T("inline code"))), T(" after")),
    ),
    "no_text": (
        "<strong><code>inline code</code></strong>",
        body(E("strong", E("code", T("inline code")))),
    ),
}


@pytest.mark.parametrize(
    "markup, expected", list(ADD_SPACE_CASES.values()), ids=list(ADD_SPACE_CASES)
)
def test_add_space(markup, expected):
    doc = parse(markup, "")
    add_space(doc, _is_bold_or_italic, lambda n: node_name(n) == "code")
    assert _tree(doc) == expected


# - - - - - - - - merge_adjacent - - - - - - - - #

_TWO_SPANS = body(E("span", T("a")), T(" "), E("span", T("b")))
_ONE_STRONG = body(E("strong", T("a")))

MERGE_CASES = {
    "other_tags": ("<span>a</span> <span>b</span>", _TWO_SPANS),
    "simple_strong": ("<strong>a</strong>", _ONE_STRONG),
    "space_between": (
        "<strong>a</strong> <strong>b</strong>",
        body(E("strong", T("a")), T(" "), E("strong", T("b"))),
    ),
    "two_adjacent": (
        "<strong>a</strong><strong>b</strong>",
        body(E("strong", T("a"), T("b"))),
    ),
    "three_adjacent": (
        "<strong>a</strong><strong>b</strong><strong>c</strong>",
        body(E("strong", T("a"), T("b"), T("c"))),
    ),
    "four_adjacent": (
        "<strong>a</strong><strong>b</strong><strong>c</strong><strong>d</strong>",
        body(E("strong", T("a"), T("b"), T("c"), T("d"))),
    ),
    "tag_between": (
        "<strong>a</strong><p>between</p><strong>b</strong>",
        body(E("strong", T("a")), E("p", T("between")), E("strong", T("b"))),
    ),
    "text_between": (
        "<strong>a</strong> between <strong>b</strong>",
        body(E("strong", T("a")), T(" between "), E("strong", T("b"))),
    ),
    "break_between": (
        "<strong>a</strong><br/><strong>b</strong>",
        body(E("strong", T("a")), E("br"), E("strong", T("b"))),
    ),
    "three_italic": (
        "<em>a</em><em>b</em><em>c</em>",
        body(E("em", T("a"), T("b"), T("c"))),
    ),
    "nested_with_space": (
        "<div><strong>A</strong></div> <strong>B</strong>",
        body(E("div", E("strong", T("A"))), T(" "), E("strong", T("B"))),
    ),
    "nested_in_div": (
        "<div><strong>A</strong></div><strong>B</strong>",
        body(E("div", E("strong", T("A"))), E("strong", T("B"))),
    ),
    "deeply_nested": (
        "<div><div><div><strong>A</strong></div></div><div><strong>b</strong></div></div>",
        body(
            E(
                "div",
                E("div", E("div", E("strong", T("A")))),
                E("div", E("strong", T("b"))),
            )
        ),
    ),
    "enclosed_in_link": (
        '<a href="/"><strong>A</strong></a><strong>B</strong>',
        body(E("a href=/", E("strong", T("A"))), E("strong", T("B"))),
    ),
    "span_1": (
        "<p><strong>a</strong><span><strong>b</strong></span>other text</p>",
        body(E("p", E("strong", T("a"), T("b")), E("span"), T("other text"))),
    ),
    "span_2": (
        "<p><strong>a</strong><span><span><strong>b</strong></span></span>other text</p>",
        body(E("p", E("strong", T("a"), T("b")), E("span", E("span")), T("other text"))),
    ),
    "span_3": (
        "<p><strong>a</strong><span><strong>b</strong></span>"
        "<span><strong>c</strong>other text</span></p>",
        body(
            E(
                "p",
                E("strong", T("a"), T("b"), T("c")),
                E("span"),
                E("span", T("other text")),
            )
        ),
    ),
    "other_span": (
        "<p><strong>a</strong><span>other text</span></p>",
        body(E("p", E("strong", T("a")), E("span", T("other text")))),
    ),
    "span_with_space": (
        "<p><strong>a</strong><span> <strong>b</strong></span></p>",
        body(E("p", E("strong", T("a")), E("span", T(" "), E("strong", T("b"))))),
    ),
}


@pytest.mark.parametrize("markup, expected", list(MERGE_CASES.values()), ids=list(MERGE_CASES))
def test_merge_adjacent(markup, expected):
    doc = parse(markup, "")
    merge_adjacent(doc, lambda n: node_name(n) in ("strong", "em"))
    assert _tree(doc) == expected


def test_merge_adjacent_text_nodes():
    div = Node(NodeType.ELEMENT, "div")
    for text in ("one", "two", "three"):
        div.append_child(Node(NodeType.TEXT, text))

    merge_adjacent_text_nodes(div)

    assert _tree(div) == E("div", T("onetwothree"))


def test_merge_adjacent_text_nodes_accepts_none():
    assert merge_adjacent_text_nodes(None) is None


# - - - - - - - - remove_redundant - - - - - - - - #

def _same_emphasis(a, b):
    italic = ("em", "i")
    bold = ("strong", "b")
    if node_name(a) in italic and node_name(b) in italic:
        return True
    return node_name(a) in bold and node_name(b) in bold


REDUNDANT_CASES = {
    "other_tags": ("<span>a</span> <span>b</span>", _TWO_SPANS),
    "simple_strong": ("<strong>a</strong>", _ONE_STRONG),
    "double_strong": ("<strong><strong>a</strong></strong>", _ONE_STRONG),
    "complicated_double_strong": (
        "<strong><strong>a</strong> b <strong><strong>c</strong></strong></strong>",
        body(E("strong", T("a"), T(" b "), T("c"))),
    ),
    "italic_inside_bold": (
        "<strong>A<em>B</em>C</strong>",
        body(E("strong", T("A"), E("em", T("B")), T("C"))),
    ),
    "italic_inside_italic": (
        "<i>A<em>B</em>C</i>",
        body(E("i", T("A"), T("B"), T("C"))),
    ),
}


@pytest.mark.parametrize(
    "markup, expected", list(REDUNDANT_CASES.values()), ids=list(REDUNDANT_CASES)
)
def test_remove_redundant(markup, expected):
    doc = parse(markup, "")
    remove_redundant(doc, _same_emphasis)
    assert _tree(doc) == expected


# - - - - - - - - rename_fake_spans - - - - - - - - #

SPAN_CASES = {
    "other_tags": (
        "<p>a</p> <p>b</p>",
        body(E("p", T("a")), T(" "), E("p", T("b"))),
    ),
    "simple_span": ("<span>a</span>", body(E("span", T("a")))),
    "inline_child": (
        "<span><a>link content</a></span>",
        body(E("span", E("a", T("link content")))),
    ),
    "block_child": (
        "<span><p>paragraph content</p></span>",
        body(E("div", E("p", T("paragraph content")))),
    ),
    "nested_spans": (
        "<span><span><p>paragraph content</p></span></span>",
        body(E("div", E("div", E("p", T("paragraph content"))))),
    ),
}


@pytest.mark.parametrize("markup, expected", list(SPAN_CASES.values()), ids=list(SPAN_CASES))
def test_rename_fake_spans(markup, expected):
    doc = parse(markup, "")
    rename_fake_spans(doc)
    assert _tree(doc) == expected


# - - - - - - - - swap - - - - - - - - #

def _build(outer_name, inner_name, key, val, content):
    outer = Node(NodeType.ELEMENT, outer_name)
    inner = Node(NodeType.ELEMENT, inner_name, [Attribute(key, val)])
    inner.append_child(Node(NodeType.TEXT, content))
    outer.append_child(inner)
    return outer


def test_swap_tags_of_nodes_basics():
    a = _build("div", "a", "KeyA", "ValA", "ContentA")
    b = _build("main", "b", "KeyB", "ValB", "ContentB")

    swap_tags_of_nodes(a.first_child, b.first_child)

    assert a.first_child.data == "b"
    assert [(x.key, x.val) for x in a.first_child.attr] == [("KeyB", "ValB")]
    assert a.first_child.parent.data == "div"
    assert a.first_child.first_child.data == "ContentA"

    assert b.first_child.data == "a"
    assert [(x.key, x.val) for x in b.first_child.attr] == [("KeyA", "ValA")]
    assert b.first_child.parent.data == "main"
    assert b.first_child.first_child.data == "ContentB"


def test_swap_tags_of_nodes_rejects_text():
    element = Node(NodeType.ELEMENT, "a")
    text = Node(NodeType.TEXT, "x")
    with pytest.raises(ValueError):
        swap_tags_of_nodes(element, text)


def _is_heading(node):
    return node_name(node) in ("h1", "h2", "h3", "h4", "h5", "h6")


HEADING_LINK_CASES = {
    "simple": (
        '<a href="/page.html"><h3>Heading</h3></a>',
        body(E("h3", E("a href=/page.html", T("Heading")))),
    ),
    "with_whitespace": (
        '\n<a href="/page.html">\n\t<h3>Heading</h3>\n</a>\n',
        body(E("h3", T("\n\t"), E("a href=/page.html", T("Heading")), T("\n"))),
    ),
    "more_content": (
        '\n<a href="/reisen">\n\t<h3><span>Reiseinspiration</span>'
        "<span>Beste Orte in Berlin</span></h3>\n</a>\n",
        body(
            E(
                "h3",
                T("\n\t"),
                E(
                    "a href=/reisen",
                    E("span", T("Reiseinspiration")),
                    E("span", T("Beste Orte in Berlin")),
                ),
                T("\n"),
            )
        ),
    ),
    "not_possible": (
        '\n<a href="/page.html">\n\t<h3>Heading</h3>\n\t<p>Some other content</p>\n</a>\n',
        body(
            E(
                "a href=/page.html",
                T("\n\t"),
                E("h3", T("Heading")),
                T("\n\t"),
                E("p", T("Some other content")),
                T("\n"),
            )
        ),
    ),
}


@pytest.mark.parametrize(
    "markup, expected", list(HEADING_LINK_CASES.values()), ids=list(HEADING_LINK_CASES)
)
def test_swap_tags_heading_link(markup, expected):
    doc = parse(markup, "body")
    swap_tags(doc, lambda n: node_name(n) == "a", _is_heading)
    assert _tree(doc) == expected


_DIV_PRE = body(E("div", E("pre", T("content"))))
_P_PRE = body(E("p"), E("pre", T("content")), E("p"))
_DIV_CODE = body(E("div", E("code", T("content"))))
_P_CODE = body(E("p", E("code", T("content"))))
_DIV_PRE_CODE = body(E("div", E("pre", E("code", T("content")))))
_PARSED_SWAP = body(E("p", E("code")), E("pre", E("code", T("content"))), E("p"))
_DIFFERENT_AST = body(
    E("p", T("before"), E("code", T("a"))),
    E("pre", E("code", T("b"))),
    E("code", T("c")),
    T("after"),
    E("p"),
)

PRE_CODE_CASES = {
    "div_with_pre": ("<div><pre>content</pre></div>", _DIV_PRE, _DIV_PRE),
    "p_with_pre": ("<p><pre>content</pre></p>", _P_PRE, _P_PRE),
    "div_with_code": ("<div><code>content</code></div>", _DIV_CODE, _DIV_CODE),
    "p_with_code": ("<p><code>content</code></p>", _P_CODE, _P_CODE),
    "correct_code_block": (
        "<div><pre><code>content</code></pre></div>",
        _DIV_PRE_CODE,
        _DIV_PRE_CODE,
    ),
    "wrong_code_block": (
        "<div><code><pre>content</pre></code></div>",
        body(E("div", E("code", E("pre", T("content"))))),
        _DIV_PRE_CODE,
    ),
    "parsing_swaps": ("<p><code><pre>content</pre></code></p>", _PARSED_SWAP, _PARSED_SWAP),
    "different_ast": (
        "<p>before<code>a<pre>b</pre>c</code>after</p>",
        _DIFFERENT_AST,
        _DIFFERENT_AST,
    ),
}


@pytest.mark.parametrize(
    "markup, before, after", list(PRE_CODE_CASES.values()), ids=list(PRE_CODE_CASES)
)
def test_swap_tags_pre_code(markup, before, after):
    doc = parse(markup, "")
    assert _tree(doc) == before

    swap_tags(doc, lambda n: node_name(n) == "code", lambda n: node_name(n) == "pre")

    assert _tree(doc) == after


_LINK = E("a href=/", T("with empty span"))
_SPACED_SPAN = E("span", T("  "))
_NESTED_SPAN = E("span", E("span", T("  ")), T(" "))

STRONG_LINK_CASES = {
    "swap": (
        '<p>before<strong><a href="/">middle</a></strong>after</p>',
        body(E("p", T("before"), E("a href=/", E("strong", T("middle"))), T("after"))),
    ),
    "empty_span": (
        '<p>before<strong><span></span><a href="/">with empty span</a><span></span></strong>after</p>',
        body(E("p", T("before"), E("strong", E("span"), _LINK, E("span")), T("after"))),
    ),
    "span_with_spaces": (
        '<p>before<strong><span>  </span><a href="/">with empty span</a>'
        "<span>  </span></strong>after</p>",
        body(E("p", T("before"), E("strong", _SPACED_SPAN, _LINK, _SPACED_SPAN), T("after"))),
    ),
    "spans_nested": (
        '<p>before<strong><span><span>  </span> </span><a href="/">with empty span</a>'
        "<span><span>  </span> </span></strong>after</p>",
        body(E("p", T("before"), E("strong", _NESTED_SPAN, _LINK, _NESTED_SPAN), T("after"))),
    ),
}


@pytest.mark.parametrize(
    "markup, expected", list(STRONG_LINK_CASES.values()), ids=list(STRONG_LINK_CASES)
)
def test_swap_tags_strong_links(markup, expected):
    doc = parse(markup, "")
    swap_tags(doc, _is_bold_or_italic, lambda n: node_name(n) == "a")
    assert _tree(doc) == expected


# - - - - - - - - remove_empty_code - - - - - - - - #

EMPTY_CODE_CASES = {
    "code_before_pre": (
        "<p>before<code><pre>middle</pre></code>after</p>",
        body(
            E("p", T("before"), E("code")),
            E("pre", E("code", T("middle"))),
            T("after"),
            E("p"),
        ),
        body(
            E("p", T("before")),
            E("pre", E("code", T("middle"))),
            T("after"),
            E("p"),
        ),
    ),
    "two_empty_code_nodes": (
        "<p><code></code></p>between<p><code></code></p>",
        body(E("p", E("code")), T("between"), E("p", E("code"))),
        body(E("p"), T("between"), E("p")),
    ),
}


@pytest.mark.parametrize(
    "markup, before, after", list(EMPTY_CODE_CASES.values()), ids=list(EMPTY_CODE_CASES)
)
def test_remove_empty_code(markup, before, after):
    doc = parse(markup, "")
    assert _tree(doc) == before

    remove_empty_code(doc)

    assert _tree(doc) == after