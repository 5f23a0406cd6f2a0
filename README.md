# htmlmark

Building blocks for turning HTML into Markdown.

- `htmlmark.dom`: a small linked node tree (`Node`, `NodeType`, `Attribute`).
  `parse(markup, start_from)` parses HTML with html5lib and returns the first
  node with the given name (`"body"` by default), raising `LookupError` if
  there is none. `render_representation` dumps a subtree as an indented tree,
  one node per line. Helpers walk the tree in document order
  (`get_next_neighbor_node`, `get_next_neighbor_element`, ...) and rewrite it
  (`remove_node`, `unwrap_node`, `wrap_node`).
- `htmlmark.domutils`: clean-up passes on the tree. `merge_adjacent` joins
  directly following matching elements, `merge_adjacent_text_nodes` joins
  sibling text nodes, `remove_redundant` unwraps nodes nested in a matching
  ancestor, `rename_fake_spans` turns spans holding blocks into divs,
  `swap_tags` swaps an outer element with its only child (for example
  `<code><pre>` into `<pre><code>`), `add_space` pads the text around an outer
  element that starts or ends with an inner one, and `remove_empty_code`
  drops `code` elements without text.
- `htmlmark.blocks`: `leaf_block_alternatives` replaces blocks placed inside
  headings or inline content by inline forms (a heading becomes `strong`
  followed by `br`, a blockquote becomes quoted text, `pre` becomes `code`,
  `hr` is removed); `move_list_items` moves stray content of `ul`/`ol` into
  list items; `add_list_end_comments` puts a `THE END` comment between two
  lists that follow each other.
- `htmlmark.escape`: checks on a byte string that tell whether the byte at an
  index would start Markdown syntax. Each `is_*` function returns the length
  of the match or -1. The placeholder byte `\a` is skipped.
- `htmlmark.spacing` and `htmlmark.quoting`: text helpers for delimiters,
  newlines, inline code, line prefixes, code fences, quoting and multi-line
  content.
- `htmlmark.markers`: the marker characters used in intermediate output.

## Installation

```
pip install htmlmark
```

## Examples

Inspect and clean a document:

```python
from htmlmark.dom import node_name, parse, render_representation
from htmlmark.domutils import swap_tags

body = parse("<div><code><pre>content</pre></code></div>", "body")
swap_tags(
    body,
    lambda n: node_name(n) == "code",
    lambda n: node_name(n) == "pre",
)
print(render_representation(body))
# ├─body
# │ ├─div
# │ │ ├─pre
# │ │ │ ├─code
# │ │ │ │ ├─#text "content"
```

Work with text:

```python
from htmlmark.spacing import delimiter_for_every_line, trim_consecutive_newlines
from htmlmark.quoting import calculate_code_fence, surround_by_quotes

delimiter_for_every_line("line 1\nline 2", "**")   # "**line 1**\n**line 2**"
trim_consecutive_newlines("a\n\n\n\nb")            # "a\n\nb"
calculate_code_fence("`", "normal ``` code")       # "````"
surround_by_quotes('double "quotes"')              # "'double \"quotes\"'"
```

Check whether a character needs escaping:

```python
from htmlmark.escape import is_atx_header

is_atx_header(b"# a", 0)   # 1: the "#" would start a heading
```

## What it does not do

The package holds the parts, not a whole converter: there is no function
that takes an HTML document and returns Markdown, no rendering of elements
into Markdown text and no command-line tool. Put the passes and helpers
together yourself.

## Tests

```
pip install -e ".[test]"
pytest
```