"""Fences, quotes and line breaks for Markdown constructs."""

from itertools import groupby

from .spacing import surrounding_spaces

DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"


def calculate_code_fence_occurrences(fence_char: str, content: str) -> int:
    """Return the longest run of ``fence_char`` in ``content`` (0 if none)."""
    return max(
        (sum(1 for _ in run) for char, run in groupby(content) if char == fence_char),
        default=0,
    )


def calculate_code_fence(fence_char: str, content: str) -> str:
    """Return a fence that is longer than any run inside ``content``, at least three."""
    repeat = max(calculate_code_fence_occurrences(fence_char, content) + 1, 3)
    return fence_char * repeat


def surround_by(content: str, chars: str) -> str:
    """Put ``chars`` before and after ``content``."""
    return chars + content + chars


def surround_by_quotes(content: str | None) -> str:
    """Quote ``content`` for a link title, choosing quotes it does not contain.

    Empty content gives an empty string.
    """
    if not content:
        return ""

    has_double = DOUBLE_QUOTE in content
    has_single = SINGLE_QUOTE in content

    if has_double and has_single:
        return surround_by(content.replace('"', '\\"'), DOUBLE_QUOTE)
    if has_double:
        return surround_by(content, SINGLE_QUOTE)
    return surround_by(content, DOUBLE_QUOTE)


def escape_multiline(content: str) -> str:
    """Keep multi-line content of a link or heading from breaking apart.

    Lines get hard line breaks, and blank lines become an escaped newline.
    """
    parts = content.split("\n")
    if len(parts) == 1:
        return content

    output: list[str] = []
    last = len(parts) - 1
    for position, part in enumerate(parts):
        _, trimmed, right = surrounding_spaces(part)
        if not trimmed:
            output.append("\\\n")
            continue

        line = trimmed + right
        if position == last:
            output.append(line)
        elif line.endswith("  "):
            output.append(line + "\n")
        else:
            output.append(line + "  \n")

    return "".join(output)