"""Whitespace handling for generated Markdown text."""

import re
import unicodedata

_LATIN1_SPACES = frozenset("\t\n\v\f\r \x85\xa0")


def _is_space(char: str) -> bool:
    """Return True for Unicode white space (as in the White_Space property)."""
    if char in _LATIN1_SPACES:
        return True
    if char < "\u0100":
        return False
    return unicodedata.category(char) in ("Zs", "Zl", "Zp")


def _rstrip_spaces(text: str) -> str:
    end = len(text)
    while end > 0 and _is_space(text[end - 1]):
        end -= 1
    return text[:end]


def _lstrip_spaces(text: str) -> str:
    start = 0
    while start < len(text) and _is_space(text[start]):
        start += 1
    return text[start:]


def surrounding_spaces(content: str) -> tuple[str, str, str]:
    """Split ``content`` into leading white space, the rest, and trailing white space."""
    right_trimmed = _rstrip_spaces(content)
    right_extra = content[len(right_trimmed):]
    trimmed = _lstrip_spaces(right_trimmed)
    left_extra = content[: len(right_trimmed) - len(trimmed)]
    return left_extra, trimmed, right_extra


def delimiter_for_every_line(text: str, delimiter: str) -> str:
    """Put ``delimiter`` around the content of every non-blank line.

    Bold and italic delimiters are not recognised across line breaks, so
    each line gets its own pair. Surrounding white space stays outside.
    """
    lines = []
    for line in text.split("\n"):
        left, trimmed, right = surrounding_spaces(line)
        if trimmed:
            lines.append(f"{left}{delimiter}{trimmed}{delimiter}{right}")
        else:
            lines.append(left + right)
    return "\n".join(lines)


def trim_unnecessary_hard_line_breaks(text: str) -> str:
    """Remove hard line breaks ("  \\n") that are followed by a blank line."""
    text = text.replace("  \n\n", "\n\n")
    text = text.replace("  \n  \n", "\n\n")
    text = text.replace("  \n \n", "\n\n")
    return text


def trim_consecutive_newlines(text: str) -> str:
    """Keep at most two newlines in a row.

    Spaces before a kept newline are kept; spaces before a dropped newline
    are dropped; spaces after the last newline are kept.
    """
    result: list[str] = []
    newline_count = 0
    pending_spaces: list[str] = []

    for char in text:
        if char == "\n":
            newline_count += 1
            if newline_count <= 2:
                result.extend(pending_spaces)
                result.append("\n")
            pending_spaces.clear()
        elif char == " ":
            pending_spaces.append(char)
        else:
            newline_count = 0
            result.extend(pending_spaces)
            result.append(char)
            pending_spaces.clear()

    result.extend(pending_spaces)
    return "".join(result)


def collapse_inline_code_content(content: str) -> str:
    """Put code content on one line with single spaces, trimmed at both ends."""
    content = content.replace("\n", " ").replace("\t", " ")
    content = _lstrip_spaces(_rstrip_spaces(content))
    return re.sub(" {2,}", " ", content)


def prefix_lines(source: str, prefix: str) -> str:
    """Put ``prefix`` at the start of every line, including an empty last one."""
    return prefix + source.replace("\n", "\n" + prefix)