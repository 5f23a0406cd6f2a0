"""Detection of Markdown syntax that would need escaping.

Each ``is_*`` check looks at the byte at ``index`` and returns how many
bytes a match spans, or -1 if there is none. Placeholder bytes are skipped.
"""

from .markers import BYTES_MARKER_ESCAPING

PLACEHOLDER_BYTE = BYTES_MARKER_ESCAPING[0]

_SPACE_BYTES = frozenset(b"\t\n\v\f\r \x85\xa0")
_GO_NON_SPACE = frozenset("\x1c\x1d\x1e\x1f")

_BACKSLASH = ord("\\")
_BACKTICK = ord("`")


def is_space(b: int) -> bool:
    """Return True for the white-space bytes of Latin-1."""
    return b in _SPACE_BYTES


def is_digit(b: int) -> bool:
    """Return True for an ASCII digit byte."""
    return 0x30 <= b <= 0x39


def _is_unicode_space(char: str) -> bool:
    return char.isspace() and char not in _GO_NON_SPACE


def get_prev(chars: bytes, index: int) -> int:
    """Return the previous byte that is not a placeholder, or 0."""
    for i in range(index - 1, -1, -1):
        if chars[i] != PLACEHOLDER_BYTE:
            return chars[i]
    return 0


def get_next(chars: bytes, index: int) -> int:
    """Return the next byte that is not a placeholder, or 0."""
    for i in range(index + 1, len(chars)):
        if chars[i] != PLACEHOLDER_BYTE:
            return chars[i]
    return 0


def _decode_single(piece: bytes) -> str | None:
    try:
        text = piece.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return text if len(text) == 1 else None


def get_prev_as_rune(chars: bytes, index: int) -> str:
    """Return the character ending before ``index``, skipping placeholders.

    Returns "" if there is none and U+FFFD for invalid UTF-8.
    """
    for i in range(index - 1, -1, -1):
        if chars[i] == PLACEHOLDER_BYTE:
            continue
        for start in range(i, max(i - 4, -1), -1):
            char = _decode_single(chars[start:i + 1])
            if char is not None:
                return char
        return "\ufffd"
    return ""


def get_next_as_rune(chars: bytes, index: int) -> str:
    """Return the character starting after ``index``, skipping placeholders.

    Returns "" if there is none and U+FFFD for invalid UTF-8.
    """
    for i in range(index + 1, len(chars)):
        if chars[i] == PLACEHOLDER_BYTE:
            continue
        for length in range(1, 5):
            if i + length > len(chars):
                break
            char = _decode_single(chars[i:i + length])
            if char is not None:
                return char
        return "\ufffd"
    return ""


def _only_indent_before(chars: bytes, index: int) -> bool:
    for i in range(index - 1, -1, -1):
        b = chars[i]
        if b == 0x0A:
            return True
        if b in (0x20, PLACEHOLDER_BYTE):
            continue
        return False
    return True


def is_backslash(chars: bytes, index: int) -> int:
    """Match a single backslash, which always needs escaping."""
    if chars[index] != _BACKSLASH:
        return -1
    return 1


def is_fenced_code(chars: bytes, index: int) -> int:
    """Match a run of three or more fence characters at the start of a line."""
    fence = b"`~"
    if chars[index] not in fence:
        return -1
    if not _only_indent_before(chars, index):
        return -1

    count = 1
    i = index + 1
    while i < len(chars):
        if chars[i] == PLACEHOLDER_BYTE:
            i += 1
            continue
        if chars[i] in fence:
            count += 1
            i += 1
            continue
        break
    if count < 3:
        return -1
    return i - index


def is_inline_code(chars: bytes, index: int) -> int:
    """Match a single backtick that could open or close inline code."""
    if chars[index] != _BACKTICK:
        return -1
    return 1


def is_divider(chars: bytes, index: int) -> int:
    """Match a thematic break made of three or more equal characters."""
    char = chars[index]
    if char not in b"-_*":
        return -1
    if not _only_indent_before(chars, index):
        return -1

    count = 1
    last = len(chars)
    for i in range(index + 1, len(chars)):
        b = chars[i]
        if b in (PLACEHOLDER_BYTE, 0x20):
            continue
        if b == char:
            count += 1
            continue
        if b == 0x0A:
            last = i
            break
        return -1
    return last - index if count >= 3 else -1


def is_atx_header(chars: bytes, index: int) -> int:
    """Match one to six pound signs that start an ATX heading."""
    if chars[index] != ord("#"):
        return -1
    if not _only_indent_before(chars, index):
        return -1

    pound_signs = 1
    for i in range(index + 1, len(chars)):
        b = chars[i]
        if b == ord("#"):
            pound_signs += 1
            if pound_signs > 6:
                return -1
            continue
        if b == PLACEHOLDER_BYTE:
            continue
        if b in b" \t\n\r":
            return i - index
        return -1
    return 1


def is_setext_header(chars: bytes, index: int) -> int:
    """Match a setext underline directly below a line of content."""
    if chars[index] not in b"=-":
        return -1

    newlines = 0
    for i in range(index - 1, -1, -1):
        b = chars[i]
        if b in (PLACEHOLDER_BYTE, 0x20):
            continue
        if b == 0x0A:
            newlines += 1
            continue
        # Content must sit on the line directly above the delimiter.
        return 1 if newlines == 1 else -1
    return -1


def is_image_or_link(chars: bytes, index: int) -> int:
    """Match the start of an image or a link."""
    if chars[index] == ord("!"):
        following = index + 1
        if following < len(chars) and chars[following] == ord("["):
            return 1
        return -1
    if chars[index] == ord("["):
        for b in chars[index + 1:]:
            if b == 0x0A:
                return -1
            if b == ord("]"):
                return 1
    return -1


def is_italic_or_bold(chars: bytes, index: int) -> int:
    """Match an emphasis delimiter not followed by white space."""
    if chars[index] not in b"*_":
        return -1
    following = get_next_as_rune(chars, index)
    if following in ("", "\0") or _is_unicode_space(following):
        return -1
    return 1


def is_unordered_list(chars: bytes, index: int) -> int:
    """Match a bullet list marker at the start of a line."""
    if chars[index] not in b"-*+":
        return -1
    if not _only_indent_before(chars, index):
        return -1
    following = get_next(chars, index)
    return 1 if is_space(following) or following == 0 else -1


def is_ordered_list(chars: bytes, index: int) -> int:
    """Match the delimiter after the number of an ordered list item."""
    if chars[index] not in b".)":
        return -1
    prev = get_prev_as_rune(chars, index)
    if not prev.isdecimal():
        return -1

    for i in range(index - 1, -1, -1):
        b = chars[i]
        if b == 0x0A:
            break
        if b in (0x20, PLACEHOLDER_BYTE) or is_digit(b):
            continue
        return -1

    following = get_next(chars, index)
    return 1 if is_space(following) or following == 0 else -1


def is_block_quote(chars: bytes, index: int) -> int:
    """Match a block quote marker at the start of a line."""
    if chars[index] != ord(">"):
        return -1
    return 1 if _only_indent_before(chars, index) else -1