"""Marker characters used while rendering Markdown.

The markers are placed into intermediate output and replaced or removed
in a later pass, so they must be characters that rarely occur in text.
"""

MARKER_ESCAPING = "\a"
"""Placeholder put in front of characters that might need escaping.

It is the bell character, which takes a single byte in UTF-8.
"""

MARKER_CODE_BLOCK_NEWLINE = "\uf002"
"""Stands in for a newline inside a code block."""

BYTES_MARKER_ESCAPING = b"\x07"
BYTES_MARKER_CODE_BLOCK_NEWLINE = bytes([239, 128, 130])


def check_marker(char: str, encoded: bytes) -> str:
    """Return ``char`` if its UTF-8 encoding equals ``encoded``.

    Raises ValueError if ``char`` is not a single character or if the
    encoding differs.
    """
    if len(char) != 1:
        raise ValueError(f"a marker must be a single character, got {char!r}")
    if char.encode("utf-8") != encoded:
        raise ValueError("the character and the bytes do not represent the same character")
    return char


check_marker(MARKER_ESCAPING, BYTES_MARKER_ESCAPING)
check_marker(MARKER_CODE_BLOCK_NEWLINE, BYTES_MARKER_CODE_BLOCK_NEWLINE)