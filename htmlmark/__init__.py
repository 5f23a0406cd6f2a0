"""Building blocks for converting HTML into Markdown: a node tree, clean-up passes, escaping checks and text helpers."""

__version__ = "0.1.0"