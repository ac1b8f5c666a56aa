"""Source positions."""

from htmlliterals.text.text import ORIGIN, TextPosition

__all__ = ["ORIGIN", "TextPosition"]
