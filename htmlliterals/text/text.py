from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class TextPosition:
    """
    Zero-based line/column position inside the original source.

    Columns count characters since the last newline token, so a token that
    holds a newline together with other text does not reset the column.
    """

    line: int
    column: int

    def __post_init__(self):
        if self.line < 0 or self.column < 0:
            raise ValueError("TextPosition cannot be negative")

    @staticmethod
    def start() -> "TextPosition":
        """Position of the first character of a source."""
        return TextPosition(0, 0)

    def advance(self, token: str) -> "TextPosition":
        """Position after consuming a whole token."""
        if token == "\n":
            return TextPosition(self.line + 1, 0)
        return TextPosition(self.line, self.column + len(token))

    def shift(self, width: int) -> "TextPosition":
        """Position after consuming `width` characters of a token."""
        return TextPosition(self.line, self.column + width)

    def display(self) -> str:
        """One-based `line L, column C` form used in messages."""
        return f"line {self.line + 1}, column {self.column + 1}"

    def __repr__(self) -> str:
        return f"TextPosition({self.line}, {self.column})"


ORIGIN: Final[TextPosition] = TextPosition(0, 0)
"""Constant for the first position in a source."""
