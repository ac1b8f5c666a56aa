"""Parser state shared by the grammar productions."""

from collections.abc import Iterator
from contextlib import contextmanager
import re
from typing import NoReturn

from htmlliterals.diagnostics import (
    PARSER_NESTING_TOO_DEEP,
    DiagnosticSpec,
    HtmlLiteralsSyntaxError,
)
from htmlliterals.lexer import BRACKETS, COMMENT_OPEN, DELIMITERS, TAG_OPEN, is_whitespace
from htmlliterals.parser.cursor import CursorCheckpoint, TokenCursor
from htmlliterals.parser.options import ParserOptions
from htmlliterals.text import TextPosition


class Parser:
    """Recursive-descent parser state: one cursor, one nesting counter."""

    def __init__(self, cursor: TokenCursor, options: ParserOptions | None = None) -> None:
        self._cursor = cursor
        self._options = options or ParserOptions()
        self._depth = 0

    @property
    def cursor(self) -> TokenCursor:
        return self._cursor

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def current(self) -> str | None:
        return self._cursor.current

    @property
    def at_eof(self) -> bool:
        return self._cursor.at_eof

    @property
    def position(self) -> TextPosition:
        return self._cursor.position

    @property
    def column(self) -> int:
        return self._cursor.column

    @property
    def depth(self) -> int:
        return self._depth

    def at(self, token: str) -> bool:
        return self._cursor.current == token

    def at_set(self, tokens: frozenset[str] | set[str]) -> bool:
        return self._cursor.current in tokens

    def at_whitespace(self) -> bool:
        return is_whitespace(self._cursor.current)

    def at_tag_open(self) -> bool:
        """`<` followed by something that can start a tag name.

        A `<` right before a delimiter or the end of input is a comparison.
        """
        if not self.at(TAG_OPEN):
            return False
        following = self._cursor.nth(1)
        return following is not None and following not in DELIMITERS

    def at_markup_open(self) -> bool:
        return self.at(COMMENT_OPEN) or self.at_tag_open()

    def closing_bracket(self) -> str | None:
        """Closer for the current token if it opens a bracket group."""
        current = self._cursor.current
        return BRACKETS.get(current) if current is not None else None

    def bump(self) -> str:
        """Consume the current token and return its text."""
        token = self._cursor.current or ""
        self._cursor.advance()
        return token

    def split_front(self, pattern: re.Pattern[str]) -> str | None:
        return self._cursor.split_front(pattern)

    def checkpoint(self) -> CursorCheckpoint:
        return self._cursor.checkpoint

    def rewind(self, checkpoint: CursorCheckpoint) -> None:
        self._cursor.rewind(checkpoint)

    @contextmanager
    def nested(self) -> Iterator[None]:
        if self._depth >= self._options.max_nesting_depth:
            self.error(PARSER_NESTING_TOO_DEEP)
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def error(self, spec: DiagnosticSpec, message: str | None = None) -> NoReturn:
        raise HtmlLiteralsSyntaxError.from_spec(spec, self._cursor.position, message=message)
