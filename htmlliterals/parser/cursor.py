"""Token cursor with savepoints."""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from htmlliterals.text import TextPosition


@dataclass(frozen=True, slots=True)
class CursorCheckpoint:
    index: int
    current: str | None
    at_eof: bool
    position: TextPosition

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column


class TokenCursor:
    """Cursor over a token sequence.

    The current token may be a suffix of `tokens[index]` after `split_front`
    has consumed part of it; restoring a checkpoint brings that suffix back.
    """

    def __init__(self, tokens: Sequence[str]) -> None:
        self._tokens = tokens
        self._index = 0
        self._at_eof = len(tokens) == 0
        self._current: str | None = None if self._at_eof else tokens[0]
        self._position = TextPosition.start()

    @property
    def current(self) -> str | None:
        return self._current

    @property
    def index(self) -> int:
        return self._index

    @property
    def at_eof(self) -> bool:
        return self._at_eof

    @property
    def position(self) -> TextPosition:
        return self._position

    @property
    def line(self) -> int:
        return self._position.line

    @property
    def column(self) -> int:
        return self._position.column

    def peek(self) -> str | None:
        return self._current

    def nth(self, n: int) -> str | None:
        """Token `n` places ahead, `None` past the end. `nth(0)` is `current`."""
        if n == 0:
            return self._current
        index = self._index + n
        return self._tokens[index] if index < len(self._tokens) else None

    def advance(self) -> None:
        if self._at_eof:
            return
        if self._current:
            self._position = self._position.advance(self._current)

        self._index += 1
        if self._index >= len(self._tokens):
            self._at_eof = True
            self._current = None
        else:
            self._current = self._tokens[self._index]

    def split_front(self, pattern: re.Pattern[str]) -> str | None:
        """Consume the prefix of the current token matched by `pattern`.

        Matching never spans tokens. Returns the matched text, or None when
        the pattern does not match or matches the empty string.
        """
        if self._current is None:
            return None
        match = pattern.match(self._current)
        if match is None or not match.group(0):
            return None

        text = match.group(0)
        self._position = self._position.shift(len(text))
        self._current = self._current[len(text) :]
        if self._current == "":
            self.advance()
        return text

    @property
    def checkpoint(self) -> CursorCheckpoint:
        return CursorCheckpoint(
            index=self._index,
            current=self._current,
            at_eof=self._at_eof,
            position=self._position,
        )

    def rewind(self, checkpoint: CursorCheckpoint) -> None:
        self._index = checkpoint.index
        self._current = checkpoint.current
        self._at_eof = checkpoint.at_eof
        self._position = checkpoint.position
