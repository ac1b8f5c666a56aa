"""Lexer."""

from htmlliterals.lexer.tokens import (
    COMMENT_CLOSE,
    COMMENT_OPEN,
    END_TAG_OPEN,
    EQUAL,
    INLINE_WHITESPACE,
    LINE_COMMENT,
    SINGLE_CHAR_TOKENS,
    STRAY_TAG_OPENERS,
    TAG_OPEN,
    TAG_SELF_CLOSE,
)


class Lexer:
    """Split source text into the token strings consumed by the parser.

    Every syntactically significant lexeme is emitted as its own token and
    all other text is merged into runs, so joining the tokens always gives
    back the source. `<` and `</` only stand alone when a letter follows
    them; otherwise they are run text so comparisons like `a < b` never
    open markup. The one exception is a stray `<` wedged between two
    delimiters, as in `f()<(g)`, which has no run to join.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def lex(self) -> list[str]:
        tokens: list[str] = []
        after_run = False
        while not self.is_eof:
            start = self._position
            is_run = self._lex_token()
            token = self._source[start : self._position]
            # A stray `<` or `</` with a delimiter right after it joins the
            # preceding text or whitespace run.
            if is_run and after_run and token in STRAY_TAG_OPENERS:
                tokens[-1] += token
            else:
                tokens.append(token)
            after_run = is_run
        return tokens

    def _lex_token(self) -> bool:
        """Consume one token; True when it is a text or whitespace run."""
        width = self._significant_width()
        if width:
            self._advance(width)
            return False

        if self._current_char() in INLINE_WHITESPACE:
            self._consume_whitespaces()
            return True

        self._consume_text_run()
        return True

    def _significant_width(self) -> int:
        """Width of the standalone lexeme at the current position, 0 if none."""
        if self._at(COMMENT_OPEN):
            return len(COMMENT_OPEN)
        if self._at(COMMENT_CLOSE):
            return len(COMMENT_CLOSE)
        if self._at(END_TAG_OPEN) and self._peek_char(2).isalpha():
            return len(END_TAG_OPEN)
        if self._at(TAG_OPEN) and self._peek_char().isalpha():
            return len(TAG_OPEN)
        if self._at(TAG_SELF_CLOSE):
            return len(TAG_SELF_CLOSE)
        if self._at(LINE_COMMENT):
            return len(LINE_COMMENT)
        if self._current_char() in SINGLE_CHAR_TOKENS:
            return 1
        return 0

    def _consume_whitespaces(self) -> None:
        while not self.is_eof and self._current_char() in INLINE_WHITESPACE:
            self._advance(1)

    def _consume_text_run(self) -> None:
        if self._at(TAG_OPEN):
            # `<` or `</` that opens no markup: keep `<=` together and take
            # the spaces after it so `a < b` stays one run.
            self._advance(len(END_TAG_OPEN) if self._at(END_TAG_OPEN) else len(TAG_OPEN))
            if self._at(EQUAL):
                self._advance(len(EQUAL))
            else:
                self._consume_whitespaces()
        else:
            self._advance(1)
        while not self.is_eof:
            if self._current_char() in INLINE_WHITESPACE or self._significant_width():
                break
            self._advance(1)

    def _at(self, lexeme: str) -> bool:
        return self._source.startswith(lexeme, self._position)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def tokenize(source: str) -> list[str]:
    """Tokenize `source` in one pass."""
    return Lexer(source).lex()


def dump_tokens(tokens: list[str]) -> None:
    """Print token list with index, width and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} width={len(tok):<4} text={tok!r}")
