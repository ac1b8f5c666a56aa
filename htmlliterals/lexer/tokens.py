"""Token vocabulary shared by the lexer and the parser.

Tokens are plain strings. The constants below name the lexemes that the
grammar dispatches on; every one of them is emitted as a standalone token.
"""

from typing import Final

# -------------------------
# Markup delimiters
# -------------------------
TAG_OPEN: Final = "<"
TAG_CLOSE: Final = ">"
TAG_SELF_CLOSE: Final = "/>"
END_TAG_OPEN: Final = "</"
COMMENT_OPEN: Final = "<!--"
COMMENT_CLOSE: Final = "-->"

# -------------------------
# Code insertion / attributes
# -------------------------
AT: Final = "@"
EQUAL: Final = "="

# -------------------------
# Literals
# -------------------------
DOUBLE_QUOTE: Final = '"'
SINGLE_QUOTE: Final = "'"
LINE_COMMENT: Final = "//"
NEWLINE: Final = "\n"

QUOTES: Final[frozenset[str]] = frozenset({DOUBLE_QUOTE, SINGLE_QUOTE})

# opener -> closer
BRACKETS: Final[dict[str, str]] = {
    "(": ")",
    "[": "]",
    "{": "}",
}

MARKUP_OPENERS: Final[frozenset[str]] = frozenset({TAG_OPEN, COMMENT_OPEN})

# single characters that always stand alone
SINGLE_CHAR_TOKENS: Final[frozenset[str]] = frozenset(
    {AT, EQUAL, DOUBLE_QUOTE, SINGLE_QUOTE, TAG_CLOSE, NEWLINE, *BRACKETS, *BRACKETS.values()}
)

# every standalone lexeme
DELIMITERS: Final[frozenset[str]] = frozenset(
    {TAG_OPEN, END_TAG_OPEN, TAG_SELF_CLOSE, COMMENT_OPEN, COMMENT_CLOSE, LINE_COMMENT, *SINGLE_CHAR_TOKENS}
)

# `<` or `</` that opens no markup but has no text run next to it
STRAY_TAG_OPENERS: Final[frozenset[str]] = frozenset({TAG_OPEN, END_TAG_OPEN})

# whitespace other than newline, merged into runs
INLINE_WHITESPACE: Final[frozenset[str]] = frozenset({" ", "\t", "\r", "\f", "\v"})


def is_whitespace(token: str | None) -> bool:
    """True for whitespace-only tokens, newlines included."""
    return token is not None and (token == "" or token.isspace())
