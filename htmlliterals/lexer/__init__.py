"""Lexer."""

from htmlliterals.lexer.lexer import Lexer, dump_tokens, tokenize
from htmlliterals.lexer.tokens import (
    AT,
    BRACKETS,
    COMMENT_CLOSE,
    COMMENT_OPEN,
    DELIMITERS,
    DOUBLE_QUOTE,
    END_TAG_OPEN,
    EQUAL,
    LINE_COMMENT,
    MARKUP_OPENERS,
    NEWLINE,
    QUOTES,
    SINGLE_QUOTE,
    TAG_CLOSE,
    TAG_OPEN,
    TAG_SELF_CLOSE,
    is_whitespace,
)

__all__ = [
    "AT",
    "BRACKETS",
    "COMMENT_CLOSE",
    "COMMENT_OPEN",
    "DELIMITERS",
    "DOUBLE_QUOTE",
    "END_TAG_OPEN",
    "EQUAL",
    "LINE_COMMENT",
    "Lexer",
    "MARKUP_OPENERS",
    "NEWLINE",
    "QUOTES",
    "SINGLE_QUOTE",
    "TAG_CLOSE",
    "TAG_OPEN",
    "TAG_SELF_CLOSE",
    "dump_tokens",
    "is_whitespace",
    "tokenize",
]
