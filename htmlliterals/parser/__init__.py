"""Parser infrastructure (token cursor + recursive-descent grammar)."""

from htmlliterals.parser.cursor import CursorCheckpoint, TokenCursor
from htmlliterals.parser.grammar import (
    is_escaped,
    parse_balanced_brackets,
    parse_code_comment,
    parse_code_top_level,
    parse_directive,
    parse_embedded_code,
    parse_html_comment,
    parse_html_element,
    parse_html_insert,
    parse_html_literal,
    parse_html_text,
    parse_html_whitespace_text,
    parse_property,
    parse_quoted_string,
)
from htmlliterals.parser.literals import parse, parse_result, parse_tokens
from htmlliterals.parser.options import DEFAULT_MAX_NESTING_DEPTH, ParserOptions
from htmlliterals.parser.parser import Parser

__all__ = [
    "DEFAULT_MAX_NESTING_DEPTH",
    "CursorCheckpoint",
    "Parser",
    "ParserOptions",
    "TokenCursor",
    "is_escaped",
    "parse",
    "parse_balanced_brackets",
    "parse_code_comment",
    "parse_code_top_level",
    "parse_directive",
    "parse_embedded_code",
    "parse_html_comment",
    "parse_html_element",
    "parse_html_insert",
    "parse_html_literal",
    "parse_html_text",
    "parse_html_whitespace_text",
    "parse_property",
    "parse_quoted_string",
    "parse_result",
    "parse_tokens",
]
