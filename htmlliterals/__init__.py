"""Parser front end for code with embedded html literals."""

from htmlliterals.ast import CodeTopLevel, render_source
from htmlliterals.diagnostics import HtmlLiteralsSyntaxError
from htmlliterals.lexer import tokenize
from htmlliterals.parser import ParserOptions, parse, parse_result, parse_tokens
from htmlliterals.pipeline import HtmlLiteralsParseResult

__all__ = [
    "CodeTopLevel",
    "HtmlLiteralsParseResult",
    "HtmlLiteralsSyntaxError",
    "ParserOptions",
    "parse",
    "parse_result",
    "parse_tokens",
    "render_source",
    "tokenize",
]
