"""Diagnostics."""

from htmlliterals.diagnostics.codes import (
    PARSER_EMPTY_EMBEDDED_CODE,
    PARSER_MALFORMED_DIRECTIVE,
    PARSER_MISSING_CLOSE_TAG,
    PARSER_MISSING_DIRECTIVE_NAME,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_UNTERMINATED_CLOSE_TAG,
    PARSER_UNTERMINATED_HTML_COMMENT,
    PARSER_UNTERMINATED_PARENTHESES,
    PARSER_UNTERMINATED_START_TAG,
    PARSER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from htmlliterals.diagnostics.diagnostic import Diagnostic, Severity
from htmlliterals.diagnostics.errors import HtmlLiteralsSyntaxError

__all__ = [
    "PARSER_EMPTY_EMBEDDED_CODE",
    "PARSER_MALFORMED_DIRECTIVE",
    "PARSER_MISSING_CLOSE_TAG",
    "PARSER_MISSING_DIRECTIVE_NAME",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_UNEXPECTED_TOKEN",
    "PARSER_UNTERMINATED_CLOSE_TAG",
    "PARSER_UNTERMINATED_HTML_COMMENT",
    "PARSER_UNTERMINATED_PARENTHESES",
    "PARSER_UNTERMINATED_START_TAG",
    "PARSER_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticSpec",
    "HtmlLiteralsSyntaxError",
    "Severity",
]
