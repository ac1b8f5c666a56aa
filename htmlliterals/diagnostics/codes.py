"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from htmlliterals.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_UNTERMINATED_START_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_START_TAG",
    message="Unterminated start tag",
    hint="Close the tag with `>` or `/>`.",
    category="parser",
)

PARSER_MISSING_CLOSE_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_CLOSE_TAG",
    message="Element missing close tag",
    hint="Add a matching `</tag>` or write the element as `<tag/>`.",
    category="parser",
)

PARSER_UNTERMINATED_CLOSE_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_CLOSE_TAG",
    message="End of input while looking for element close tag",
    category="parser",
)

PARSER_UNTERMINATED_HTML_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_HTML_COMMENT",
    message="Unterminated html comment",
    hint="Close the comment with `-->`.",
    category="parser",
)

PARSER_UNTERMINATED_PARENTHESES: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_PARENTHESES",
    message="Unterminated parentheses",
    category="parser",
)

PARSER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_STRING",
    message="Unterminated string",
    hint="Close the string with the same quote it was opened with.",
    category="parser",
)

PARSER_MISSING_DIRECTIVE_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_DIRECTIVE_NAME",
    message="Directive must have a name",
    category="parser",
)

PARSER_MALFORMED_DIRECTIVE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MALFORMED_DIRECTIVE",
    message="Unrecognized directive",
    hint="Directives have the form `@foo:bar = ...` or `@foo( ... )`.",
    category="parser",
)

PARSER_EMPTY_EMBEDDED_CODE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EMPTY_EMBEDDED_CODE",
    message="Expected embedded code",
    hint="Embedded code starts with an identifier or a bracketed group, like `@name` or `@(expr)`.",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="Markup and code nesting is too deep",
    hint="Raise ParserOptions.max_nesting_depth or split the literal.",
    category="parser",
)
