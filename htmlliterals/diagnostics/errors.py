"""Exception raised on the first malformed construct."""

from __future__ import annotations

from htmlliterals.diagnostics.codes import DiagnosticSpec
from htmlliterals.diagnostics.diagnostic import Diagnostic
from htmlliterals.text import TextPosition


class HtmlLiteralsSyntaxError(Exception):
    """Syntax error carrying the diagnostic that caused it.

    Parsing is fail-fast: the first error aborts the whole parse and no
    partial tree is returned.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(f"{diagnostic.message} ({diagnostic.position.display()})")
        self.diagnostic = diagnostic

    @classmethod
    def from_spec(
        cls,
        spec: DiagnosticSpec,
        position: TextPosition,
        *,
        message: str | None = None,
    ) -> HtmlLiteralsSyntaxError:
        return cls(
            Diagnostic(
                code=spec.code,
                message=message or spec.message,
                position=position,
                severity=spec.severity,
                hint=spec.hint,
                category=spec.category,
            )
        )

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def column(self) -> int:
        return self.diagnostic.column
