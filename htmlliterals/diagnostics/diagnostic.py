"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from htmlliterals.text import TextPosition

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and parser."""

    code: str
    message: str
    position: TextPosition
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def render(self) -> str:
        text = f"{self.message} ({self.position.display()})"
        if self.hint:
            text = f"{text}\nhint: {self.hint}"
        return text
