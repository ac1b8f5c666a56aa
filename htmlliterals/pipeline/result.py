"""Parse carrier that keeps source, tokens and tree from one parse."""

from __future__ import annotations

from dataclasses import dataclass, field

from htmlliterals.ast import CodeTopLevel, HtmlLiteral, iter_nodes, render_source
from htmlliterals.parser.options import ParserOptions


@dataclass(slots=True)
class HtmlLiteralsParseResult:
    """Result of parsing one source text, with cached derived views."""

    source_text: str
    tokens: tuple[str, ...]
    root: CodeTopLevel
    options: ParserOptions
    _rendered: str | None = field(default=None, init=False, repr=False)
    _literals: tuple[HtmlLiteral, ...] | None = field(default=None, init=False, repr=False)

    def rendered_source(self) -> str:
        if self._rendered is None:
            self._rendered = render_source(self.root)
        return self._rendered

    def html_literals(self) -> tuple[HtmlLiteral, ...]:
        """Every html literal in the tree, nested ones included, in source order."""
        if self._literals is None:
            self._literals = tuple(node for node in iter_nodes(self.root) if isinstance(node, HtmlLiteral))
        return self._literals

    @property
    def has_markup(self) -> bool:
        return any(isinstance(segment, HtmlLiteral) for segment in self.root.segments)
