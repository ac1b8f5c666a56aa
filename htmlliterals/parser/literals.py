"""High-level parse entrypoints for source text with html literals."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from htmlliterals.ast import CodeTopLevel
from htmlliterals.lexer import tokenize
from htmlliterals.parser.cursor import TokenCursor
from htmlliterals.parser.grammar import parse_code_top_level
from htmlliterals.parser.options import ParserOptions
from htmlliterals.parser.parser import Parser

if TYPE_CHECKING:
    from htmlliterals.pipeline import HtmlLiteralsParseResult

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParserOptions | None,
    max_nesting_depth: int | None,
) -> ParserOptions:
    if options is not None and max_nesting_depth is not None:
        raise ValueError("Pass either options or max_nesting_depth, not both")

    if options is not None:
        return options

    if max_nesting_depth is not None:
        return ParserOptions(max_nesting_depth=max_nesting_depth)
    return ParserOptions()


def parse_tokens(
    tokens: Sequence[str],
    options: ParserOptions | None = None,
    *,
    max_nesting_depth: int | None = None,
) -> CodeTopLevel:
    """Parse an already tokenized source into a `CodeTopLevel` tree."""
    for index, token in enumerate(tokens):
        if not isinstance(token, str) or not token:
            raise ValueError(f"Token {index} must be a non-empty string, got {token!r}")

    resolved_options = _resolve_options(options, max_nesting_depth)
    parser = Parser(TokenCursor(tokens), options=resolved_options)
    root = parse_code_top_level(parser)

    logger.debug("Parsed %d tokens into %d top-level segments", len(tokens), len(root.segments))
    return root


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    max_nesting_depth: int | None = None,
) -> CodeTopLevel:
    return parse_tokens(
        tokenize(text),
        options,
        max_nesting_depth=max_nesting_depth,
    )


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    max_nesting_depth: int | None = None,
) -> HtmlLiteralsParseResult:
    from htmlliterals.pipeline import HtmlLiteralsParseResult

    resolved_options = _resolve_options(options, max_nesting_depth)
    tokens = tokenize(text)
    root = parse_tokens(tokens, resolved_options)
    return HtmlLiteralsParseResult(
        source_text=text,
        tokens=tuple(tokens),
        root=root,
        options=resolved_options,
    )
