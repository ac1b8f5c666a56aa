"""Shared parse carrier."""

from htmlliterals.pipeline.result import HtmlLiteralsParseResult

__all__ = ["HtmlLiteralsParseResult"]
