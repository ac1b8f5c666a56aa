"""Typed AST for code with embedded html literals."""

from htmlliterals.ast.model import (
    AstNode,
    AttrStyleDirective,
    CodeSegment,
    CodeText,
    CodeTopLevel,
    Directive,
    DirectiveNode,
    EmbeddedCode,
    HtmlComment,
    HtmlContent,
    HtmlElement,
    HtmlInsert,
    HtmlLiteral,
    HtmlText,
    Property,
)
from htmlliterals.ast.source import child_nodes, iter_nodes, render_source

__all__ = [
    "AstNode",
    "AttrStyleDirective",
    "CodeSegment",
    "CodeText",
    "CodeTopLevel",
    "Directive",
    "DirectiveNode",
    "EmbeddedCode",
    "HtmlComment",
    "HtmlContent",
    "HtmlElement",
    "HtmlInsert",
    "HtmlLiteral",
    "HtmlText",
    "Property",
    "child_nodes",
    "iter_nodes",
    "render_source",
]
