"""Shared debug printers for lexer/parser tests."""

from __future__ import annotations

import os

from htmlliterals.ast import (
    AstNode,
    AttrStyleDirective,
    child_nodes,
    CodeText,
    Directive,
    HtmlComment,
    HtmlElement,
    HtmlInsert,
    HtmlLiteral,
    HtmlText,
    Property,
)

PRINT_TOKENS = os.getenv("PRINT_TOKENS", "0").lower() in {"1", "true", "yes", "on"}
PRINT_AST = os.getenv("PRINT_AST", "0").lower() in {"1", "true", "yes", "on"}


def debug_dump_tokens(test_name: str, source: str, tokens: list[str]) -> None:
    if not PRINT_TOKENS:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)
    print(f"===== {test_name} TOKENS =====")
    for index, tok in enumerate(tokens):
        print(f"{index:03d} {tok!r}")


def debug_dump_ast(test_name: str, root: AstNode) -> None:
    if not PRINT_AST:
        return
    print(f"\n===== {test_name} AST =====")
    print(_dump_ast(root))


def _dump_ast(root: AstNode) -> str:
    lines: list[str] = []

    def walk(node: AstNode, depth: int) -> None:
        lines.append("  " * depth + _describe(node))
        for child in child_nodes(node):
            walk(child, depth + 1)

    walk(root, 0)
    return "\n".join(lines)


def _describe(node: AstNode) -> str:
    match node:
        case CodeText(text=text) | HtmlText(text=text) | HtmlComment(text=text):
            return f"{type(node).__name__} {text!r}"
        case HtmlLiteral(column=column) | HtmlInsert(column=column):
            return f"{type(node).__name__} column={column}"
        case HtmlElement(open_tag=open_tag, close_tag=close_tag):
            return f"HtmlElement {open_tag!r} ... {close_tag!r}"
        case Property(name=name) | Directive(name=name):
            return f"{type(node).__name__} name={name!r}"
        case AttrStyleDirective(name=name, modifiers=modifiers):
            return f"AttrStyleDirective name={name!r} modifiers={modifiers!r}"
        case _:
            return type(node).__name__
