"""Turn trees back into source text."""

from __future__ import annotations

from collections.abc import Iterator

from htmlliterals.ast.model import (
    AstNode,
    AttrStyleDirective,
    CodeText,
    CodeTopLevel,
    Directive,
    EmbeddedCode,
    HtmlComment,
    HtmlElement,
    HtmlInsert,
    HtmlLiteral,
    HtmlText,
    Property,
)


def render_source(node: AstNode) -> str:
    """Render `node` as source text.

    Code and markup text come back verbatim. Properties and directives were
    lifted out of their open tag during parsing, so they are re-emitted right
    before the tag's closing delimiter in declaration order.
    """
    match node:
        case CodeTopLevel(segments=segments) | EmbeddedCode(segments=segments):
            return "".join(render_source(segment) for segment in segments)
        case CodeText(text=text) | HtmlText(text=text) | HtmlComment(text=text):
            return text
        case HtmlLiteral(nodes=nodes):
            return "".join(render_source(child) for child in nodes)
        case HtmlInsert(code=code):
            return "@" + render_source(code)
        case HtmlElement():
            return _render_element(node)
        case Property(name=name, code=code):
            return f" {name}={render_source(code)}"
        case Directive(name=name, code=code):
            return f" @{name}{render_source(code)}"
        case AttrStyleDirective(name=name, modifiers=modifiers, code=code):
            return f" @{':'.join((name, *modifiers))}={render_source(code)}"
        case _:
            raise TypeError(f"Not an htmlliterals AST node: {node!r}")


def _render_element(element: HtmlElement) -> str:
    attributes = "".join(render_source(item) for item in (*element.properties, *element.directives))
    open_tag = element.open_tag
    if attributes:
        closer = "/>" if element.is_self_closing else ">"
        open_tag = open_tag[: -len(closer)] + attributes + closer
    content = "".join(render_source(child) for child in element.content)
    return open_tag + content + element.close_tag


def iter_nodes(node: AstNode) -> Iterator[AstNode]:
    """Yield `node` and every descendant, depth-first, parents before children."""
    yield node
    for child in child_nodes(node):
        yield from iter_nodes(child)


def child_nodes(node: AstNode) -> tuple[AstNode, ...]:
    """Direct children of `node`: properties, then directives, then content for elements."""
    match node:
        case CodeTopLevel(segments=segments) | EmbeddedCode(segments=segments):
            return segments
        case HtmlLiteral(nodes=nodes):
            return nodes
        case HtmlElement(properties=properties, directives=directives, content=content):
            return (*properties, *directives, *content)
        case HtmlInsert(code=code) | Property(code=code) | Directive(code=code) | AttrStyleDirective(code=code):
            return (code,)
        case _:
            return ()
