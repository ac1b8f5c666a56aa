"""AST data model for code with embedded html literals."""

from __future__ import annotations

import re
from dataclasses import dataclass

_TAG_NAME = re.compile(r"^</?\s*([^\s/>]+)")


@dataclass(frozen=True, slots=True)
class CodeText:
    """Verbatim host-language source fragment."""

    text: str


@dataclass(frozen=True, slots=True)
class HtmlText:
    text: str


@dataclass(frozen=True, slots=True)
class HtmlComment:
    """Markup comment, delimiters included."""

    text: str


@dataclass(frozen=True, slots=True)
class EmbeddedCode:
    """One code expression, possibly holding html literals inside its brackets."""

    segments: tuple[CodeText | HtmlLiteral, ...]


@dataclass(frozen=True, slots=True)
class HtmlInsert:
    """`@expr` splice point inside markup content."""

    column: int
    code: EmbeddedCode


@dataclass(frozen=True, slots=True)
class Property:
    """Attribute whose value is a code expression instead of a quoted string."""

    name: str
    code: EmbeddedCode


@dataclass(frozen=True, slots=True)
class Directive:
    """Call-style directive, e.g. `@focus(active)`."""

    name: str
    code: EmbeddedCode


@dataclass(frozen=True, slots=True)
class AttrStyleDirective:
    """Assignment-style directive, e.g. `@on:click:capture = handler`."""

    name: str
    modifiers: tuple[str, ...]
    code: EmbeddedCode


@dataclass(frozen=True, slots=True)
class HtmlElement:
    open_tag: str
    properties: tuple[Property, ...]
    directives: tuple[DirectiveNode, ...]
    content: tuple[HtmlContent, ...]
    close_tag: str

    @property
    def is_self_closing(self) -> bool:
        return self.open_tag.endswith("/>")

    @property
    def tag_name(self) -> str | None:
        match = _TAG_NAME.match(self.open_tag)
        return match.group(1) if match else None


@dataclass(frozen=True, slots=True)
class HtmlLiteral:
    """One contiguous markup region inside code."""

    column: int
    nodes: tuple[HtmlContent, ...]


@dataclass(frozen=True, slots=True)
class CodeTopLevel:
    segments: tuple[CodeSegment, ...]


type CodeSegment = CodeText | HtmlLiteral
type HtmlContent = HtmlElement | HtmlComment | HtmlInsert | HtmlText
type DirectiveNode = Directive | AttrStyleDirective
type AstNode = (
    CodeTopLevel
    | CodeText
    | HtmlLiteral
    | HtmlElement
    | HtmlText
    | HtmlComment
    | HtmlInsert
    | Property
    | Directive
    | AttrStyleDirective
    | EmbeddedCode
)


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
]
