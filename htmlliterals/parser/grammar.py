"""Recursive-descent grammar for code with embedded html literals.

Each production is a function of the shared `Parser` state. Code mode,
markup mode and embedded code call each other directly: an element's
attribute may hold embedded code, and embedded code may hold a nested
html literal inside any bracketed group.
"""

import logging
import re
from typing import Final, NoReturn

from htmlliterals.ast import (
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
from htmlliterals.diagnostics import (
    PARSER_EMPTY_EMBEDDED_CODE,
    PARSER_MALFORMED_DIRECTIVE,
    PARSER_MISSING_CLOSE_TAG,
    PARSER_MISSING_DIRECTIVE_NAME,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_UNTERMINATED_CLOSE_TAG,
    PARSER_UNTERMINATED_HTML_COMMENT,
    PARSER_UNTERMINATED_PARENTHESES,
    PARSER_UNTERMINATED_START_TAG,
    PARSER_UNTERMINATED_STRING,
)
from htmlliterals.lexer import (
    AT,
    COMMENT_CLOSE,
    COMMENT_OPEN,
    END_TAG_OPEN,
    EQUAL,
    LINE_COMMENT,
    NEWLINE,
    QUOTES,
    TAG_CLOSE,
    TAG_SELF_CLOSE,
)
from htmlliterals.parser.parser import Parser

logger = logging.getLogger(__name__)

IDENTIFIER = r"[a-zA-Z_$][a-zA-Z_$0-9]*"

PROPERTY_LEFT_SIDE: Final = re.compile(r"\s(\S+)\s*=\s*$")
EMBEDDED_CODE_PREFIX: Final = re.compile(rf"^[+\-!~]*{IDENTIFIER}")  # !foo
EMBEDDED_CODE_INTERIM: Final = re.compile(rf"^(?:\.{IDENTIFIER})+")  # .bar.blech
EMBEDDED_CODE_SUFFIX: Final = re.compile(r"^(?:\+\+|--)")
DIRECTIVE_NAME: Final = re.compile(rf"^{IDENTIFIER}(?::[^\s:=]*)*")  # foo:bar:blech
LEADING_WHITESPACE: Final = re.compile(r"^\s+")
TAG_TRAILING_WHITESPACE: Final = re.compile(r"\s+(?=/?>$)")
EMPTY_LINES: Final = re.compile(r"\n\s+(?=\n)")

HTML_TEXT_STOP: Final[frozenset[str]] = frozenset({AT, END_TAG_OPEN})


# -------------------------
# Code mode
# -------------------------


def parse_code_top_level(parser: Parser) -> CodeTopLevel:
    segments: list[CodeSegment] = []
    text = ""

    while not parser.at_eof:
        if parser.at_markup_open():
            if text:
                segments.append(CodeText(text))
            text = ""
            segments.append(parse_html_literal(parser))
        elif parser.at_set(QUOTES):
            text += parse_quoted_string(parser)
        elif parser.at(LINE_COMMENT):
            text += parse_code_comment(parser)
        else:
            text += parser.bump()

    if text:
        segments.append(CodeText(text))

    return CodeTopLevel(tuple(segments))


# -------------------------
# Markup mode
# -------------------------


def parse_html_literal(parser: Parser) -> HtmlLiteral:
    if not parser.at_markup_open():
        _unexpected(parser, "start of html expression")

    column = parser.column
    nodes: list[HtmlContent] = []

    with parser.nested():
        while not parser.at_eof:
            if parser.at_tag_open():
                nodes.append(parse_html_element(parser))
            elif parser.at(COMMENT_OPEN):
                nodes.append(parse_html_comment(parser))
            elif parser.at(AT):
                nodes.append(parse_html_insert(parser))
            else:
                # Whitespace only belongs to the literal if more markup follows it.
                mark = parser.checkpoint()
                whitespace = parse_html_whitespace_text(parser)

                if not parser.at_eof and (parser.at_markup_open() or parser.at(AT)):
                    nodes.append(whitespace)
                else:
                    if whitespace.text:
                        logger.debug(
                            "Returning trailing whitespace %r to code at %s",
                            whitespace.text,
                            mark.position.display(),
                        )
                    parser.rewind(mark)
                    break

    return HtmlLiteral(column, tuple(nodes))


def parse_html_element(parser: Parser) -> HtmlElement:
    if not parser.at_tag_open():
        _unexpected(parser, "start of html element")

    properties: list[Property] = []
    directives: list[DirectiveNode] = []
    content: list[HtmlContent] = []
    close_tag = ""

    with parser.nested():
        open_tag = parser.bump()

        while not parser.at_eof and not parser.at(TAG_CLOSE) and not parser.at(TAG_SELF_CLOSE):
            if parser.at(AT):
                directives.append(parse_directive(parser))
            elif parser.at(EQUAL):
                open_tag = parse_property(parser, open_tag, properties)
            else:
                open_tag += parser.bump()

        if parser.at_eof:
            parser.error(PARSER_UNTERMINATED_START_TAG)

        has_content = parser.at(TAG_CLOSE)
        open_tag += parser.bump()

        if parser.options.normalize_tag_whitespace:
            # directives and properties leave gaps behind in the tag text
            open_tag = EMPTY_LINES.sub("", TAG_TRAILING_WHITESPACE.sub("", open_tag))

        if has_content:
            while not parser.at_eof and not parser.at(END_TAG_OPEN):
                if parser.at_tag_open():
                    content.append(parse_html_element(parser))
                elif parser.at(AT):
                    content.append(parse_html_insert(parser))
                elif parser.at(COMMENT_OPEN):
                    content.append(parse_html_comment(parser))
                else:
                    content.append(parse_html_text(parser))

            if parser.at_eof:
                parser.error(PARSER_MISSING_CLOSE_TAG)

            while not parser.at_eof and not parser.at(TAG_CLOSE):
                close_tag += parser.bump()

            if parser.at_eof:
                parser.error(PARSER_UNTERMINATED_CLOSE_TAG)

            close_tag += parser.bump()

    return HtmlElement(open_tag, tuple(properties), tuple(directives), tuple(content), close_tag)


def parse_html_text(parser: Parser) -> HtmlText:
    text = ""
    while not parser.at_eof and not parser.at_markup_open() and not parser.at_set(HTML_TEXT_STOP):
        text += parser.bump()
    return HtmlText(text)


def parse_html_whitespace_text(parser: Parser) -> HtmlText:
    text = ""
    while not parser.at_eof and parser.at_whitespace():
        text += parser.bump()
    return HtmlText(text)


def parse_html_comment(parser: Parser) -> HtmlComment:
    if not parser.at(COMMENT_OPEN):
        _unexpected(parser, "html comment")

    text = ""
    while not parser.at_eof and not parser.at(COMMENT_CLOSE):
        text += parser.bump()

    if parser.at_eof:
        parser.error(PARSER_UNTERMINATED_HTML_COMMENT)

    text += parser.bump()
    return HtmlComment(text)


def parse_html_insert(parser: Parser) -> HtmlInsert:
    if not parser.at(AT):
        _unexpected(parser, "start of code insert")

    column = parser.column
    parser.bump()
    return HtmlInsert(column, parse_embedded_code(parser))


def parse_property(parser: Parser, open_tag: str, properties: list[Property]) -> str:
    """Handle `=` inside an open tag and return the updated tag text.

    `name="..."` and `name='...'` stay in the tag as plain attributes. Any
    other value is embedded code: the `name=` text is cut from the tag and a
    `Property` is recorded instead.
    """
    if not parser.at(EQUAL):
        _unexpected(parser, "equals sign of a property assignment")

    open_tag += parser.bump()

    if parser.at_whitespace():
        open_tag += parser.bump()

    if parser.at_set(QUOTES):
        return open_tag + parse_quoted_string(parser)

    match = PROPERTY_LEFT_SIDE.search(open_tag)

    if match:
        open_tag = open_tag[: len(open_tag) - len(match.group(0))]
        parser.split_front(LEADING_WHITESPACE)
        properties.append(Property(match.group(1), parse_embedded_code(parser)))

    return open_tag


def parse_directive(parser: Parser) -> DirectiveNode:
    if not parser.at(AT):
        _unexpected(parser, "start of directive")

    parser.bump()

    name = parser.split_front(DIRECTIVE_NAME)
    if not name:
        parser.error(PARSER_MISSING_DIRECTIVE_NAME)

    if parser.at("("):
        segments: list[CodeSegment] = []
        text = parse_balanced_brackets(parser, segments, "")
        if text:
            segments.append(CodeText(text))
        return Directive(name, EmbeddedCode(tuple(segments)))

    if parser.at_whitespace():
        parser.bump()

    if not parser.at(EQUAL):
        parser.error(
            PARSER_MALFORMED_DIRECTIVE,
            f"{PARSER_MALFORMED_DIRECTIVE.message} `@{name}`: expected `(` or `=`",
        )

    parser.bump()
    parser.split_front(LEADING_WHITESPACE)

    base, *modifiers = name.split(":")
    return AttrStyleDirective(base, tuple(modifiers), parse_embedded_code(parser))


# -------------------------
# Embedded code
# -------------------------


def parse_embedded_code(parser: Parser) -> EmbeddedCode:
    segments: list[CodeSegment] = []
    text = ""

    # initial operators and identifier (!foo) plus property chain (.bar.blech)
    if part := parser.split_front(EMBEDDED_CODE_PREFIX):
        text += part
        if part := parser.split_front(EMBEDDED_CODE_INTERIM):
            text += part

    while parser.closing_bracket() is not None:
        text = parse_balanced_brackets(parser, segments, text)
        if part := parser.split_front(EMBEDDED_CODE_INTERIM):
            text += part

    if part := parser.split_front(EMBEDDED_CODE_SUFFIX):
        text += part

    if text:
        segments.append(CodeText(text))

    if not segments:
        parser.error(PARSER_EMPTY_EMBEDDED_CODE)

    return EmbeddedCode(tuple(segments))


def parse_balanced_brackets(parser: Parser, segments: list[CodeSegment], text: str) -> str:
    """Scan one bracketed group, appending it to `text`.

    Html literals found inside the group are flushed to `segments` as their
    own entries; the returned text is whatever follows the last of them.
    """
    end = parser.closing_bracket()
    if end is None:
        _unexpected(parser, "opening bracket")

    with parser.nested():
        text += parser.bump()

        while not parser.at_eof and not parser.at(end):
            if parser.at_set(QUOTES):
                text += parse_quoted_string(parser)
            elif parser.at(LINE_COMMENT):
                text += parse_code_comment(parser)
            elif parser.at_markup_open():
                if text:
                    segments.append(CodeText(text))
                text = ""
                segments.append(parse_html_literal(parser))
            elif parser.closing_bracket() is not None:
                text = parse_balanced_brackets(parser, segments, text)
            else:
                text += parser.bump()

        if parser.at_eof:
            parser.error(PARSER_UNTERMINATED_PARENTHESES)

        text += parser.bump()

    return text


# -------------------------
# Lexical helpers
# -------------------------


def parse_quoted_string(parser: Parser) -> str:
    if not parser.at_set(QUOTES):
        _unexpected(parser, "quoted string")

    start = parser.position
    quote = text = parser.bump()

    while not parser.at_eof and (not parser.at(quote) or is_escaped(text)):
        text += parser.bump()

    if parser.at_eof:
        parser.error(
            PARSER_UNTERMINATED_STRING,
            f"{PARSER_UNTERMINATED_STRING.message} opened at {start.display()}",
        )

    text += parser.bump()
    return text


def parse_code_comment(parser: Parser) -> str:
    if not parser.at(LINE_COMMENT):
        _unexpected(parser, "code comment")

    text = ""
    while not parser.at_eof and not parser.at(NEWLINE):
        text += parser.bump()

    # a comment may run to the end of input
    if not parser.at_eof:
        text += parser.bump()

    return text


def is_escaped(text: str) -> bool:
    """True when `text` ends in an odd number of backslashes."""
    return (len(text) - len(text.rstrip("\\"))) % 2 == 1


def _unexpected(parser: Parser, expected: str) -> NoReturn:
    found = "end of input" if parser.at_eof else repr(parser.current)
    parser.error(PARSER_UNEXPECTED_TOKEN, f"Expected {expected}, found {found}")
