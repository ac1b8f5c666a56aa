import logging
from dataclasses import fields

import pytest

from htmlliterals.ast import (
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
from htmlliterals.parser import ParserOptions, is_escaped, parse, parse_tokens
from tests._debug import debug_dump_ast
from tests._shared_cases import PARSER_CASES, HtmlLiteralsCase, case_id


def _code(text: str) -> EmbeddedCode:
    return EmbeddedCode((CodeText(text),))


def _only_literal(root: CodeTopLevel) -> HtmlLiteral:
    literals = [segment for segment in root.segments if isinstance(segment, HtmlLiteral)]
    assert len(literals) == 1
    return literals[0]


def _only_element(root: CodeTopLevel) -> HtmlElement:
    literal = _only_literal(root)
    assert len(literal.nodes) == 1
    element = literal.nodes[0]
    assert isinstance(element, HtmlElement)
    return element


# -------------------------
# Code mode
# -------------------------


def test_plain_code_is_one_code_text_segment() -> None:
    tokens = ["var", " ", "x", " ", "=", " ", "1", ";", "\n"]

    root = parse_tokens(tokens)

    assert root == CodeTopLevel((CodeText("var x = 1;\n"),))


def test_empty_input_has_no_segments() -> None:
    assert parse("") == CodeTopLevel(())
    assert parse_tokens([]) == CodeTopLevel(())


def test_code_and_markup_alternate() -> None:
    root = parse("var d = <div></div>;")

    assert root.segments == (
        CodeText("var d = "),
        HtmlLiteral(8, (HtmlElement("<div>", (), (), (), "</div>"),)),
        CodeText(";"),
    )


def test_markup_at_start_and_end_emits_no_empty_code_text() -> None:
    root = parse("<a/><b/>")

    assert root.segments == (
        HtmlLiteral(
            0,
            (
                HtmlElement("<a/>", (), (), (), ""),
                HtmlElement("<b/>", (), (), (), ""),
            ),
        ),
    )


def test_markup_inside_quoted_strings_stays_code() -> None:
    source = "var s = '<b>' + \"</b>\";"

    assert parse(source) == CodeTopLevel((CodeText(source),))


def test_markup_inside_line_comment_stays_code() -> None:
    source = "a(); // <div>\nb();"

    assert parse(source) == CodeTopLevel((CodeText(source),))


def test_line_comment_may_end_the_input() -> None:
    assert parse("a // <div>") == CodeTopLevel((CodeText("a // <div>"),))


@pytest.mark.parametrize(
    "source",
    [
        'ok = a <"z"; s = "<div>";',
        "ok = a <'z'; s = '<div>';",
        "ok = a <(b);",
        "ok = a <[0]; e = x;",
        "ok = a <\n b;",
        'f()<(g) + "a"<"b";',
    ],
)
def test_less_than_before_a_delimiter_stays_code(source: str) -> None:
    assert parse(source) == CodeTopLevel((CodeText(source),))


def test_bare_less_than_token_before_a_delimiter_is_code() -> None:
    assert parse_tokens(["x", "<", "(", "y", ")"]) == CodeTopLevel((CodeText("x<(y)"),))
    assert parse_tokens(["x", "<", "\n"]) == CodeTopLevel((CodeText("x<\n"),))
    assert parse_tokens(["x", "<"]) == CodeTopLevel((CodeText("x<"),))


def test_less_than_inside_embedded_code_keeps_groups_balanced() -> None:
    element = _only_element(parse("<p>@f(a <(b), c <@d, e <'x')</p>"))

    assert element.content == (HtmlInsert(3, _code("f(a <(b), c <@d, e <'x')")),)


def test_bare_less_than_after_insert_is_html_text() -> None:
    element = _only_element(parse("<p>@f()<(y) and x <[z]</p>"))

    assert element.content == (
        HtmlInsert(3, _code("f()")),
        HtmlText("<(y) and x <[z]"),
    )


def test_escaped_quote_does_not_close_string() -> None:
    source = 'var s = "a\\"<b>";'

    assert parse(source) == CodeTopLevel((CodeText(source),))


def test_even_backslashes_close_string() -> None:
    source = 'var s = "a\\\\" + <b/>;'

    root = parse(source)

    assert root.segments[0] == CodeText('var s = "a\\\\" + ')
    assert isinstance(root.segments[1], HtmlLiteral)


def test_backslash_parity() -> None:
    assert is_escaped('"a\\')
    assert not is_escaped('"a\\\\')
    assert is_escaped('"a\\\\\\')
    assert not is_escaped('"a')


# -------------------------
# Markup mode
# -------------------------


def test_trailing_whitespace_is_returned_to_code() -> None:
    root = parse("var f = <b/> <i/>\n<u/> ;")

    literal = _only_literal(root)
    assert literal.nodes == (
        HtmlElement("<b/>", (), (), (), ""),
        HtmlText(" "),
        HtmlElement("<i/>", (), (), (), ""),
        HtmlText("\n"),
        HtmlElement("<u/>", (), (), (), ""),
    )
    assert root.segments[-1] == CodeText(" ;")


def test_trailing_whitespace_rollback_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="htmlliterals.parser.grammar")

    parse("<b/>  ;")

    assert any("trailing whitespace" in record.getMessage() for record in caplog.records)


def test_whitespace_only_content_is_text() -> None:
    element = _only_element(parse("<div>   </div>"))

    assert element.content == (HtmlText("   "),)


def test_whitespace_before_sibling_element_is_text() -> None:
    element = _only_element(parse("<div> a <span/> </div>"))

    assert element.content == (
        HtmlText(" a "),
        HtmlElement("<span/>", (), (), (), ""),
        HtmlText(" "),
    )


def test_comment_and_element_in_one_literal() -> None:
    literal = _only_literal(parse("var c = <!-- note --><p/>;"))

    assert literal.nodes == (
        HtmlComment("<!-- note -->"),
        HtmlElement("<p/>", (), (), (), ""),
    )


def test_comment_inside_element_content() -> None:
    element = _only_element(parse("<p>a<!-- b -->c</p>"))

    assert element.content == (HtmlText("a"), HtmlComment("<!-- b -->"), HtmlText("c"))


def test_self_closing_element_has_no_content() -> None:
    element = _only_element(parse("<br/>"))

    assert element.is_self_closing
    assert element.tag_name == "br"
    assert element.content == ()
    assert element.close_tag == ""


def test_literal_and_insert_columns() -> None:
    root = parse("x = <p>\n  @name</p>")

    literal = _only_literal(root)
    assert literal.column == 4
    element = literal.nodes[0]
    assert isinstance(element, HtmlElement)
    assert element.content == (HtmlText("\n  "), HtmlInsert(2, _code("name")))


# -------------------------
# Properties and attributes
# -------------------------


def test_quoted_value_stays_an_attribute() -> None:
    element = _only_element(parse('<div x="1"></div>'))

    assert element.open_tag == '<div x="1">'
    assert element.properties == ()


def test_single_quoted_value_stays_an_attribute() -> None:
    element = _only_element(parse("<div x='a b=c @d'></div>"))

    assert element.open_tag == "<div x='a b=c @d'>"
    assert element.properties == ()
    assert element.directives == ()


def test_unquoted_value_becomes_a_property() -> None:
    element = _only_element(parse("<div x=foo()></div>"))

    assert element.open_tag == "<div>"
    assert element.properties == (Property("x", _code("foo()")),)


def test_property_with_spaces_around_equals() -> None:
    element = _only_element(parse('<input type="text" value = model.name />'))

    assert element.open_tag == '<input type="text"/>'
    assert element.properties == (Property("value", _code("model.name")),)


def test_multiple_properties_keep_order() -> None:
    element = _only_element(parse("<a x=one y=!two z=three++></a>"))

    assert [prop.name for prop in element.properties] == ["x", "y", "z"]
    assert element.properties[1].code == _code("!two")
    assert element.properties[2].code == _code("three++")
    assert element.open_tag == "<a>"


# -------------------------
# Directives
# -------------------------


def test_assignment_style_directive_splits_modifiers() -> None:
    element = _only_element(parse("<a @on:click:capture = handler></a>"))

    assert element.directives == (AttrStyleDirective("on", ("click", "capture"), _code("handler")),)
    assert element.open_tag == "<a>"


def test_assignment_style_directive_without_modifiers() -> None:
    element = _only_element(parse("<a @ref=self.link></a>"))

    assert element.directives == (AttrStyleDirective("ref", (), _code("self.link")),)


def test_call_style_directive_keeps_full_name() -> None:
    element = _only_element(parse("<input @focus:soft(active, 10) />"))

    assert element.directives == (Directive("focus:soft", _code("(active, 10)")),)
    assert element.open_tag == "<input/>"


def test_call_style_directive_with_nested_markup() -> None:
    element = _only_element(parse("<div @tooltip(<b>hi</b>)></div>"))

    directive = element.directives[0]
    assert isinstance(directive, Directive)
    assert directive.code.segments == (
        CodeText("("),
        HtmlLiteral(14, (HtmlElement("<b>", (), (), (HtmlText("hi"),), "</b>"),)),
        CodeText(")"),
    )


def test_tag_whitespace_left_by_directives_is_normalized() -> None:
    element = _only_element(parse('<div\n  @a(x)\n  id="i">t</div>'))

    assert element.open_tag == '<div\n  id="i">'
    assert len(element.directives) == 1


def test_tag_whitespace_normalization_can_be_disabled() -> None:
    options = ParserOptions(normalize_tag_whitespace=False)
    root = parse('<div\n  @a(x)\n  id="i" >t</div>', options)

    assert _only_element(root).open_tag == '<div\n  \n  id="i" >'


# -------------------------
# Embedded code
# -------------------------


def test_nested_markup_inside_embedded_code() -> None:
    element = _only_element(parse("<p>@foo(<div>@x</div>)</p>"))

    (insert,) = element.content
    assert isinstance(insert, HtmlInsert)
    assert insert.column == 3
    assert insert.code.segments == (
        CodeText("foo("),
        HtmlLiteral(
            8,
            (HtmlElement("<div>", (), (), (HtmlInsert(13, _code("x")),), "</div>"),),
        ),
        CodeText(")"),
    )


def test_embedded_code_property_chains_and_calls() -> None:
    element = _only_element(parse("<p>@user.name.toUpperCase().trim() and @count++</p>"))

    assert element.content == (
        HtmlInsert(3, _code("user.name.toUpperCase().trim()")),
        HtmlText(" and "),
        HtmlInsert(39, _code("count++")),
    )


def test_embedded_code_stops_mid_token() -> None:
    element = _only_element(parse("<p>@name.first!</p>"))

    assert element.content == (HtmlInsert(3, _code("name.first")), HtmlText("!"))


def test_embedded_code_with_every_bracket_kind() -> None:
    element = _only_element(parse("<p>@rows[0]({ key: [1, 2] }).label</p>"))

    assert element.content == (HtmlInsert(3, _code("rows[0]({ key: [1, 2] }).label")),)


def test_embedded_code_may_start_with_a_group() -> None:
    element = _only_element(parse("<p>@(a + b)</p>"))

    assert element.content == (HtmlInsert(3, _code("(a + b)")),)


def test_brackets_inside_strings_and_comments_are_opaque() -> None:
    element = _only_element(parse('<p>@f(")", // )\n x)</p>'))

    assert element.content == (HtmlInsert(3, _code('f(")", // )\n x)')),)


# -------------------------
# Options
# -------------------------


def test_nesting_depth_guard_allows_default_depth() -> None:
    assert _only_element(parse("<a><b><c></c></b></a>")).tag_name == "a"


def test_conflicting_option_arguments_are_rejected() -> None:
    with pytest.raises(ValueError, match="not both"):
        parse("x", ParserOptions(), max_nesting_depth=3)


def test_options_carry_only_depth_and_tag_whitespace() -> None:
    assert [field.name for field in fields(ParserOptions)] == ["max_nesting_depth", "normalize_tag_whitespace"]
    with pytest.raises(TypeError):
        parse("x", mode="strict")  # type: ignore[call-arg]


def test_invalid_options_are_rejected() -> None:
    with pytest.raises(ValueError, match="max_nesting_depth"):
        ParserOptions(max_nesting_depth=0)


def test_tokens_must_be_non_empty_strings() -> None:
    with pytest.raises(ValueError, match="Token 1"):
        parse_tokens(["a", ""])


@pytest.mark.parametrize("case", PARSER_CASES, ids=case_id)
def test_parses_all_central_cases(case: HtmlLiteralsCase) -> None:
    root = parse(case.source)
    debug_dump_ast(f"parser_case::{case.name}", root)

    assert isinstance(root.segments, tuple)
    for first, second in zip(root.segments, root.segments[1:]):
        assert not (isinstance(first, CodeText) and isinstance(second, CodeText))
    assert all(segment.text for segment in root.segments if isinstance(segment, CodeText))
