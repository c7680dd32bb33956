from qwuri.ast.parser import parse, variable_names
from qwuri.ast.spec import Expression, Literal, Operator, Variable
from qwuri.exceptions import InvalidTemplateError
import pytest


def test_parse_literal_only():
    parts = parse("http://example.com/path")
    assert parts == [Literal("http://example.com/path")]


def test_parse_empty_template():
    assert parse("") == []


def test_parse_literal_and_path_expression():
    parts = parse("http://foo.com{/foo,bar}")
    assert parts == [
        Literal("http://foo.com"),
        Expression(
            operator=Operator.PATH,
            variables=(Variable("foo"), Variable("bar")),
        ),
    ]


def test_trailing_literal_emitted_once():
    parts = parse("a{x}b{y}tail")
    literals = [p.text for p in parts if isinstance(p, Literal)]
    assert literals == ["a", "b", "tail"]


def test_literal_skeleton_round_trip():
    template = "http://h/{a}/mid{?q}end"
    parts = parse(template)
    skeleton = "".join(p.text for p in parts if isinstance(p, Literal))
    assert skeleton == "http://h//midend"


def test_parse_all_operators():
    for op in "+#./;?&":
        (expr,) = parse("{" + op + "var}")
        assert expr.operator == Operator(op)
        assert expr.variables == (Variable("var"),)


def test_parse_simple_has_no_operator():
    (expr,) = parse("{var}")
    assert expr.operator is None


def test_parse_modifiers():
    (expr,) = parse("{x:3,list*,y}")
    assert expr.variables == (
        Variable("x", max_length=3),
        Variable("list", explode=True),
        Variable("y"),
    )


def test_parse_dotted_and_pct_encoded_names():
    (expr,) = parse("{a.b,c%20d}")
    assert [v.name for v in expr.variables] == ["a.b", "c%20d"]


def test_closing_brace_allowed_in_literal():
    assert parse("a}b") == [Literal("a}b")]


@pytest.mark.parametrize(
    "template",
    [
        "{unterminated",
        "{",
        "{}",
        "{+}",
        "{x:}",
        "{x:0}",
        "{x:10000}",
        "{x:" + "9" * 5000 + "}",
        "{x:3*}",
        "{x*:3}",
        "{x**}",
        "{x y}",
        "{x,}",
        "{,x}",
        "{a{b}",
        "{x.}",
        "{a..b}",
        "{%zz}",
        "foo{bar",
    ],
)
def test_invalid_templates(template):
    with pytest.raises(InvalidTemplateError):
        parse(template)


def test_invalid_template_reports_position():
    with pytest.raises(InvalidTemplateError) as exc_info:
        parse("abc{x y}")
    assert exc_info.value.position == 5
    assert exc_info.value.template == "abc{x y}"


def test_variable_names_first_appearance_order():
    parts = parse("{b}{a,b}{?c,a}")
    assert variable_names(parts) == ["b", "a", "c"]


def test_expression_str_reproduces_source():
    (expr,) = parse("{?x:3,list*}")
    assert str(expr) == "{?x:3,list*}"


def test_prefix_length_range():
    (expr,) = parse("{x:1,y:9999}")
    assert [v.max_length for v in expr.variables] == [1, 9999]


def test_overlong_prefix_length_is_invalid_template():
    with pytest.raises(InvalidTemplateError) as exc_info:
        parse("{x:" + "9" * 5000 + "}")
    assert exc_info.value.reason == "prefix length too long"
