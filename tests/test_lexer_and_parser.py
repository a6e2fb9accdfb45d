import pytest
from hypothesis import given, strategies as st

from rsp.errors import RspSyntaxError
from rsp.printer import lisp_repr
from rsp.reader.parser import lex, parse_all, parse_one
from rsp.types.nil import Nil
from rsp.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("'a", [("quote", "'"), ("atom", "a")]),
        ("(a b)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        (' ; comment\n a b', [("atom", "a"), ("atom", "b")]),
        ('"open', [("unterminated", '"'), ("atom", "open")]),
    ],
)
def test_lexer_basic(source, expected):
    assert [(kind, text) for kind, text, _ in lex(source)] == expected


def test_lexer_keeps_trivia_on_request():
    kinds = [kind for kind, _, _ in lex("a ;c\n", keep_trivia=True)]
    assert kinds == ["atom", "ws", "comment", "ws"]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("nil", Nil),
        ("true", True),
        ("false", False),
        ("123", 123.0),
        ("-45", -45.0),
        ("+7", 7.0),
        ("3.14", 3.14),
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
        (".5", 0.5),
        ("-", Symbol("-")),
        ("foo-bar?", Symbol("foo-bar?")),
        ("math/+", Symbol("math/+")),
        ("1abc", Symbol("1abc")),
        ("'a", [Symbol("quote"), Symbol("a")]),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("()", []),
        ('"hello"', "hello"),
        (r'"a\"b\\c\n\t\r"', 'a"b\\c\n\t\r'),
        ('"multi\nline"', "multi\nline"),
    ],
)
def test_parser(source, expected):
    _, expr = parse_one(source)
    assert expr == expected


def test_numbers_are_floats():
    _, expr = parse_one("42")
    assert isinstance(expr, float)


def test_nested_lists():
    _, expr = parse_one("((a b) (c d))")
    assert expr == [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]


def test_parse_one_returns_remaining_text():
    remaining, expr = parse_one("  (a b) ; trailing\n (c)")
    assert expr == [Symbol("a"), Symbol("b")]
    assert remaining == "(c)"


@pytest.mark.parametrize("source", ["", "    ", "; comment", ";; a\n;; b\n"])
def test_parse_one_without_expression(source):
    remaining, expr = parse_one(source)
    assert expr is None
    assert remaining == ""


def test_parse_all():
    assert parse_all("1 'x (f 2)") == [
        1.0,
        [Symbol("quote"), Symbol("x")],
        [Symbol("f"), 2.0],
    ]


@pytest.mark.parametrize(
    "source,incomplete",
    [
        ("(a b", True),
        ("((a)", True),
        ('"abc', True),
        ("'", True),
        (")", False),
        ("a)", False),
        (r'"bad \q escape"', False),
    ],
)
def test_syntax_errors(source, incomplete):
    with pytest.raises(RspSyntaxError) as excinfo:
        parse_all(source)
    assert excinfo.value.incomplete is incomplete


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.text(
    st.characters(categories=("Ll", "Lu"), include_characters="-_?!*<>="),
    min_size=1,
    max_size=10,
).filter(lambda s: s not in ("true", "false", "nil")).map(Symbol)

string_strat = st.text(max_size=20)

number_strat = st.one_of(
    st.integers(min_value=-1000, max_value=1000).map(float),
    st.floats(min_value=-1e6, max_value=1e6, allow_infinity=False, allow_nan=False),
)

atom_strat = st.one_of(symbol_strat, string_strat, number_strat, st.booleans(), st.just(Nil))

sexpr_strat = st.recursive(atom_strat, lambda children: st.lists(children, max_size=5), max_leaves=20)


@given(sexpr_strat)
def test_printed_expressions_read_back(sexpr):
    _, expr = parse_one(lisp_repr(sexpr))
    assert expr == sexpr


@given(st.text(max_size=40))
def test_reader_only_raises_syntax_errors(source):
    try:
        parse_all(source)
    except RspSyntaxError:
        pass
