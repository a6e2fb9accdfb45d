import pytest

from rsp import errors


@pytest.mark.parametrize(
    "code,expected",
    [
        ('(string/concat "foo" "bar" "baz")', "foobarbaz"),
        ("(string/concat)", ""),
        ('(string/reverse "abc")', "cba"),
        ('(string/len "hello")', 5.0),
        ('(string/to-upper "abc")', "ABC"),
        ('(string/to-lower "ABC")', "abc"),
        ('(string/trim "  x  ")', "x"),
        ('(string/format "%s + %s" 1 2)', "1 + 2"),
        ('(string/format "a %s" "b")', "a b"),
        ('(string/format "%s %s" 1)', "1 %s"),
        ('(string/format "none" 1 2)', "none"),
        ("(string/format \"%s\" '(1 x))", "(1 x)"),
    ],
)
def test_string_functions(interp, code, expected):
    assert interp.eval(code) == expected


@pytest.mark.parametrize(
    "code",
    ['(string/concat "a" 1)', "(string/reverse 1)", "(string/format 1)", "(string/len nil)"],
)
def test_string_type_errors(interp, code):
    with pytest.raises(errors.RspTypeError):
        interp.eval(code)


@pytest.mark.parametrize("code", ["(string/reverse)", '(string/trim "a" "b")', "(string/format)"])
def test_string_arity_errors(interp, code):
    with pytest.raises(errors.RspArityError):
        interp.eval(code)
