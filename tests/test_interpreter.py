import pytest

from rsp.errors import RspUndefinedSymbol
from rsp.interpreter import Interpreter, evaluate_source
from rsp.types import Environment, Nil, Symbol


def test_eval_returns_last_value(interp):
    assert interp.eval("(let a 1) (let b 2) (+ a b)") == 3.0


def test_eval_of_nothing_is_nil(interp):
    assert interp.eval("") is Nil
    assert interp.eval("; only a comment") is Nil


def test_bindings_persist_across_calls(interp):
    interp.eval("(let counter 10)")
    assert interp.eval("counter") == 10.0


def test_bindings_before_an_error_are_kept(interp):
    with pytest.raises(RspUndefinedSymbol):
        interp.eval("(let kept 1) (oops)")
    assert interp.eval("kept") == 1.0


def test_eval_expr(interp):
    assert interp.eval_expr([Symbol("+"), 1.0, 2.0]) == 3.0


def test_user_prelude():
    interp = Interpreter(prelude="(let square (fn (x) (* x x)))")
    assert interp.eval("(square 3)") == 9.0


def test_custom_evaluator():
    calls = []

    def recording_eval(expr, env):
        calls.append(expr)
        return expr

    interp = Interpreter(eval_fn=recording_eval)
    assert interp.eval("1 2") == 2.0
    assert calls == [1.0, 2.0]


def test_evaluate_source_uses_given_environment():
    env = Environment.with_prelude()
    evaluate_source("(let z 5)", env)
    assert env.lookup("z") == 5.0
