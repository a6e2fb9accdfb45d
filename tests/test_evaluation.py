import logging

import pytest
from hypothesis import given, strategies as st

from rsp import errors
from rsp.evaluation import evaluate
from rsp.reader import parse_all
from rsp.types import Environment, Lambda, Module, Nil, NativeFunction, Symbol


def run(code, env):
    result = Nil
    for expr in parse_all(code):
        result = evaluate(expr, env)
    return result


@pytest.mark.parametrize(
    "value",
    [
        1.0,
        -2.5,
        True,
        False,
        Nil,
        "hello",
        NativeFunction("id", lambda args: args[0]),
        Module("builtin:test", Environment()),
    ],
)
def test_self_evaluating_values(env, value):
    assert evaluate(value, env) == value


def test_lambda_is_self_evaluating(env):
    fn = Lambda(["x"], Symbol("x"), env)
    assert evaluate(fn, env) is fn


def test_empty_list_evaluates_to_itself(env):
    assert evaluate([], env) == []


def test_symbol_lookup(env):
    env.define("x", 42.0)
    assert evaluate(Symbol("x"), env) == 42.0
    with pytest.raises(errors.RspUndefinedSymbol):
        evaluate(Symbol("z"), env)


def test_simple_expression(env):
    assert run("(+ 1 2)", env) == 3.0
    assert run("(* 2 (+ 1 2))", env) == 6.0


def test_factorial_like_example(env):
    run("(let x (fn (n) (if (= n 0) 1 (* n 1))))", env)
    assert run("(x 0)", env) == 1.0
    assert run("(x 5)", env) == 5.0


def test_recursive_function(env):
    run("(let fact (fn (n) (if (= n 0) 1 (* n (fact (- n 1))))))", env)
    assert run("(fact 5)", env) == 120.0


def test_arguments_evaluated_left_to_right(env):
    seen = []

    def record(args):
        seen.append(args[0])
        return args[0]

    env.define("rec", NativeFunction("rec", record))
    run("(+ (rec 1) (rec 2) (rec 3))", env)
    assert seen == [1.0, 2.0, 3.0]


def test_computed_head(env):
    assert run("((fn (x) (* x x)) 4)", env) == 16.0
    assert run("((if true + -) 5 3)", env) == 8.0


def test_calling_a_non_function(env):
    with pytest.raises(errors.RspNotAFunction):
        run("(1 2 3)", env)
    with pytest.raises(errors.RspNotAFunction):
        run('("f")', env)


def test_arity_mismatch(env):
    run("(let id (fn (p) p))", env)
    assert run("(id 7)", env) == 7.0
    with pytest.raises(errors.RspArityError):
        run("(id)", env)
    with pytest.raises(errors.RspArityError):
        run("(id 1 2)", env)


def test_closure_captures_environment_by_reference(env):
    run("(let y 1)", env)
    run("(let f (fn () y))", env)
    run("(let y 2)", env)
    assert run("(f)", env) == 2.0


def test_closure_sees_bindings_added_after_creation(env):
    run("(let f (fn () later))", env)
    run("(let later 10)", env)
    assert run("(f)", env) == 10.0


def test_call_frame_does_not_leak_into_caller(env):
    run("(let f (fn (a) a))", env)
    run("(f 1)", env)
    assert env.get("a") is None


def test_let_inside_function_body_is_local(env):
    run("(let f (fn (a) (let inner a)))", env)
    assert run("(f 3)", env) == 3.0
    assert env.get("inner") is None


def test_errors_propagate_unchanged(env):
    with pytest.raises(errors.RspUndefinedSymbol) as excinfo:
        run("(+ 1 (car-of nothing))", env)
    assert excinfo.value.name == "car-of"


def test_deep_recursion_raises_recursion_error(env):
    run("(let loop (fn (n) (loop (+ n 1))))", env)
    with pytest.raises(RecursionError):
        run("(loop 0)", env)


def test_failures_are_logged_at_debug_level(env, caplog):
    with caplog.at_level(logging.DEBUG, logger="rsp"):
        with pytest.raises(errors.RspUndefinedSymbol):
            evaluate(Symbol("ghost"), env)
    assert any("ghost" in record.getMessage() for record in caplog.records)


@given(
    st.one_of(
        st.floats(allow_nan=False),
        st.text(max_size=20),
        st.booleans(),
        st.just(Nil),
    )
)
def test_atoms_evaluate_to_themselves(value):
    assert evaluate(value, Environment()) == value
