import pytest

from rsp.types import Environment, Lambda, Module, NativeFunction, Symbol


def _lambda(env):
    return Lambda(["x"], [Symbol("+"), Symbol("x"), 1.0], env)


@pytest.mark.parametrize(
    "left,right",
    [
        (_lambda(Environment()), _lambda(Environment())),
        (NativeFunction("f", lambda args: 1.0), NativeFunction("f", lambda args: 2.0)),
        (Module("builtin:m", Environment()), Module("builtin:m", Environment())),
    ],
)
def test_equal_regardless_of_environment_or_implementation(left, right):
    assert left == right


@pytest.mark.parametrize(
    "left,right",
    [
        (_lambda(Environment()), Lambda(["y"], Symbol("y"), Environment())),
        (NativeFunction("f", len), NativeFunction("g", len)),
        (Module("builtin:m", Environment()), Module("builtin:n", Environment())),
    ],
)
def test_unequal_when_identity_differs(left, right):
    assert left != right


def test_natives_and_modules_hash_by_identity_fields():
    assert hash(NativeFunction("f", len)) == hash(NativeFunction("f", abs))
    assert hash(Module("builtin:m", Environment())) == hash(Module("builtin:m", Environment()))
