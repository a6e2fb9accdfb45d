"""Natives of the built-in `list` module.

Lists are Python lists; every operation returns a new list and never mutates
its arguments, since quoted code shares structure with the AST.
"""
from __future__ import annotations

from rsp import LispValue
from rsp.errors import RspArityError, RspTypeError, RspValueError
from rsp.printer import lisp_repr
from rsp.types.native_fn import NativeFunction
from rsp.types.nil import Nil


def _expect_arity(args: list[LispValue], n: int, op_name: str) -> None:
    if len(args) != n:
        raise RspArityError(f"{op_name} expects {n} argument{'s' if n != 1 else ''}, got {len(args)}")


def _expect_list(value: LispValue, op_name: str) -> list[LispValue]:
    """Lists pass through; nil reads as the empty list."""
    if value is Nil:
        return []
    if isinstance(value, list):
        return value
    raise RspTypeError("List", lisp_repr(value))


def list_builtin(args: list[LispValue]) -> LispValue:
    """Construct a list from the provided arguments."""
    return list(args)


def cons(args: list[LispValue]) -> LispValue:
    """(cons x xs) -> a new list with x prepended to xs."""
    _expect_arity(args, 2, "list/cons")
    head, tail = args
    return [head] + _expect_list(tail, "list/cons")


def car(args: list[LispValue]) -> LispValue:
    """First element of a non-empty list."""
    _expect_arity(args, 1, "list/car")
    xs = _expect_list(args[0], "list/car")
    if not xs:
        raise RspValueError("car of empty list")
    return xs[0]


def cdr(args: list[LispValue]) -> LispValue:
    """All but the first element of a non-empty list."""
    _expect_arity(args, 1, "list/cdr")
    xs = _expect_list(args[0], "list/cdr")
    if not xs:
        raise RspValueError("cdr of empty list")
    return xs[1:]


def length(args: list[LispValue]) -> LispValue:
    _expect_arity(args, 1, "list/len")
    return float(len(_expect_list(args[0], "list/len")))


def is_empty(args: list[LispValue]) -> LispValue:
    _expect_arity(args, 1, "list/empty?")
    return not _expect_list(args[0], "list/empty?")


LIST_FUNCTIONS = {
    "list": list_builtin,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "len": length,
    "empty?": is_empty,
}


def natives() -> dict[str, NativeFunction]:
    return {name: NativeFunction(f"list/{name}", fn) for name, fn in LIST_FUNCTIONS.items()}
