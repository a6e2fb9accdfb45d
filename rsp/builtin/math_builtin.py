"""Arithmetic and numeric comparison natives.

These back both the `math` built-in module and the shorthand operators the
prelude binds at top level.
"""
from __future__ import annotations

import logging
import operator
from typing import Callable

from rsp import LispValue
from rsp.errors import RspArityError, RspDivisionByZero, RspTypeError
from rsp.printer import lisp_repr
from rsp.types.native_fn import NativeFunction

logger = logging.getLogger(__name__)


def extract_number(value: LispValue, op_name: str) -> float:
    """Return `value` as a number or raise RspTypeError; booleans are not numbers."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    logger.debug("Type error in native %r: %s is not a number", op_name, lisp_repr(value))
    raise RspTypeError("Number", lisp_repr(value))


def add(args: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments; 0 with no arguments."""
    total = 0.0
    for x in args:
        total += extract_number(x, "+")
    return total


def mul(args: list[LispValue]) -> LispValue:
    """Return the product of all arguments; 1 with no arguments."""
    product = 1.0
    for x in args:
        product *= extract_number(x, "*")
    return product


def sub(args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise RspArityError("Native '-' expects at least 1 argument, got 0")
    first = extract_number(args[0], "-")
    if len(args) == 1:
        return -first
    result = first
    for x in args[1:]:
        result -= extract_number(x, "-")
    return result


def div(args: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not args:
        raise RspArityError("Native '/' expects at least 1 argument, got 0")
    first = extract_number(args[0], "/")
    if len(args) == 1:
        if first == 0.0:
            raise RspDivisionByZero("reciprocal of 0 in native '/'")
        return 1.0 / first
    result = first
    for position, x in enumerate(args[1:], start=2):
        divisor = extract_number(x, "/")
        if divisor == 0.0:
            logger.debug("Division by zero in native '/' at argument %d", position)
            raise RspDivisionByZero(f"argument {position} of native '/' is 0")
        result /= divisor
    return result


def equals(args: list[LispValue]) -> LispValue:
    """Numeric equality: true if every argument equals the first (at least 2 args)."""
    if len(args) < 2:
        raise RspArityError(
            f"Native '=' expects at least 2 arguments for numeric comparison, got {len(args)}"
        )
    first = extract_number(args[0], "=")
    return all(extract_number(x, "=") == first for x in args[1:])


def _comparison(op_name: str, op: Callable[[float, float], bool]) -> Callable[[list[LispValue]], LispValue]:
    def compare(args: list[LispValue]) -> LispValue:
        if len(args) != 2:
            raise RspArityError(
                f"Native '{op_name}' expects exactly 2 arguments, got {len(args)}"
            )
        return op(extract_number(args[0], op_name), extract_number(args[1], op_name))

    compare.__name__ = f"compare_{op.__name__}"
    compare.__doc__ = f"({op_name} a b) for exactly two numbers."
    return compare


lt = _comparison("<", operator.lt)
gt = _comparison(">", operator.gt)
lte = _comparison("<=", operator.le)
gte = _comparison(">=", operator.ge)


MATH_FUNCTIONS: dict[str, Callable[[list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": lt,
    ">": gt,
    "<=": lte,
    ">=": gte,
}


def natives() -> dict[str, NativeFunction]:
    return {name: NativeFunction(name, fn) for name, fn in MATH_FUNCTIONS.items()}
