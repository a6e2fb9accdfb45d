"""Natives of the built-in `string` module."""
from __future__ import annotations

import logging

from rsp import LispValue
from rsp.errors import RspArityError, RspTypeError
from rsp.printer import lisp_repr, to_lisp_string
from rsp.types.native_fn import NativeFunction

logger = logging.getLogger(__name__)

PLACEHOLDER = "%s"


def extract_string(value: LispValue, op_name: str) -> str:
    if isinstance(value, str):
        return value
    logger.debug("Type error in native %r: %s is not a string", op_name, lisp_repr(value))
    raise RspTypeError("String", lisp_repr(value))


def _single_string(args: list[LispValue], op_name: str) -> str:
    if len(args) != 1:
        raise RspArityError(f"{op_name} expects 1 argument, got {len(args)}")
    return extract_string(args[0], op_name)


def concat(args: list[LispValue]) -> LispValue:
    """Concatenate any number of strings."""
    return "".join(
        extract_string(arg, f"string/concat (arg {i})") for i, arg in enumerate(args, start=1)
    )


def reverse(args: list[LispValue]) -> LispValue:
    return _single_string(args, "string/reverse")[::-1]


def length(args: list[LispValue]) -> LispValue:
    """Length in characters, as a number."""
    return float(len(_single_string(args, "string/len")))


def to_upper(args: list[LispValue]) -> LispValue:
    return _single_string(args, "string/to-upper").upper()


def to_lower(args: list[LispValue]) -> LispValue:
    return _single_string(args, "string/to-lower").lower()


def trim(args: list[LispValue]) -> LispValue:
    return _single_string(args, "string/trim").strip()


def string_format(args: list[LispValue]) -> LispValue:
    """(string/format fmt args...) replaces each %s with the next argument.

    Arguments are written in display form. Placeholders without a matching
    argument are left as %s; surplus arguments are ignored.
    """
    if not args:
        raise RspArityError("string/format expects at least 1 argument (the format string)")
    fmt = args[0]
    if not isinstance(fmt, str):
        raise RspTypeError("String (for format)", lisp_repr(fmt))

    values = iter(args[1:])
    pieces = fmt.split(PLACEHOLDER)
    out = [pieces[0]]
    for piece in pieces[1:]:
        value = next(values, None)
        out.append(PLACEHOLDER if value is None else to_lisp_string(value))
        out.append(piece)
    return "".join(out)


STRING_FUNCTIONS = {
    "concat": concat,
    "reverse": reverse,
    "len": length,
    "to-upper": to_upper,
    "to-lower": to_lower,
    "trim": trim,
    "format": string_format,
}


def natives() -> dict[str, NativeFunction]:
    return {name: NativeFunction(f"string/{name}", fn) for name, fn in STRING_FUNCTIONS.items()}
