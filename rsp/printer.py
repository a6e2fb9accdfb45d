"""Rendering of rsp values as Lisp text.

`to_lisp_string` is the display form used by natives such as `log/info` and
`string/format` (strings appear raw). `lisp_repr` is the readable form used
when the CLI and REPL echo results (strings quoted and escaped).
"""

from __future__ import annotations

from rsp import LispValue
from rsp.types.lambda_fn import Lambda
from rsp.types.module import Module
from rsp.types.native_fn import NativeFunction
from rsp.types.nil import NilType
from rsp.types.symbol import Symbol

_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t"}


# Integral floats at or above this magnitude keep their exponent form
MAX_INTEGRAL_DISPLAY = 1e16


def format_number(n: float) -> str:
    if isinstance(n, float) and n.is_integer() and abs(n) < MAX_INTEGRAL_DISPLAY:
        return str(int(n))
    return repr(n)


def _render(value: LispValue, quote_strings: bool) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case NilType():
            return "nil"
        case int() | float():
            return format_number(value)
        case str():
            if not quote_strings:
                return value
            return '"' + "".join(_ESCAPES.get(c, c) for c in value) + '"'
        case Symbol():
            return value.id
        case list():
            return "(" + " ".join(_render(v, quote_strings) for v in value) + ")"
        case Lambda() | NativeFunction() | Module():
            return str(value)
    return repr(value)


def to_lisp_string(value: LispValue) -> str:
    """Display form of a value; strings are written without quotes."""
    return _render(value, quote_strings=False)


def lisp_repr(value: LispValue) -> str:
    """Readable form of a value; strings are quoted so they read back as strings."""
    return _render(value, quote_strings=True)
