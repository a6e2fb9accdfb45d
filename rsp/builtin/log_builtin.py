"""Natives of the built-in `log` module: user-facing output from Lisp code."""
from __future__ import annotations

import sys
from typing import TextIO

from rsp import LispValue
from rsp.printer import to_lisp_string
from rsp.types.native_fn import NativeFunction


def _write_message(args: list[LispValue], stream: TextIO) -> str:
    message = " ".join(to_lisp_string(arg) for arg in args)
    print(message, file=stream)
    return message


def log_info(args: list[LispValue]) -> LispValue:
    """Print the arguments space-separated to stdout; returns the printed text."""
    return _write_message(args, sys.stdout)


def log_error(args: list[LispValue]) -> LispValue:
    """Print the arguments space-separated to stderr; returns the printed text."""
    return _write_message(args, sys.stderr)


LOG_FUNCTIONS = {
    "info": log_info,
    "error": log_error,
}


def natives() -> dict[str, NativeFunction]:
    return {name: NativeFunction(f"log/{name}", fn) for name, fn in LOG_FUNCTIONS.items()}
