"""The prelude: natives and built-in modules present in every root environment.

`register` runs for the interpreter's root environment and again for each
module loaded from disk, so every module sees the same prelude.
"""
from __future__ import annotations

from typing import Callable

from rsp.builtin import list_builtin, log_builtin, math_builtin, string_builtin
from rsp.types.environment import Environment
from rsp.types.module import Module
from rsp.types.native_fn import NativeFunction

BUILTIN_MODULES: dict[str, Callable[[], dict[str, NativeFunction]]] = {
    "math": math_builtin.natives,
    "log": log_builtin.natives,
    "string": string_builtin.natives,
    "list": list_builtin.natives,
}


def create_builtin_module(name: str) -> Module:
    """Build the built-in module `name` in its own environment."""
    env = Environment()
    env.update(BUILTIN_MODULES[name]())
    return Module(f"builtin:{name}", env)


def register(env: Environment) -> None:
    """Register the built-in modules and the shorthand math operators into `env`."""
    env.update({name: create_builtin_module(name) for name in BUILTIN_MODULES})
    env.update(math_builtin.natives())
