from __future__ import annotations

from typing import Callable

from rsp import LispValue

NativeFn = Callable[[list[LispValue]], LispValue]


class NativeFunction:
    """A host function callable from Lisp with already-evaluated arguments.

    Identity is the name: two natives with the same name compare equal.
    """

    __slots__ = ("name", "func")

    def __init__(self, name: str, func: NativeFn):
        self.name = name
        self.func = func

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.func(args)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NativeFunction):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(("native", self.name))

    def __repr__(self) -> str:
        return f"NativeFunction({self.name!r})"

    def __str__(self) -> str:
        return f"<native fn {self.name}>"
