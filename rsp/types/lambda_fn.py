"""User-defined function values for rsp."""

from __future__ import annotations

from io import StringIO

from rsp import SExpression
from rsp.types.environment import Environment


class Lambda:
    """A first-class function with parameter names, a body and a closure env.

    The closure is a reference to the defining environment, never a copy, so
    bindings added to that scope after the lambda is created are visible when
    it is called. Equality ignores the closure.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[str], body: SExpression, env: Environment):
        self.params: list[str] = params
        self.body: SExpression = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lambda):
            return NotImplemented
        return self.params == other.params and self.body == other.body

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<fn (")
            buffer.write(" ".join(self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Lambda(params={self.params!r}, body={self.body!r})"

    def extend_env(self, args: list) -> Environment:
        """Return a new frame enclosed by the closure with params bound to `args`.

        The caller is responsible for checking the arity first.
        """
        call_env = Environment(outer=self.env)
        for name, value in zip(self.params, args):
            call_env.define(name, value)
        return call_env
