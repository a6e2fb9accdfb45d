"""Runtime environment for rsp.

The Environment stores bindings of names to evaluated Lisp values and supports
nested lexical scopes via an `outer` link. Frames are shared by reference:
closures, child frames and modules all hold the same object, so a frame lives
as long as its longest holder.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional

from rsp import LispValue
from rsp.errors import RspUndefinedSymbol
from rsp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def _name(name: str | Symbol) -> str:
    return name.id if isinstance(name, Symbol) else name


class Environment:
    """Hierarchical mapping from names to Lisp values."""

    __slots__ = ("vars", "outer", "__weakref__")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def with_prelude(cls) -> Environment:
        """Create a new root environment populated with the native prelude."""
        # Lazy import: the builtin package depends on this module
        from rsp.builtin.globals import register

        logger.debug("Creating new root environment with prelude")
        env = cls()
        register(env)
        return env

    def define(self, name: str | Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only.

        Outer frames are never touched, which is what makes shadowing work.
        """
        key = _name(name)
        logger.debug("Defining %r in frame %#x", key, id(self))
        self.vars[key] = value

    def find(self, name: str | Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = _name(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: str | Symbol) -> Optional[LispValue]:
        """Return the value bound to `name`, or None if no frame binds it."""
        env = self.find(name)
        if env is None:
            logger.debug("Variable %r not found in any environment", _name(name))
            return None
        return env.vars[_name(name)]

    def lookup(self, name: str | Symbol) -> LispValue:
        """Like `get`, but raises RspUndefinedSymbol if the name is unbound."""
        env = self.find(name)
        if env is None:
            raise RspUndefinedSymbol(_name(name))
        return env.vars[_name(name)]

    def root(self) -> Environment:
        """Return the outermost frame of this chain."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: dict[str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: str | Symbol) -> bool:
        return _name(name) in self.vars

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings at {id(self):#x}>"
