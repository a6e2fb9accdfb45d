from __future__ import annotations

from pathlib import Path

from rsp.types.environment import Environment


class Module:
    """A loaded module: its canonical path plus the environment its code ran in.

    Built-in modules use pseudo paths of the form `builtin:<name>`. Equality is
    by path only, the path being the module's identity.
    """

    __slots__ = ("path", "env")

    def __init__(self, path: Path | str, env: Environment):
        self.path: Path | str = path
        self.env: Environment = env

    def member(self, name: str):
        """Look up `name` in the module's own frame only; None if absent."""
        return self.env.vars.get(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Module):
            return NotImplemented
        return str(self.path) == str(other.path)

    def __hash__(self) -> int:
        return hash(str(self.path))

    def __repr__(self) -> str:
        return f"Module({str(self.path)!r})"

    def __str__(self) -> str:
        return f"<module {self.path}>"
