"""Runtime environment for Schemelet.

An Environment is one frame of a lexical scope chain. Each frame maps a name
to a Cell, a mutable slot shared by every holder of the frame, and links to
the frame it was created in through `outer`. The link is fixed at creation;
frames never reference their children, so reference counting reclaims them
without cycles.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import Iterable, Optional

from schemelet.errors import UnboundVarError
from schemelet.types.values import Value


@dataclass
class Cell:
    value: Value


class Environment:
    """Hierarchical mapping from variable names to Cells."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Cell] = {}
        self.outer: Environment | None = outer

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def is_bound(self, name: str) -> bool:
        return self.find(name) is not None

    def lookup(self, name: str) -> Value:
        """Return the current value bound to `name`, searching innermost first.

        Raises UnboundVarError if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundVarError("Getting an unbound variable", name)
        return env.vars[name].value

    def set(self, name: str, value: Value) -> Value:
        """Mutate the existing binding for `name` in place and return `value`.

        Bindings are never created here: raises UnboundVarError if the name is
        not bound anywhere in the chain.
        """
        env = self.find(name)
        if env is None:
            raise UnboundVarError("Setting an unbound variable", name)
        env.vars[name].value = value
        return value

    def define(self, name: str, value: Value) -> Value:
        """Bind `name` in this frame only, overwriting a binding already here."""
        cell = self.vars.get(name)
        if cell is None:
            self.vars[name] = Cell(value)
        else:
            cell.value = value
        return value

    def update(self, bindings: Iterable[tuple[str, Value]]) -> None:
        """Bulk-define (name, value) pairs in the current frame."""
        for name, value in bindings:
            self.define(name, value)

    def extend(self, bindings: Iterable[tuple[str, Value]] = ()) -> Environment:
        """Create a child frame of this one holding `bindings`."""
        child = Environment(outer=self)
        child.update(bindings)
        return child

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {c.value}" for k, c in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as buffer:
                env._write_vars(buffer)
                chain.append(buffer.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
