"""User-defined procedure representation for Schemelet."""

from __future__ import annotations

from io import StringIO
from typing import Optional

from schemelet.types.environment import Environment
from schemelet.types.values import Value


class Func(Value):
    """A closure: formal parameters, optional rest parameter, body and the
    environment captured where the procedure was created."""

    __slots__ = ("params", "vararg", "body", "closure")
    __match_args__ = ("params", "vararg", "body", "closure")

    def __init__(
        self,
        params: tuple[str, ...],
        vararg: Optional[str],
        body: tuple[Value, ...],
        closure: Environment,
    ):
        self.params: tuple[str, ...] = tuple(params)
        self.vararg: Optional[str] = vararg
        self.body: tuple[Value, ...] = tuple(body)
        self.closure: Environment = closure

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(self.params))
            if self.vararg is not None:
                if self.params:
                    buffer.write(" ")
                buffer.write(f". {self.vararg}")
            buffer.write(") ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    # --- Evaluation helpers ---
    def extend_env(self, args: list[Value]) -> Environment:
        """
        Bind the given argument values to this procedure's parameters and
        return the new frame, a child of the captured closure, in which the
        body is evaluated.

        Delegates to the shared binder in schemelet.types.bind.
        """
        from schemelet.types.bind import bind_arguments
        return bind_arguments(self.params, self.vararg, list(args), self.closure)
