from __future__ import annotations
import sys

from schemelet.types.values import Value


class Atom(Value):
    """A symbol. Also the representation of variable references in code."""

    __slots__ = ("name",)
    __match_args__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Atom) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Atom({self.name!r})"

    def __str__(self):
        return self.name
