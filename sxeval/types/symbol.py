from __future__ import annotations
import sys


class Symbol:
    """An identifier: operator or binding name in code, a plain value when quoted.

    Two symbols are equal exactly when their text is equal; the text is
    interned so equality and hashing stay cheap on environment lookups.
    Symbols are immutable once made.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        object.__setattr__(self, "id", sys.intern(name))

    def __setattr__(self, name, value):
        raise AttributeError("Symbol is immutable")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
