"""Expression values for sxeval.

An expression is one of a closed set of variants. Most map onto plain Python
objects; the remainder are small immutable classes defined here:

    nil        -> Nil (NilType singleton)
    booleans   -> bool
    integers   -> int
    strings    -> str
    symbols    -> Symbol
    lists      -> tuple
    'x         -> Quote(x)
    builtins   -> Primitive(name, min_arity, callback)

`sx_kind` maps a value onto its variant tag so that consumers can dispatch
exhaustively with `match`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sxeval import SxValue, PrimitiveFn
from sxeval.types.nil import NilType
from sxeval.types.symbol import Symbol


class SxKind(Enum):
    NIL = "nil"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    STRING = "string"
    SYMBOL = "symbol"
    LIST = "list"
    QUOTE = "quote"
    PRIMITIVE = "primitive"


class Quote:
    """Wraps exactly one expression, marking it as data for one evaluation step."""

    __slots__ = ("inner",)

    def __init__(self, inner: SxValue):
        object.__setattr__(self, "inner", inner)

    def __setattr__(self, name, value):
        raise AttributeError("Quote is immutable")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Quote) and sx_equal(self.inner, other.inner)

    def __hash__(self) -> int:
        return hash((Quote, self.inner))

    def __repr__(self):
        return f"Quote({self.inner!r})"


@dataclass(frozen=True)
class Primitive:
    """A built-in function: name, minimum arity and the native callback."""

    name: str
    min_arity: int
    callback: PrimitiveFn

    def __repr__(self):
        return f"Primitive({self.name!r}, min_arity={self.min_arity})"


def sx_kind(value: SxValue) -> SxKind:
    """Classify `value` into its expression variant.

    Raises TypeError for Python objects that are not expression values.
    bool is tested before int since bool subclasses int.
    """
    if isinstance(value, NilType):
        return SxKind.NIL
    if isinstance(value, bool):
        return SxKind.BOOLEAN
    if isinstance(value, int):
        return SxKind.INTEGER
    if isinstance(value, str):
        return SxKind.STRING
    if isinstance(value, Symbol):
        return SxKind.SYMBOL
    if isinstance(value, tuple):
        return SxKind.LIST
    if isinstance(value, Quote):
        return SxKind.QUOTE
    if isinstance(value, Primitive):
        return SxKind.PRIMITIVE
    raise TypeError(f"Not an expression value: {value!r} ({type(value).__name__})")


def sx_equal(a: SxValue, b: SxValue) -> bool:
    """Structural equality that keeps booleans and integers apart."""
    if a is b:
        return True
    if isinstance(a, tuple) and isinstance(b, tuple):
        if len(a) != len(b):
            return False
        return all(sx_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return a == b


def is_truthy(value: SxValue) -> bool:
    """Only nil and false are falsy; 0, "" and () are all true."""
    return not (isinstance(value, NilType) or value is False)
