"""Built-in primitives for the sxeval runtime environment.

Each primitive is a Primitive record (name, minimum arity, callback). The
callback receives the evaluated arguments and either returns a value or raises
PrimitiveBadArg; the evaluator turns that into a BadArg error carrying the
call site. Arity floors are checked by the evaluator before the callback runs.
"""
from __future__ import annotations

import logging
import operator
from functools import reduce
from typing import Sequence

from sxeval import SxValue
from sxeval.types.environment import Environment
from sxeval.types.errors import PrimitiveBadArg
from sxeval.types.nil import Nil
from sxeval.types.symbol import Symbol
from sxeval.types.values import Primitive, sx_equal

logger = logging.getLogger(__name__)


def _integers(args: Sequence[SxValue]) -> Sequence[int]:
    # bool subclasses int but is not an integer here
    for arg in args:
        if not isinstance(arg, int) or isinstance(arg, bool):
            raise PrimitiveBadArg(f"expected an integer, got {arg!r}")
    return args


def _list_arg(arg: SxValue) -> tuple:
    if not isinstance(arg, tuple):
        raise PrimitiveBadArg(f"expected a list, got {arg!r}")
    return arg


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Sequence[SxValue]) -> int:
    """Sum of all arguments; (+) is 0."""
    return sum(_integers(args))


def sub(args: Sequence[SxValue]) -> int:
    """Subtract all subsequent integers from the first; unary negation for one arg."""
    first, *rest = _integers(args)
    if not rest:
        return -first
    return first - sum(rest)


def mul(args: Sequence[SxValue]) -> int:
    """Product of all arguments; (*) is 1."""
    return reduce(operator.mul, _integers(args), 1)


# -------------------------------
# Comparison
# -------------------------------
def num_eq(args: Sequence[SxValue]) -> bool:
    nums = _integers(args)
    return all(a == b for a, b in zip(nums, nums[1:]))


def less_than(args: Sequence[SxValue]) -> bool:
    nums = _integers(args)
    return all(a < b for a, b in zip(nums, nums[1:]))


# -------------------------------
# Lists
# -------------------------------
def make_list(args: Sequence[SxValue]) -> tuple:
    return tuple(args)


def first(args: Sequence[SxValue]) -> SxValue:
    """First element of a list, nil for the empty list."""
    if len(args) != 1:
        raise PrimitiveBadArg("first takes exactly 1 argument")
    items = _list_arg(args[0])
    return items[0] if items else Nil


def rest(args: Sequence[SxValue]) -> tuple:
    if len(args) != 1:
        raise PrimitiveBadArg("rest takes exactly 1 argument")
    return _list_arg(args[0])[1:]


def cons(args: Sequence[SxValue]) -> tuple:
    if len(args) != 2:
        raise PrimitiveBadArg("cons takes exactly 2 arguments")
    return (args[0],) + _list_arg(args[1])


def is_nil(args: Sequence[SxValue]) -> bool:
    return all(sx_equal(arg, Nil) for arg in args)


PRIMITIVES: tuple[Primitive, ...] = (
    Primitive("+", 0, add),
    Primitive("-", 1, sub),
    Primitive("*", 0, mul),
    Primitive("=", 1, num_eq),
    Primitive("<", 1, less_than),
    Primitive("list", 0, make_list),
    Primitive("first", 1, first),
    Primitive("rest", 1, rest),
    Primitive("cons", 2, cons),
    Primitive("nil?", 1, is_nil),
)


def register(env: Environment, primitives: Sequence[Primitive] = PRIMITIVES) -> Environment:
    """Bind each primitive under its name in `env`."""
    env.update({Symbol(p.name): p for p in primitives})
    logger.debug("registered %d primitives: %s", len(primitives), " ".join(p.name for p in primitives))
    return env
