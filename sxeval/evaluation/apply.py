"""Application engine for sxeval.

Ordinary (non-special) list forms are applications: the head expression is
evaluated, and if it yields a Primitive the arguments are evaluated strictly
left to right, the primitive's minimum arity is checked, and its callback is
invoked with the evaluated values.

Anything other than a Primitive in function position is reported as
NotAFunction; there are no user-defined functions to apply.
"""

from sxeval import SExpression, SxValue, EvaluatorFn
from sxeval.types.environment import Environment
from sxeval.types.errors import (
    BadArg,
    NotAFunction,
    PrimitiveBadArg,
    PrimitiveTooFewArgs,
)
from sxeval.types.values import Primitive


def apply_primitive(
    head: SExpression,
    fn: Primitive,
    args: list[SxValue],
) -> SxValue:
    """Invoke `fn` on already-evaluated `args`.

    `head` is the call-site expression as written; it is what a BadArg error
    carries, not the offending argument.
    """
    if len(args) < fn.min_arity:
        raise PrimitiveTooFewArgs(fn.name, fn.min_arity, len(args))
    try:
        return fn.callback(args)
    except PrimitiveBadArg:
        raise BadArg(head) from None


def apply(
    head: SExpression,
    env: Environment,
    arg_exprs: tuple[SExpression, ...],
    evaluate_fn: EvaluatorFn,
) -> SxValue:
    fn = evaluate_fn(env, head)
    if not isinstance(fn, Primitive):
        raise NotAFunction(head)

    # The first failing argument stops evaluation of the rest
    args = [evaluate_fn(env, arg) for arg in arg_exprs]
    return apply_primitive(head, fn, args)
