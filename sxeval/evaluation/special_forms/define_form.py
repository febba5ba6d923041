from sxeval import EvaluatorFn
from sxeval import SExpression, SxValue
from sxeval.types.errors import DefineBadSymbol, Redefine
from sxeval.types.environment import Environment
from sxeval.types.symbol import Symbol


def define_form(
    args: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SxValue:
    """
    (def name value)
    Binds `name` once; returns the symbol itself rather than the value.
    An already-bound name fails before `value` is evaluated.
    """
    name, val_expr = args
    if not isinstance(name, Symbol):
        raise DefineBadSymbol(name)
    if name in env:
        raise Redefine(name)

    value = evaluate_fn(env, val_expr)
    env.define(name, value)
    return name
