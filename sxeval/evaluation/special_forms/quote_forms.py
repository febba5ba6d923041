from sxeval import SExpression, SxValue, EvaluatorFn
from sxeval.types.environment import Environment


def quote_form(
    args: tuple[SExpression, ...], env: Environment, evaluate_fn: EvaluatorFn
) -> SxValue:
    return args[0]
