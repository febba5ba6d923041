from sxeval import EvaluatorFn
from sxeval import SExpression, SxValue
from sxeval.types.environment import Environment
from sxeval.types.values import is_truthy


def if_form(
    args: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SxValue:
    cond, then_expr, else_expr = args

    # Only nil and false are false; the untaken branch is never evaluated
    if is_truthy(evaluate_fn(env, cond)):
        return evaluate_fn(env, then_expr)
    return evaluate_fn(env, else_expr)
