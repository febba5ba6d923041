"""Core evaluator for sxeval.

Evaluation is plain recursive descent over the expression tree: every nested
form is a nested Python call, so very deep nesting is bounded by the host
recursion limit (see sxeval.config).

Dispatch order:
  1. nil, booleans, integers, strings and primitives evaluate to themselves.
  2. The empty list evaluates to itself.
  3. A quote yields its inner expression without evaluating it.
  4. A symbol yields its binding, or fails with Undefined.
  5. A list headed by a symbol is a special form (def, if, quote) or an
     application of whatever the head evaluates to.
  6. Any other list fails with Unknown.
"""

from __future__ import annotations

from sxeval import SExpression, SxValue
from sxeval.types.environment import Environment
from sxeval.types.errors import EvalError, Undefined, Unknown
from sxeval.types.symbol import Symbol
from sxeval.types.values import SxKind, sx_kind
from sxeval.evaluation.apply import apply
from sxeval.evaluation.special_forms import SPECIAL_FORMS, apply_special


def evaluate(env: Environment, expr: SExpression) -> SxValue:
    """Evaluate `expr` against `env`.

    Raises the first EvalError encountered. Only `def` mutates `env`.
    """
    match sx_kind(expr):
        case SxKind.NIL | SxKind.BOOLEAN | SxKind.INTEGER | SxKind.STRING | SxKind.PRIMITIVE:
            return expr

        case SxKind.QUOTE:
            return expr.inner

        case SxKind.SYMBOL:
            value = env.lookup(expr)
            if value is None:
                raise Undefined(expr)
            return value

        case SxKind.LIST:
            if not expr:
                return expr

            head, args = expr[0], expr[1:]
            if isinstance(head, Symbol):
                form = SPECIAL_FORMS.get(head)
                if form is not None:
                    return apply_special(head, form, env, args, evaluate)
                return apply(head, env, args, evaluate)
            raise Unknown(expr)


def try_evaluate(env: Environment, expr: SExpression) -> SxValue | EvalError:
    """Evaluate `expr`, returning the EvalError as a value instead of raising it."""
    try:
        return evaluate(env, expr)
    except EvalError as err:
        return err
