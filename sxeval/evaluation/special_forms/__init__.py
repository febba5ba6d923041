"""Registry of special forms for the sxeval evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules,
together with the exact number of argument expressions each form takes. The
evaluator consults this table before ordinary function application; handlers
receive the unevaluated argument expressions and decide what to evaluate.
"""

from typing import Callable, NamedTuple

from sxeval import SExpression, SxValue, EvaluatorFn
from sxeval.types.environment import Environment
from sxeval.types.errors import SpecialTooFewArgs, SpecialTooManyArgs
from sxeval.types.symbol import Symbol
from sxeval.evaluation.special_forms.define_form import define_form
from sxeval.evaluation.special_forms.if_form import if_form
from sxeval.evaluation.special_forms.quote_forms import quote_form


SpecialFormFn = Callable[[tuple[SExpression, ...], Environment, EvaluatorFn], SxValue]


class SpecialForm(NamedTuple):
    handler: SpecialFormFn
    arity: int


SPECIAL_FORMS: dict[Symbol, SpecialForm] = {
    Symbol("def"): SpecialForm(define_form, 2),
    Symbol("if"): SpecialForm(if_form, 3),
    Symbol("quote"): SpecialForm(quote_form, 1),
}


def apply_special(
    symbol: Symbol,
    form: SpecialForm,
    env: Environment,
    args: tuple[SExpression, ...],
    evaluate_fn: EvaluatorFn,
) -> SxValue:
    """Check the exact arity of a special form, then run its handler."""
    if len(args) < form.arity:
        raise SpecialTooFewArgs(symbol)
    if len(args) > form.arity:
        raise SpecialTooManyArgs(symbol)
    return form.handler(args, env, evaluate_fn)
