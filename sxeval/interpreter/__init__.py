from __future__ import annotations

import logging
import sys
from typing import Literal

from sxeval import SExpression, SxValue
from sxeval import config
from sxeval.reader.parser import lex, TokenStream
from sxeval.types.nil import Nil
from sxeval.types.environment import Environment
from sxeval.types.errors import EvalError, NestingTooDeep
from sxeval.builtin.env_builtin import register
from sxeval.evaluation.evaluator import evaluate, try_evaluate

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating sxeval source text.
    Maintains one Environment across calls, with the primitives pre-registered.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        limit = config.get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            logger.debug("raising recursion limit to %d", limit)
            sys.setrecursionlimit(limit)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = config.get_prelude_path()
            if path is not None:
                logger.info("loading prelude from %s", path)
                self.eval_prelude(path.read_text(encoding="utf-8"))
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        stream = TokenStream(lex(code))
        while (expr := stream.parse_expr()) is not None:
            evaluate(self.env, expr)

    def eval(self, code: str) -> SxValue:
        """Evaluate every form in `code`, returning the last value (nil if none).

        Raises the first EvalError; forms after it are not evaluated.
        """
        stream = TokenStream(lex(code))
        result: SxValue = Nil
        while (expr := stream.parse_expr()) is not None:
            result = evaluate(self.env, expr)
        return result

    def eval_all(self, code: str) -> list[SxValue | EvalError]:
        """Evaluate every form in `code`, one result or error per form.

        The whole of `code` is read before anything is evaluated. An error,
        including a form too deep for the host stack, does not stop later
        forms, as in an interactive session.
        """
        exprs = list(TokenStream(lex(code)).parse_all())
        return [self._try_form(expr) for expr in exprs]

    def _try_form(self, expr: SExpression) -> SxValue | EvalError:
        try:
            return try_evaluate(self.env, expr)
        except RecursionError:
            logger.debug("form exceeded the recursion limit")
            return NestingTooDeep()
