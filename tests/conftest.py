import pytest

from sxeval.types.environment import Environment
from sxeval.builtin.env_builtin import register
from sxeval.reader.parser import read_all
from sxeval.evaluation.evaluator import try_evaluate
from sxeval.printer import render


@pytest.fixture
def env():
    """Fresh environment with the primitives registered."""
    return register(Environment())


@pytest.fixture
def eval_results(env):
    """Evaluate each top-level form of a source string in one environment,
    collecting a value or an EvalError per form."""
    def _eval_results(source):
        return [try_evaluate(env, expr) for expr in read_all(source)]
    return _eval_results


@pytest.fixture
def eval_rendered(eval_results):
    """Like eval_results, but renders every result to canonical text."""
    def _eval_rendered(source):
        return [render(result) for result in eval_results(source)]
    return _eval_rendered
