import pytest
from hypothesis import given, strategies as st

from sxeval.types.environment import Environment
from sxeval.types.nil import Nil
from sxeval.types.symbol import Symbol
from sxeval.types.values import Primitive
from sxeval.types.errors import BadArg, PrimitiveBadArg, PrimitiveTooFewArgs
from sxeval.builtin.env_builtin import register, PRIMITIVES
from sxeval.evaluation.evaluator import evaluate, try_evaluate
from tests.helpers import rendered


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+)", "0"),
        ("(+ 1)", "1"),
        ("(+ 0 0)", "0"),
        ("(+ -1 1)", "0"),
        ("(+ 1 1)", "2"),
        ("(+ 999 1)", "1000"),
        ("(+ (+ 1 1) (+ 1 1))", "4"),
        ("(+ 1 2 3)", "6"),
        ("(+ 1 2 (+ 1 2) 4)", "10"),
        ("(- 5)", "-5"),
        ("(- 10 3 2)", "5"),
        ("(*)", "1"),
        ("(* 2 3 4)", "24"),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
        ("(= 1 1 1)", "true"),
        ("(= 1 2)", "false"),
        ("(< 1 2 3)", "true"),
        ("(< 1 3 2)", "false"),
        ("(list)", "()"),
        ("(list 1 \"two\" 'three)", "(1 \"two\" three)"),
        ("(first '(1 2 3))", "1"),
        ("(first '())", "nil"),
        ("(rest '(1 2 3))", "(2 3)"),
        ("(rest '())", "()"),
        ("(cons 0 '(1 2))", "(0 1 2)"),
        ("(nil? nil)", "true"),
        ("(nil? '())", "false"),
    ],
)
def test_primitive_application(eval_rendered, source, expected):
    assert eval_rendered(source) == rendered(expected)


def test_primitive_plus_session(eval_rendered):
    assert eval_rendered(
        """
        (def x 40)
        (+ x 2)
        """
    ) == ["x", "42"]


@given(st.lists(st.integers(), max_size=10))
def test_plus_sums_integers(nums):
    env = register(Environment())
    assert evaluate(env, (Symbol("+"), *nums)) == sum(nums)


@pytest.mark.parametrize(
    "source,name,minimum,actual",
    [
        ("(-)", "-", 1, 0),
        ("(=)", "=", 1, 0),
        ("(first)", "first", 1, 0),
        ("(cons 1)", "cons", 2, 1),
    ],
)
def test_primitive_too_few_args(eval_results, source, name, minimum, actual):
    assert eval_results(source) == [PrimitiveTooFewArgs(name, minimum, actual)]


@pytest.mark.parametrize(
    "source",
    ['(+ 1 "two")', "(+ true 1)", "(* 'a)", "(- nil)", "(first 1)", "(rest \"abc\")", "(cons 1 2)"],
)
def test_bad_arg_carries_call_site_head(eval_results, source):
    [result] = eval_results(source)
    assert isinstance(result, BadArg)
    assert result.expression == Symbol(source[1:].split()[0].rstrip(")"))


def test_bad_arg_from_nested_call(eval_results):
    assert eval_results('(+ 1 (* 2 "x"))') == [BadArg(Symbol("*"))]


def test_minimum_arity_is_a_floor(env):
    env.define(Symbol("count"), Primitive("count", 2, lambda args: len(args)))
    assert evaluate(env, (Symbol("count"), 1, 2, 3, 4)) == 4
    assert try_evaluate(env, (Symbol("count"), 1)) == PrimitiveTooFewArgs("count", 2, 1)


def test_arity_checked_after_arguments_evaluated(env):
    env.define(Symbol("pair"), Primitive("pair", 2, tuple))
    result = try_evaluate(env, (Symbol("pair"), Symbol("missing")))
    assert result.symbol == Symbol("missing")


def test_primitive_bound_under_other_name(env):
    # the error carries the head as written, not the primitive's own name
    env.define(Symbol("plus"), env.lookup(Symbol("+")))
    assert evaluate(env, (Symbol("plus"), 1, 2)) == 3
    assert try_evaluate(env, (Symbol("plus"), "a")) == BadArg(Symbol("plus"))


def test_new_primitive_needs_no_evaluator_change(env):
    def shout(args):
        if not isinstance(args[0], str):
            raise PrimitiveBadArg("shout expects a string")
        return args[0].upper() + "!"

    register(env, [Primitive("shout", 1, shout)])
    assert evaluate(env, (Symbol("shout"), "hi")) == "HI!"
    assert try_evaluate(env, (Symbol("shout"), 1)) == BadArg(Symbol("shout"))


def test_other_callback_exceptions_propagate(env):
    def boom(args):
        raise ZeroDivisionError("boom")

    env.define(Symbol("boom"), Primitive("boom", 0, boom))
    with pytest.raises(ZeroDivisionError):
        try_evaluate(env, (Symbol("boom"),))


def test_registry_names():
    assert [p.name for p in PRIMITIVES] == [
        "+", "-", "*", "=", "<", "list", "first", "rest", "cons", "nil?",
    ]


def test_register_returns_env():
    env = Environment()
    assert register(env) is env
    assert isinstance(env.lookup(Symbol("+")), Primitive)
    assert env.lookup(Symbol("nil?")).min_arity == 1
    assert env.lookup(Symbol("missing")) is None
    assert Nil not in env
