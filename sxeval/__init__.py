# Core type aliases for the sxeval data model.
# Values are plain Python objects wherever one fits the closed set of
# expression variants (bool, int, str, tuple), plus a handful of small
# classes for the rest (Nil, Symbol, Quote, Primitive). See sxeval.types.values.
#
# Naming guidance:
# - SExpression: Use in reader/printer code to denote syntactic forms.
# - SxValue:     Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable; code and data share
# one representation.

from typing import Any, Callable, Sequence

# Runtime value alias
SxValue = Any
# Forms alias (code-as-data, same representation as values)
SExpression = SxValue

# Evaluator function type used by special forms to recurse
EvaluatorFn = Callable[..., SxValue]

# Primitive callback type: receives the evaluated argument sequence
PrimitiveFn = Callable[[Sequence[SxValue]], SxValue]

__version__ = "0.3.0"
