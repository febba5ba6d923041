"""Error taxonomy for sxeval.

Evaluation errors are exceptions that double as values: each carries the
payload that identifies it and compares equal to another error of the same
class with an equal payload, so callers may collect them like results.
"""

from __future__ import annotations

from sxeval.types.values import sx_equal


class SxError(Exception):
    """ Base class for all sxeval errors"""
    pass


class SxSyntaxError(SxError):
    """ Raised by the reader when source text is malformed"""

    def __init__(self, message: str, position: int | None = None):
        if position is not None:
            message = f"{message} at {position}"
        super().__init__(message)
        self.position = position


class PrimitiveBadArg(SxError):
    """ Raised by a primitive callback to reject its evaluated arguments"""


class SxInvalidSymbol(SxError):
    """ Raised when a binding name is not a Symbol"""


class EvalError(SxError):
    """Base class for evaluation errors.

    Subclasses name their payload fields in `fields`; equality and hashing
    are derived from the class and those fields.
    """

    fields: tuple[str, ...] = ()

    def __init__(self, *payload):
        if len(payload) != len(self.fields):
            raise TypeError(
                f"{type(self).__name__} expects {len(self.fields)} field(s), got {len(payload)}"
            )
        super().__init__(*payload)
        for name, value in zip(self.fields, payload):
            setattr(self, name, value)

    @property
    def payload(self) -> tuple:
        return tuple(getattr(self, name) for name in self.fields)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return all(sx_equal(a, b) for a, b in zip(self.payload, other.payload))

    def __hash__(self) -> int:
        return hash((type(self), repr(self.payload)))

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(p) for p in self.payload)})"

    def __str__(self):
        return self.describe()

    def describe(self) -> str:
        return repr(self)


class Undefined(EvalError):
    """ Symbol has no binding"""
    fields = ("symbol",)

    def describe(self) -> str:
        return f"undefined symbol: {self.symbol}"


class Redefine(EvalError):
    """ def targeted an already-bound symbol"""
    fields = ("symbol",)

    def describe(self) -> str:
        return f"cannot redefine symbol: {self.symbol}"


class SpecialTooFewArgs(EvalError):
    """ Special form called with fewer arguments than it takes"""
    fields = ("symbol",)

    def describe(self) -> str:
        return f"too few arguments to special form: {self.symbol}"


class SpecialTooManyArgs(EvalError):
    """ Special form called with more arguments than it takes"""
    fields = ("symbol",)

    def describe(self) -> str:
        return f"too many arguments to special form: {self.symbol}"


class DefineBadSymbol(EvalError):
    """ First argument of def is not a symbol"""
    fields = ("expression",)

    def describe(self) -> str:
        from sxeval.printer import render
        return f"def expects a symbol, got: {render(self.expression)}"


class BadArg(EvalError):
    """ A primitive rejected its evaluated arguments"""
    fields = ("expression",)

    def describe(self) -> str:
        from sxeval.printer import render
        return f"bad argument in call to: {render(self.expression)}"


class NotAFunction(EvalError):
    """ Function position evaluated to something that cannot be applied"""
    fields = ("expression",)

    def describe(self) -> str:
        from sxeval.printer import render
        return f"not a function: {render(self.expression)}"


class PrimitiveTooFewArgs(EvalError):
    """ Primitive invoked below its minimum arity"""
    fields = ("name", "minimum", "actual")

    def describe(self) -> str:
        return f"{self.name} expects at least {self.minimum} argument(s), got {self.actual}"


class Unknown(EvalError):
    """ A list form matching none of the recognised shapes"""
    fields = ("expression",)

    def describe(self) -> str:
        from sxeval.printer import render
        return f"cannot evaluate form: {render(self.expression)}"


class NestingTooDeep(EvalError):
    """ A form nested deeper than the host call stack allows"""

    def describe(self) -> str:
        return "expression nested too deeply"
