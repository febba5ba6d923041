"""Canonical text rendering of sxeval values.

`render` is the inverse of the reader for every readable value:
read(render(v)) == v. Primitives have no readable syntax and render as
#<primitive NAME>.
"""

from __future__ import annotations

from sxeval import SxValue
from sxeval.types.errors import EvalError
from sxeval.types.values import SxKind, sx_kind

STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def render_string(text: str) -> str:
    return '"' + "".join(STRING_ESCAPES.get(ch, ch) for ch in text) + '"'


def render(value: SxValue) -> str:
    match sx_kind(value):
        case SxKind.NIL:
            return "nil"
        case SxKind.BOOLEAN:
            return "true" if value else "false"
        case SxKind.INTEGER:
            return str(value)
        case SxKind.STRING:
            return render_string(value)
        case SxKind.SYMBOL:
            return str(value)
        case SxKind.LIST:
            return "(" + " ".join(render(item) for item in value) + ")"
        case SxKind.QUOTE:
            return "'" + render(value.inner)
        case SxKind.PRIMITIVE:
            return f"#<primitive {value.name}>"


def render_error(err: EvalError) -> str:
    """One-line description of an evaluation error."""
    return err.describe()
