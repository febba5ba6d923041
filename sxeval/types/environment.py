"""Runtime environment for sxeval.

The Environment is a single flat table of Symbol bindings, live for a whole
session. It has no parent frames and no removal or rebind operation; the
write-once discipline for user definitions is enforced by the `def` special
form, not here.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping, Optional

from sxeval import SxValue
from sxeval.types.errors import SxInvalidSymbol
from sxeval.types.symbol import Symbol


class Environment:
    """Mapping from Symbols to evaluated values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[Symbol, SxValue] = {}

    def define(self, name: Symbol, value: SxValue) -> None:
        """Bind `name` to `value` unconditionally.

        Raises SxInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SxInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def lookup(self, name: Symbol) -> Optional[SxValue]:
        """Return the value bound to `name`, or None if it is unbound."""
        return self.vars.get(name)

    def update(self, mapping: Mapping[Symbol, SxValue]) -> None:
        """Bulk-define a mapping of Symbol -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def symbols(self) -> list[Symbol]:
        return sorted(self.vars, key=str)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for k, v in self.vars.items():
                if not first:
                    buffer.write(", ")
                buffer.write(f"{k}: {v!r}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} binding(s)>"
