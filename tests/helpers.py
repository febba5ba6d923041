"""Shared helpers for building expected results."""

from sxeval.reader.parser import read_all
from sxeval.printer import render


def rendered(source):
    """Canonical text of each form in `source`, for expected-output tables."""
    return [render(expr) for expr in read_all(source)]
