"""Command-line driver: `python -m sxeval [FILE ...]`.

With files, evaluates each in turn and prints every result. Without, runs a
line-oriented read-eval-print loop on stdin.
"""

from __future__ import annotations

import logging
import sys

from sxeval import config
from sxeval.interpreter import Interpreter
from sxeval.printer import render, render_error
from sxeval.types.errors import EvalError, NestingTooDeep, SxSyntaxError

logger = logging.getLogger("sxeval")

PROMPT = "sx> "


def run_source(interp: Interpreter, source: str, out=None) -> bool:
    """Evaluate `source` form by form, printing results. Returns False on any error."""
    ok = True
    try:
        results = interp.eval_all(source)
    except SxSyntaxError as err:
        print(f"error: {err}", file=out)
        return False
    for result in results:
        if not isinstance(result, EvalError):
            try:
                print(render(result), file=out)
                continue
            except RecursionError:
                result = NestingTooDeep()
        logger.info("evaluation failed: %r", result)
        print(f"error: {render_error(result)}", file=out)
        ok = False
    return ok


def repl(interp: Interpreter) -> None:
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return
        if line.strip():
            run_source(interp, line)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=config.get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    interp = Interpreter()
    logger.debug("session started with %d bindings", len(interp.env))
    if not argv:
        repl(interp)
        return 0

    ok = True
    for path in argv:
        try:
            with open(path, encoding="utf-8") as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as err:
            logger.info("cannot read %s: %s", path, err)
            reason = getattr(err, "strerror", None) or err
            print(f"error: cannot read {path}: {reason}")
            ok = False
            continue
        ok = run_source(interp, source) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
