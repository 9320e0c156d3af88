"""Command line entry point: one-shot evaluation, script runner and REPL.

Exit codes: 0 on success; 1 when a one-shot expression or a script fails
(the error is printed to stderr). The interactive loop reports errors inline
and always exits 0.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from schemelet.config import get_log_level, get_prompt
from schemelet.errors import SchemeletError
from schemelet.interpreter import Interpreter
from schemelet.types.values import String, make_list

logger = logging.getLogger(__name__)

QUIT_COMMAND = "quit"


def run_repl(
    interp: Interpreter,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    """Read-eval-print until `quit` or end of input."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    prompt = get_prompt() if prompt is None else prompt
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line or line.strip() == QUIT_COMMAND:
            break
        if not line.strip():
            continue
        stdout.write(interp.eval_string(line) + "\n")


def run_one(interp: Interpreter, code: str) -> int:
    try:
        result = interp.eval(code)
    except SchemeletError as ex:
        logger.debug("expression failed", exc_info=True)
        print(ex, file=sys.stderr)
        return 1
    print(result)
    return 0


def run_file(interp: Interpreter, filename: str, script_args: Sequence[str]) -> int:
    interp.env.define("args", make_list(String(a) for a in script_args))
    try:
        interp.load(filename)
    except SchemeletError as ex:
        logger.debug("script %s failed", filename, exc_info=True)
        print(ex, file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="schemelet",
        description="Evaluate Schemelet expressions, run a script, or start a REPL",
    )
    parser.add_argument(
        "-e",
        "--eval",
        dest="expr",
        help="Evaluate EXPR, print the result and exit",
    )
    parser.add_argument(
        "--no-prelude",
        action="store_true",
        help="Start with the primitive table only, without the bootstrap library",
    )
    parser.add_argument("file", nargs="?", help="Script to evaluate")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments bound to `args`")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=get_log_level(),
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    try:
        interp = Interpreter(prelude=None if args.no_prelude else 'auto')
    except SchemeletError as ex:
        logging.error("could not load prelude: %s", ex)
        return 1

    if args.expr is not None:
        return run_one(interp, args.expr)
    if args.file is not None:
        return run_file(interp, args.file, args.args)
    run_repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
