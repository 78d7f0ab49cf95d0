"""
Command-line interface: run lumen source files or start a REPL.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from lumen import __version__
from lumen.config import get_log_level
from lumen.errors import LispError, LispIncompleteInput
from lumen.evaluation.evaluator import evaluate
from lumen.interpreter import Interpreter
from lumen.types.nil import Nil
from lumen.types.values import lisp_str

logger = logging.getLogger(__name__)

PROMPT = "lumen> "
CONTINUATION_PROMPT = "...    "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lumen",
        description="Evaluate lumen Lisp source files, or start a REPL when none are given",
    )
    parser.add_argument("files", nargs="*", help="Source files, evaluated in order")
    parser.add_argument("-e", "--eval", dest="expr", action="append", default=[],
                        help="Evaluate an expression and print its value (repeatable)")
    parser.add_argument("--no-prelude", action="store_true",
                        help="Do not load the prelude")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="More logging (-v info, -vv debug)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, get_log_level(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run_files(interp: Interpreter, files: list[str]) -> int:
    for path in files:
        try:
            interp.load_file(path)
        except LispError as err:
            err.dump_traceback()
            return 1
    return 0


def run_exprs(interp: Interpreter, exprs: list[str]) -> int:
    for code in exprs:
        try:
            print(lisp_str(interp.eval(code, "<eval>")))
        except LispError as err:
            err.dump_traceback()
            return 1
    return 0


def repl(interp: Interpreter) -> int:
    buffer: list[str] = []
    while True:
        try:
            line = input(CONTINUATION_PROMPT if buffer else PROMPT)
        except EOFError:
            print()
            return 0
        except KeyboardInterrupt:
            print()
            buffer.clear()
            continue

        buffer.append(line)
        source = "\n".join(buffer)
        try:
            forms = interp.read(source, "<repl>")
        except LispIncompleteInput:
            continue
        except LispError as err:
            err.dump_traceback()
            buffer.clear()
            continue
        buffer.clear()

        for form in forms:
            try:
                value = evaluate(form, interp.env)
            except LispError as err:
                err.dump_traceback()
                break
            if value is not Nil:
                print(lisp_str(value))


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        interp = Interpreter(prelude=None if args.no_prelude else 'auto')
    except LispError as err:
        logger.error("failed to load the prelude")
        err.dump_traceback()
        return 1

    if args.files:
        status = run_files(interp, args.files)
        if status:
            return status
    if args.expr:
        status = run_exprs(interp, args.expr)
        if status:
            return status
    if not args.files and not args.expr:
        return repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
