from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from lumen import LispValue
from lumen.builtin.args import expect, unpack
from lumen.config import get_load_path
from lumen.errors import LispIOError
from lumen.evaluation.evaluator import evaluate
from lumen.reader.reader import iter_forms
from lumen.types.environment import Environment
from lumen.types.native import native_table
from lumen.types.nil import Nil
from lumen.types.values import is_string, lisp_display

logger = logging.getLogger(__name__)


def resolve_path(path: Union[str, Path]) -> Path:
    """`path` itself if it exists (or is absolute), else the first hit on the load path."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    for directory in get_load_path():
        candidate = directory / p
        if candidate.exists():
            return candidate
    return p


def load_path(path: Union[str, Path], env: Environment) -> LispValue:
    """Evaluate a file form by form in the top-level frame; returns the last value."""
    resolved = resolve_path(path)
    try:
        source = resolved.read_text(encoding="utf-8")
    except OSError as err:
        raise LispIOError(f"cannot open file: {path}: {err.strerror or err}") from err

    logger.info("loading %s", resolved)
    top = env.root
    out: LispValue = Nil
    for form in iter_forms(source, top, str(resolved)):
        out = evaluate(form, top)
    return out


def load_file(env: Environment, args: list[LispValue]) -> LispValue:
    """(load-file "path") evaluate a source file at the top level, returning its last value"""
    path = expect(unpack(args, 1)[0], is_string, "string")
    return load_path(path, env)


def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(print x...) write the arguments separated by spaces, then a newline"""
    print(" ".join(lisp_display(a) for a in args))
    return Nil


def register(env: Environment) -> None:
    env.update(
        native_table(
            {
                "print": print_builtin,
                "load-file": load_file,
            }
        )
    )
