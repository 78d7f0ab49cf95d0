"""Reading source text against an environment's reader-character table."""

from __future__ import annotations

import logging
from typing import Iterator

from lumen import SExpression
from lumen.errors import LispReadError
from lumen.evaluation.evaluator import apply
from lumen.reader.parser import CharHandler, read_all, read_forms
from lumen.types.cons import Cons
from lumen.types.environment import Environment
from lumen.types.nil import Nil

logger = logging.getLogger(__name__)


def char_handler_for(env: Environment) -> CharHandler:
    """A `char_handler` for the Parser that dispatches through `env`."""

    def handle_char(ch: str, datum: SExpression) -> SExpression:
        handler = env.lookup_char_handler(ch)
        if handler is None:
            raise LispReadError(f"no handler for special character {ch}")
        logger.debug("reader character %s", ch)
        return apply(handler, Cons(datum, Nil), env)

    return handle_char


def read_string(source: str, env: Environment, source_name: str = "<string>") -> list[SExpression]:
    return read_all(source, source_name, char_handler_for(env))


def iter_forms(source: str, env: Environment, source_name: str = "<string>") -> Iterator[SExpression]:
    """Like read_string, but each form is read only when the previous one has been consumed."""
    return read_forms(source, source_name, char_handler_for(env))
