from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal, Optional, Union

from lumen import LispValue, SExpression
from lumen.builtin import default_environment
from lumen.builtin.io_builtin import load_path
from lumen.config import get_prelude_path, get_recursion_limit
from lumen.evaluation.evaluator import evaluate
from lumen.reader.reader import char_handler_for, iter_forms, read_string
from lumen.types.environment import Environment
from lumen.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates lumen code against one top-level Environment that
    persists across calls.

    prelude: 'auto' loads the configured prelude file if it exists, None skips
    it, and any other string is evaluated as prelude source.
    """

    def __init__(
        self,
        env: Optional[Environment] = None,
        prelude: Union[str, None, Literal['auto']] = 'auto',
    ):
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

        self.env: Environment = env if env is not None else default_environment()

        if prelude is None:
            pass
        elif prelude == 'auto':
            path = get_prelude_path()
            if path.is_file():
                logger.info("loading prelude %s", path)
                self.load_file(path)
            else:
                logger.info("no prelude at %s", path)
        elif prelude:
            self.eval_prelude(prelude)

    def read(self, code: str, source_name: str = "<string>") -> list[SExpression]:
        return read_string(code, self.env, source_name)

    def handle_char(self, ch: str, datum: SExpression) -> SExpression:
        """Apply the reader handler registered for special character `ch` to `datum`."""
        return char_handler_for(self.env)(ch, datum)

    def eval_prelude(self, code: str) -> None:
        for expr in iter_forms(code, self.env, "<prelude>"):
            evaluate(expr, self.env)

    def eval(self, code: str, source_name: str = "<string>") -> LispValue:
        """Evaluate every form in `code`; returns the last value (nil when there is none)."""
        result: LispValue = Nil
        for expr in iter_forms(code, self.env, source_name):
            result = evaluate(expr, self.env)
        return result

    def eval_all(self, code: str, source_name: str = "<string>") -> list[LispValue]:
        return [evaluate(expr, self.env) for expr in iter_forms(code, self.env, source_name)]

    def load_file(self, path: Union[str, Path]) -> LispValue:
        return load_path(path, self.env)
