"""Macro expansion.

A macro is a Procedure registered with `define-macro` in an environment's
macro table. Expansion applies it to the *unevaluated* argument list through
the same `lambda_apply` used for ordinary calls; the result replaces the
original form.
"""

from __future__ import annotations

import logging
from typing import Optional

from lumen import EvaluatorFn, SExpression
from lumen.errors import LispError, LispMacroError
from lumen.types.cons import Cons
from lumen.types.environment import Environment
from lumen.types.symbol import Symbol

logger = logging.getLogger(__name__)


def try_macro_expand(
    name: Symbol, args: SExpression, env: Environment, evaluate_fn: EvaluatorFn
) -> Optional[SExpression]:
    """Expansion of `(name . args)`, or None when `name` is not a macro."""
    macro = env.lookup_macro(name)
    if macro is None:
        return None
    from lumen.evaluation.apply import lambda_apply

    logger.debug("expanding macro %s", name)
    try:
        return lambda_apply(macro, args, evaluate_fn)
    except LispError as err:
        raise LispMacroError(f"error in expansion of macro {name}", cause=err) from err


def macro_expand_once(form: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Expand `form` one step if it is a macro call, else return it unchanged."""
    if isinstance(form, Cons) and isinstance(form.car, Symbol):
        expanded = try_macro_expand(form.car, form.cdr, env, evaluate_fn)
        if expanded is not None:
            return expanded
    return form
