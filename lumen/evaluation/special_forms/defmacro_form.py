"""Special form: define-macro.

(define-macro (name . params) body...)

Registers a macro transformer in the top-level macro table. The transformer
is an ordinary procedure; it receives its arguments unevaluated.
"""

from __future__ import annotations

import logging

from lumen import EvaluatorFn, LispValue, SExpression
from lumen.errors import LispRedefineError, LispSyntaxError
from lumen.evaluation.special_forms.define_form import redefine_allowed
from lumen.evaluation.special_forms.lambda_form import parse_lambda
from lumen.types.cons import Cons, to_lisp_list
from lumen.types.environment import Environment
from lumen.types.symbol import Symbol

logger = logging.getLogger(__name__)


def defmacro_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) < 2:
        raise LispSyntaxError(f"not enough arguments to define-macro: {to_lisp_list(tail)!r}")

    signature = tail[0]
    if not isinstance(signature, Cons) or not isinstance(signature.car, Symbol):
        raise LispSyntaxError(f"invalid macro definition: {to_lisp_list(tail)!r}")

    name = signature.car
    transformer = parse_lambda(signature.cdr, tail[1:], env, str(name))
    allowed = redefine_allowed(env)
    top = env.root
    previous = top.define_macro(name, transformer)
    if previous is not None:
        if not allowed:
            top.define_macro(name, previous)
            raise LispRedefineError(f"macro {name} is already bound")
        logger.warning("redefining macro %s", name)
    return name
