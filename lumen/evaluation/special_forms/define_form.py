from __future__ import annotations

import logging

from lumen import EvaluatorFn, LispValue, SExpression
from lumen.errors import LispRedefineError, LispSyntaxError
from lumen.evaluation.special_forms.lambda_form import parse_lambda
from lumen.types.cons import Cons, to_lisp_list
from lumen.types.environment import Environment
from lumen.types.procedure import Procedure
from lumen.types.symbol import Symbol
from lumen.types.values import truthy

logger = logging.getLogger(__name__)

ALLOW_REDEFINE = Symbol("*allow-redefine*")


def redefine_allowed(env: Environment) -> bool:
    flag = env.lookup(ALLOW_REDEFINE)
    return flag is not None and truthy(flag)


def define_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (define name value)
    (define (name . params) body...)

    Always binds in the top-level frame and returns the symbol. Rebinding an
    existing name is a redefine-error (the old value stays) unless
    *allow-redefine* is truthy.
    """
    if len(tail) < 2:
        raise LispSyntaxError(f"not enough arguments to define: {to_lisp_list(tail)!r}")

    target = tail[0]
    if isinstance(target, Symbol) and len(tail) == 2:
        name = target
        value = evaluate_fn(tail[1], env)
        if isinstance(value, Procedure):
            value = value.with_name(str(name))
    elif isinstance(target, Cons) and isinstance(target.car, Symbol):
        name = target.car
        value = parse_lambda(target.cdr, tail[1:], env, str(name))
    else:
        raise LispSyntaxError(f"invalid arguments to define: {to_lisp_list(tail)!r}")

    allowed = redefine_allowed(env)
    top = env.root
    previous = top.define(name, value)
    if previous is not None:
        if not allowed:
            top.define(name, previous)
            raise LispRedefineError(f"symbol {name} is already bound")
        logger.warning("redefining %s", name)
    return name
