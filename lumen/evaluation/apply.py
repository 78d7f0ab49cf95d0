"""Procedure application.

Binds arguments against the first matching clause, evaluates the body up to
its tail expression and then loops while that tail is a call back into the
same procedure (recognised by procedure id, so renamed copies count). Each
turn re-binds the call frame in place when nothing else holds it, otherwise a
fresh frame is allocated. Any other tail expression is handed to the
evaluator normally.
"""

from __future__ import annotations

import logging
from typing import Optional

from lumen import EvaluatorFn, LispValue, SExpression
from lumen.errors import LispSyntaxError
from lumen.evaluation.special_forms import SPECIAL_FORMS
from lumen.evaluation.tco import BEGIN, until_last
from lumen.types.bind import bind_arguments, select_clause
from lumen.types.cons import Cons, to_lisp_list
from lumen.types.environment import Environment
from lumen.types.nil import Nil
from lumen.types.procedure import Procedure
from lumen.types.symbol import Symbol

logger = logging.getLogger(__name__)


def start_procedure(
    proc: Procedure, args: LispValue, frame: Optional[Environment] = None
) -> tuple[Environment, list[SExpression]]:
    """Bind `args` for `proc`, reusing `frame` when one is given."""
    arity, body = select_clause(proc.clauses, args)
    if frame is None:
        frame = proc.env.child()
    bind_arguments(arity, args, frame)
    return frame, body


def lambda_apply_until_last(
    proc: Procedure, args: LispValue, evaluate_fn: EvaluatorFn, frame: Optional[Environment] = None
) -> tuple[Environment, Environment, SExpression]:
    frame, body = start_procedure(proc, args, frame)
    env, last = until_last(BEGIN, body, frame, evaluate_fn)
    return frame, env, last


def lambda_apply(proc: Procedure, args: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    frame, env, last = lambda_apply_until_last(proc, args, evaluate_fn)
    while True:
        if not isinstance(last, Cons) or not isinstance(last.car, Symbol) or last.car in SPECIAL_FORMS:
            return evaluate_fn(last, env)
        callee = env.lookup(last.car)
        if not isinstance(callee, Procedure) or callee.id != proc.id:
            return evaluate_fn(last, env)

        new_args = _eval_args(last.cdr, env, evaluate_fn)
        if frame.is_shared:
            logger.debug("self tail call in %r: allocating a fresh frame", proc)
            reuse = None
        else:
            reuse = frame
        frame, env, last = lambda_apply_until_last(proc, new_args, evaluate_fn, reuse)


def _eval_args(args: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    values = []
    rest = args
    while isinstance(rest, Cons):
        values.append(evaluate_fn(rest.car, env))
        rest = rest.cdr
    if rest is not Nil:
        raise LispSyntaxError(f"not a proper list: {args!r}")
    return to_lisp_list(values)
