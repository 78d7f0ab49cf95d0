from __future__ import annotations

from typing import Optional

from lumen import EvaluatorFn, LispValue, SExpression
from lumen.errors import LispSyntaxError
from lumen.types.bind import parse_arglist
from lumen.types.cons import list_to_vec
from lumen.types.environment import Environment
from lumen.types.procedure import Clause, Procedure


def parse_lambda_body(params: SExpression, body: list[SExpression]) -> tuple[Clause, Optional[str]]:
    """A clause for `params`/`body`, plus its docstring when the body starts with one."""
    doc = None
    if len(body) > 1 and isinstance(body[0], str):
        doc, body = body[0], body[1:]
    return (parse_arglist(params), list(body)), doc


def parse_lambda(
    params: SExpression, body: list[SExpression], env: Environment, name: Optional[str] = None
) -> Procedure:
    clause, doc = parse_lambda_body(params, body)
    return Procedure(env, [clause], name, doc)


def lambda_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (lambda (a b) body...)
    (lambda (a . rest) body...)
    (lambda args body...)
    """
    if not tail:
        raise LispSyntaxError("lambda must at least have arg-list")
    return parse_lambda(tail[0], tail[1:], env)


def case_lambda_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (case-lambda ((a) body...) ((a b . rest) body...) ...)
    Clauses are tried in order at call time.
    """
    clauses: list[Clause] = []
    for clause in tail:
        parts = list_to_vec(clause)
        if not parts:
            raise LispSyntaxError(f"malformed case-lambda clause: {clause!r}")
        clauses.append((parse_arglist(parts[0]), parts[1:]))
    if not clauses:
        raise LispSyntaxError("(case-lambda) must contain at least one clause")
    return Procedure(env, clauses)
