from __future__ import annotations

from lumen import LispValue, SExpression
from lumen.errors import LispArityError, LispSyntaxError
from lumen.types.cons import Cons, list_length
from lumen.types.environment import Environment
from lumen.types.nil import Nil
from lumen.types.procedure import ArityDescriptor, Clause
from lumen.types.symbol import Symbol


def parse_arglist(params: SExpression) -> ArityDescriptor:
    """
    Build an ArityDescriptor from a lambda list.

    Accepts a proper list `(a b)`, a dotted list `(a b . rest)`, a bare symbol
    `args` (everything goes to the rest parameter), or Nil.
    """
    required: list[Symbol] = []
    while isinstance(params, Cons):
        if not isinstance(params.car, Symbol):
            raise LispSyntaxError(f"parameter names must be symbols, got {params.car!r}")
        required.append(params.car)
        params = params.cdr
    if params is Nil:
        return ArityDescriptor(required)
    if isinstance(params, Symbol):
        return ArityDescriptor(required, params)
    raise LispSyntaxError(f"malformed parameter list, unexpected {params!r}")


def bind_arguments(arity: ArityDescriptor, args: LispValue, frame: Environment) -> Environment:
    """
    Clear `frame` and bind `args` (a Lisp list) against `arity`.

    Positional names take successive cars; a rest name takes whatever tail is
    left. Without a rest name the tail must be exactly Nil.
    """
    frame.clear()
    for name in arity.required:
        if not isinstance(args, Cons):
            raise LispArityError(
                f"Too few args: expected {len(arity.required)}, missing {name}"
            )
        frame.vars[name] = args.car
        args = args.cdr
    if arity.rest is not None:
        frame.vars[arity.rest] = args
    elif args is not Nil:
        raise LispArityError(f"Extra args: {args!r}")
    return frame


def select_clause(clauses: list[Clause], args: LispValue) -> Clause:
    """First clause whose arity accepts `args`; the last clause otherwise."""
    n = list_length(args)
    if n is not None:
        for clause in clauses[:-1]:
            if clause[0].accepts(n):
                return clause
    return clauses[-1]
