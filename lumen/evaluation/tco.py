"""Evaluation "until last" for the tail-call trampoline.

`begin`, `if` and `let` are evaluated up to, but not including, the
expression in tail position. The caller gets back `(env, last_expr)` and can
decide how to finish: the evaluator loop adopts it as its next expression,
and procedure application checks it for a call back into the same procedure.
Tail expressions that are themselves one of those forms (or a macro call) are
unwrapped in a loop rather than by recursion.
"""

from __future__ import annotations

from typing import Callable

from lumen import EvaluatorFn, LispValue, SExpression
from lumen.errors import LispSyntaxError
from lumen.evaluation.macros import try_macro_expand
from lumen.types.bind import parse_arglist
from lumen.types.cons import Cons, list_to_vec, to_lisp_list
from lumen.types.environment import Environment
from lumen.types.nil import Nil
from lumen.types.procedure import Procedure
from lumen.types.symbol import Symbol
from lumen.types.values import truthy

BEGIN = Symbol("begin")
IF = Symbol("if")
LET = Symbol("let")
QUOTE = Symbol("quote")

UntilLast = tuple[Environment, SExpression]


def flatten_form(name: Symbol, args: SExpression) -> list[SExpression]:
    out = list_to_vec(args)
    if out is None:
        raise LispSyntaxError(f"({name}) invalid syntax (ill-formed arg list): {args!r}")
    return out


def begin_until_last(args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> UntilLast:
    if not args:
        return env, Nil
    for expr in args[:-1]:
        evaluate_fn(expr, env)
    return env, args[-1]


def if_until_last(args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> UntilLast:
    if len(args) not in (2, 3):
        raise LispSyntaxError(f"wrong number of arguments to if: {to_lisp_list(args)!r}")
    if truthy(evaluate_fn(args[0], env)):
        return env, args[1]
    return env, args[2] if len(args) == 3 else Nil


def let_until_last(args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> UntilLast:
    """
    (let ((name value) ...) body...)
    (let loop ((name value) ...) body...)

    Bindings are evaluated one after another in the new frame, so later values
    can see earlier names. The new frame is returned as the active environment.
    """
    if not args:
        raise LispSyntaxError("let must have bindings")
    if isinstance(args[0], Symbol):
        return _named_let(args, env, evaluate_fn)

    frame = env.child()
    for name, expr in _parse_bindings(args[0]):
        frame.define(name, _named(name, evaluate_fn(expr, frame)))
    return begin_until_last(args[1:], frame, evaluate_fn)


def _named_let(args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> UntilLast:
    if len(args) < 2:
        raise LispSyntaxError(f"named let needs bindings: {to_lisp_list(args)!r}")
    name, bindings, body = args[0], _parse_bindings(args[1]), args[2:]
    values = [evaluate_fn(expr, env) for _, expr in bindings]

    frame = env.child()
    arity = parse_arglist(to_lisp_list(n for n, _ in bindings))
    frame.define(name, Procedure(frame, [(arity, body)], str(name)))
    call = Cons(name, to_lisp_list(to_lisp_list([QUOTE, v]) for v in values))
    return frame, call


def _parse_bindings(bindings: SExpression) -> list[tuple[Symbol, SExpression]]:
    pairs = list_to_vec(bindings)
    if pairs is None:
        raise LispSyntaxError(f"malformed bindings list: {bindings!r}")
    out = []
    for binding in pairs:
        parts = list_to_vec(binding)
        if parts is None or len(parts) != 2 or not isinstance(parts[0], Symbol):
            raise LispSyntaxError(f"malformed binding: {binding!r}")
        out.append((parts[0], parts[1]))
    return out


def _named(name: Symbol, value: LispValue) -> LispValue:
    if isinstance(value, Procedure):
        return value.with_name(str(name))
    return value


UNTIL_LAST: dict[Symbol, Callable[..., UntilLast]] = {
    BEGIN: begin_until_last,
    IF: if_until_last,
    LET: let_until_last,
}


def until_last(form: Symbol, args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> UntilLast:
    """Run `form` up to its tail expression, unwrapping nested tail forms and macros."""
    from lumen.evaluation.special_forms import SPECIAL_FORMS

    while True:
        env, last = UNTIL_LAST[form](args, env, evaluate_fn)
        while isinstance(last, Cons) and isinstance(last.car, Symbol):
            head = last.car
            if head in UNTIL_LAST:
                form, args = head, flatten_form(head, last.cdr)
                break
            if head in SPECIAL_FORMS:
                return env, last
            expanded = try_macro_expand(head, last.cdr, env, evaluate_fn)
            if expanded is None:
                return env, last
            last = expanded
        else:
            return env, last


def handle_special_form_tco(form: Symbol, args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Fully evaluate `form`, finishing with a single evaluation of its tail."""
    env, last = until_last(form, args, env, evaluate_fn)
    return evaluate_fn(last, env)
