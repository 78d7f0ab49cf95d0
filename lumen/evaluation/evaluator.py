"""Core evaluator for the lumen interpreter.

`evaluate` is a loop over a current `(expr, env)` pair. Special forms that
end in a tail position hand back a `TailCall` and macro calls hand back their
expansion; both replace the current expression and the loop continues instead
of recursing.
"""

from __future__ import annotations

from typing import Iterable

from lumen import LispValue, SExpression
from lumen.errors import LispBoundError, LispError, LispEvalError, LispSyntaxError, LispTypeError
from lumen.evaluation.apply import lambda_apply
from lumen.evaluation.macros import try_macro_expand
from lumen.evaluation.special_forms import SPECIAL_FORMS
from lumen.types.char import Char
from lumen.types.cons import Cons, list_to_vec, to_lisp_list
from lumen.types.environment import Environment
from lumen.types.native import NativeFunction
from lumen.types.nil import Nil, NilType
from lumen.types.persistent_vector import PersistentVector
from lumen.types.procedure import Procedure
from lumen.types.symbol import Symbol
from lumen.types.tail_call import TailCall
from lumen.types.values import lisp_str

SELF_EVALUATING = (int, float, str, NilType, Char, PersistentVector)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    while True:
        if isinstance(expr, SELF_EVALUATING):
            return expr

        if isinstance(expr, Symbol):
            val = env.lookup(expr)
            if val is None:
                raise LispBoundError(f"symbol '{expr} is not bound")
            return val

        if isinstance(expr, Cons):
            head, tail = expr.car, expr.cdr
            if isinstance(head, Symbol):
                handler = SPECIAL_FORMS.get(head)
                if handler is not None:
                    args = list_to_vec(tail)
                    if args is None:
                        raise LispSyntaxError(f"({head}) invalid syntax (ill-formed arg list): {lisp_str(tail)}")
                    result = handler(args, env, evaluate)
                    if isinstance(result, TailCall):
                        expr, env = result.expr, result.env
                        continue
                    return result

                expanded = try_macro_expand(head, tail, env, evaluate)
                if expanded is not None:
                    expr = expanded
                    continue

            fn = evaluate(head, env)
            return apply(fn, map_eval(tail, env), env)

        raise LispEvalError(f"unable to evaluate: {lisp_str(expr)}")


def map_eval(ls: SExpression, env: Environment) -> LispValue:
    """Evaluate each element of a proper list, left to right."""
    values = []
    rest = ls
    while isinstance(rest, Cons):
        values.append(evaluate(rest.car, env))
        rest = rest.cdr
    if rest is not Nil:
        raise LispSyntaxError(f"not a proper list: {lisp_str(ls)}")
    return to_lisp_list(values)


def apply(callee: LispValue, args: LispValue, env: Environment) -> LispValue:
    """Apply a native function or procedure to an evaluated argument list.

    Errors leaving a native gain the native as their source (or, when a source
    is already set, a new link naming it); errors leaving a procedure always
    gain a new link naming the procedure.
    """
    if isinstance(callee, NativeFunction):
        flat = list_to_vec(args)
        if flat is None:
            raise LispSyntaxError(f"(apply) ill-formed argument list: {lisp_str(args)}")
        try:
            return callee(env, flat)
        except LispError as err:
            if err.source is None:
                raise err.with_source(callee) from err
            raise LispError.new_from(err, callee) from err

    if isinstance(callee, Procedure):
        try:
            return lambda_apply(callee, args, evaluate)
        except LispError as err:
            raise LispError.new_from(err, callee) from err

    raise LispTypeError(f"expecting procedure, got {lisp_str(callee)}")


def eval_all(forms: Iterable[SExpression], env: Environment) -> list[LispValue]:
    return [evaluate(form, env) for form in forms]

