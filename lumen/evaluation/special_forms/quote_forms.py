from lumen import EvaluatorFn, LispValue, SExpression
from lumen.errors import LispSyntaxError, LispTypeError
from lumen.types.cons import Cons, list_to_vec, to_lisp_list
from lumen.types.environment import Environment
from lumen.types.nil import Nil
from lumen.types.symbol import Symbol

QUASIQUOTE = Symbol("quasiquote")
UNQUOTE = Symbol("unquote")
UNQUOTE_SPLICING = Symbol("unquote-splicing")


def _operand(form: Cons) -> SExpression:
    """The single operand of `(unquote x)` and friends."""
    rest = form.cdr
    if not isinstance(rest, Cons) or rest.cdr is not Nil:
        raise LispSyntaxError(f"quasiquote: invalid {form.car}: {form!r}")
    return rest.car


def _is(obj: SExpression, sym: Symbol) -> bool:
    return isinstance(obj, Symbol) and obj == sym


def eval_quasiquote(
    expr: SExpression, env: Environment, evaluate_fn: EvaluatorFn, depth: int = 1
) -> SExpression:
    if not isinstance(expr, Cons):
        return expr

    head = expr.car
    if _is(head, UNQUOTE):
        arg = _operand(expr)
        if depth == 1:
            return evaluate_fn(arg, env)
        return to_lisp_list([UNQUOTE, eval_quasiquote(arg, env, evaluate_fn, depth - 1)])
    if _is(head, QUASIQUOTE):
        arg = _operand(expr)
        return to_lisp_list([QUASIQUOTE, eval_quasiquote(arg, env, evaluate_fn, depth + 1)])

    items: list[SExpression] = []
    rest = expr
    while isinstance(rest, Cons):
        # `(a . ,b)` reads as `(a unquote b)`: the tail itself is the unquote.
        if rest is not expr and (_is(rest.car, UNQUOTE) or _is(rest.car, QUASIQUOTE)):
            break
        item = rest.car
        if isinstance(item, Cons) and _is(item.car, UNQUOTE_SPLICING):
            arg = _operand(item)
            if depth == 1:
                spliced = evaluate_fn(arg, env)
                values = list_to_vec(spliced)
                if values is None:
                    raise LispTypeError(f"unquote-splicing requires a list, got {spliced!r}")
                items.extend(values)
            else:
                items.append(
                    to_lisp_list([UNQUOTE_SPLICING, eval_quasiquote(arg, env, evaluate_fn, depth - 1)])
                )
        else:
            items.append(eval_quasiquote(item, env, evaluate_fn, depth))
        rest = rest.cdr

    tail = eval_quasiquote(rest, env, evaluate_fn, depth) if rest is not Nil else Nil
    return to_lisp_list(items, tail)


def quote_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise LispSyntaxError(f"wrong number of arguments to quote: {to_lisp_list(tail)!r}")
    return tail[0]


def quasiquote_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise LispSyntaxError(f"quasiquote must have exactly 1 argument, given {to_lisp_list(tail)!r}")
    return eval_quasiquote(tail[0], env, evaluate_fn)


def unquote_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    raise LispSyntaxError("unquote not valid outside of quasiquote")


def unquote_splice_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    raise LispSyntaxError("unquote-splicing not valid outside of quasiquote")
