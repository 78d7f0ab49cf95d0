from __future__ import annotations

from lumen import LispValue
from lumen.builtin.args import expect, unpack
from lumen.types import cons as cons_ops
from lumen.types.cons import Cons, LazyCons, list_length, to_lisp_list
from lumen.types.environment import Environment
from lumen.types.native import native_table
from lumen.types.persistent_vector import PersistentVector
from lumen.types.values import is_callable, is_list, is_nil, lazy_car, lazy_cdr, lisp_bool, lisp_str
from lumen.errors import LispTypeError


def car(env: Environment, args: list[LispValue]) -> LispValue:
    """(car pair) first element of a cons cell"""
    return cons_ops.car(unpack(args, 1)[0])


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    """(cdr pair) rest of a cons cell"""
    return cons_ops.cdr(unpack(args, 1)[0])


def cons(env: Environment, args: list[LispValue]) -> LispValue:
    """(cons a b) new pair"""
    a, b = unpack(args, 2)
    return Cons(a, b)


def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(list x...) proper list of the arguments"""
    return to_lisp_list(args)


def cons_p(env: Environment, args: list[LispValue]) -> LispValue:
    """(cons? x)"""
    return lisp_bool(isinstance(unpack(args, 1)[0], Cons))


def nil_p(env: Environment, args: list[LispValue]) -> LispValue:
    """(nil? x)"""
    return lisp_bool(is_nil(unpack(args, 1)[0]))


def list_p(env: Environment, args: list[LispValue]) -> LispValue:
    """(list? x) true for nil and nil-terminated cons chains"""
    return lisp_bool(is_list(unpack(args, 1)[0]))


def length(env: Environment, args: list[LispValue]) -> LispValue:
    """(length seq) number of elements in a proper list, vector or string"""
    seq = unpack(args, 1)[0]
    if isinstance(seq, (str, PersistentVector)):
        return len(seq)
    n = list_length(seq)
    if n is None:
        raise LispTypeError(f"expected proper list, got {lisp_str(seq)}")
    return n


def lazy_cons(env: Environment, args: list[LispValue]) -> LispValue:
    """(lazy-cons x thunk) cell whose tail is computed by calling thunk"""
    head, thunk = unpack(args, 2)
    return LazyCons(head, expect(thunk, is_callable, "procedure"))


def lazy_car_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(lazy-car cell) head of a lazy cell, without forcing anything"""
    return lazy_car(unpack(args, 1)[0])


def lazy_cdr_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(lazy-cdr cell) force the tail of a lazy cell (recomputed on every call)"""
    return lazy_cdr(unpack(args, 1)[0], env)


def lazy_cons_p(env: Environment, args: list[LispValue]) -> LispValue:
    """(lazy-cons? x)"""
    return lisp_bool(isinstance(unpack(args, 1)[0], LazyCons))


def register(env: Environment) -> None:
    env.update(
        native_table(
            {
                "car": car,
                "cdr": cdr,
                "cons": cons,
                "list": list_builtin,
                "cons?": cons_p,
                "nil?": nil_p,
                "list?": list_p,
                "length": length,
                "lazy-cons": lazy_cons,
                "lazy-car": lazy_car_builtin,
                "lazy-cdr": lazy_cdr_builtin,
                "lazy-cons?": lazy_cons_p,
            }
        )
    )
