"""Core natives: application, evaluation, reflection and error values."""

from __future__ import annotations

import itertools

from lumen import LispValue
from lumen.builtin.args import at_least, expect, unpack
from lumen.errors import LispArityError, LispError, LispTypeError
from lumen.evaluation.evaluator import apply as apply_engine
from lumen.evaluation.evaluator import evaluate
from lumen.evaluation.macros import macro_expand_once
from lumen.types.char import Char
from lumen.types.cons import list_to_vec, to_lisp_list
from lumen.types.environment import Environment
from lumen.types.native import NativeFunction, native_table
from lumen.types.nil import Nil
from lumen.types.procedure import Procedure
from lumen.types.symbol import Symbol
from lumen.types.values import (
    falsey,
    is_callable,
    is_char,
    is_error,
    is_string,
    is_symbol,
    lisp_bool,
    lisp_equal,
    lisp_str,
)

_gensym_counter = itertools.count(1)


def apply(env: Environment, args: list[LispValue]) -> LispValue:
    """(apply f arg... list) call f with the args followed by the elements of list"""
    at_least(args, 2)
    fn, *leading, last = args
    if list_to_vec(last) is None:
        raise LispTypeError(f"apply expects a proper list as its last argument, got {lisp_str(last)}")
    return apply_engine(fn, to_lisp_list(leading, last), env)


def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(eval form) evaluate form in the calling environment"""
    return evaluate(unpack(args, 1)[0], env)


def bound_p(env: Environment, args: list[LispValue]) -> LispValue:
    """(bound? 'name) true when name has a binding"""
    name = expect(unpack(args, 1)[0], is_symbol, "symbol")
    return lisp_bool(env.lookup(name) is not None)


def macro_expand(env: Environment, args: list[LispValue]) -> LispValue:
    """(macro-expand form) one expansion step, or form unchanged if it is not a macro call"""
    return macro_expand_once(unpack(args, 1)[0], env, evaluate)


def gensym(env: Environment, args: list[LispValue]) -> LispValue:
    """(gensym [prefix]) a fresh symbol named #:<prefix><n>, which source text cannot spell"""
    prefix = "G__"
    if args:
        prefix = str(unpack(args, 1)[0])
    # the lexer always reads a leading # as a special character
    return Symbol(f"#:{prefix}{next(_gensym_counter)}")


def doc(env: Environment, args: list[LispValue]) -> LispValue:
    """(doc f) documentation string of a procedure or native, or nil"""
    fn = unpack(args, 1)[0]
    if isinstance(fn, (Procedure, NativeFunction)) and fn.doc:
        return fn.doc
    return Nil


def not_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(not x) true when x is falsey"""
    return lisp_bool(falsey(unpack(args, 1)[0]))


def eq_p(env: Environment, args: list[LispValue]) -> LispValue:
    """(eq? a b...) structural equality of all arguments"""
    at_least(args, 1)
    first = args[0]
    return lisp_bool(all(lisp_equal(first, other) for other in args[1:]))


def procedure_p(env: Environment, args: list[LispValue]) -> LispValue:
    """(procedure? x) true for procedures and natives"""
    return lisp_bool(is_callable(unpack(args, 1)[0]))


def symbol_p(env: Environment, args: list[LispValue]) -> LispValue:
    """(symbol? x)"""
    return lisp_bool(is_symbol(unpack(args, 1)[0]))


def string_p(env: Environment, args: list[LispValue]) -> LispValue:
    """(string? x)"""
    return lisp_bool(is_string(unpack(args, 1)[0]))


def char_p(env: Environment, args: list[LispValue]) -> LispValue:
    """(char? x)"""
    return lisp_bool(is_char(unpack(args, 1)[0]))


def error(env: Environment, args: list[LispValue]) -> LispValue:
    """(error 'kind [value]) raise an error of the given kind"""
    if not 1 <= len(args) <= 2:
        raise LispArityError(f"error expects 1 or 2 args, got {len(args)}")
    kind = expect(args[0], is_symbol, "symbol")
    raise LispError(str(kind), args[1] if len(args) == 2 else None)


def error_p(env: Environment, args: list[LispValue]) -> LispValue:
    """(error? x) true for error values returned by catch-error"""
    return lisp_bool(is_error(unpack(args, 1)[0]))


def _error(value: LispValue) -> LispError:
    return expect(value, is_error, "error")


def error_kind(env: Environment, args: list[LispValue]) -> LispValue:
    """(error-kind err) kind of an error, as a symbol"""
    return Symbol(_error(unpack(args, 1)[0]).kind)


def error_value(env: Environment, args: list[LispValue]) -> LispValue:
    """(error-value err) payload of an error, or nil"""
    err = _error(unpack(args, 1)[0])
    return Nil if err.value is None else err.value


def error_cause(env: Environment, args: list[LispValue]) -> LispValue:
    """(error-cause err) the error this one was raised while handling, or nil"""
    err = _error(unpack(args, 1)[0])
    return Nil if err.cause is None else err.cause


def define_char_handler(env: Environment, args: list[LispValue]) -> LispValue:
    """(define-char-handler ch f) make the reader call (f datum) after special character ch"""
    ch, handler = unpack(args, 2)
    if isinstance(ch, Char):
        ch = ch.value
    elif not (isinstance(ch, str) and len(ch) == 1):
        raise LispTypeError(f"expected character, got {lisp_str(ch)}")
    env.root.define_char_handler(ch, expect(handler, is_callable, "procedure"))
    return Char(ch)


def register(env: Environment) -> None:
    env.update(
        native_table(
            {
                "apply": apply,
                "eval": eval_builtin,
                "bound?": bound_p,
                "macro-expand": macro_expand,
                "gensym": gensym,
                "doc": doc,
                "not": not_builtin,
                "eq?": eq_p,
                "procedure?": procedure_p,
                "symbol?": symbol_p,
                "string?": string_p,
                "char?": char_p,
                "error": error,
                "error?": error_p,
                "error-kind": error_kind,
                "error-value": error_value,
                "error-cause": error_cause,
                "define-char-handler": define_char_handler,
            }
        )
    )
