"""Default reader-character handlers.

Each handler is a native called with the datum read after its character:

    'x       (quote x)
    `x       (quasiquote x)
    ,x       (unquote x)
    ,@x      (unquote-splicing x)    read as , then @
    #(a b)   vector literal
    #t #f    true / false
    \\a       character literal; \\space \\newline \\tab \\return by name
"""

from __future__ import annotations

from lumen import LispValue
from lumen.builtin.args import unpack
from lumen.errors import LispReadError
from lumen.types.char import NAMED_CHARS, Char
from lumen.types.cons import Cons, list_to_vec, to_lisp_list
from lumen.types.environment import Environment
from lumen.types.native import NativeFunction
from lumen.types.persistent_vector import PersistentVector
from lumen.types.symbol import Symbol
from lumen.types.values import FALSE, TRUE, lisp_str

QUOTE = Symbol("quote")
QUASIQUOTE = Symbol("quasiquote")
UNQUOTE = Symbol("unquote")
UNQUOTE_SPLICING = Symbol("unquote-splicing")


def _wrap(sym: Symbol, datum: LispValue) -> LispValue:
    return to_lisp_list([sym, datum])


def quote_char(env: Environment, args: list[LispValue]) -> LispValue:
    return _wrap(QUOTE, unpack(args, 1)[0])


def quasiquote_char(env: Environment, args: list[LispValue]) -> LispValue:
    return _wrap(QUASIQUOTE, unpack(args, 1)[0])


def unquote_char(env: Environment, args: list[LispValue]) -> LispValue:
    datum = unpack(args, 1)[0]
    # ,@x arrives here already wrapped by the @ handler
    if isinstance(datum, Cons) and datum.car == UNQUOTE_SPLICING:
        return datum
    return _wrap(UNQUOTE, datum)


def splice_char(env: Environment, args: list[LispValue]) -> LispValue:
    return _wrap(UNQUOTE_SPLICING, unpack(args, 1)[0])


def hash_char(env: Environment, args: list[LispValue]) -> LispValue:
    datum = unpack(args, 1)[0]
    if isinstance(datum, Symbol):
        if datum.id == "t":
            return TRUE
        if datum.id == "f":
            return FALSE
    items = list_to_vec(datum)
    if items is None:
        raise LispReadError(f"invalid # syntax: #{lisp_str(datum)}")
    return PersistentVector.from_iterable(items)


def char_char(env: Environment, args: list[LispValue]) -> LispValue:
    datum = unpack(args, 1)[0]
    if isinstance(datum, Symbol):
        name = datum.id
        if name in NAMED_CHARS:
            return Char(NAMED_CHARS[name])
        if len(name) == 1:
            return Char(name)
    elif isinstance(datum, int) and 0 <= datum <= 9:
        return Char(str(datum))
    raise LispReadError(f"invalid character literal: \\{lisp_str(datum)}")


DEFAULT_CHAR_HANDLERS = {
    "'": quote_char,
    "`": quasiquote_char,
    ",": unquote_char,
    "@": splice_char,
    "#": hash_char,
    "\\": char_char,
}


def register(env: Environment) -> None:
    for ch, fn in DEFAULT_CHAR_HANDLERS.items():
        env.define_char_handler(ch, NativeFunction(f"char-handler({ch})", fn))
