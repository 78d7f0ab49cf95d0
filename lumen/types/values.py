"""Predicates, truthiness, equality and printing for lumen values."""

from __future__ import annotations

from io import StringIO

from lumen import LispValue
from lumen.errors import LispError
from lumen.types.char import Char
from lumen.types.cons import Cons, LazyCons, is_list  # noqa: F401
from lumen.types.native import NativeFunction
from lumen.types.nil import Nil
from lumen.types.persistent_vector import PersistentVector
from lumen.types.procedure import Procedure
from lumen.types.symbol import Symbol

TRUE = Symbol("true")
FALSE = Symbol("false")


def lisp_bool(b: bool) -> Symbol:
    return TRUE if b else FALSE


# --- predicates ---
def is_cons(obj: LispValue) -> bool:
    return isinstance(obj, Cons)


def is_nil(obj: LispValue) -> bool:
    return obj is Nil


def is_vector(obj: LispValue) -> bool:
    return isinstance(obj, PersistentVector)


def is_symbol(obj: LispValue) -> bool:
    return isinstance(obj, Symbol)


def is_char(obj: LispValue) -> bool:
    return isinstance(obj, Char)


def is_string(obj: LispValue) -> bool:
    return isinstance(obj, str)


def is_integer(obj: LispValue) -> bool:
    return isinstance(obj, int) and not isinstance(obj, bool)


def is_float(obj: LispValue) -> bool:
    return isinstance(obj, float)


def is_number(obj: LispValue) -> bool:
    return is_integer(obj) or is_float(obj)


def is_procedure(obj: LispValue) -> bool:
    return isinstance(obj, Procedure)


def is_native(obj: LispValue) -> bool:
    return isinstance(obj, NativeFunction)


def is_callable(obj: LispValue) -> bool:
    return isinstance(obj, (Procedure, NativeFunction))


def is_lazy_cons(obj: LispValue) -> bool:
    return isinstance(obj, LazyCons)


def is_error(obj: LispValue) -> bool:
    return isinstance(obj, LispError)


def falsey(obj: LispValue) -> bool:
    """Nil, integer zero, "", an empty vector and the symbol `false` are false."""
    if obj is Nil or (isinstance(obj, Symbol) and obj == FALSE):
        return True
    if is_integer(obj):
        return obj == 0
    if isinstance(obj, str):
        return obj == ""
    if isinstance(obj, PersistentVector):
        return len(obj) == 0
    return False


def truthy(obj: LispValue) -> bool:
    return not falsey(obj)


# --- lazy cells ---
def lazy_car(obj: LispValue) -> LispValue:
    if not isinstance(obj, LazyCons):
        raise _type_error("lazy-cons", obj)
    return obj.car


def lazy_cdr(obj: LispValue, env) -> LispValue:
    """Force the tail thunk. Every call applies the thunk again."""
    if not isinstance(obj, LazyCons):
        raise _type_error("lazy-cons", obj)
    return obj.force(env)


def _type_error(expected: str, obj: LispValue) -> LispError:
    from lumen.errors import LispTypeError
    return LispTypeError(f"expected {expected}, got {lisp_str(obj)}")


# --- equality ---
def lisp_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality. Procedures and errors are never equal."""
    while isinstance(a, Cons) and isinstance(b, Cons):
        if not lisp_equal(a.car, b.car):
            return False
        a, b = a.cdr, b.cdr
    return _atom_equal(a, b)


def _atom_equal(a: LispValue, b: LispValue) -> bool:
    if a is Nil or b is Nil:
        return a is b
    if isinstance(a, (Cons, LazyCons, Procedure, LispError)):
        return False
    if is_number(a):
        return is_number(b) and type(a) is type(b) and a == b
    if isinstance(a, PersistentVector):
        if not isinstance(b, PersistentVector) or len(a) != len(b):
            return False
        return all(lisp_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, (str, Symbol, Char, NativeFunction)):
        return type(a) is type(b) and a == b
    return False


# --- printing ---
_STRING_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t"}


def _quote_string(s: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(c, c) for c in s) + '"'


def lisp_str(obj: LispValue) -> str:
    """Render a value the way the printer shows it (strings quoted)."""
    with StringIO() as buffer:
        _write(buffer, obj, True)
        return buffer.getvalue()


def lisp_display(obj: LispValue) -> str:
    """Like `lisp_str` but strings and characters appear raw."""
    if isinstance(obj, str):
        return obj
    if isinstance(obj, Char):
        return obj.value
    return lisp_str(obj)


def _write(buffer: StringIO, obj: LispValue, readable: bool) -> None:
    if isinstance(obj, str):
        buffer.write(_quote_string(obj) if readable else obj)
    elif isinstance(obj, Cons):
        buffer.write("(")
        _write(buffer, obj.car, readable)
        rest = obj.cdr
        while isinstance(rest, Cons):
            buffer.write(" ")
            _write(buffer, rest.car, readable)
            rest = rest.cdr
        if rest is not Nil:
            buffer.write(" . ")
            _write(buffer, rest, readable)
        buffer.write(")")
    elif isinstance(obj, PersistentVector):
        buffer.write("[")
        for i, item in enumerate(obj):
            if i:
                buffer.write(" ")
            _write(buffer, item, readable)
        buffer.write("]")
    elif isinstance(obj, LispError):
        buffer.write(f"#<ERROR-OBJ {obj.kind} value: ")
        _write(buffer, Nil if obj.value is None else obj.value, readable)
        buffer.write(" source: ")
        _write(buffer, Nil if obj.source is None else obj.source, readable)
        buffer.write(">")
    else:
        buffer.write(str(obj))


def type_name(obj: LispValue) -> str:
    if obj is Nil:
        return "nil"
    for pred, name in _TYPE_NAMES:
        if pred(obj):
            return name
    return type(obj).__name__


_TYPE_NAMES = (
    (is_integer, "integer"),
    (is_float, "float"),
    (is_string, "string"),
    (is_symbol, "symbol"),
    (is_char, "char"),
    (is_cons, "cons"),
    (is_lazy_cons, "lazy-cons"),
    (is_vector, "vector"),
    (is_native, "native-procedure"),
    (is_procedure, "procedure"),
    (is_error, "error"),
)
