import pytest

from lumen.errors import LispTypeError
from lumen.types.char import Char
from lumen.types.cons import Cons, LazyCons, to_lisp_list
from lumen.types.environment import Environment
from lumen.types.native import NativeFunction
from lumen.types.nil import Nil
from lumen.types.persistent_vector import PersistentVector
from lumen.types.procedure import ArityDescriptor, Procedure
from lumen.types.symbol import Symbol
from lumen.types.values import (
    FALSE,
    TRUE,
    falsey,
    lisp_display,
    lisp_equal,
    lisp_str,
    truthy,
    type_name,
)


@pytest.mark.parametrize(
    "value",
    [Nil, FALSE, 0, "", PersistentVector.empty()],
)
def test_falsey_values(value):
    assert falsey(value)
    assert not truthy(value)


@pytest.mark.parametrize(
    "value",
    [TRUE, 1, -1, 0.0, "a", Symbol("x"), to_lisp_list([Nil]), PersistentVector.from_iterable([0]), Char("a")],
)
def test_truthy_values(value):
    assert truthy(value)


def _proc():
    return Procedure(Environment(), [(ArityDescriptor([]), [])])


@pytest.mark.parametrize(
    "a,b,equal",
    [
        (1, 1, True),
        (1, 1.0, False),
        ("a", "a", True),
        ("a", Symbol("a"), False),
        (Symbol("a"), Symbol("a"), True),
        (Char("a"), Char("a"), True),
        (Char("a"), "a", False),
        (Nil, Nil, True),
        (Nil, to_lisp_list([]), True),
        (to_lisp_list([1, to_lisp_list([2])]), to_lisp_list([1, to_lisp_list([2])]), True),
        (Cons(1, 2), Cons(1, 2), True),
        (Cons(1, 2), Cons(1, 3), False),
        (PersistentVector.from_iterable([1, "b"]), PersistentVector.from_iterable([1, "b"]), True),
        (PersistentVector.from_iterable([1]), PersistentVector.from_iterable([1.0]), False),
    ],
)
def test_lisp_equal(a, b, equal):
    assert lisp_equal(a, b) is equal


def test_procedures_are_never_equal():
    p = _proc()
    assert not lisp_equal(p, p)


def test_natives_compare_by_name():
    a = NativeFunction("f", lambda env, args: 1)
    b = NativeFunction("f", lambda env, args: 2)
    assert lisp_equal(a, b)


def test_lazy_cells_are_never_equal():
    cell = LazyCons(1, _proc())
    assert not lisp_equal(cell, cell)


@pytest.mark.parametrize(
    "value,printed,displayed",
    [
        (1, "1", "1"),
        (2.5, "2.5", "2.5"),
        ("a\"b\n", '"a\\"b\\n"', 'a"b\n'),
        (Char("a"), "\\a", "a"),
        (Char(" "), "\\space", " "),
        (Symbol("sym"), "sym", "sym"),
        (Nil, "()", "()"),
        (to_lisp_list(["x", Symbol("y")]), '("x" y)', '("x" y)'),
        (PersistentVector.from_iterable([1, Nil]), "[1 ()]", "[1 ()]"),
    ],
)
def test_printing(value, printed, displayed):
    assert lisp_str(value) == printed
    assert lisp_display(value) == displayed


def test_native_printing():
    assert lisp_str(NativeFunction("car", lambda env, args: None)) == "#<native-procedure:car>"


@pytest.mark.parametrize(
    "value,name",
    [
        (Nil, "nil"),
        (1, "integer"),
        (1.5, "float"),
        ("s", "string"),
        (Symbol("s"), "symbol"),
        (Char("c"), "char"),
        (Cons(1, 2), "cons"),
        (PersistentVector.empty(), "vector"),
        (LispTypeError("x"), "error"),
    ],
)
def test_type_name(value, name):
    assert type_name(value) == name


def test_char_requires_one_character():
    with pytest.raises(ValueError):
        Char("ab")


def test_symbols_are_interned():
    assert Symbol("abc") is Symbol("abc")
    assert Symbol("abc") != Symbol("abd")
    assert {Symbol("k"): 1}[Symbol("k")] == 1
