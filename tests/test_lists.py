import pytest
from hypothesis import given, strategies as st

from lumen.errors import LispArityError, LispTypeError
from lumen.types.cons import Cons, is_list, list_length, list_to_vec, to_lisp_list
from lumen.types.nil import Nil
from lumen.types.symbol import Symbol
from lumen.types.values import lisp_str


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(car '(1 2 3))", 1),
        ("(cdr '(1 2 3))", to_lisp_list([2, 3])),
        ("(cdr '(1))", Nil),
        ("(cons 1 2)", Cons(1, 2)),
        ("(cons 1 '())", to_lisp_list([1])),
        ("(list 1 2 3)", to_lisp_list([1, 2, 3])),
        ("(list)", Nil),
        ("(length '(1 2 3))", 3),
        ("(length '())", 0),
        ("(length \"abcd\")", 4),
        ("(length (vector 1 2))", 2),
        ("'(a . b)", Cons(Symbol("a"), Symbol("b"))),
    ],
)
def test_list_builtins(interp, source, expected):
    assert interp.eval(source) == expected


@pytest.mark.parametrize(
    "source,truth",
    [
        ("(cons? '(1))", "true"),
        ("(cons? '())", "false"),
        ("(nil? '())", "true"),
        ("(nil? nil)", "true"),
        ("(nil? 0)", "false"),
        ("(list? '(1 2))", "true"),
        ("(list? '())", "true"),
        ("(list? '(1 . 2))", "false"),
        ("(list? 5)", "false"),
    ],
)
def test_list_predicates(interp, source, truth):
    assert str(interp.eval(source)) == truth


@pytest.mark.parametrize(
    "source,error",
    [
        ("(car 5)", LispTypeError),
        ("(cdr 'a)", LispTypeError),
        ("(car '())", LispTypeError),
        ("(car)", LispArityError),
        ("(car '(1) '(2))", LispArityError),
        ("(cons 1)", LispArityError),
        ("(length '(1 . 2))", LispTypeError),
    ],
)
def test_list_errors(interp, source, error):
    with pytest.raises(error):
        interp.eval(source)


def test_type_error_message_names_the_value(interp):
    with pytest.raises(LispTypeError) as excinfo:
        interp.eval("(car 5)")
    assert excinfo.value.value == "expected cons, got 5"


@pytest.mark.parametrize(
    "value,printed",
    [
        (to_lisp_list([1, 2, 3]), "(1 2 3)"),
        (Cons(1, Cons(2, 3)), "(1 2 . 3)"),
        (to_lisp_list([1, to_lisp_list(["a", Symbol("b")])]), '(1 ("a" b))'),
        (Nil, "()"),
    ],
)
def test_list_printing(value, printed):
    assert lisp_str(value) == printed


def test_improper_lists_are_detected():
    dotted = Cons(1, Cons(2, 3))
    assert list_to_vec(dotted) is None
    assert list_length(dotted) is None
    assert not is_list(dotted)
    assert is_list(Nil)


@given(st.lists(st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1)))
def test_lisp_list_conversion(items):
    ls = to_lisp_list(items)
    assert list_to_vec(ls) == items
    assert list_length(ls) == len(items)
    assert is_list(ls)


def test_long_lists_compare_without_recursion():
    a = to_lisp_list(range(50000))
    b = to_lisp_list(range(50000))
    assert a == b
    assert a != to_lisp_list(range(49999))
