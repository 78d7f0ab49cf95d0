import pytest

from lumen.errors import LispTypeError
from lumen.types.cons import LazyCons, to_lisp_list
from lumen.types.symbol import Symbol
from lumen.types.values import lisp_str


def test_lazy_cons_parts(interp):
    interp.eval("(define cell (lazy-cons 1 (lambda () '(2 3))))")
    cell = interp.eval("cell")
    assert isinstance(cell, LazyCons)
    assert lisp_str(cell) == "#<lazy-cons>"
    assert interp.eval("(lazy-car cell)") == 1
    assert interp.eval("(lazy-cdr cell)") == to_lisp_list([2, 3])
    assert interp.eval("(lazy-cons? cell)") == Symbol("true")
    assert interp.eval("(lazy-cons? '(1))") == Symbol("false")


def test_tail_is_recomputed_each_time(interp):
    interp.eval("(define counter 0)")
    interp.eval("(define cell (lazy-cons 1 (lambda () (set! counter (+ counter 1)) counter)))")
    assert interp.eval("(lazy-cdr cell)") == 1
    assert interp.eval("(lazy-cdr cell)") == 2
    assert interp.eval("counter") == 2


def test_tail_is_not_computed_until_forced(interp):
    interp.eval("(define cell (lazy-cons 1 (lambda () (car 5))))")
    assert interp.eval("(lazy-car cell)") == 1
    with pytest.raises(LispTypeError):
        interp.eval("(lazy-cdr cell)")


def test_infinite_stream(interp_prelude):
    interp_prelude.eval("(define ones (stream-cons 1 ones))")
    assert interp_prelude.eval("(stream-take ones 3)") == to_lisp_list([1, 1, 1])


def test_counting_stream(interp_prelude):
    interp_prelude.eval("(define (from n) (stream-cons n (from (+ n 1))))")
    assert interp_prelude.eval("(stream-take (from 5) 4)") == to_lisp_list([5, 6, 7, 8])


@pytest.mark.parametrize(
    "source",
    ["(lazy-car '(1))", "(lazy-cdr 5)", "(lazy-cons 1 2)"],
)
def test_lazy_cons_type_errors(interp, source):
    with pytest.raises(LispTypeError):
        interp.eval(source)
