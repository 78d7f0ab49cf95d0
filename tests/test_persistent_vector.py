import pytest
from hypothesis import given, strategies as st

from lumen.errors import LispArgumentError, LispBoundsError, LispTypeError
from lumen.types.cons import to_lisp_list
from lumen.types.nil import Nil
from lumen.types.persistent_vector import PersistentVector
from lumen.types.values import lisp_str


def test_empty():
    v = PersistentVector.empty()
    assert len(v) == 0
    assert list(v) == []
    assert v.capacity == 2
    assert v.lookup(0) is None


@pytest.mark.parametrize("n,capacity", [(0, 2), (1, 2), (2, 2), (3, 4), (5, 8), (16, 16), (17, 32)])
def test_capacity_is_a_power_of_two(n, capacity):
    assert PersistentVector.with_size(n).capacity == capacity
    assert PersistentVector.from_iterable(range(n)).capacity == capacity


def test_with_size_has_unset_slots():
    v = PersistentVector.with_size(5)
    assert len(v) == 5
    assert v.lookup(3) is None
    assert v.lookup(5) is None


def test_repeating():
    assert list(PersistentVector.repeating(3, "x")) == ["x", "x", "x"]


def test_from_generator():
    assert list(PersistentVector.from_iterable(i * i for i in range(6))) == [0, 1, 4, 9, 16, 25]


def test_indexing():
    v = PersistentVector.from_iterable("abcde")
    assert v[0] == "a"
    assert v[-1] == "e"
    with pytest.raises(IndexError):
        v[5]


def test_insert_out_of_range():
    with pytest.raises(IndexError):
        PersistentVector.from_iterable([1, 2]).insert(2, 0)


def test_concat():
    a = PersistentVector.from_iterable([1, 2, 3])
    b = PersistentVector.from_iterable([4, 5])
    assert list(PersistentVector.concat([a, b])) == [1, 2, 3, 4, 5]


def test_equality():
    assert PersistentVector.from_iterable([1, 2]) == PersistentVector.from_iterable([1, 2])
    assert PersistentVector.from_iterable([1, 2]) != PersistentVector.from_iterable([1, 2, 3])


@given(st.lists(st.integers(), min_size=1), st.data())
def test_insert_leaves_the_original_untouched(items, data):
    v = PersistentVector.from_iterable(items)
    i = data.draw(st.integers(min_value=0, max_value=len(items) - 1))
    x = data.draw(st.integers())
    w = v.insert(i, x)
    assert w.lookup(i) == x
    assert list(v) == items
    assert all(w.lookup(j) == items[j] for j in range(len(items)) if j != i)


@given(st.lists(st.integers(), max_size=200))
def test_append_grows_one_slot_at_a_time(items):
    v = PersistentVector.empty()
    versions = []
    for x in items:
        versions.append(v)
        v = v.append(x)
    assert list(v) == items
    for n, old in enumerate(versions):
        assert len(old) == n
        assert list(old) == items[:n]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(vector-ref (vector 1 2 3) 1)", 2),
        ("(vector-length (vector 1 2 3))", 3),
        ("(vector-length (make-vector 4))", 4),
        ("(vector-ref (make-vector 2 'z) 1)", "z"),
        ("(vector-ref (make-vector 2) 0)", Nil),
        ("(vector->list (vector-push (vector 1) 2))", to_lisp_list([1, 2])),
        ("(vector->list (list->vector '(1 2 3)))", to_lisp_list([1, 2, 3])),
        ("(vector-ref #(1 2 3) 2)", 3),
    ],
)
def test_vector_builtins(interp, source, expected):
    result = interp.eval(source)
    if isinstance(expected, str):
        assert str(result) == expected
    else:
        assert result == expected


def test_vector_set_is_persistent(interp):
    source = """
    (let ((v (vector 1 2 3)))
      (let ((w (vector-set v 0 9)))
        (list (vector-ref v 0) (vector-ref w 0))))
    """
    assert interp.eval(source) == to_lisp_list([1, 9])


@pytest.mark.parametrize(
    "source,error",
    [
        ("(vector-ref (vector 1) 5)", LispBoundsError),
        ("(vector-ref (vector 1) -1)", LispBoundsError),
        ("(vector-set (vector) 0 1)", LispBoundsError),
        ("(vector-ref '(1) 0)", LispTypeError),
        ("(vector-ref (vector 1) 'a)", LispTypeError),
        ("(make-vector -1)", LispArgumentError),
        ("(list->vector '(1 . 2))", LispTypeError),
    ],
)
def test_vector_errors(interp, source, error):
    with pytest.raises(error):
        interp.eval(source)


def test_vector_printing(interp):
    assert lisp_str(interp.eval("(vector 1 \"a\" 'b)")) == '[1 "a" b]'
    assert interp.eval("(vector? (vector))") == interp.eval("true")
