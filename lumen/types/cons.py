"""Pair cells and the list helpers built on them.

A list is a chain of `Cons` cells terminated by `Nil`; anything else in the
final cdr makes the list improper. Helpers that need a proper list return
None (or raise type-error) when they find an improper one.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from lumen import LispValue
from lumen.errors import LispTypeError
from lumen.types.nil import Nil


class Cons:
    """A pair cell: the building block of linked lists."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        self.car: LispValue = car
        self.cdr: LispValue = cdr

    def __eq__(self, other: object) -> bool:
        from lumen.types.values import lisp_equal
        return lisp_equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        from lumen.types.values import lisp_str
        return lisp_str(self)

    __str__ = __repr__


class LazyCons:
    """A cell whose tail is computed on demand by a zero-argument procedure.

    Forcing is not memoized: each `force` applies the thunk again.
    """

    __slots__ = ("car", "thunk")

    def __init__(self, car: LispValue, thunk: LispValue):
        self.car: LispValue = car
        self.thunk: LispValue = thunk

    def force(self, env) -> LispValue:
        from lumen.evaluation.evaluator import apply
        return apply(self.thunk, Nil, env)

    def __repr__(self) -> str:
        return "#<lazy-cons>"

    __str__ = __repr__


def car(obj: LispValue) -> LispValue:
    if not isinstance(obj, Cons):
        from lumen.types.values import lisp_str
        raise LispTypeError(f"expected cons, got {lisp_str(obj)}")
    return obj.car


def cdr(obj: LispValue) -> LispValue:
    if not isinstance(obj, Cons):
        from lumen.types.values import lisp_str
        raise LispTypeError(f"expected cons, got {lisp_str(obj)}")
    return obj.cdr


def to_lisp_list(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a list right-to-left from any finite iterable."""
    out = tail
    for item in reversed(list(items)):
        out = Cons(item, out)
    return out


def list_to_vec(obj: LispValue) -> Optional[list[LispValue]]:
    """Python list of the elements of a proper list, or None if improper."""
    out: list[LispValue] = []
    while isinstance(obj, Cons):
        out.append(obj.car)
        obj = obj.cdr
    if obj is not Nil:
        return None
    return out


def list_length(obj: LispValue) -> Optional[int]:
    n = 0
    while isinstance(obj, Cons):
        n += 1
        obj = obj.cdr
    return n if obj is Nil else None


def is_list(obj: LispValue) -> bool:
    """True when obj is Nil or a Nil-terminated chain of cons cells."""
    while isinstance(obj, Cons):
        obj = obj.cdr
    return obj is Nil


def iter_list(obj: LispValue) -> Iterator[LispValue]:
    """Yield the cars of a cons chain, ignoring an improper tail."""
    while isinstance(obj, Cons):
        yield obj.car
        obj = obj.cdr
