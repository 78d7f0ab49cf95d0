"""Argument checks shared by the native functions."""

from __future__ import annotations

from typing import Callable

from lumen import LispValue
from lumen.errors import LispArityError, LispTypeError
from lumen.types.values import lisp_str


def unpack(args: list[LispValue], n: int) -> list[LispValue]:
    """Require exactly `n` arguments."""
    if len(args) < n:
        raise LispArityError(f"Too few args: expected {n}, got {len(args)}")
    if len(args) > n:
        raise LispArityError(f"Too many args: expected {n}, got {len(args)}")
    return args


def at_least(args: list[LispValue], n: int) -> list[LispValue]:
    if len(args) < n:
        raise LispArityError(f"Too few args: expected at least {n}, got {len(args)}")
    return args


def expect(value: LispValue, pred: Callable[[LispValue], bool], what: str) -> LispValue:
    if not pred(value):
        raise LispTypeError(f"expected {what}, got {lisp_str(value)}")
    return value
