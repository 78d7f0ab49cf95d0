"""Arithmetic and numeric comparison natives.

Integers are 64-bit signed: a result outside that range is an
arithmetic-error rather than a silently widened Python int. `/` always
produces a float, so dividing by zero gives inf or nan instead of failing.
"""

from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Callable

from lumen import LispValue
from lumen.builtin.args import at_least, expect, unpack
from lumen.errors import LispArithmeticError
from lumen.types.environment import Environment
from lumen.types.native import native_table
from lumen.types.values import is_float, is_integer, is_number, lisp_bool

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


def _number(value: LispValue) -> LispValue:
    return expect(value, is_number, "number")


def _checked(result: LispValue) -> LispValue:
    if is_integer(result) and not I64_MIN <= result <= I64_MAX:
        raise LispArithmeticError(f"integer overflow: {result}")
    return result


def _fold(op: Callable, start: LispValue, args: list[LispValue]) -> LispValue:
    return reduce(lambda acc, x: _checked(op(acc, _number(x))), args, start)


def add(env: Environment, args: list[LispValue]) -> LispValue:
    """(+ n...) sum of the arguments; 0 with none"""
    return _fold(operator.add, 0, args)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """(- n m...) subtract the rest from the first; (- n) negates"""
    at_least(args, 1)
    first = _number(args[0])
    if len(args) == 1:
        return _checked(-first)
    return _fold(operator.sub, first, args[1:])


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """(* n...) product of the arguments; 1 with none"""
    return _fold(operator.mul, 1, args)


def _float_div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """(/ n m...) float division; (/ n) is the reciprocal"""
    at_least(args, 1)
    first = float(_number(args[0]))
    if len(args) == 1:
        return _float_div(1.0, first)
    return reduce(lambda acc, x: _float_div(acc, float(_number(x))), args[1:], first)


def mod(env: Environment, args: list[LispValue]) -> LispValue:
    """(mod n m) remainder with the sign of m"""
    a, b = (_number(x) for x in unpack(args, 2))
    if b == 0:
        raise LispArithmeticError("mod by zero")
    return _checked(a % b)


def _compare(op: Callable[[LispValue, LispValue], bool]) -> Callable:
    def compare(env: Environment, args: list[LispValue]) -> LispValue:
        nums = [_number(x) for x in at_least(args, 1)]
        return lisp_bool(all(op(a, b) for a, b in zip(nums, nums[1:])))
    return compare


num_eq = _compare(operator.eq)
num_eq.__doc__ = "(= n m...) true when all arguments are numerically equal"
lt = _compare(operator.lt)
lt.__doc__ = "(< n m...) true when the arguments strictly increase"
gt = _compare(operator.gt)
gt.__doc__ = "(> n m...) true when the arguments strictly decrease"
lte = _compare(operator.le)
lte.__doc__ = "(<= n m...) true when the arguments never decrease"
gte = _compare(operator.ge)
gte.__doc__ = "(>= n m...) true when the arguments never increase"


def number_p(env: Environment, args: list[LispValue]) -> LispValue:
    """(number? x)"""
    return lisp_bool(is_number(unpack(args, 1)[0]))


def integer_p(env: Environment, args: list[LispValue]) -> LispValue:
    """(integer? x)"""
    return lisp_bool(is_integer(unpack(args, 1)[0]))


def float_p(env: Environment, args: list[LispValue]) -> LispValue:
    """(float? x)"""
    return lisp_bool(is_float(unpack(args, 1)[0]))


def register(env: Environment) -> None:
    env.update(
        native_table(
            {
                "+": add,
                "-": sub,
                "*": mul,
                "/": div,
                "mod": mod,
                "=": num_eq,
                "<": lt,
                ">": gt,
                "<=": lte,
                ">=": gte,
                "number?": number_p,
                "integer?": integer_p,
                "float?": float_p,
            }
        )
    )
