import math

import pytest

from lumen.errors import LispArithmeticError, LispArityError, LispTypeError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 1 2 3 4)", 0),
        ("(*)", 1),
        ("(+)", 0),
        ("(- 5)", -5),
        ("(* 2 3 4)", 24),
        ("(+ 1 2.5 3)", 6.5),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(* -2 3)", -6),
        ("(/ 12 3)", 4.0),
        ("(/ 1 4)", 0.25),
        ("(/ 2)", 0.5),
        ("(mod 7 3)", 1),
        ("(mod -7 3)", 2),
    ],
)
def test_arithmetic(interp, source, expected):
    result = interp.eval(source)
    assert result == expected
    assert type(result) is type(expected)


def test_division_always_yields_float(interp):
    assert isinstance(interp.eval("(/ 6 3)"), float)


@pytest.mark.parametrize(
    "source,check",
    [
        ("(/ 1 0)", lambda v: v == math.inf),
        ("(/ -1 0)", lambda v: v == -math.inf),
        ("(/ 0 0)", math.isnan),
    ],
)
def test_division_by_zero_is_not_an_error(interp, source, check):
    result = interp.eval(source)
    assert isinstance(result, float)
    assert check(result)


@pytest.mark.parametrize(
    "source,truth",
    [
        ("(= 1 1 1)", "true"),
        ("(= 1 1.0)", "true"),
        ("(= 1 2)", "false"),
        ("(< 1 2 3)", "true"),
        ("(< 1 3 2)", "false"),
        ("(> 3 2 1)", "true"),
        ("(<= 1 1 2)", "true"),
        ("(>= 2 2 3)", "false"),
        ("(number? 1.5)", "true"),
        ("(integer? 1.5)", "false"),
        ("(float? 1.5)", "true"),
        ("(number? 'a)", "false"),
    ],
)
def test_comparisons_and_predicates(interp, source, truth):
    assert str(interp.eval(source)) == truth


@pytest.mark.parametrize(
    "source,error",
    [
        ("(+ 1 'a)", LispTypeError),
        ("(- 'a)", LispTypeError),
        ("(-)", LispArityError),
        ("(/)", LispArityError),
        ("(mod 5 0)", LispArithmeticError),
        ("(* 9223372036854775807 2)", LispArithmeticError),
        ("(- -9223372036854775807 2)", LispArithmeticError),
    ],
)
def test_arithmetic_errors(interp, source, error):
    with pytest.raises(error):
        interp.eval(source)


def test_error_source_is_the_native(interp):
    with pytest.raises(LispTypeError) as excinfo:
        interp.eval("(+ 1 \"two\")")
    assert str(excinfo.value.source) == "#<native-procedure:+>"
