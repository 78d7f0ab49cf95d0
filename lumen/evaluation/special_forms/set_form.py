from lumen import EvaluatorFn
from lumen import SExpression, LispValue
from lumen.errors import LispArityError, LispBoundError, LispTypeError
from lumen.types.symbol import Symbol
from lumen.types.environment import Environment


def set_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (set! name value)
    Replaces the binding in whichever frame owns `name` and returns the old value.
    """
    if len(tail) != 2:
        raise LispArityError(f"set! requires exactly 2 arguments, got {len(tail)}")
    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LispTypeError(f"expected symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    previous = env.swap(name, value)
    if previous is None:
        raise LispBoundError(f"cannot set! unbound symbol {name}")
    return previous
