from lumen import EvaluatorFn, LispValue, SExpression
from lumen.errors import LispError
from lumen.evaluation.tco import BEGIN, handle_special_form_tco
from lumen.types.environment import Environment


def catch_error_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (catch-error body...)
    Evaluates body like `begin`; a raised error is returned as a value instead.
    """
    try:
        return handle_special_form_tco(BEGIN, tail, env, evaluate_fn)
    except LispError as err:
        return err
