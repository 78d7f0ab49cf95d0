from lumen import EvaluatorFn, SExpression
from lumen.types.environment import Environment
from lumen.types.values import FALSE, TRUE, falsey


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a falsey value
    is found, which is returned immediately. If all operands are truthy,
    returns the value of the last operand. With zero operands, returns true.
    """
    val: SExpression = TRUE
    for expr in tail:
        val = evaluate_fn(expr, env)
        if falsey(val):
            return val
    return val


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Short-circuiting logical OR special form.

    (or a b c ...) returns the first truthy operand, or the last value seen
    when none are truthy. With zero operands, returns false.
    """
    val: SExpression = FALSE
    for expr in tail:
        val = evaluate_fn(expr, env)
        if not falsey(val):
            return val
    return val
