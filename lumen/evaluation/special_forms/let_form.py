from lumen import EvaluatorFn
from lumen import SExpression
from lumen.evaluation.tco import LET, until_last
from lumen.types.environment import Environment
from lumen.types.tail_call import TailCall


def let_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> TailCall:
    """The body's last expression is evaluated in the let frame, in tail position."""
    env, last = until_last(LET, tail, env, evaluate_fn)
    return TailCall(last, env)
