from lumen import EvaluatorFn
from lumen import SExpression
from lumen.evaluation.tco import IF, until_last
from lumen.types.environment import Environment
from lumen.types.tail_call import TailCall


def if_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> TailCall:
    """
    (if test then [else])
    The chosen branch is in tail position; a missing else yields nil.
    """
    env, last = until_last(IF, tail, env, evaluate_fn)
    return TailCall(last, env)
