from lumen import EvaluatorFn
from lumen import SExpression
from lumen.evaluation.tco import BEGIN, until_last
from lumen.types.environment import Environment
from lumen.types.tail_call import TailCall


def begin_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> TailCall:
    env, last = until_last(BEGIN, tail, env, evaluate_fn)
    return TailCall(last, env)
