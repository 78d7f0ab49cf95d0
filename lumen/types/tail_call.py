from lumen import SExpression


class TailCall:
    """A pending evaluation of `expr` in `env`, handed back to the evaluator loop."""

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env):
        self.expr = expr
        self.env = env
