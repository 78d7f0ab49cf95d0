# Core type aliases for lumen's data model.
# Runtime values are plain Python objects where the host has a natural match
# (int, float, str) and small classes from lumen.types otherwise (Symbol,
# Char, Cons, LazyCons, Nil, PersistentVector, NativeFunction, Procedure).
# Code is data: the reader produces exactly the values the evaluator consumes.
#
# Naming guidance:
# - SExpression: use in reader/special-form/macro code for unevaluated forms.
# - LispValue:  use in evaluator/runtime code for evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
LispValue = Any
# Forms alias (code-as-data)
SExpression = LispValue

# Evaluator function type: passed to special forms and the trampoline so they
# can evaluate sub-expressions without importing the evaluator module.
EvaluatorFn = Callable[..., LispValue]
