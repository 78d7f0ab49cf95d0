"""Structured runtime errors for lumen.

Every failure raised by the runtime is a `LispError`: an error kind (a
symbolic name such as ``type-error``), an optional payload value, an optional
cause (the error it was raised while handling) and an optional source (the
native function or procedure it propagated through). Errors travel as Python
exceptions; each procedure/native boundary re-raises a new link so the chain
reads as a traceback. `catch-error` is the only place an error becomes an
ordinary value.
"""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

ARGUMENT_ERROR = "argument-error"
ARITHMETIC_ERROR = "arithmetic-error"
ARITY_ERROR = "arity-error"
BOUND_ERROR = "bound-error"
BOUNDS_ERROR = "bounds-error"
EVAL_ERROR = "eval-error"
INTERNAL_ERROR = "internal-error"
IO_ERROR = "io-error"
MACRO_ERROR = "macro-expansion-error"
READ_ERROR = "read-error"
REDEFINE_ERROR = "redefine-error"
SYNTAX_ERROR = "syntax-error"
TYPE_ERROR = "type-error"


class LispError(Exception):
    """Base class for all lumen errors: one link of a cause chain."""

    def __init__(
        self,
        kind: str,
        value: Any = None,
        cause: Optional[LispError] = None,
        source: Any = None,
    ):
        self.kind: str = kind
        self.value: Any = value
        self.cause: Optional[LispError] = cause
        self.source: Any = source
        super().__init__(self._message())

    def _message(self) -> str:
        if self.value is None:
            return self.kind
        from lumen.types.values import lisp_display
        return f"{self.kind}: {lisp_display(self.value)}"

    def _derive(self, cause: Optional[LispError], source: Any) -> LispError:
        # Keep the concrete subclass so callers can still catch by kind class.
        err = LispError.__new__(type(self))
        LispError.__init__(err, self.kind, self.value, cause, source)
        return err

    @classmethod
    def new_from(cls, cause: LispError, source: Any) -> LispError:
        """A new link repeating `cause`'s kind and value, raised through `source`."""
        return cause._derive(cause, source)

    def with_source(self, source: Any) -> LispError:
        return self._derive(self.cause, source)

    def with_cause(self, cause: LispError) -> LispError:
        return self._derive(cause, self.source)

    def into_traceback(self) -> list[LispError]:
        """Flatten the cause chain, outermost first and innermost cause last."""
        out: list[LispError] = []
        err: Optional[LispError] = self
        while err is not None:
            out.append(err)
            err = err.cause
        return out

    def format_traceback(self) -> list[str]:
        from lumen.types.values import lisp_display, lisp_str

        lines = []
        for err in self.into_traceback():
            val = "" if err.value is None else lisp_display(err.value)
            lines.append(f"{err.kind}: {val}")
            if err.source is not None:
                lines.append(f"\tfrom {lisp_str(err.source)}")
        return lines

    def dump_traceback(self, file: Optional[TextIO] = None) -> None:
        out = file if file is not None else sys.stderr
        for line in self.format_traceback():
            print(line, file=out)

    def __repr__(self) -> str:
        from lumen.types.values import lisp_str
        return lisp_str(self)


class LispArgumentError(LispError):
    """Raised when an argument has the right type but an unusable value"""

    def __init__(self, value: Any = None, cause: Optional[LispError] = None, source: Any = None):
        super().__init__(ARGUMENT_ERROR, value, cause, source)


class LispArithmeticError(LispError):
    """Raised on integer overflow or an undefined integer operation"""

    def __init__(self, value: Any = None, cause: Optional[LispError] = None, source: Any = None):
        super().__init__(ARITHMETIC_ERROR, value, cause, source)


class LispArityError(LispError):
    """Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, value: Any = None, cause: Optional[LispError] = None, source: Any = None):
        super().__init__(ARITY_ERROR, value, cause, source)


class LispBoundError(LispError):
    """Raised when a symbol is used before it is bound"""

    def __init__(self, value: Any = None, cause: Optional[LispError] = None, source: Any = None):
        super().__init__(BOUND_ERROR, value, cause, source)


class LispBoundsError(LispError):
    """Raised when a vector index is out of range"""

    def __init__(self, value: Any = None, cause: Optional[LispError] = None, source: Any = None):
        super().__init__(BOUNDS_ERROR, value, cause, source)


class LispEvalError(LispError):
    """Raised when a value cannot be evaluated"""

    def __init__(self, value: Any = None, cause: Optional[LispError] = None, source: Any = None):
        super().__init__(EVAL_ERROR, value, cause, source)


class LispInternalError(LispError):

    def __init__(self, value: Any = None, cause: Optional[LispError] = None, source: Any = None):
        super().__init__(INTERNAL_ERROR, value, cause, source)


class LispIOError(LispError):
    """Raised when a file cannot be read"""

    def __init__(self, value: Any = None, cause: Optional[LispError] = None, source: Any = None):
        super().__init__(IO_ERROR, value, cause, source)


class LispMacroError(LispError):
    """Raised when a macro transformer fails"""

    def __init__(self, value: Any = None, cause: Optional[LispError] = None, source: Any = None):
        super().__init__(MACRO_ERROR, value, cause, source)


class LispReadError(LispError):
    """Raised by the reader on malformed source text"""

    def __init__(self, value: Any = None, cause: Optional[LispError] = None, source: Any = None):
        super().__init__(READ_ERROR, value, cause, source)


class LispIncompleteInput(LispReadError):
    """Raised when the source ends inside a form; a REPL may read more input"""


class LispRedefineError(LispError):
    """Raised when a top-level name is defined twice"""

    def __init__(self, value: Any = None, cause: Optional[LispError] = None, source: Any = None):
        super().__init__(REDEFINE_ERROR, value, cause, source)


class LispSyntaxError(LispError):
    """Raised when a special form is malformed"""

    def __init__(self, value: Any = None, cause: Optional[LispError] = None, source: Any = None):
        super().__init__(SYNTAX_ERROR, value, cause, source)


class LispTypeError(LispError):
    """Raised when the types of arguments passed to a function are incorrect"""

    def __init__(self, value: Any = None, cause: Optional[LispError] = None, source: Any = None):
        super().__init__(TYPE_ERROR, value, cause, source)
