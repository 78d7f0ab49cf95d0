"""User-defined procedures with one or more call signatures."""

from __future__ import annotations

from typing import Optional

from lumen import SExpression
from lumen.types.symbol import Symbol


class ArityDescriptor:
    """Required parameter names plus an optional rest-parameter name."""

    __slots__ = ("required", "rest")

    def __init__(self, required: list[Symbol], rest: Optional[Symbol] = None):
        self.required: list[Symbol] = required
        self.rest: Optional[Symbol] = rest

    def accepts(self, n: int) -> bool:
        if n < len(self.required):
            return False
        return self.rest is not None or n == len(self.required)

    def __repr__(self) -> str:
        names = " ".join(str(s) for s in self.required)
        if self.rest is None:
            return f"({names})"
        return f"({names} . {self.rest})" if names else str(self.rest)


Clause = tuple[ArityDescriptor, list[SExpression]]


class Procedure:
    """A closure over its defining environment.

    `id` comes from the environment's shared procedure counter and is kept by
    renamed copies, so a procedure recognises calls to itself however it is
    bound.
    """

    __slots__ = ("env", "name", "id", "doc", "clauses")

    def __init__(
        self,
        env,
        clauses: list[Clause],
        name: Optional[str] = None,
        doc: Optional[str] = None,
        proc_id: Optional[int] = None,
    ):
        if not clauses:
            raise ValueError("a procedure needs at least one clause")
        self.env = env
        self.clauses: list[Clause] = clauses
        self.name: Optional[str] = name
        self.doc: Optional[str] = doc
        self.id: int = proc_id if proc_id is not None else env.next_procedure_id()
        # Closures keep their frame alive; it can no longer be reused in place.
        env.mark_shared()

    def with_name(self, name: str) -> Procedure:
        return Procedure(self.env, self.clauses, name, self.doc, self.id)

    def __repr__(self) -> str:
        if self.name is not None:
            return f"#<named-procedure:{self.name}>"
        return f"#<anonymous-procedure:{self.id}>"

    __str__ = __repr__
