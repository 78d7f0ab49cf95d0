from __future__ import annotations

from typing import Callable, Optional

from lumen import LispValue
from lumen.types.symbol import Symbol

NativeFn = Callable[..., LispValue]


class NativeFunction:
    """A host function callable from Lisp as `fn(env, args)`."""

    __slots__ = ("name", "doc", "fn")

    def __init__(self, name: str, fn: NativeFn, doc: Optional[str] = None):
        self.name: str = name
        self.fn: NativeFn = fn
        self.doc: Optional[str] = doc if doc is not None else _clean_doc(fn)

    def __call__(self, env, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NativeFunction) and other.name == self.name

    def __hash__(self) -> int:
        return hash(("native", self.name))

    def __repr__(self) -> str:
        return f"#<native-procedure:{self.name}>"

    __str__ = __repr__


def _clean_doc(fn: NativeFn) -> Optional[str]:
    doc = getattr(fn, "__doc__", None)
    if not doc:
        return None
    return " ".join(doc.split())


def native_table(mapping: dict[str, NativeFn]) -> dict:
    """Wrap `{name: fn}` as `{Symbol(name): NativeFunction}` for Environment.update."""
    return {Symbol(name): NativeFunction(name, fn) for name, fn in mapping.items()}
