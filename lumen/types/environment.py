"""Runtime environment for lumen.

An Environment is one frame of bindings from Symbols to evaluated Lisp values,
linked to its enclosing frame through `outer`. Lookups walk outward and the
first frame that binds a name wins. Macro and reader-character tables follow
the same shadowing rule and are only allocated when first written.

The top-level frame creates a `ProcedureIdCounter`; every child frame is handed
the same counter so procedure ids stay unique across the whole chain.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lumen import LispValue
from lumen.errors import LispTypeError
from lumen.types.symbol import Symbol


class ProcedureIdCounter:
    """Monotonic source of procedure ids, shared by a whole frame chain."""

    __slots__ = ("_next",)

    def __init__(self, start: int = 0):
        self._next = start

    def next_id(self) -> int:
        self._next += 1
        return self._next


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "macros", "char_handlers", "outer", "counter", "_shared")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        counter: Optional[ProcedureIdCounter] = None,
    ):
        self.vars: dict[Symbol, LispValue] = {}
        self.macros: Optional[dict[Symbol, LispValue]] = None
        self.char_handlers: Optional[dict[str, LispValue]] = None
        self.outer: Optional[Environment] = outer
        if counter is None:
            counter = outer.counter if outer is not None else ProcedureIdCounter()
        self.counter: ProcedureIdCounter = counter
        self._shared = False
        if outer is not None:
            outer.mark_shared()

    def child(self) -> Environment:
        return Environment(self, self.counter)

    # --- ownership ---
    @property
    def is_shared(self) -> bool:
        """True once a child frame or a closure has been created over this frame."""
        return self._shared

    def mark_shared(self) -> None:
        self._shared = True

    @property
    def is_top_level(self) -> bool:
        return self.outer is None

    @property
    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    # --- variables ---
    def lookup(self, name: Symbol) -> Optional[LispValue]:
        """Value bound to `name` in the nearest frame, or None if unbound."""
        env: Optional[Environment] = self
        while env is not None:
            val = env.vars.get(name)
            if val is not None:
                return val
            env = env.outer
        return None

    def find(self, name: Symbol) -> Optional[Environment]:
        """The nearest frame in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def define(self, name: Symbol, value: LispValue) -> Optional[LispValue]:
        """Bind `name` in this frame, returning the value it replaced (if any)."""
        if not isinstance(name, Symbol):
            raise LispTypeError(f"cannot define {name!r} as a symbol")
        previous = self.vars.get(name)
        self.vars[name] = value
        return previous

    def swap(self, name: Symbol, value: LispValue) -> Optional[LispValue]:
        """Replace `name` in the frame that owns it; None when unbound everywhere."""
        env = self.find(name)
        if env is None:
            return None
        previous = env.vars[name]
        env.vars[name] = value
        return previous

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    # --- macros ---
    def lookup_macro(self, name: Symbol) -> Optional[LispValue]:
        env: Optional[Environment] = self
        while env is not None:
            if env.macros is not None:
                m = env.macros.get(name)
                if m is not None:
                    return m
            env = env.outer
        return None

    def define_macro(self, name: Symbol, proc: LispValue) -> Optional[LispValue]:
        if self.macros is None:
            self.macros = {}
        previous = self.macros.get(name)
        self.macros[name] = proc
        return previous

    # --- reader characters ---
    def lookup_char_handler(self, ch: str) -> Optional[LispValue]:
        env: Optional[Environment] = self
        while env is not None:
            if env.char_handlers is not None:
                h = env.char_handlers.get(ch)
                if h is not None:
                    return h
            env = env.outer
        return None

    def define_char_handler(self, ch: str, handler: LispValue) -> Optional[LispValue]:
        if self.char_handlers is None:
            self.char_handlers = {}
        previous = self.char_handlers.get(ch)
        self.char_handlers[ch] = handler
        return previous

    def next_procedure_id(self) -> int:
        return self.counter.next_id()

    def clear(self) -> None:
        """Drop every binding in this frame so it can host a fresh call."""
        self.vars.clear()
        self.macros = None
        self.char_handlers = None

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                if env.outer is None:
                    chain.append("<top-level>")
                else:
                    env_buf = StringIO()
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
