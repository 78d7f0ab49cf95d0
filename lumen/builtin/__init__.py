"""Builtin natives and the default top-level environment.

Each builtin module exposes `register(env)` which binds its natives into a
frame; `default_environment` assembles them together with the constant
values and the default reader-character handlers.
"""

from __future__ import annotations

from typing import Optional

from lumen.builtin import char_handlers, core_builtin, io_builtin, list_builtin, math_builtin, vector_builtin
from lumen.config import get_allow_redefine
from lumen.evaluation.special_forms.define_form import ALLOW_REDEFINE
from lumen.types.environment import Environment
from lumen.types.nil import Nil
from lumen.types.symbol import Symbol
from lumen.types.values import FALSE, TRUE, lisp_bool

BUILTIN_MODULES = (core_builtin, math_builtin, list_builtin, vector_builtin, io_builtin)


def default_environment(allow_redefine: Optional[bool] = None) -> Environment:
    """A fresh top-level frame with natives, constants and reader-character handlers."""
    if allow_redefine is None:
        allow_redefine = get_allow_redefine()
    env = Environment()
    env.update(
        {
            TRUE: TRUE,
            FALSE: FALSE,
            Symbol("nil"): Nil,
            ALLOW_REDEFINE: lisp_bool(allow_redefine),
        }
    )
    for module in BUILTIN_MODULES:
        module.register(env)
    char_handlers.register(env)
    return env
