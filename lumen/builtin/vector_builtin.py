from __future__ import annotations

from lumen import LispValue
from lumen.builtin.args import expect, unpack
from lumen.errors import LispArgumentError, LispArityError, LispBoundsError, LispTypeError
from lumen.types.cons import list_to_vec, to_lisp_list
from lumen.types.environment import Environment
from lumen.types.native import native_table
from lumen.types.nil import Nil
from lumen.types.persistent_vector import PersistentVector
from lumen.types.values import is_integer, is_vector, lisp_bool, lisp_str


def _vector(value: LispValue) -> PersistentVector:
    return expect(value, is_vector, "vector")


def _index(vec: PersistentVector, i: LispValue) -> int:
    expect(i, is_integer, "integer")
    if not 0 <= i < len(vec):
        raise LispBoundsError(f"index {i} out of range for vector of length {len(vec)}")
    return i


def vector(env: Environment, args: list[LispValue]) -> LispValue:
    """(vector x...) vector of the arguments"""
    return PersistentVector.from_iterable(args)


def make_vector(env: Environment, args: list[LispValue]) -> LispValue:
    """(make-vector n [fill]) vector of n copies of fill (default nil)"""
    if not 1 <= len(args) <= 2:
        raise LispArityError(f"make-vector expects 1 or 2 args, got {len(args)}")
    n = expect(args[0], is_integer, "integer")
    if n < 0:
        raise LispArgumentError(f"make-vector: negative size {n}")
    fill = args[1] if len(args) == 2 else Nil
    return PersistentVector.repeating(n, fill)


def vector_ref(env: Environment, args: list[LispValue]) -> LispValue:
    """(vector-ref v i) element at index i"""
    vec, i = unpack(args, 2)
    vec = _vector(vec)
    return vec[_index(vec, i)]


def vector_set(env: Environment, args: list[LispValue]) -> LispValue:
    """(vector-set v i x) new vector with index i replaced; v is unchanged"""
    vec, i, value = unpack(args, 3)
    vec = _vector(vec)
    return vec.insert(_index(vec, i), value)


def vector_push(env: Environment, args: list[LispValue]) -> LispValue:
    """(vector-push v x) new vector with x appended"""
    vec, value = unpack(args, 2)
    return _vector(vec).append(value)


def vector_length(env: Environment, args: list[LispValue]) -> LispValue:
    """(vector-length v)"""
    return len(_vector(unpack(args, 1)[0]))


def vector_p(env: Environment, args: list[LispValue]) -> LispValue:
    """(vector? x)"""
    return lisp_bool(is_vector(unpack(args, 1)[0]))


def list_to_vector(env: Environment, args: list[LispValue]) -> LispValue:
    """(list->vector list)"""
    ls = unpack(args, 1)[0]
    items = list_to_vec(ls)
    if items is None:
        raise LispTypeError(f"expected proper list, got {lisp_str(ls)}")
    return PersistentVector.from_iterable(items)


def vector_to_list(env: Environment, args: list[LispValue]) -> LispValue:
    """(vector->list v)"""
    return to_lisp_list(_vector(unpack(args, 1)[0]))


def register(env: Environment) -> None:
    env.update(
        native_table(
            {
                "vector": vector,
                "make-vector": make_vector,
                "vector-ref": vector_ref,
                "vector-set": vector_set,
                "vector-push": vector_push,
                "vector-length": vector_length,
                "vector?": vector_p,
                "list->vector": list_to_vector,
                "vector->list": vector_to_list,
            }
        )
    )
