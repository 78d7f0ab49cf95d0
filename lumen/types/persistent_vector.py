"""An immutable indexed sequence backed by a binary trie.

Capacity is always a power of two (at least 2). Internal nodes have exactly two
children, leaves hold two slots, and the path to index ``i`` is the binary
expansion of ``i`` over ``log2(capacity)`` bits. Updates copy only the nodes on
that path; every other subtree is shared with the vector it came from.
"""

from __future__ import annotations

from itertools import chain, repeat
from typing import Any, Iterable, Iterator, Optional

_UNSET = object()


class _Leaf:
    __slots__ = ("a", "b")

    def __init__(self, a: Any = _UNSET, b: Any = _UNSET):
        self.a = a
        self.b = b


class _Node:
    __slots__ = ("left", "right")

    def __init__(self, left, right):
        self.left = left
        self.right = right


def _next_power_of_two(n: int) -> int:
    cap = 2
    while cap < n:
        cap <<= 1
    return cap


def _empty(width: int):
    # Empty subtrees never change, so one copy per level is enough.
    if width == 2:
        return _Leaf()
    sub = _empty(width // 2)
    return _Node(sub, sub)


def _build(width: int, count: int, items: Iterator[Any]):
    """Fill a subtree of `width` slots with the next `count` items."""
    if count == 0:
        return _empty(width)
    if width == 2:
        a = next(items)
        b = next(items) if count > 1 else _UNSET
        return _Leaf(a, b)
    half = width // 2
    left = _build(half, min(count, half), items)
    right = _build(half, max(count - half, 0), items)
    return _Node(left, right)


def _lookup(node, width: int, i: int) -> Any:
    while width > 2:
        half = width // 2
        if i < half:
            node = node.left
        else:
            node = node.right
            i -= half
        width = half
    return node.a if i == 0 else node.b


def _assoc(node, width: int, i: int, value: Any):
    if width == 2:
        return _Leaf(value, node.b) if i == 0 else _Leaf(node.a, value)
    half = width // 2
    if i < half:
        return _Node(_assoc(node.left, half, i, value), node.right)
    return _Node(node.left, _assoc(node.right, half, i - half, value))


def _walk(node, width: int) -> Iterator[Any]:
    if width == 2:
        yield node.a
        yield node.b
        return
    half = width // 2
    yield from _walk(node.left, half)
    yield from _walk(node.right, half)


class PersistentVector:
    """Immutable vector with O(log n) indexed lookup and update."""

    __slots__ = ("_size", "_capacity", "_root")

    def __init__(self, size: int = 0, capacity: int = 2, root=None):
        self._size = size
        self._capacity = capacity
        self._root = root if root is not None else _empty(capacity)

    # --- construction ---
    @classmethod
    def empty(cls) -> PersistentVector:
        return cls()

    @classmethod
    def with_size(cls, n: int) -> PersistentVector:
        """A vector of `n` unset slots."""
        if n < 0:
            raise ValueError(f"negative vector size: {n}")
        cap = _next_power_of_two(max(n, 2))
        return cls(n, cap, _empty(cap))

    @classmethod
    def repeating(cls, n: int, value: Any) -> PersistentVector:
        return cls._filled(n, repeat(value, n))

    @classmethod
    def from_iterable(cls, items: Iterable[Any]) -> PersistentVector:
        """Build in one pass; unsized iterables are materialized first to learn the count."""
        try:
            n = len(items)  # type: ignore[arg-type]
        except TypeError:
            items = list(items)
            n = len(items)
        return cls._filled(n, iter(items))

    @classmethod
    def concat(cls, vectors: Iterable[PersistentVector]) -> PersistentVector:
        return cls.from_iterable(list(chain.from_iterable(vectors)))

    @classmethod
    def _filled(cls, n: int, items: Iterator[Any]) -> PersistentVector:
        if n < 0:
            raise ValueError(f"negative vector size: {n}")
        cap = _next_power_of_two(max(n, 2))
        try:
            root = _build(cap, n, items)
        except StopIteration:
            raise ValueError(f"iterable produced fewer than {n} items") from None
        return cls(n, cap, root)

    # --- access ---
    @property
    def capacity(self) -> int:
        return self._capacity

    def lookup(self, i: int) -> Optional[Any]:
        """The value at `i`, or None when `i` is out of range or the slot is unset."""
        if not 0 <= i < self._size:
            return None
        val = _lookup(self._root, self._capacity, i)
        return None if val is _UNSET else val

    def __getitem__(self, i: int) -> Any:
        if i < 0:
            i += self._size
        if not 0 <= i < self._size:
            raise IndexError(f"vector index out of range: {i}")
        val = _lookup(self._root, self._capacity, i)
        return None if val is _UNSET else val

    def insert(self, i: int, value: Any) -> PersistentVector:
        """A new vector with slot `i` set to `value`; this vector is unchanged."""
        if not 0 <= i < self._size:
            raise IndexError(f"vector index out of range: {i}")
        return PersistentVector(self._size, self._capacity, _assoc(self._root, self._capacity, i, value))

    def append(self, value: Any) -> PersistentVector:
        root, cap = self._root, self._capacity
        if self._size == cap:
            root = _Node(root, _empty(cap))
            cap *= 2
        return PersistentVector(self._size + 1, cap, _assoc(root, cap, self._size, value))

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for i, val in enumerate(_walk(self._root, self._capacity)):
            if i >= self._size:
                break
            yield None if val is _UNSET else val

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersistentVector) or len(other) != self._size:
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PersistentVector({list(self)!r})"
