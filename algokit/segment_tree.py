"""Segment trees: point update with range fold, and range affine with range sum."""

from __future__ import annotations

import math
from typing import Callable

AFFINE_MODULUS = 998_244_353


class SegmentTree:
    """Point assignment and range fold of an associative ``op``.

    The defaults give range minimum with ``inf`` for unset positions.
    """

    def __init__(self, n: int, op: Callable = min, identity=math.inf) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        size = 1
        while size < n:
            size *= 2
        self._n = n
        self._size = size
        self._op = op
        self._identity = identity
        self._tree = [identity] * (2 * size)

    def __len__(self) -> int:
        return self._n

    def update(self, i: int, a) -> None:
        """Set element ``i`` to ``a``."""
        if not 0 <= i < self._n:
            raise IndexError(f"index {i} out of range")
        i += self._size
        tree = self._tree
        tree[i] = a
        while i > 1:
            i //= 2
            tree[i] = self._op(tree[2 * i], tree[2 * i + 1])

    def query(self, l: int, r: int):
        """Fold over ``[l, r)``; the identity for an empty range."""
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"invalid range [{l}, {r})")
        op, tree = self._op, self._tree
        left = right = self._identity
        l += self._size
        r += self._size
        while l < r:
            if l & 1:
                left = op(left, tree[l])
                l += 1
            if r & 1:
                r -= 1
                right = op(tree[r], right)
            l >>= 1
            r >>= 1
        return op(left, right)


_IDENTITY_MAP = (1, 0)


class _Node:
    __slots__ = ("lo", "hi", "value", "lazy", "left", "right")

    def __init__(self, lo: int, hi: int) -> None:
        self.lo = lo
        self.hi = hi
        self.value = 0
        self.lazy = _IDENTITY_MAP
        self.left: _Node | None = None
        self.right: _Node | None = None


class LazySegmentTree:
    """Range affine update ``x -> b*x + c`` and range sum, modulo ``mod``.

    Nodes are created on demand, so construction is O(1) for any size and
    every element starts at zero.
    """

    def __init__(self, n: int, mod: int = AFFINE_MODULUS) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._n = n
        self.mod = mod
        self._root = _Node(0, n)

    def __len__(self) -> int:
        return self._n

    def _apply(self, node: _Node, f: tuple[int, int]) -> None:
        b, c = f
        mod = self.mod
        pb, pc = node.lazy
        node.lazy = (pb * b % mod, (pc * b + c) % mod)
        node.value = (b * node.value + c * (node.hi - node.lo)) % mod

    def _push(self, node: _Node) -> None:
        if node.left is None:
            mid = node.lo + (node.hi - node.lo) // 2
            node.left = _Node(node.lo, mid)
            node.right = _Node(mid, node.hi)
        if node.lazy != _IDENTITY_MAP:
            self._apply(node.left, node.lazy)
            self._apply(node.right, node.lazy)
            node.lazy = _IDENTITY_MAP

    def _check(self, l: int, r: int) -> None:
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"invalid range [{l}, {r})")

    def effect(self, l: int, r: int, f: tuple[int, int]) -> None:
        """Replace every ``x`` in ``[l, r)`` by ``b*x + c`` where ``f = (b, c)``."""
        self._check(l, r)
        f = (f[0] % self.mod, f[1] % self.mod)
        self._effect(self._root, l, r, f)

    def _effect(self, node: _Node, l: int, r: int, f: tuple[int, int]) -> None:
        if r <= node.lo or node.hi <= l:
            return
        if l <= node.lo and node.hi <= r:
            self._apply(node, f)
            return
        self._push(node)
        self._effect(node.left, l, r, f)
        self._effect(node.right, l, r, f)
        node.value = (node.left.value + node.right.value) % self.mod

    def query(self, l: int, r: int) -> int:
        """Sum of ``[l, r)`` modulo ``mod``."""
        self._check(l, r)
        return self._query(self._root, l, r)

    def _query(self, node: _Node, l: int, r: int) -> int:
        if r <= node.lo or node.hi <= l:
            return 0
        if l <= node.lo and node.hi <= r:
            return node.value
        self._push(node)
        return (self._query(node.left, l, r) + self._query(node.right, l, r)) % self.mod