"""Disjoint-set forests, plain and with potential differences."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over ``0 .. n-1`` with union by size and path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of elements must be non-negative")
        self._parent = list(range(n))
        self._size = [1] * n
        self._count = n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, v: int) -> int:
        """Representative of the set holding ``v``."""
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def same(self, u: int, v: int) -> bool:
        return self.find(u) == self.find(v)

    def unite(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``; False if they were already one."""
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        if self._size[u] < self._size[v]:
            u, v = v, u
        self._parent[v] = u
        self._size[u] += self._size[v]
        self._count -= 1
        return True

    def size(self, v: int) -> int:
        """Number of elements in the set holding ``v``."""
        return self._size[self.find(v)]

    def count(self) -> int:
        """Number of disjoint sets."""
        return self._count


class WeightedUnionFind:
    """Disjoint sets where each element carries a weight relative to its root.

    ``merge(a, b, w)`` records ``weight(b) - weight(a) == w``.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of elements must be non-negative")
        # Negative entries hold the size of a root's set, others the parent.
        self._parent_or_size = [-1] * n
        self._diff = [0] * n

    def __len__(self) -> int:
        return len(self._parent_or_size)

    def find(self, i: int) -> int:
        path = []
        while self._parent_or_size[i] >= 0:
            path.append(i)
            i = self._parent_or_size[i]
        root = i
        for node in reversed(path):
            parent = self._parent_or_size[node]
            if parent != root:
                self._diff[node] += self._diff[parent]
                self._parent_or_size[node] = root
        return root

    def weight(self, i: int):
        """Weight of ``i`` relative to the root of its set."""
        self.find(i)
        return self._diff[i]

    def merge(self, a: int, b: int, w) -> None:
        """Join the sets so that ``weight(b) - weight(a) == w``.

        Nothing changes if ``a`` and ``b`` are already connected.
        """
        w = w + self.weight(a) - self.weight(b)
        a, b = self.find(a), self.find(b)
        if a == b:
            return
        if -self._parent_or_size[a] < -self._parent_or_size[b]:
            a, b = b, a
            w = -w
        self._parent_or_size[a] += self._parent_or_size[b]
        self._parent_or_size[b] = a
        self._diff[b] = w

    def diff(self, a: int, b: int):
        """``weight(b) - weight(a)``; meaningful only when connected."""
        return self.weight(b) - self.weight(a)

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def size(self, i: int) -> int:
        return -self._parent_or_size[self.find(i)]