"""Fenwick tree (binary indexed tree) for prefix sums."""

from __future__ import annotations

from typing import Sequence


class FenwickTree:
    """Point updates and prefix sums over ``n`` elements, all starting at zero."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._n = n
        self._data = [0] * (n + 1)

    @classmethod
    def from_values(cls, values: Sequence) -> FenwickTree:
        """Build in linear time from initial values."""
        tree = cls(len(values))
        data = tree._data
        data[1:] = list(values)
        n = tree._n
        for i in range(1, n + 1):
            j = i + (i & -i)
            if j <= n:
                data[j] += data[i]
        return tree

    def __len__(self) -> int:
        return self._n

    def add(self, k: int, x) -> None:
        """Add ``x`` to element ``k``."""
        if not 0 <= k < self._n:
            raise IndexError(f"index {k} out of range")
        k += 1
        while k <= self._n:
            self._data[k] += x
            k += k & -k

    def prefix_sum(self, r: int):
        """Sum of elements ``[0, r)``."""
        if not 0 <= r <= self._n:
            raise IndexError(f"bound {r} out of range")
        total = 0
        while r > 0:
            total += self._data[r]
            r -= r & -r
        return total

    def range_sum(self, l: int, r: int):
        """Sum of elements ``[l, r)``."""
        return self.prefix_sum(r) - self.prefix_sum(l)

    def _search(self, x, inclusive: bool) -> int:
        i = 0
        k = 1 << self._n.bit_length()
        while k:
            j = i + k
            if j <= self._n:
                v = self._data[j]
                if v < x or (inclusive and v == x):
                    x -= v
                    i = j
            k >>= 1
        return i

    def lower_bound(self, x) -> int:
        """Smallest ``i`` with ``prefix_sum(i + 1) >= x`` (values non-negative)."""
        return self._search(x, inclusive=False)

    def upper_bound(self, x) -> int:
        """Smallest ``i`` with ``prefix_sum(i + 1) > x`` (values non-negative)."""
        return self._search(x, inclusive=True)