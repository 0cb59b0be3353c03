"""Sparse table for idempotent range folds."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class SparseTable(Generic[T]):
    """Static range queries in O(1) for an idempotent, associative ``op``."""

    def __init__(self, values: Iterable[T], op: Callable[[T, T], T]) -> None:
        row = list(values)
        self._op = op
        self._n = len(row)
        self._table = [row]
        width = 1
        while 2 * width <= self._n:
            prev = self._table[-1]
            self._table.append(
                [op(prev[j], prev[j + width]) for j in range(self._n - 2 * width + 1)]
            )
            width *= 2

    def __len__(self) -> int:
        return self._n

    def fold(self, l: int, r: int) -> T:
        """Fold of ``op`` over elements ``[l, r)``; the range must be non-empty."""
        if not 0 <= l < r <= self._n:
            raise IndexError(f"invalid range [{l}, {r})")
        b = (r - l).bit_length() - 1
        level = self._table[b]
        return self._op(level[l], level[r - (1 << b)])