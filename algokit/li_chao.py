"""Li Chao tree: minimum of lines and line segments at fixed query points."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable

INF = (2**63 - 1) // 4

_Line = tuple[int, int]
_EMPTY: _Line = (0, INF)


def _at(line: _Line, x: int) -> int:
    return line[0] * x + line[1]


class LiChaoTree:
    """Minimum of added lines ``a*x + b`` evaluated at given coordinates.

    Queries must be at one of the coordinates given at construction; with no
    line covering a point the result is ``INF``.
    """

    def __init__(self, xs: Iterable[int]) -> None:
        coords = sorted(xs)
        if not coords:
            raise ValueError("at least one coordinate is needed")
        n = 1
        while n < len(coords):
            n <<= 1
        coords += [coords[-1]] * (n - len(coords))
        self._xs = coords
        self._n = n
        self._seg: list[_Line] = [_EMPTY] * (2 * n)

    def _descend(self, line: _Line, i: int, l: int, r: int) -> None:
        xs, seg = self._xs, self._seg
        while True:
            mid = (l + r) >> 1
            cur = seg[i]
            lov = _at(line, xs[l]) < _at(cur, xs[l])
            rov = _at(line, xs[r - 1]) < _at(cur, xs[r - 1])
            if lov == rov:
                if lov:
                    seg[i] = line
                return
            mov = _at(line, xs[mid]) < _at(cur, xs[mid])
            if mov:
                seg[i], line = line, cur
            if lov != mov:
                i, r = 2 * i, mid
            else:
                i, l = 2 * i + 1, mid

    def _update_node(self, line: _Line, i: int) -> None:
        depth = i.bit_length() - 1
        width = self._n >> depth
        lo = width * (i - (1 << depth))
        self._descend(line, i, lo, lo + width)

    def add_line(self, a: int, b: int) -> None:
        """Add the line ``a*x + b`` over all coordinates."""
        self._descend((a, b), 1, 0, self._n)

    def add_segment(self, l: int, r: int, a: int, b: int) -> None:
        """Add ``a*x + b`` restricted to coordinates ``l <= x < r``."""
        lo = bisect_left(self._xs, l) + self._n
        hi = bisect_left(self._xs, r) + self._n
        line = (a, b)
        while lo < hi:
            if lo & 1:
                self._update_node(line, lo)
                lo += 1
            if hi & 1:
                hi -= 1
                self._update_node(line, hi)
            lo >>= 1
            hi >>= 1

    def query(self, x: int) -> int:
        """Minimum over the lines covering ``x``; ``INF`` if there are none."""
        p = bisect_left(self._xs, x)
        if p == len(self._xs) or self._xs[p] != x:
            raise ValueError(f"{x} is not a coordinate of this tree")
        p += self._n
        best = _at(self._seg[p], x)
        while p > 1:
            p >>= 1
            best = min(best, _at(self._seg[p], x))
        return best