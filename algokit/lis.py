"""Length of the longest increasing subsequence."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Iterable


def longest_increasing_subsequence(values: Iterable, strict: bool = True) -> int:
    """Length of the longest increasing subsequence in O(n log n).

    With ``strict`` the subsequence must strictly increase; otherwise equal
    neighbours are allowed.
    """
    search = bisect_left if strict else bisect_right
    tails: list = []
    for v in values:
        pos = search(tails, v)
        if pos == len(tails):
            tails.append(v)
        else:
            tails[pos] = v
    return len(tails)