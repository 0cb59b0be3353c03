"""Solvers for a few standard judge problems, reading and writing plain text."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterator

from .convolution import and_convolution, or_convolution, xor_convolution
from .li_chao import INF, LiChaoTree
from .modint import ModInt
from .segment_tree import AFFINE_MODULUS, LazySegmentTree, SegmentTree

MOD = 998_244_353


def _ints(text: str) -> Iterator[int]:
    return map(int, text.split())


def _take(it: Iterator[int], count: int) -> list[int]:
    values = [next(it) for _ in range(count)]
    return values


def _lines(values) -> str:
    return "".join(f"{v}\n" for v in values)


def _read_pair(text: str) -> tuple[list[ModInt], list[ModInt]]:
    it = _ints(text)
    try:
        size = 1 << next(it)
        a = [ModInt(v, MOD) for v in _take(it, size)]
        b = [ModInt(v, MOD) for v in _take(it, size)]
    except StopIteration:
        raise ValueError("input ended early") from None
    return a, b


def _row(values) -> str:
    return " ".join(str(v) for v in values) + "\n"


def solve_and_convolution(text: str) -> str:
    """Bitwise AND convolution of two length ``2**n`` arrays modulo 998244353."""
    a, b = _read_pair(text)
    return _row(and_convolution(a, b))


def solve_and_convolution_by_or(text: str) -> str:
    """AND convolution computed through OR convolution of the reversed arrays."""
    a, b = _read_pair(text)
    c = or_convolution(a[::-1], b[::-1])
    return _row(c[::-1])


def solve_xor_convolution(text: str) -> str:
    """Bitwise XOR convolution of two length ``2**n`` arrays modulo 998244353."""
    a, b = _read_pair(text)
    return _row(xor_convolution(a, b))


def solve_line_add_get_min(text: str) -> str:
    """Add lines and query the minimum at points, answering offline."""
    it = _ints(text)
    try:
        n, q = next(it), next(it)
        queries: list[tuple[int, int, int]] = [
            (0, next(it), next(it)) for _ in range(n)
        ]
        points: list[int] = []
        for _ in range(q):
            kind = next(it)
            if kind == 0:
                queries.append((0, next(it), next(it)))
            else:
                p = next(it)
                queries.append((1, p, 0))
                points.append(p)
    except StopIteration:
        raise ValueError("input ended early") from None
    if not points:
        return ""
    tree = LiChaoTree(points)
    answers = []
    for kind, a, b in queries:
        if kind == 0:
            tree.add_line(a, b)
        else:
            answers.append(tree.query(a))
    return _lines(answers)


def solve_segment_add_get_min(text: str) -> str:
    """Add line segments on ``[l, r)`` and query minima; ``INFINITY`` if uncovered."""
    it = _ints(text)
    try:
        n, q = next(it), next(it)
        queries: list[tuple[int, ...]] = [
            (0, next(it), next(it), next(it), next(it)) for _ in range(n)
        ]
        points: list[int] = []
        for _ in range(q):
            kind = next(it)
            if kind == 0:
                queries.append((0, next(it), next(it), next(it), next(it)))
            else:
                p = next(it)
                queries.append((1, p))
                points.append(p)
    except StopIteration:
        raise ValueError("input ended early") from None
    if not points:
        return ""
    tree = LiChaoTree(points)
    answers = []
    for query in queries:
        if query[0] == 0:
            _, l, r, a, b = query
            tree.add_segment(l, r, a, b)
        else:
            value = tree.query(query[1])
            answers.append("INFINITY" if value == INF else value)
    return _lines(answers)


def solve_range_affine_range_sum(text: str) -> str:
    """Range affine updates and range sums modulo 998244353."""
    it = _ints(text)
    try:
        n, q = next(it), next(it)
        tree = LazySegmentTree(n, AFFINE_MODULUS)
        for i in range(n):
            tree.effect(i, i + 1, (0, next(it)))
        answers = []
        for _ in range(q):
            if next(it) == 0:
                l, r, b, c = next(it), next(it), next(it), next(it)
                tree.effect(l, r, (b, c))
            else:
                l, r = next(it), next(it)
                answers.append(tree.query(l, r))
    except StopIteration:
        raise ValueError("input ended early") from None
    return _lines(answers)


def solve_static_rmq(text: str) -> str:
    """Range minimum queries over a fixed array."""
    it = _ints(text)
    try:
        n, q = next(it), next(it)
        tree = SegmentTree(n)
        for i in range(n):
            tree.update(i, next(it))
        answers = [tree.query(next(it), next(it)) for _ in range(q)]
    except StopIteration:
        raise ValueError("input ended early") from None
    return _lines(answers)


SOLVERS: dict[str, Callable[[str], str]] = {
    "bitwise_and_convolution": solve_and_convolution,
    "bitwise_and_convolution_by_or": solve_and_convolution_by_or,
    "bitwise_xor_convolution": solve_xor_convolution,
    "line_add_get_min": solve_line_add_get_min,
    "segment_add_get_min": solve_segment_add_get_min,
    "range_affine_range_sum": solve_range_affine_range_sum,
    "staticrmq": solve_static_rmq,
}


def main(argv: list[str] | None = None) -> int:
    """Solve the named problem with input from stdin and answers to stdout."""
    parser = argparse.ArgumentParser(description="Solve a judge problem from stdin.")
    parser.add_argument("problem", choices=sorted(SOLVERS))
    args = parser.parse_args(argv)
    try:
        output = SOLVERS[args.problem](sys.stdin.read())
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())