"""Bitwise convolutions and number-theoretic convolution modulo 998244353."""

from __future__ import annotations

from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")

MOD = 998_244_353
_ROOT = 62


def _pairs(n: int) -> Iterator[tuple[int, int]]:
    """Index pairs touched by a radix-2 butterfly pass over length ``n``."""
    step = 1
    while step < n:
        for block in range(0, n, 2 * step):
            for lo in range(block, block + step):
                yield lo, lo + step
        step *= 2


def _power_of_two_pair(a: Sequence[T], b: Sequence[T]) -> tuple[list[T], list[T]]:
    x, y = list(a), list(b)
    n = len(x)
    if n != len(y):
        raise ValueError("operands must have the same length")
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a power of two")
    return x, y


def _superset_sum(v: list, sign: int) -> None:
    for lo, hi in _pairs(len(v)):
        v[lo] = v[lo] + v[hi] if sign > 0 else v[lo] - v[hi]


def _subset_sum(v: list, sign: int) -> None:
    for lo, hi in _pairs(len(v)):
        v[hi] = v[hi] + v[lo] if sign > 0 else v[hi] - v[lo]


def _hadamard(v: list) -> None:
    for lo, hi in _pairs(len(v)):
        s, t = v[lo], v[hi]
        v[lo] = s + t
        v[hi] = s - t


def and_convolution(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """``c[k] = sum(a[i] * b[j] for i & j == k)``; lengths a power of two."""
    x, y = _power_of_two_pair(a, b)
    _superset_sum(x, 1)
    _superset_sum(y, 1)
    c = [p * q for p, q in zip(x, y)]
    _superset_sum(c, -1)
    return c


def or_convolution(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """``c[k] = sum(a[i] * b[j] for i | j == k)``; lengths a power of two."""
    x, y = _power_of_two_pair(a, b)
    _subset_sum(x, 1)
    _subset_sum(y, 1)
    c = [p * q for p, q in zip(x, y)]
    _subset_sum(c, -1)
    return c


def xor_convolution(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """``c[k] = sum(a[i] * b[j] for i ^ j == k)``; lengths a power of two."""
    x, y = _power_of_two_pair(a, b)
    _hadamard(x)
    _hadamard(y)
    c = [p * q for p, q in zip(x, y)]
    _hadamard(c)
    n = len(c)
    return [v // n if isinstance(v, int) else v / n for v in c]


def _roots(n: int) -> list[int]:
    rt = [1, 1]
    k, s = 2, 2
    while k < n:
        z = pow(_ROOT, MOD >> s, MOD)
        rt += [rt[i // 2] * (z if i & 1 else 1) % MOD for i in range(k, 2 * k)]
        k *= 2
        s += 1
    return rt


def ntt(values: Sequence[int]) -> list[int]:
    """Number-theoretic transform modulo 998244353; length a power of two."""
    a = [v % MOD for v in values]
    n = len(a)
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a power of two")
    bits = n.bit_length() - 1
    rt = _roots(n)
    rev = [0] * n
    for i in range(1, n):
        rev[i] = (rev[i // 2] | (i & 1) << bits) // 2
    for i, r in enumerate(rev):
        if i < r:
            a[i], a[r] = a[r], a[i]
    k = 1
    while k < n:
        for start in range(0, n, 2 * k):
            for j in range(k):
                lo = start + j
                hi = lo + k
                z = rt[j + k] * a[hi] % MOD
                ai = a[lo]
                a[hi] = (ai - z) % MOD
                a[lo] = (ai + z) % MOD
        k *= 2
    return a


def convolve_mod(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Polynomial product of ``a`` and ``b`` with coefficients modulo 998244353."""
    if not a or not b:
        return []
    size = len(a) + len(b) - 1
    n = 1 << size.bit_length()
    inv = pow(n, MOD - 2, MOD)
    fa = ntt(list(a) + [0] * (n - len(a)))
    fb = ntt(list(b) + [0] * (n - len(b)))
    out = [0] * n
    for i, (x, y) in enumerate(zip(fa, fb)):
        out[-i & (n - 1)] = x * y % MOD * inv % MOD
    return ntt(out)[:size]