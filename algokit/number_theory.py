"""Elementary number theory: modular powers, gcd, primes and totients."""

from __future__ import annotations

import math
from itertools import accumulate


def power(base: int, exponent: int, modulus: int) -> int:
    """``base ** exponent`` modulo ``modulus`` by repeated squaring.

    A zero exponent yields 1 regardless of the modulus.
    """
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    while exponent > 0:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def extgcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    x0, y0, x1, y1 = 1, 0, 0, 1
    while b != 0:
        q = a // b
        a, b = b, a - q * b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return a, x0, y0


def invmod(a: int, m: int) -> int:
    """Inverse of ``a`` modulo ``m`` in ``[0, m)``; they must be coprime."""
    if math.gcd(a, m) != 1:
        raise ValueError(f"{a} and {m} are not coprime")
    _, x, _ = extgcd(a, m)
    return x % m


def is_prime(n: int) -> bool:
    """Primality by trial division."""
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def prime_factorization(n: int) -> list[tuple[int, int]]:
    """Prime factors of ``n`` with multiplicities, in increasing order."""
    if n < 1:
        raise ValueError("factorisation needs a positive integer")
    factors: list[tuple[int, int]] = []
    rest = n
    d = 2
    while d * d <= rest:
        if rest % d == 0:
            count = 0
            while rest % d == 0:
                rest //= d
                count += 1
            factors.append((d, count))
        d += 1
    if rest != 1:
        factors.append((rest, 1))
    return factors


def euler_phi(n: int) -> int:
    """Euler's totient: the count of ``1 <= k <= n`` coprime to ``n``."""
    result = n
    for p, _ in prime_factorization(n):
        result = result // p * (p - 1)
    return result


class Sieve:
    """Sieve of Eratosthenes on ``[0, limit]`` with prime-counting prefix sums."""

    def __init__(self, limit: int) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        flags = bytearray([1]) * (limit + 1)
        flags[: min(2, limit + 1)] = bytes(min(2, limit + 1))
        for p in range(2, math.isqrt(limit) + 1):
            if flags[p]:
                flags[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
        self._flags = flags
        self._counts = list(accumulate(flags))

    def _check(self, n: int) -> None:
        if not 0 <= n <= self.limit:
            raise ValueError(f"{n} is outside the sieve range [0, {self.limit}]")

    def is_prime(self, n: int) -> bool:
        self._check(n)
        return bool(self._flags[n])

    def count(self, limit: int) -> int:
        """Number of primes in ``[1, limit]``."""
        self._check(limit)
        return self._counts[limit]