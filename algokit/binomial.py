"""Binomial coefficients modulo an integer."""

from __future__ import annotations

DEFAULT_MODULUS = 1_000_000_007


class Binomial:
    """Precomputed factorials for ``comb(n, k)`` modulo a prime, ``n <= limit``."""

    def __init__(self, limit: int, mod: int = DEFAULT_MODULUS) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        if mod <= max(limit, 1):
            raise ValueError("modulus must exceed the limit")
        self.limit = limit
        self.mod = mod
        fac = [1] * (limit + 1)
        inv = [1] * (limit + 1)
        finv = [1] * (limit + 1)
        for i in range(2, limit + 1):
            fac[i] = fac[i - 1] * i % mod
            inv[i] = mod - inv[mod % i] * (mod // i) % mod
            finv[i] = finv[i - 1] * inv[i] % mod
        self._fac = fac
        self._finv = finv

    def comb(self, n: int, k: int) -> int:
        """``C(n, k)`` modulo ``mod``; zero when ``k`` is out of ``[0, n]``."""
        if n < k or n < 0 or k < 0:
            return 0
        if n > self.limit:
            raise ValueError(f"{n} exceeds the precomputed limit {self.limit}")
        return self._fac[n] * (self._finv[k] * self._finv[n - k] % self.mod) % self.mod


def pascal_table(size: int, mod: int = DEFAULT_MODULUS) -> list[list[int]]:
    """Table ``C[i][j]`` for ``0 <= i, j < size`` by Pascal's rule, modulo any positive ``mod``."""
    if size < 0:
        raise ValueError("size must be non-negative")
    if size == 0:
        return []
    table = [[0] * size]
    table[0][0] = 1
    for _ in range(1, size):
        prev = table[-1]
        row = [1] + [(prev[j - 1] + prev[j]) % mod for j in range(1, size)]
        table.append(row)
    return table