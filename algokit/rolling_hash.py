"""Polynomial rolling hash modulo the Mersenne prime 2**61 - 1."""

from __future__ import annotations

MODULUS = (1 << 61) - 1
DEFAULT_BASE = 150


class RollingHash:
    """Hashes of every substring of a string in O(1) after linear setup."""

    def __init__(self, s: str | bytes, base: int = DEFAULT_BASE) -> None:
        self.base = base
        n = len(s)
        hashed = [0] * (n + 1)
        powers = [1] * (n + 1)
        for i, ch in enumerate(s):
            code = ord(ch) if isinstance(ch, str) else ch
            powers[i + 1] = powers[i] * base % MODULUS
            hashed[i + 1] = (hashed[i] * base + code) % MODULUS
        self._hashed = hashed
        self._powers = powers

    def __len__(self) -> int:
        return len(self._hashed) - 1

    def get(self, l: int, r: int) -> int:
        """Hash of the substring ``s[l:r]``."""
        if not 0 <= l <= r <= len(self):
            raise IndexError(f"invalid range [{l}, {r})")
        return (self._hashed[r] - self._hashed[l] * self._powers[r - l]) % MODULUS