"""Integers modulo a fixed modulus."""

from __future__ import annotations

DEFAULT_MODULUS = 998_244_353


class ModInt:
    """An element of the ring of integers modulo ``mod``.

    Arithmetic with plain ``int`` operands is supported on either side; mixing
    two elements with different moduli raises ``ValueError``.
    """

    __slots__ = ("value", "mod")

    def __init__(self, value: int = 0, mod: int = DEFAULT_MODULUS) -> None:
        if mod < 1:
            raise ValueError(f"modulus must be positive, got {mod}")
        self.mod = mod
        self.value = value % mod

    def _coerce(self, other: object) -> ModInt | None:
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError(
                    f"cannot combine moduli {self.mod} and {other.mod}"
                )
            return other
        if isinstance(other, int):
            return ModInt(other, self.mod)
        return None

    def __add__(self, other: object) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return ModInt(self.value + o.value, self.mod)

    __radd__ = __add__

    def __sub__(self, other: object) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return ModInt(self.value - o.value, self.mod)

    def __rsub__(self, other: object) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return ModInt(o.value - self.value, self.mod)

    def __mul__(self, other: object) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return ModInt(self.value * o.value, self.mod)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self * o.inverse()

    def __rtruediv__(self, other: object) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o * self.inverse()

    def __neg__(self) -> ModInt:
        return ModInt(-self.value, self.mod)

    def __pow__(self, n: int) -> ModInt:
        return self.pow(n)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModInt):
            return self.mod == other.mod and self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"ModInt({self.value}, mod={self.mod})"

    def inverse(self) -> ModInt:
        """Multiplicative inverse; raises ``ZeroDivisionError`` if none exists."""
        try:
            return ModInt(pow(self.value, -1, self.mod), self.mod)
        except ValueError:
            raise ZeroDivisionError(
                f"{self.value} has no inverse modulo {self.mod}"
            ) from None

    def pow(self, n: int) -> ModInt:
        """Raise to the integer power ``n``; negative powers use the inverse."""
        if n < 0:
            return self.inverse().pow(-n)
        return ModInt(pow(self.value, n, self.mod), self.mod)