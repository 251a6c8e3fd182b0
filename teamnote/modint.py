"""Integers modulo a prime, with fast exponentiation and inverses."""

from __future__ import annotations

from typing import Union

__all__ = ["MOD", "ModInt", "mod_pow", "mod_inverse"]

MOD = 998244353

_Operand = Union["ModInt", int]


class ModInt:
    """An integer reduced modulo ``mod``.

    Arithmetic with plain integers and with other ``ModInt`` values of the same
    modulus gives a ``ModInt``. Equality with a plain integer compares the
    reduced value with that integer as given.
    """

    __slots__ = ("value", "mod")

    def __init__(self, value: _Operand = 0, mod: int = MOD) -> None:
        if mod <= 0:
            raise ValueError(f"modulus must be positive, got {mod}")
        if isinstance(value, ModInt):
            value = value.value
        self.value = value % mod
        self.mod = mod

    def _operand(self, other: object) -> int | None:
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError(f"moduli differ: {self.mod} and {other.mod}")
            return other.value
        if isinstance(other, int):
            return other
        return None

    def __add__(self, other: _Operand) -> ModInt:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return ModInt(self.value + value, self.mod)

    __radd__ = __add__

    def __sub__(self, other: _Operand) -> ModInt:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return ModInt(self.value - value, self.mod)

    def __rsub__(self, other: _Operand) -> ModInt:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return ModInt(value - self.value, self.mod)

    def __neg__(self) -> ModInt:
        return ModInt(-self.value, self.mod)

    def __mul__(self, other: _Operand) -> ModInt:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return ModInt(self.value * value, self.mod)

    __rmul__ = __mul__

    def __pow__(self, exponent: int) -> ModInt:
        return mod_pow(self, exponent)

    def __int__(self) -> int:
        return self.value

    __index__ = __int__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModInt):
            return self.mod == other.mod and self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"ModInt({self.value}, mod={self.mod})"


def mod_pow(base: _Operand, exponent: int, mod: int | None = None) -> ModInt:
    """Return ``base ** exponent`` modulo ``mod``.

    When ``mod`` is omitted it is taken from ``base`` if that is a ``ModInt``,
    and is ``MOD`` otherwise.
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if mod is None:
        mod = base.mod if isinstance(base, ModInt) else MOD
    return ModInt(pow(int(base), exponent, mod), mod)


def mod_inverse(value: _Operand, mod: int | None = None) -> ModInt:
    """Return the multiplicative inverse of ``value`` modulo a prime ``mod``."""
    if mod is None:
        mod = value.mod if isinstance(value, ModInt) else MOD
    if int(value) % mod == 0:
        raise ZeroDivisionError("zero has no inverse")
    return mod_pow(value, mod - 2, mod)