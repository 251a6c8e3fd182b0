"""Number-theoretic transform modulo 998244353 and exact polynomial products."""

from __future__ import annotations

from collections.abc import Sequence

from .modint import MOD, ModInt

__all__ = ["PRIMITIVE_ROOT", "MAX_BITS", "MAX_LENGTH", "dft", "multiply"]

PRIMITIVE_ROOT = 3
MAX_BITS = 21
MAX_LENGTH = 1 << MAX_BITS


def _check_length(n: int) -> None:
    if n <= 0 or n & (n - 1) or n > MAX_LENGTH:
        raise ValueError(f"length must be a power of two up to {MAX_LENGTH}, got {n}")


def _reversal_permutation(n: int) -> list[int]:
    bits = n.bit_length() - 1
    rev = [0] * n
    for i in range(1, n):
        rev[i] = (rev[i >> 1] >> 1) | ((i & 1) << (bits - 1))
    return rev


def _transform(values: Sequence[int], inverse: bool) -> list[int]:
    n = len(values)
    _check_length(n)
    a = [int(values[r]) % MOD for r in _reversal_permutation(n)]
    half = 1
    while half < n:
        root = pow(PRIMITIVE_ROOT, (MOD - 1) // (2 * half), MOD)
        if inverse:
            root = pow(root, MOD - 2, MOD)
        for start in range(0, n, 2 * half):
            w = 1
            for k in range(start, start + half):
                x, y = a[k], a[k + half] * w % MOD
                a[k], a[k + half] = (x + y) % MOD, (x - y) % MOD
                w = w * root % MOD
        half *= 2
    if inverse:
        inv_n = pow(n, MOD - 2, MOD)
        a = [x * inv_n % MOD for x in a]
    return a


def dft(values: Sequence[int | ModInt], inverse: bool = False) -> list[ModInt]:
    """Return the transform of ``values`` modulo ``MOD``.

    With ``inverse`` true the inverse transform is returned. The length must be
    a power of two no larger than ``MAX_LENGTH``.
    """
    return [ModInt(x) for x in _transform(values, inverse)]


def multiply(f: Sequence[int | ModInt], g: Sequence[int | ModInt]) -> list[ModInt]:
    """Return the coefficients of ``f * g`` modulo ``MOD``."""
    if not f or not g:
        raise ValueError("polynomials must have at least one coefficient")
    out_len = len(f) + len(g) - 1
    size = 1 << (out_len - 1).bit_length()
    fa = _transform(list(f) + [0] * (size - len(f)), False)
    ga = _transform(list(g) + [0] * (size - len(g)), False)
    product = _transform([x * y % MOD for x, y in zip(fa, ga)], True)
    return [ModInt(x) for x in product[:out_len]]