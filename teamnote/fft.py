"""Floating-point FFT and integer polynomial multiplication."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence

__all__ = ["MAX_BITS", "MAX_LENGTH", "SPLIT", "dft", "multiply", "multiply_split"]

MAX_BITS = 21
MAX_LENGTH = 1 << MAX_BITS
# Roughly the square root of the largest coefficient multiply_split handles.
SPLIT = 50_000


def _check_length(n: int) -> None:
    if n <= 0 or n & (n - 1) or n > MAX_LENGTH:
        raise ValueError(f"length must be a power of two up to {MAX_LENGTH}, got {n}")


def _reversal_permutation(n: int) -> list[int]:
    bits = n.bit_length() - 1
    rev = [0] * n
    for i in range(1, n):
        rev[i] = (rev[i >> 1] >> 1) | ((i & 1) << (bits - 1))
    return rev


def dft(values: Sequence[complex], inverse: bool = False) -> list[complex]:
    """Return the discrete Fourier transform of ``values``.

    With ``inverse`` true the inverse transform is returned, scaled by
    ``1 / len(values)``. The length must be a power of two.
    """
    n = len(values)
    _check_length(n)
    a = [complex(values[r]) for r in _reversal_permutation(n)]
    sign = -1 if inverse else 1
    half = 1
    while half < n:
        roots = [cmath.exp(sign * 1j * math.pi * k / half) for k in range(half)]
        for start in range(0, n, 2 * half):
            for k, w in enumerate(roots, start):
                x, y = a[k], a[k + half] * w
                a[k], a[k + half] = x + y, x - y
        half *= 2
    if inverse:
        a = [x / n for x in a]
    return a


def _sizes(f: Sequence[int], g: Sequence[int]) -> tuple[int, int]:
    if not f or not g:
        raise ValueError("polynomials must have at least one coefficient")
    out_len = len(f) + len(g) - 1
    return out_len, 1 << (out_len - 1).bit_length()


def _padded(values: Sequence[complex], size: int) -> list[complex]:
    return list(values) + [0] * (size - len(values))


def multiply(f: Sequence[int], g: Sequence[int]) -> list[int]:
    """Return the coefficients of the product of polynomials ``f`` and ``g``.

    Suited to small coefficients: the largest coefficient squared times the
    length must stay well within double precision.
    """
    out_len, size = _sizes(f, g)
    cf = dft(_padded(f, size))
    cg = dft(_padded(g, size))
    product = dft([x * y for x, y in zip(cf, cg)], inverse=True)
    return [round(x.real) for x in product[:out_len]]


def multiply_split(f: Sequence[int], g: Sequence[int]) -> list[int]:
    """Multiply polynomials with large coefficients exactly.

    Each coefficient is split into a high and low part around ``SPLIT``, which
    keeps the floating-point products small enough to round correctly.
    """
    out_len, size = _sizes(f, g)
    p = dft(_padded([complex(*divmod(v, SPLIT)) for v in f], size))
    q = dft(_padded([complex(*divmod(v, SPLIT)) for v in g], size))

    high, mid, low = [], [], []
    for i, (pi, qi) in enumerate(zip(p, q)):
        j = -i % size
        pc, qc = p[j].conjugate(), q[j].conjugate()
        p1, p2 = (pi + pc) * 0.5, (pi - pc) * -0.5j
        q1, q2 = (qi + qc) * 0.5, (qi - qc) * -0.5j
        high.append(p1 * q1)
        mid.append(p1 * q2 + p2 * q1)
        low.append(p2 * q2)

    high = dft(high, inverse=True)
    mid = dft(mid, inverse=True)
    low = dft(low, inverse=True)
    return [
        round(h.real) * SPLIT * SPLIT + round(m.real) * SPLIT + round(lo.real)
        for h, m, lo in zip(high[:out_len], mid[:out_len], low[:out_len])
    ]