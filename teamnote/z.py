"""Z function and prefix matching against a second string."""

from __future__ import annotations

__all__ = ["z_function", "match_z"]


def z_function(s: str) -> list[int]:
    """Return the Z function of ``s`` indexed by 1-based position.

    The result has ``len(s) + 1`` entries. For ``i >= 2`` entry ``i`` is the
    length of the longest common prefix of ``s[i - 1:]`` and ``s``. Entries 0
    and 1 are 0.
    """
    n = len(s)
    z = [0] * (n + 1)
    pos = 1
    for i in range(2, n + 1):
        if i <= pos + z[pos] - 1:
            z[i] = min(pos + z[pos] - i, z[i - pos + 1])
        while i + z[i] <= n and s[i + z[i] - 1] == s[z[i]]:
            z[i] += 1
        if z[pos] + pos < z[i] + i:
            pos = i
    return z


def match_z(s: str, t: str) -> list[int]:
    """Return, for each 1-based position of ``s``, its common prefix with ``t``.

    The result has ``len(s) + 1`` entries; entry ``i`` (``i >= 1``) is the
    length of the longest common prefix of ``s[i - 1:]`` and ``t``. Entry 0
    is 0.
    """
    n, m = len(s), len(t)
    z = z_function(t)
    f = [0] * (n + 1)
    pos = 0
    for i in range(1, n + 1):
        if i <= pos + f[pos] - 1:
            f[i] = min(pos + f[pos] - i, z[i - pos + 1])
        while i + f[i] <= n and f[i] + 1 <= m and s[i + f[i] - 1] == t[f[i]]:
            f[i] += 1
        if pos + f[pos] < i + f[i]:
            pos = i
    return f