"""Manacher's algorithm for odd-length palindromes."""

from __future__ import annotations

__all__ = ["manacher"]


def manacher(s: str) -> list[int]:
    """Return the maximal palindrome radius at each 1-based position of ``s``.

    The result has ``len(s) + 1`` entries. For ``i >= 1`` with ``r`` the entry
    at ``i``, ``s[i - 1 - r:i + r]`` is the longest palindrome centred at
    position ``i``. Entry 0 is 0. Even-length palindromes are found by running
    this on the string with a separator between and around all characters.
    """
    n = len(s)
    p = [0] * (n + 1)
    pos = 0
    for i in range(1, n + 1):
        if i <= pos + p[pos]:
            p[i] = min(pos + p[pos] - i, p[2 * pos - i])
        while (
            i + p[i] + 1 <= n
            and i - p[i] - 1 >= 1
            and s[i - p[i] - 2] == s[i + p[i]]
        ):
            p[i] += 1
        if p[pos] + pos < p[i] + i:
            pos = i
    return p