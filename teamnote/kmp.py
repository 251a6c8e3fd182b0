"""Knuth-Morris-Pratt failure function and pattern search."""

from __future__ import annotations

__all__ = ["failure_function", "find_occurrences"]


def failure_function(pattern: str) -> list[int]:
    """Return the failure function of ``pattern``.

    The result has ``len(pattern) + 1`` entries. Entry ``i`` is the length of
    the longest proper border of ``pattern[:i]``; entry 0 is ``-1``.
    """
    fail = [-1] * (len(pattern) + 1)
    for i in range(1, len(pattern) + 1):
        j = fail[i - 1]
        while j >= 0 and pattern[j] != pattern[i - 1]:
            j = fail[j]
        fail[i] = j + 1
    return fail


def find_occurrences(text: str, pattern: str) -> list[int]:
    """Return the end offsets of every occurrence of ``pattern`` in ``text``.

    Each returned value ``end`` satisfies
    ``text[end - len(pattern):end] == pattern``. Overlapping occurrences are
    all reported, in increasing order.
    """
    fail = failure_function(pattern)
    m = len(pattern)
    ends: list[int] = []
    j = 0
    for i, ch in enumerate(text, start=1):
        while j >= 0 and (j == m or pattern[j] != ch):
            j = fail[j]
        j += 1
        if j == m:
            ends.append(i)
            j = fail[j]
    return ends