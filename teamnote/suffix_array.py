"""Suffix array, rank and LCP arrays with fast substring comparison."""

from __future__ import annotations

__all__ = ["SuffixArray"]


class SuffixArray:
    """Suffix structures of a string, all indexed from 1.

    ``sa[i]`` is the starting position of the ``i``-th smallest suffix,
    ``rank[p]`` is the order of the suffix starting at ``p`` (so
    ``rank[sa[i]] == i``), and ``lcp[i]`` for ``i >= 2`` is the longest common
    prefix of the suffixes at ``sa[i - 1]`` and ``sa[i]``. Entry 0 of each
    list, and ``lcp[1]``, are 0.
    """

    def __init__(self, s: str) -> None:
        self.s = s
        n = len(s)
        self.n = n

        sa = [0] + sorted(range(1, n + 1), key=lambda p: s[p - 1])
        rank = [0] * (n + 1)
        for i in range(1, n + 1):
            rank[sa[i]] = rank[sa[i - 1]] + (i == 1 or s[sa[i] - 1] != s[sa[i - 1] - 1])
        # levels[t][p] orders suffixes at p by their first 2**t characters.
        self._levels: list[list[int]] = [rank[:]]

        d = 1
        while d <= n and rank[sa[n]] != n:
            def key(p: int, r: list[int] = rank, d: int = d) -> tuple[int, int]:
                return r[p], (r[p + d] if p + d <= n else 0)

            sa = [0] + sorted(range(1, n + 1), key=key)
            new_rank = [0] * (n + 1)
            for i in range(1, n + 1):
                new_rank[sa[i]] = new_rank[sa[i - 1]] + (
                    i == 1 or key(sa[i]) != key(sa[i - 1])
                )
            rank = new_rank
            self._levels.append(rank[:])
            d <<= 1

        lcp = [0] * (n + 1)
        k = 0
        for i in range(1, n + 1):
            if rank[i] > 1:
                j = sa[rank[i] - 1]
                while i + k <= n and j + k <= n and s[i + k - 1] == s[j + k - 1]:
                    k += 1
                lcp[rank[i]] = k
            if k:
                k -= 1

        self.sa = sa
        self.rank = rank
        self.lcp = lcp

    def compare(self, l1: int, r1: int, l2: int, r2: int) -> bool:
        """Return whether ``s[l1..r1]`` is smaller than ``s[l2..r2]``.

        Bounds are 1-based and inclusive; a range with ``l > r`` is empty.
        """
        if l2 > r2:
            return False
        if l1 > r1:
            return True
        length = min(r1 - l1 + 1, r2 - l2 + 1)
        t = length.bit_length() - 1
        table = self._levels[min(t, len(self._levels) - 1)]
        if table[l1] != table[l2]:
            return table[l1] < table[l2]
        tail = length - (1 << t)
        if table[l1 + tail] != table[l2 + tail]:
            return table[l1 + tail] < table[l2 + tail]
        return (r1 - l1) < (r2 - l2)