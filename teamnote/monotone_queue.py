"""Monotone-queue optimisation for one-dimensional dp with a Monge cost."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

__all__ = ["solve"]

Cost = Callable[[int, int], int]


def solve(n: int, cost: Cost) -> tuple[list[int], list[int], list[int]]:
    """Minimise ``dp[i] = min_{j<i} dp[j] + cost(j, i)`` for a Monge ``cost``.

    Returns ``(values, counts, path)``: the dp values for ``0..n``, the number
    of transitions used to reach each, and the optimal cut points from 0 to
    ``n``.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    values = [0] * (n + 1)
    counts = [0] * (n + 1)
    memo = [0] * (n + 1)

    def candidate(j: int, i: int) -> int:
        return values[j] + cost(j, i)

    def cross(p: int, q: int) -> int:
        """Return the largest x at which ``p`` is still strictly better than ``q``."""
        lo, hi = q, n + 1
        while lo + 1 < hi:
            mid = (lo + hi) // 2
            if candidate(p, mid) < candidate(q, mid):
                lo = mid
            else:
                hi = mid
        return lo

    queue: deque[int] = deque([0])
    for i in range(1, n + 1):
        while len(queue) > 1 and candidate(queue[0], i) >= candidate(queue[1], i):
            queue.popleft()
        opt = queue[0]
        values[i] = candidate(opt, i)
        counts[i] = counts[opt] + 1
        memo[i] = opt
        while len(queue) > 1 and not (
            cross(queue[-2], queue[-1]) < cross(queue[-1], i)
        ):
            queue.pop()
        queue.append(i)

    path = []
    i = n
    while i > 0:
        path.append(i)
        i = memo[i]
    path.append(0)
    path.reverse()
    return values, counts, path