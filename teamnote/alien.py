"""Penalty (Lagrangian) optimisation for partitions into exactly k parts."""

from __future__ import annotations

from collections.abc import Callable

__all__ = ["solve_with_penalty", "alien"]

Cost = Callable[[int, int], int]

_LIMIT = 10**18


def _restore(memo: list[int], n: int) -> list[int]:
    path = []
    i = n
    while i > 0:
        path.append(i)
        i = memo[i]
    path.append(0)
    path.reverse()
    return path


def solve_with_penalty(
    n: int, cost: Cost, penalty: int
) -> tuple[list[int], list[int], list[int]]:
    """Minimise ``dp[i] = min_{j<i} dp[j] + 2 * cost(j, i) - penalty``.

    Returns ``(values, counts, path)``: the dp values for ``0..n``, the number
    of transitions used to reach each, and the optimal cut points from 0 to
    ``n``. Among equal candidates the smallest ``j`` is chosen.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    values = [0] * (n + 1)
    counts = [0] * (n + 1)
    memo = [0] * (n + 1)
    for i in range(1, n + 1):
        opt = min(range(i), key=lambda j: values[j] + 2 * cost(j, i))
        values[i] = values[opt] + 2 * cost(opt, i) - penalty
        counts[i] = counts[opt] + 1
        memo[i] = opt
    return values, counts, _restore(memo, n)


def alien(n: int, k: int, cost: Cost) -> tuple[int, list[int]]:
    """Split ``0..n`` into exactly ``k`` segments minimising the total cost.

    ``cost`` must make the optimum convex in ``k``. Returns the minimal total
    and the cut points ``[0, ..., n]`` of an optimal split.
    """
    if not 1 <= k <= n:
        raise ValueError(f"k must be between 1 and n={n}, got {k}")

    lo, hi = -_LIMIT, _LIMIT
    while lo + 1 < hi:
        mid = (lo + hi) >> 1
        _, counts, _ = solve_with_penalty(n, cost, 2 * mid + 1)
        if k <= counts[n]:
            hi = mid
        else:
            lo = mid

    _, _, p1 = solve_with_penalty(n, cost, 2 * lo + 1)
    _, _, p2 = solve_with_penalty(n, cost, 2 * hi + 1)
    if len(p1) > len(p2):
        p1, p2 = p2, p1

    if len(p1) - 1 == k:
        path = p1
    elif len(p2) - 1 == k:
        path = p2
    else:
        if not len(p1) - 1 < k < len(p2) - 1:
            raise RuntimeError("optimal solutions do not bracket k")
        x = k + 1 - len(p1)
        path = []
        i = 0
        while i + 1 < len(p1) and i + x + 1 < len(p2):
            if p1[i] <= p2[i + x] and p2[i + x + 1] <= p1[i + 1]:
                path = p2[: i + x + 1] + p1[i + 1 :]
                break
            i += 1
    if len(path) != k + 1:
        raise RuntimeError("could not restore a split with k segments")

    values, _, _ = solve_with_penalty(n, cost, 2 * hi)
    return values[n] // 2 + hi * k, path