"""Maximum bipartite matching by the Hopcroft-Karp algorithm."""

from __future__ import annotations

from collections import deque

__all__ = ["HopcroftKarp"]


class HopcroftKarp:
    """A bipartite graph with left vertices ``1..n`` and right vertices ``1..m``.

    After ``matching``, ``match_left[u]`` is the right vertex matched to left
    vertex ``u`` and ``match_right[v]`` the left vertex matched to right vertex
    ``v``; 0 means unmatched. Entry 0 of both lists is unused.
    """

    def __init__(self, n: int, m: int) -> None:
        if n < 0 or m < 0:
            raise ValueError(f"vertex counts must be non-negative, got {n} and {m}")
        self.n = n
        self.m = m
        self._adj: list[list[int]] = [[] for _ in range(n + 1)]
        self.match_left = [0] * (n + 1)
        self.match_right = [0] * (m + 1)

    def add_edge(self, u: int, v: int) -> None:
        """Connect left vertex ``u`` with right vertex ``v``."""
        if not 1 <= u <= self.n:
            raise ValueError(f"left vertex {u} is outside 1..{self.n}")
        if not 1 <= v <= self.m:
            raise ValueError(f"right vertex {v} is outside 1..{self.m}")
        self._adj[u].append(v)

    def _levels(self) -> list[int]:
        level = [0] * (self.n + 1)
        queue: deque[int] = deque()
        for u in range(1, self.n + 1):
            if not self.match_left[u]:
                level[u] = 1
                queue.append(u)
        while queue:
            node = queue.popleft()
            for v in self._adj[node]:
                owner = self.match_right[v]
                if not owner or level[owner]:
                    continue
                level[owner] = level[node] + 1
                queue.append(owner)
        return level

    def _augment(self, start: int, level: list[int], pos: list[int]) -> bool:
        stack = [start]
        while stack:
            node = stack[-1]
            edges = self._adj[node]
            if pos[node] >= len(edges):
                stack.pop()
                if stack:
                    pos[stack[-1]] += 1
                continue
            v = edges[pos[node]]
            owner = self.match_right[v]
            if not owner:
                for u in stack:
                    w = self._adj[u][pos[u]]
                    self.match_right[w] = u
                    self.match_left[u] = w
                return True
            if level[owner] == level[node] + 1:
                stack.append(owner)
            else:
                pos[node] += 1
        return False

    def matching(self) -> int:
        """Extend the current matching to a maximum one and return its size."""
        size = 0
        while True:
            level = self._levels()
            pos = [0] * (self.n + 1)
            found = sum(
                self._augment(u, level, pos)
                for u in range(1, self.n + 1)
                if not self.match_left[u]
            )
            if not found:
                break
            size += found
        return size