"""Maximum flow by Dinic's algorithm with capacity scaling."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

__all__ = ["Dinic"]

_INF = (1 << 63) - 1


@dataclass(slots=True)
class _Edge:
    to: int
    capacity: int
    rev: int


class Dinic:
    """A flow network on vertices ``1..n``.

    Residual capacities persist between calls to ``flow``, so calling it again
    only finds flow that was not already sent.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"vertex count must be non-negative, got {n}")
        self.n = n
        self._adj: list[list[_Edge]] = [[] for _ in range(n + 1)]

    def _check_vertex(self, v: int) -> None:
        if not 1 <= v <= self.n:
            raise ValueError(f"vertex {v} is outside 1..{self.n}")

    def add_edge(self, u: int, v: int, capacity: int, directed: bool = True) -> None:
        """Add an edge from ``u`` to ``v``.

        A directed edge carries flow from ``u`` to ``v`` only; an undirected
        one carries up to ``capacity`` in either direction.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        forward = _Edge(v, capacity, len(self._adj[v]))
        backward = _Edge(u, 0 if directed else capacity, len(self._adj[u]))
        self._adj[u].append(forward)
        self._adj[v].append(backward)

    def _levels(self, source: int, sink: int, limit: int) -> list[int] | None:
        level = [0] * (self.n + 1)
        level[source] = 1
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for edge in self._adj[node]:
                if level[edge.to] or edge.capacity < limit:
                    continue
                level[edge.to] = level[node] + 1
                queue.append(edge.to)
        return level if level[sink] else None

    def _augment(self, source: int, sink: int, level: list[int], pos: list[int]) -> int:
        nodes = [source]
        path: list[_Edge] = []
        while True:
            node = nodes[-1]
            if node == sink:
                pushed = min(edge.capacity for edge in path)
                for edge in path:
                    edge.capacity -= pushed
                    self._adj[edge.to][edge.rev].capacity += pushed
                return pushed
            edges = self._adj[node]
            while pos[node] < len(edges):
                edge = edges[pos[node]]
                if level[edge.to] == level[node] + 1 and edge.capacity:
                    path.append(edge)
                    nodes.append(edge.to)
                    break
                pos[node] += 1
            else:
                nodes.pop()
                if not path:
                    return 0
                path.pop()
                pos[nodes[-1]] += 1

    def flow(self, source: int, sink: int) -> int:
        """Send as much flow as possible from ``source`` to ``sink``."""
        self._check_vertex(source)
        self._check_vertex(sink)
        if source == sink:
            raise ValueError("source and sink must differ")
        total = 0
        limit = _INF
        while limit > 0:
            while (level := self._levels(source, sink, limit)) is not None:
                pos = [0] * (self.n + 1)
                while pushed := self._augment(source, sink, level, pos):
                    total += pushed
            limit >>= 1
        return total