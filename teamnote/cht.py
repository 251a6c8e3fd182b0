"""Convex hull trick for minimum queries over lines of decreasing slope."""

from __future__ import annotations

from collections import deque
from fractions import Fraction
from typing import NamedTuple

__all__ = ["Line", "ConvexHullTrick"]


class Line(NamedTuple):
    """The line ``y = a * x + b``."""

    a: int
    b: int

    def at(self, x: int) -> int:
        return self.a * x + self.b


def _cross(p: Line, q: Line) -> Fraction:
    """Return the x coordinate where lines ``p`` and ``q`` meet."""
    return Fraction(p.b - q.b, q.a - p.a)


class ConvexHullTrick:
    """Lower envelope of lines, answering minimum-value queries.

    Lines must be pushed in order of non-increasing slope. The intersection
    points of neighbouring lines on the envelope then increase from front to
    back. ``query`` answers any ``x`` by binary search; ``query_monotone``
    discards lines from the front and needs non-decreasing ``x`` between
    calls.
    """

    def __init__(self) -> None:
        self.lines: deque[Line] = deque()

    def __len__(self) -> int:
        return len(self.lines)

    def push(self, a: int, b: int) -> None:
        """Add the line ``y = a * x + b``.

        ``a`` must not exceed the slope of any line pushed before.
        """
        line = Line(a, b)
        lines = self.lines
        if lines and lines[-1].a < a:
            raise ValueError(
                f"slopes must be non-increasing: {a} after {lines[-1].a}"
            )
        if lines and lines[-1].a == a:
            if lines[-1].b <= b:
                return
            lines.pop()
        while len(lines) > 1 and not (
            _cross(lines[-2], lines[-1]) < _cross(lines[-1], line)
        ):
            lines.pop()
        lines.append(line)

    def _require_lines(self) -> None:
        if not self.lines:
            raise ValueError("no lines have been pushed")

    def query(self, x: int) -> int:
        """Return the minimum over all lines of their value at ``x``."""
        self._require_lines()
        lines = self.lines
        lo, hi = 0, len(lines)
        while lo + 1 < hi:
            mid = (lo + hi) // 2
            if _cross(lines[mid - 1], lines[mid]) < x:
                lo = mid
            else:
                hi = mid
        return lines[lo].at(x)

    def query_monotone(self, x: int) -> int:
        """Return the minimum at ``x``, for ``x`` non-decreasing across calls.

        Lines that can no longer be optimal are removed from the front.
        """
        self._require_lines()
        lines = self.lines
        while len(lines) > 1 and _cross(lines[0], lines[1]) < x:
            lines.popleft()
        return lines[0].at(x)