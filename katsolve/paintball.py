"""Geometry helpers for circular opponents on a paintball field."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Interval = tuple[float, float]


@dataclass(frozen=True)
class Circle:
    """An opponent at (x, y) covering radius ``r``."""

    x: float
    y: float
    r: float

    def intersects(self, other: Circle) -> bool:
        """Return whether the two circles overlap (touching does not count)."""
        return self.r + other.r > distance(self.x, self.y, other.x, other.y)

    def intersects_vertical_line(self, x: float) -> bool:
        """Return whether the vertical line at ``x`` crosses the circle's interior."""
        return abs(x - self.x) < self.r

    def vertical_line_intersection(self, x: float) -> Interval:
        """Return the y-range the vertical line at ``x`` spends inside the circle."""
        dx = x - self.x
        dy = math.sqrt(self.r * self.r - dx * dx)
        return self.y - dy, self.y + dy


def intervals_intersect(first: Interval, second: Interval) -> Interval:
    """Return the overlap of two intervals (empty when start exceeds end)."""
    return max(first[0], second[0]), min(first[1], second[1])


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Return the Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def remove_interval(intervals: Iterable[Interval], start: float, end: float) -> list[Interval]:
    """Cut [start, end] out of each interval and return what remains, sorted."""
    result: list[Interval] = []
    for low, high in intervals:
        if low >= end or start >= high:
            result.append((low, high))
            continue
        if low <= start:
            result.append((low, start))
        if end <= high:
            result.append((end, high))
    return sorted(result)


def build_graph(circles: Sequence[Circle]) -> list[list[int]]:
    """Return, for each circle, the ascending indices of the circles it overlaps."""
    neighbours: list[list[int]] = [[] for _ in circles]
    for index, circle in enumerate(circles):
        for other_index in range(index + 1, len(circles)):
            if circle.intersects(circles[other_index]):
                neighbours[index].append(other_index)
                neighbours[other_index].append(index)
    return [sorted(adjacent) for adjacent in neighbours]