"""Integer plane geometry: orientation, distance, convex hull and polar sort."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key


@dataclass(frozen=True)
class Point:
    """Lattice point."""

    x: int
    y: int


def ccw(a, b, c):
    """Return 1 for a counter-clockwise turn a->b->c, -1 for clockwise, 0 if collinear."""
    cross = a.x * b.y + b.x * c.y + c.x * a.y - (b.x * a.y + c.x * b.y + a.x * c.y)
    return (cross > 0) - (cross < 0)


def dist(a, b):
    """Return the squared Euclidean distance."""
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def convex_hull(points):
    """Return the hull counter-clockwise from the lowest-leftmost point, keeping collinear points."""
    pts = sorted(points, key=lambda p: (p.y, p.x))
    if len(pts) <= 1:
        return pts
    hull = []
    for p in pts:
        while len(hull) > 1 and ccw(hull[-2], hull[-1], p) == -1:
            hull.pop()
        hull.append(p)
    lower = len(hull)
    for p in reversed(pts[:-1]):
        while len(hull) > lower and ccw(hull[-2], hull[-1], p) == -1:
            hull.pop()
        hull.append(p)
    hull.pop()
    return hull


def _half(p):
    if p.y > 0 or (p.y == 0 and p.x < 0):
        return 1
    if p.y < 0 or (p.y == 0 and p.x > 0):
        return -1
    return 0


def _less(a, b):
    ha, hb = _half(a), _half(b)
    if ha == hb:
        return a.y * b.x < b.y * a.x
    return ha < hb


def _compare(a, b):
    if _less(a, b):
        return -1
    if _less(b, a):
        return 1
    return 0


def polar_sort(points):
    """Return the points sorted by argument, from just above -pi up to pi."""
    return sorted(points, key=cmp_to_key(_compare))