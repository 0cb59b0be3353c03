"""Algorithms on polygons and point sets."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right, insort
from enum import IntEnum
from typing import Iterable, Sequence

from .geometry import EPS, Ccw, Point, ccw


class Containment(IntEnum):
    OUTSIDE = 0
    ON_EDGE = 1
    INSIDE = 2


def area(polygon: Sequence[Point]) -> float:
    """Signed area; positive when the vertices run counter-clockwise."""
    if len(polygon) < 3:
        return 0.0
    origin = polygon[0]
    return sum(
        (b - origin).cross(c - origin) * 0.5
        for b, c in zip(polygon[1:], polygon[2:])
    )


def convex_hull(points: Iterable[Point], strict: bool = True) -> list[Point]:
    """Convex hull in counter-clockwise order, starting from the smallest point.

    With ``strict`` the points lying on hull edges are left out; otherwise
    they are kept.
    """
    pts: list[Point] = []
    for p in sorted(points):
        if not pts or pts[-1] != p:
            pts.append(p)
    if len(pts) <= 2:
        return pts

    limit = EPS if strict else -EPS

    def turns_wrong(hull: list[Point], p: Point) -> bool:
        return (hull[-1] - hull[-2]).cross(p - hull[-1]) <= limit

    hull: list[Point] = []
    for p in pts:
        while len(hull) >= 2 and turns_wrong(hull, p):
            hull.pop()
        hull.append(p)
    floor = len(hull) + 1
    for p in reversed(pts[:-1]):
        while len(hull) >= floor and turns_wrong(hull, p):
            hull.pop()
        hull.append(p)
    hull.pop()
    return hull


def diameter(polygon: Iterable[Point]) -> float:
    """Largest distance between two of the given points (rotating calipers)."""
    hull = convex_hull(polygon)
    n = len(hull)
    if n == 0:
        raise ValueError("diameter of an empty point set")
    if n == 1:
        return 0.0
    if n == 2:
        return abs(hull[0] - hull[1])

    i = min(range(n), key=lambda k: (hull[k].x, hull[k].y))
    j = max(range(n), key=lambda k: (hull[k].x, hull[k].y))
    start = (i, j)
    best = (hull[i] - hull[j]).norm()
    while True:
        edge_i = hull[(i + 1) % n] - hull[i]
        edge_j = hull[(j + 1) % n] - hull[j]
        if edge_i.cross(edge_j) >= 0:
            j = (j + 1) % n
        else:
            i = (i + 1) % n
        best = max(best, (hull[i] - hull[j]).norm())
        if (i, j) == start:
            break
    return math.sqrt(best)


def closest_pair(points: Iterable[Point]) -> tuple[Point, Point]:
    """The two points nearest to each other."""
    pts = sorted(points, key=lambda p: p.y)
    if len(pts) < 2:
        raise ValueError("closest pair needs at least two points")

    active: list[tuple[float, float, int]] = []
    best = math.inf
    pair: tuple[Point, Point] | None = None
    j = 0
    for idx, p in enumerate(pts):
        while j < idx and pts[j].y <= p.y - best:
            key = (pts[j].x, pts[j].y, j)
            del active[bisect_left(active, key)]
            j += 1
        lo = bisect_left(active, (p.x - best, p.y))
        hi = bisect_right(active, (p.x + best, p.y))
        for qx, qy, _ in active[lo:hi]:
            q = Point(qx, qy)
            d = abs(q - p)
            if d < best:
                best, pair = d, (q, p)
        if best == 0.0:
            break
        insort(active, (p.x, p.y, idx))
    assert pair is not None
    return pair


def is_convex(polygon: Sequence[Point]) -> bool:
    """Whether the polygon, given counter-clockwise, never turns clockwise."""
    n = len(polygon)
    return all(
        ccw(polygon[k - 1], polygon[k], polygon[(k + 1) % n]) != Ccw.CLOCKWISE
        for k in range(n)
    )


def contains(polygon: Sequence[Point], p: Point) -> Containment:
    """Locate ``p`` relative to the polygon."""
    inside = False
    n = len(polygon)
    for k, vertex in enumerate(polygon):
        a = vertex - p
        b = polygon[(k + 1) % n] - p
        if abs(a.cross(b)) < EPS and a.dot(b) < EPS:
            return Containment.ON_EDGE
        if a.y > b.y:
            a, b = b, a
        if a.y < EPS < b.y and a.cross(b) > EPS:
            inside = not inside
    return Containment.INSIDE if inside else Containment.OUTSIDE