"""Planar points, segments and the basic predicates and distances on them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

EPS = 1e-10


@dataclass(frozen=True, eq=False)
class Point:
    """A point (or vector) in the plane.

    Equality is approximate (within ``EPS`` on each coordinate); ordering is
    lexicographic on ``(x, y)``.
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, k: float) -> Point:
        return Point(k * self.x, k * self.y)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Point:
        return Point(self.x / k, self.y / k)

    def __abs__(self) -> float:
        return math.sqrt(self.norm())

    def norm(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        return self.x * other.y - self.y * other.x

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return abs(self.x - other.x) < EPS and abs(self.y - other.y) < EPS

    def __lt__(self, other: Point) -> bool:
        return (self.x, self.y) < (other.x, other.y)


Vector = Point


@dataclass(frozen=True)
class Segment:
    """A segment from ``start`` to ``end``; also used as the line through them."""

    start: Point
    end: Point

    @property
    def direction(self) -> Point:
        return self.end - self.start


Line = Segment


@dataclass(frozen=True)
class Circle:
    center: Point = field(default_factory=Point)
    radius: float = 0.0


class Ccw(IntEnum):
    """Position of a point relative to a directed segment."""

    COUNTER_CLOCKWISE = 1
    CLOCKWISE = -1
    ONLINE_BACK = 2
    ONLINE_FRONT = -2
    ON_SEGMENT = 0


def ccw(a: Point, b: Point, c: Point) -> Ccw:
    """Classify ``c`` against the directed segment ``a -> b``."""
    s = b - a
    t = c - a
    cr = s.cross(t)
    if cr > EPS:
        return Ccw.COUNTER_CLOCKWISE
    if cr < -EPS:
        return Ccw.CLOCKWISE
    if s.dot(t) < -EPS:
        return Ccw.ONLINE_BACK
    if s.norm() < t.norm():
        return Ccw.ONLINE_FRONT
    return Ccw.ON_SEGMENT


def intersect(s1: Segment, s2: Segment) -> bool:
    """Whether two segments share at least one point."""
    a, b, c, d = s1.start, s1.end, s2.start, s2.end
    return ccw(a, b, c) * ccw(a, b, d) <= 0 and ccw(c, d, a) * ccw(c, d, b) <= 0


def point_distance(a: Point, b: Point) -> float:
    return abs(a - b)


def line_distance(line: Line, p: Point) -> float:
    """Signed distance from ``p`` to the line; positive on the left side."""
    base = line.direction
    return base.cross(p - line.start) / abs(base)


def segment_point_distance(segment: Segment, p: Point) -> float:
    """Distance from ``p`` to the closest point of the segment."""
    a, b = segment.start, segment.end
    if a == b:
        return abs(p - a)
    if (b - a).dot(p - a) < 0.0:
        return abs(p - a)
    if (a - b).dot(p - b) < 0.0:
        return abs(p - b)
    return abs(line_distance(segment, p))


def segment_distance(s1: Segment, s2: Segment) -> float:
    """Shortest distance between two segments."""
    if intersect(s1, s2):
        return 0.0
    return min(
        segment_point_distance(s1, s2.start),
        segment_point_distance(s1, s2.end),
        segment_point_distance(s2, s1.start),
        segment_point_distance(s2, s1.end),
    )


def on_segment(segment: Segment, p: Point) -> bool:
    """Whether ``p`` lies on the segment, endpoints included."""
    a = segment.start - p
    b = segment.end - p
    return abs(a.cross(b)) < EPS and a.dot(b) < EPS


def projection(segment: Segment, p: Point) -> Point:
    """Foot of the perpendicular from ``p`` onto the line through the segment."""
    base = segment.direction
    r = (p - segment.start).dot(base) / base.norm()
    return segment.start + base * r


def reflection(segment: Segment, p: Point) -> Point:
    """Mirror image of ``p`` in the line through the segment."""
    return p + (projection(segment, p) - p) * 2.0