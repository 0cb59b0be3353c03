import itertools
import random

import pytest

from algokit.geometry import Point, point_distance
from algokit.polygon import (
    Containment,
    area,
    closest_pair,
    contains,
    convex_hull,
    diameter,
    is_convex,
)

SQUARE = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]


def _random_points(seed, n):
    rng = random.Random(seed)
    return [Point(rng.uniform(-50, 50), rng.uniform(-50, 50)) for _ in range(n)]


def test_area_square_and_orientation():
    assert area(SQUARE) == pytest.approx(4.0)
    assert area(list(reversed(SQUARE))) == pytest.approx(-area(SQUARE))


def test_area_of_too_few_points_is_zero():
    assert area(SQUARE[:2]) == 0.0


def test_convex_hull_strict_drops_interior_and_edge_points():
    pts = SQUARE + [Point(1, 1), Point(1, 0), Point(2, 2)]
    assert convex_hull(pts) == SQUARE


def test_convex_hull_non_strict_keeps_edge_points():
    pts = SQUARE + [Point(1, 1), Point(1, 0)]
    hull = convex_hull(pts, strict=False)
    assert hull == [Point(0, 0), Point(1, 0), Point(2, 0), Point(2, 2), Point(0, 2)]


def test_convex_hull_does_not_mutate_input():
    pts = [Point(2, 2), Point(0, 0), Point(1, 1), Point(2, 0)]
    copy = list(pts)
    convex_hull(pts)
    assert pts == copy


def test_convex_hull_small_inputs():
    assert convex_hull([Point(1, 1), Point(0, 0), Point(1, 1)]) == [Point(0, 0), Point(1, 1)]


def test_convex_hull_random_is_convex_and_contains_all():
    pts = _random_points(7, 60)
    hull = convex_hull(pts)
    assert is_convex(hull)
    assert area(hull) > 0
    assert all(contains(hull, p) != Containment.OUTSIDE for p in pts)


def test_diameter_square():
    assert diameter(SQUARE) == pytest.approx(point_distance(Point(0, 0), Point(2, 2)))


def test_diameter_two_points_and_one_point():
    assert diameter([Point(1, 1), Point(4, 5)]) == pytest.approx(
        point_distance(Point(1, 1), Point(4, 5))
    )
    assert diameter([Point(3, 3)]) == 0.0


def test_diameter_empty_raises():
    with pytest.raises(ValueError):
        diameter([])


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_diameter_matches_farthest_pair(seed):
    pts = _random_points(seed, 40)
    farthest = max(point_distance(a, b) for a, b in itertools.combinations(pts, 2))
    assert diameter(pts) == pytest.approx(farthest)


@pytest.mark.parametrize("seed", [4, 5, 6])
def test_closest_pair_matches_nearest_pair(seed):
    pts = _random_points(seed, 50)
    a, b = closest_pair(pts)
    nearest = min(point_distance(p, q) for p, q in itertools.combinations(pts, 2))
    assert point_distance(a, b) == pytest.approx(nearest)
    assert a in pts and b in pts


def test_closest_pair_with_duplicates():
    pts = [Point(0, 0), Point(5, 5), Point(9, 1), Point(5, 5)]
    a, b = closest_pair(pts)
    assert a == b == Point(5, 5)


def test_closest_pair_needs_two_points():
    with pytest.raises(ValueError):
        closest_pair([Point(0, 0)])


def test_is_convex():
    assert is_convex(SQUARE)
    assert not is_convex(list(reversed(SQUARE)))
    arrow = [Point(0, 0), Point(4, 0), Point(4, 4), Point(2, 1), Point(0, 4)]
    assert not is_convex(arrow)


@pytest.mark.parametrize(
    "p, expected",
    [
        (Point(1, 1), Containment.INSIDE),
        (Point(1, 0), Containment.ON_EDGE),
        (Point(2, 2), Containment.ON_EDGE),
        (Point(3, 1), Containment.OUTSIDE),
        (Point(-1, -1), Containment.OUTSIDE),
    ],
)
def test_contains_square(p, expected):
    assert contains(SQUARE, p) is expected


def test_contains_concave_notch():
    arrow = [Point(0, 0), Point(4, 0), Point(4, 4), Point(2, 1), Point(0, 4)]
    assert contains(arrow, Point(2, 3)) is Containment.OUTSIDE
    assert contains(arrow, Point(2, 0.5)) is Containment.INSIDE