import numpy as np
import pytest

from brute_force import diameter_pair_naive
from calipers import InvalidHull, diameter, find_diameter_pair
from geometry import Point, build_hull, dist_sq


def make_points(coords) -> list[Point]:
    return [Point(float(x), float(y), i) for i, (x, y) in enumerate(coords)]


def pair_coords(pair) -> set[tuple[float, float]]:
    return {p.coords for p in pair}


def test_square_diagonal():
    hull = build_hull(make_points([(0, 0), (0, 2), (2, 2), (2, 0)]))
    a, b = find_diameter_pair(hull)
    assert dist_sq(a, b) == 8
    assert pair_coords((a, b)) in ({(0, 0), (2, 2)}, {(0, 2), (2, 0)})


def test_triangle():
    hull = build_hull(make_points([(0, 0), (2, 0), (1, 1)]))
    assert pair_coords(find_diameter_pair(hull)) == {(0, 0), (2, 0)}


def test_collinear_points():
    hull = build_hull(make_points([(0, 0), (1, 1), (2, 2), (3, 3)]))
    assert pair_coords(find_diameter_pair(hull)) == {(0, 0), (3, 3)}


def test_convex_quadrilateral():
    hull = build_hull(make_points([(0, 0), (2, 1), (2, 3), (0, 3)]))
    assert pair_coords(find_diameter_pair(hull)) == {(0, 0), (2, 3)}


def test_hexagon():
    hull = build_hull(make_points([(0, 0), (2, -1), (4, 0), (5, 2), (3, 4), (1, 3)]))
    assert pair_coords(find_diameter_pair(hull)) == {(0, 0), (5, 2)}


def test_circle_of_points():
    n_points, radius = 100, 10.0
    angles = 2 * np.pi * np.arange(n_points) / n_points
    hull = make_points(zip(radius * np.cos(angles), radius * np.sin(angles)))

    a, b = find_diameter_pair(hull)
    assert abs(dist_sq(a, b) - (2 * radius) ** 2) < 1e-6
    assert diameter(hull) == pytest.approx(2 * radius)


def test_single_point_is_returned_twice():
    hull = build_hull(make_points([(0, 0)]))
    a, b = find_diameter_pair(hull)
    assert a == b == hull[0]


def test_two_points():
    hull = build_hull(make_points([(-1, -1), (1, 1)]))
    assert pair_coords(find_diameter_pair(hull)) == {(-1, -1), (1, 1)}


def test_multiple_maxima_is_deterministic():
    hull = build_hull(make_points([(-1, 0), (0, 1), (1, 0), (0, -1)]))
    pair = find_diameter_pair(hull)
    assert pair_coords(pair) in ({(-1, 0), (1, 0)}, {(0, -1), (0, 1)})
    assert find_diameter_pair(hull) == pair


def test_labels_are_carried():
    points = make_points([(5, 5), (0, 0), (1, 1), (10, 0)])
    a, b = find_diameter_pair(build_hull(points))
    assert {a.label, b.label} == {1, 3}


def test_empty_hull_raises():
    with pytest.raises(InvalidHull):
        find_diameter_pair([])


@pytest.mark.parametrize("n_points", [3, 10, 50, 200])
@pytest.mark.parametrize("limits", [(-5, 5), (0, 1000), (-10**6, 10**6)])
def test_matches_all_pairs_scan(n_points, limits):
    np.random.seed(42)
    low, high = limits

    for seed in np.random.randint(0, 100_000, size=50):
        np.random.seed(seed)
        xs = np.random.randint(low, high, n_points)
        ys = np.random.randint(low, high, n_points)
        hull = build_hull(make_points(zip(xs, ys)))

        a, b = find_diameter_pair(hull)
        a_naive, b_naive = diameter_pair_naive(hull)
        assert dist_sq(a, b) == dist_sq(a_naive, b_naive), (
            f"Calipers pair {a}, {b} differs from all-pairs {a_naive}, {b_naive} on {hull}"
        )


@pytest.mark.parametrize("n_points", [3, 10, 100, 1000])
def test_matches_all_pairs_scan_on_float_points(n_points):
    np.random.seed(7)

    for seed in np.random.randint(0, 100_000, size=30):
        np.random.seed(seed)
        xs = np.random.randn(n_points) * 100
        ys = np.random.randn(n_points) * 100
        hull = build_hull(make_points(zip(xs, ys)))

        a, b = find_diameter_pair(hull)
        a_naive, b_naive = diameter_pair_naive(hull)
        assert dist_sq(a, b) == pytest.approx(dist_sq(a_naive, b_naive)), (
            f"Calipers pair {a}, {b} differs from all-pairs {a_naive}, {b_naive}"
        )
