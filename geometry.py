import logging

from dataclasses import dataclass
from functools import cmp_to_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    label: int

    @property
    def coords(self) -> tuple[float, float]:
        return self.x, self.y


def cross(o: Point, a: Point, b: Point) -> float:
    """
    Cross product of segments oa and ob.
    Positive for a counter-clockwise turn o -> a -> b, zero if collinear.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def dist_sq(a: Point, b: Point) -> float:
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def deduplicate(points: list[Point]) -> tuple[list[Point], dict[int, int]]:
    """
    Collapse points with identical coordinates, first occurrence wins.

    Returns the unique points in input order and a mapping from every
    input label to the label of the point that represents it.
    """
    kept: dict[tuple[float, float], Point] = {}
    representative: dict[int, int] = {}
    for p in points:
        first = kept.setdefault(p.coords, p)
        representative[p.label] = first.label
        if first is not p:
            logger.warning(
                "Point %d at (%s, %s) duplicates point %d, merged into it",
                p.label, p.x, p.y, first.label,
            )
    return list(kept.values()), representative


def lowest_point(points: list[Point]) -> Point:
    """
    Point with the smallest y, ties broken by the smallest x.
    """
    return min(points, key=lambda p: (p.y, p.x))


def sort_by_angle(pivot: Point, points: list[Point]) -> list[Point]:
    """
    Sort points by polar angle around the pivot, nearest first on equal angles.
    All points must lie in the closed upper half-plane of the pivot,
    which holds when the pivot comes from `lowest_point`.
    """
    def compare(a: Point, b: Point) -> int:
        turn = cross(pivot, a, b)
        if turn > 0:
            return -1
        if turn < 0:
            return 1
        da, db = dist_sq(pivot, a), dist_sq(pivot, b)
        return (da > db) - (da < db)

    return sorted(points, key=cmp_to_key(compare))


def build_hull(points: list[Point]) -> list[Point]:
    """
    Graham scan convex hull.

    Returns hull vertices in counter-clockwise order starting from the
    lowest point. Collinear points on hull edges are dropped, so every
    turn of the result is strictly to the left.
    Time complexity: O(n*log(n)).
    """
    unique, _ = deduplicate(points)
    if len(unique) <= 1:
        return unique

    pivot = lowest_point(unique)
    rest = sort_by_angle(pivot, [p for p in unique if p is not pivot])

    hull = [pivot]
    for p in rest:
        while len(hull) >= 2 and cross(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)

    logger.debug("Hull of %d points has %d vertices", len(unique), len(hull))
    return hull
