import logging
import math

from geometry import Point, dist_sq

logger = logging.getLogger(__name__)


class InvalidHull(ValueError):
    pass


def edge_cross(a0: Point, a1: Point, b0: Point, b1: Point) -> float:
    """
    Cross product of edge vectors a0->a1 and b0->b1.
    """
    return (a1.x - a0.x) * (b1.y - b0.y) - (a1.y - a0.y) * (b1.x - b0.x)


def find_diameter_pair(hull: list[Point]) -> tuple[Point, Point]:
    """
    Find the two hull vertices farthest apart using rotating calipers.

    The hull must be convex and counter-clockwise, as returned by `build_hull`.
    For every edge (i, i + 1) the caliper index j is advanced while the edge
    at j still turns left relative to edge i, which leaves j on the vertex
    antipodal to the edge. Both endpoints of edge i are measured against it.
    Ties keep the first pair found.

    Time complexity: O(n).
    """
    n = len(hull)
    if n == 0:
        raise InvalidHull("Hull must contain at least one point")
    if n == 1:
        return hull[0], hull[0]

    best_sq = -1.0
    best_pair = hull[0], hull[0]

    j = 1
    for i in range(n):
        next_i = (i + 1) % n
        while edge_cross(hull[i], hull[next_i], hull[j], hull[(j + 1) % n]) > 0:
            j = (j + 1) % n

        for a in (hull[i], hull[next_i]):
            d = dist_sq(a, hull[j])
            if d > best_sq:
                best_sq = d
                best_pair = a, hull[j]

    logger.debug(
        "Diameter pair %d-%d, length %.6g",
        best_pair[0].label, best_pair[1].label, math.sqrt(best_sq),
    )
    return best_pair


def diameter(hull: list[Point]) -> float:
    a, b = find_diameter_pair(hull)
    return math.sqrt(dist_sq(a, b))
