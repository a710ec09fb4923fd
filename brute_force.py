import itertools
import math

import numpy as np

from geometry import Point, dist_sq
from hamiltonian_path import PathResult, infeasible, path_cost


def diameter_pair_naive(points: list[Point]) -> tuple[Point, Point]:
    """
    All-pairs scan for the farthest pair. Time complexity: O(n^2).
    """
    if not points:
        raise ValueError("Need at least one point")
    best_sq = -1.0
    best_pair = points[0], points[0]
    for a, b in itertools.combinations(points, 2):
        d = dist_sq(a, b)
        if d > best_sq:
            best_sq = d
            best_pair = a, b
    return best_pair


def hamiltonian_path_naive(n: int, distance_matrix, start: int, end: int) -> PathResult:
    """
    Try every ordering of the intermediate labels. Time complexity: O(n!).
    """
    dist = np.asarray(distance_matrix, dtype=float)
    if n == 1:
        return PathResult(0.0, [start])

    middle = [v for v in range(n) if v not in (start, end)]
    best = infeasible()
    for perm in itertools.permutations(middle):
        path = [start, *perm, end]
        cost = path_cost(dist, path)
        if cost < best.cost:
            best = PathResult(cost, path)
    return best if math.isfinite(best.cost) else infeasible()
