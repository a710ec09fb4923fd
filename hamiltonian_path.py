import logging
import math

from typing import NamedTuple, Sequence

import numpy as np

from config import MAX_SUPPORTED_PATH_POINTS, get_settings

logger = logging.getLogger(__name__)


class PathInputError(ValueError):
    pass


class PathResult(NamedTuple):
    cost: float
    path: list[int]

    @property
    def feasible(self) -> bool:
        return math.isfinite(self.cost)


def infeasible() -> PathResult:
    return PathResult(math.inf, [])


def check_path_input(
    n: int,
    dist: np.ndarray,
    start: int,
    end: int,
    max_points: int,
) -> None:
    if n < 1:
        raise PathInputError(f"Need at least one point, got n={n}")
    if n > max_points:
        raise PathInputError(
            f"n={n} exceeds the supported maximum of {max_points} points "
            f"for the exact path solver"
        )
    if dist.shape != (n, n):
        raise PathInputError(f"Distance matrix must be {n}x{n}, got shape {dist.shape}")
    for name, label in (("start", start), ("end", end)):
        if not 0 <= label < n:
            raise PathInputError(f"{name}={label} is out of range [0, {n})")
    if n > 1 and start == end:
        raise PathInputError(f"start and end must differ for n={n}, both are {start}")
    if np.isnan(dist).any():
        raise PathInputError("Distance matrix contains NaN")
    if (dist < 0).any():
        raise PathInputError("Distance matrix contains negative entries")


def solve_path(
    n: int,
    distance_matrix: Sequence[Sequence[float]] | np.ndarray,
    start: int,
    end: int,
    max_points: int | None = None,
) -> PathResult:
    """
    Shortest Hamiltonian path from `start` to `end` visiting every label once.

    Dynamic programming over (subset, last) states: dp[mask, v] is the
    cheapest path that leaves `start`, visits exactly the labels in `mask`
    and stops at v. `end` is never an intermediate stop; the hop into it is
    added once after the table is filled.

    Ties resolve to the lowest label, so results are reproducible.
    An unreachable `end` gives cost inf and an empty path.

    Time complexity: O(2^n * n^2), memory O(2^n * n).
    """
    if max_points is None:
        max_points = get_settings().max_path_points
    max_points = min(max_points, MAX_SUPPORTED_PATH_POINTS)

    dist = np.asarray(distance_matrix, dtype=float)
    check_path_input(n, dist, start, end, max_points)

    if n == 1:
        return PathResult(0.0, [start])
    if n == 2:
        cost = float(dist[start, end])
        return PathResult(cost, [start, end]) if math.isfinite(cost) else infeasible()

    n_masks = 1 << n
    dp = np.full((n_masks, n), np.inf)
    parent = np.full((n_masks, n), -1, dtype=np.int64)
    start_bit = 1 << start
    end_bit = 1 << end
    dp[start_bit, start] = 0.0

    for mask in range(n_masks):
        # end is only entered by the final hop, so masks holding it stay inf
        if not mask & start_bit or mask & end_bit:
            continue
        for v in range(n):
            if not mask >> v & 1:
                continue
            prev = mask ^ (1 << v)
            if prev == 0:
                continue
            # dp[prev, u] is inf for every u outside prev
            candidates = dp[prev] + dist[:, v]
            u = int(np.argmin(candidates))
            if candidates[u] < dp[mask, v]:
                dp[mask, v] = candidates[u]
                parent[mask, v] = u

    full = (n_masks - 1) ^ end_bit
    finals = dp[full] + dist[:, end]
    finals[end] = np.inf
    last = int(np.argmin(finals))
    best = float(finals[last])

    if not math.isfinite(best):
        logger.debug("No Hamiltonian path from %d to %d", start, end)
        return infeasible()

    path = reconstruct_path(parent, full, start, end, last)
    logger.debug("Hamiltonian path %s, cost %.6g", path, best)
    return PathResult(best, path)


def reconstruct_path(
    parent: np.ndarray,
    mask: int,
    start: int,
    end: int,
    last: int,
) -> list[int]:
    """
    Walk parent pointers back from `last` to `start`, clearing each
    visited label from the mask, then append `end`.
    """
    path = []
    current = last
    while current != start:
        path.append(current)
        prev = int(parent[mask, current])
        mask ^= 1 << current
        current = prev
    path.append(start)
    path.reverse()
    path.append(end)
    return path


def path_cost(distance_matrix: Sequence[Sequence[float]] | np.ndarray, path: Sequence[int]) -> float:
    dist = np.asarray(distance_matrix, dtype=float)
    return float(sum(dist[a, b] for a, b in zip(path, path[1:])))
