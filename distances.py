"""
Distance providers for the path solver.

Points carry longitude in `x` and latitude in `y`, both in degrees.
"""
from typing import Callable

import numpy as np

from config import get_settings
from geometry import Point

DistanceProvider = Callable[[list[Point]], np.ndarray]


def _coords(points: list[Point]) -> tuple[np.ndarray, np.ndarray]:
    xs = np.array([p.x for p in points], dtype=float)
    ys = np.array([p.y for p in points], dtype=float)
    return xs, ys


def haversine_matrix(points: list[Point], radius: float | None = None) -> np.ndarray:
    """
    Great-circle distances in metres between every pair of points.
    """
    if radius is None:
        radius = get_settings().earth_radius_m

    lon, lat = (np.radians(c) for c in _coords(points))
    dlat = lat[None, :] - lat[:, None]
    dlon = lon[None, :] - lon[:, None]

    a = np.sin(dlat / 2) ** 2 + np.cos(lat[:, None]) * np.cos(lat[None, :]) * np.sin(dlon / 2) ** 2
    # rounding can push a just past 1 for antipodal points
    a = np.clip(a, 0.0, 1.0)
    return 2 * radius * np.arcsin(np.sqrt(a))


def euclidean_matrix(points: list[Point]) -> np.ndarray:
    xs, ys = _coords(points)
    return np.hypot(xs[None, :] - xs[:, None], ys[None, :] - ys[:, None])
