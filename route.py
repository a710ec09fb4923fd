"""
Order map markers into a single route anchored at their two extreme points.

The hull of the marker positions gives the diameter pair, whose labels are
fixed as the first and last stop of the exact Hamiltonian path.
"""
import logging
import math

from dataclasses import dataclass, field

from calipers import find_diameter_pair
from distances import DistanceProvider, haversine_matrix
from geometry import Point, build_hull, deduplicate
from hamiltonian_path import solve_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Marker:
    label: int
    latitude: float
    longitude: float
    title: str = ""
    description: str = ""


@dataclass
class RoutePlan:
    hull: list[Point] = field(default_factory=list)
    endpoints: tuple[int, int] | None = None
    cost: float = 0.0
    order: list[int] = field(default_factory=list)
    markers: list[Marker] = field(default_factory=list)
    # marker position -> position of the first marker at the same coordinates
    representative: dict[int, int] = field(default_factory=dict)

    @property
    def feasible(self) -> bool:
        return math.isfinite(self.cost)


def to_points(markers: list[Marker]) -> list[Point]:
    """
    Project markers onto the plane, x = longitude, y = latitude.
    Labels are positions in the marker list, not marker labels.
    """
    return [Point(m.longitude, m.latitude, i) for i, m in enumerate(markers)]


def pick_endpoints(hull: list[Point], n: int) -> tuple[int, int]:
    a, b = find_diameter_pair(hull)
    start, end = a.label, b.label
    if start == end and n > 1:
        # every marker sits on the same spot
        end = min(i for i in range(n) if i != start)
    return start, end


def plan_route(
    markers: list[Marker],
    distance_provider: DistanceProvider = haversine_matrix,
    max_points: int | None = None,
) -> RoutePlan:
    if not markers:
        return RoutePlan()

    points = to_points(markers)
    unique, representative = deduplicate(points)
    hull = build_hull(unique)
    start, end = pick_endpoints(hull, len(points))
    logger.debug("Route endpoints: %d -> %d", start, end)

    dist = distance_provider(points)
    cost, order = solve_path(len(points), dist, start, end, max_points=max_points)
    if not order:
        logger.warning(
            "No route visits all %d markers from %d to %d", len(markers), start, end,
        )

    return RoutePlan(
        hull=hull,
        endpoints=(start, end),
        cost=cost,
        order=order,
        markers=[markers[i] for i in order],
        representative=representative,
    )
