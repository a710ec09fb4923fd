import logging

from rich.console import Console
from rich.table import Table

import logging_config
from route import Marker, RoutePlan, plan_route

logger = logging.getLogger(__name__)

SAMPLE_MARKERS = [
    Marker(1, 0.3186, 32.5916, "Café Javas Kampala", "Popular café with an extensive menu."),
    Marker(2, 0.3270, 32.6010, "Izumi Restaurant & Lounge", "Japanese, sushi and Thai cuisine."),
    Marker(3, 0.3138, 32.5865, "La Paroni's Choma Point", "Live music on Parliamentary Avenue."),
    Marker(4, 0.3275, 32.6020, "Mythos", "Greek-inspired Mediterranean dishes in Kololo."),
    Marker(5, 0.3272, 32.6025, "The Lawns", "Game meat with a view of the gardens."),
    Marker(6, 0.3194, 32.5883, "Cayenne Restaurant & Lounge", "Poolside lounge in Bukoto."),
    Marker(7, 0.3112, 32.5910, "Sky Lounge", "Rooftop bar on Kisementi."),
    Marker(8, 0.3189, 32.5965, "The Alchemist Kitchen & Bar", "Craft cocktails in Kololo."),
    Marker(9, 0.3125, 32.5790, "Prunes Café", "Organic brunch in a garden setting."),
    Marker(10, 0.3203, 32.5969, "Riders Lounge", "Nightlife spot with a dance floor."),
]


def render_plan(plan: RoutePlan, console: Console) -> None:
    table = Table(title="Route")
    table.add_column("#", justify="right")
    table.add_column("Marker")
    table.add_column("Lat", justify="right")
    table.add_column("Lon", justify="right")
    for i, marker in enumerate(plan.markers, start=1):
        table.add_row(str(i), marker.title, f"{marker.latitude:.4f}", f"{marker.longitude:.4f}")
    console.print(table)
    if plan.feasible:
        console.print(f"Total distance: {plan.cost / 1000:.2f} km")
    else:
        console.print("[red]No route visits every marker[/red]")


def main(markers: list[Marker] | None = None, console: Console | None = None) -> RoutePlan:
    logging_config.configure()
    if markers is None:
        markers = SAMPLE_MARKERS
    if console is None:
        console = Console()

    plan = plan_route(markers)
    logger.info("Ordered %d markers, hull has %d vertices", len(plan.order), len(plan.hull))
    render_plan(plan, console)
    return plan


if __name__ == "__main__":
    main()
