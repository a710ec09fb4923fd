import logging

from rich.logging import RichHandler

from config import get_settings


def configure(level: str | None = None) -> None:
    if level is None:
        level = get_settings().log_level
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_time=False, show_path=False)],
        force=True,
    )
