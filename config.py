"""Configuration settings for route-hull."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Largest point count the exact path solver accepts at all.
# The DP tables hold 2**n * n entries each.
MAX_SUPPORTED_PATH_POINTS = 20


class Settings(BaseSettings):
    """Settings loaded from ROUTE_HULL_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTE_HULL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Exact path solver
    max_path_points: int = Field(default=16, ge=1, le=MAX_SUPPORTED_PATH_POINTS)

    # Distance provider, metres. Same equatorial radius the map app used.
    earth_radius_m: float = Field(default=6378137.0, gt=0)

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()
