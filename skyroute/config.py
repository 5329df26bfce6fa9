"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for runtime settings:
where the timetable lives, the routing defaults used by the planner
service, and logging options.

Configuration can be overridden via environment variables:
- SKY_SCHEDULE_DATA_DIR=/path/to/data
- SKY_SCHEDULE_FLIGHTS_FILE=flights.csv
- SKY_ROUTING_DEFAULT_MIN_LAYOVER=45
- SKY_ROUTING_CACHE_ENABLED=false
- SKY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class ScheduleConfig(BaseSettings):
    """Timetable data configuration.

    Environment variables prefixed with SKY_SCHEDULE_.
    """

    model_config = SettingsConfigDict(env_prefix="SKY_SCHEDULE_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    flights_file: str = "flights.csv"

    # CSV column names
    origin_column: str = "Starting_Airport"
    destination_column: str = "Destination_Airport"
    duration_column: str = "travel_duration"
    departure_time_column: str = "departure_time"
    day_column: str = "day_of_flight"

    @property
    def flights_path(self) -> Path:
        """Full path to the flights CSV file."""
        return self.data_dir / self.flights_file


class RoutingConfig(BaseSettings):
    """Earliest-arrival query defaults.

    Environment variables prefixed with SKY_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="SKY_ROUTING_")

    default_min_layover: int = Field(default=60, ge=0)
    horizon_weeks: int = Field(default=2, ge=1)
    cache_enabled: bool = True
    cache_size: int = Field(default=256, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with SKY_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SKY_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.schedule.flights_path)
        print(config.routing.default_min_layover)

    Environment variables prefixed with SKY_.
    """

    model_config = SettingsConfigDict(env_prefix="SKY_")

    schedule: ScheduleConfig = Field(default_factory=ScheduleConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Raises:
        ConfigurationError: If an environment override fails validation.
    """
    try:
        return AppConfig()
    except ValidationError as e:
        loc = e.errors()[0]["loc"]
        raise ConfigurationError(
            "Invalid configuration",
            cause=e,
            setting_name=".".join(str(part) for part in loc),
        ) from e


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
