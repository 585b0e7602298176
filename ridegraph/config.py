"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the dataset location,
the analytics parameters and the logging setup.

Configuration can be overridden via environment variables:
- RIDEGRAPH_DATASET_DATA_DIR=/path/to/data
- RIDEGRAPH_DATASET_RIDES_FILE=rides.csv
- RIDEGRAPH_ANALYTICS_TOP_K=10
- RIDEGRAPH_ANALYTICS_WORKERS=4
- RIDEGRAPH_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatasetConfig(BaseSettings):
    """Ride-log dataset configuration.

    Environment variables prefixed with RIDEGRAPH_DATASET_.
    """

    model_config = SettingsConfigDict(env_prefix="RIDEGRAPH_DATASET_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    rides_file: str = "UberDataset.csv"
    has_header: bool = True

    # START_DATE,END_DATE,CATEGORY,START,STOP,MILES,PURPOSE
    category_column: int = Field(default=2, ge=0)
    origin_column: int = Field(default=3, ge=0)
    destination_column: int = Field(default=4, ge=0)

    excluded_locations: frozenset[str] = frozenset({"Unknown Location"})

    @property
    def rides_path(self) -> Path:
        """Full path to the rides CSV file."""
        return self.data_dir / self.rides_file

    @property
    def min_columns(self) -> int:
        """Minimum number of columns a row needs to be usable."""
        return (
            max(self.category_column, self.origin_column, self.destination_column)
            + 1
        )


class AnalyticsConfig(BaseSettings):
    """Analytics parameters.

    Environment variables prefixed with RIDEGRAPH_ANALYTICS_.
    """

    model_config = SettingsConfigDict(env_prefix="RIDEGRAPH_ANALYTICS_")

    top_k: int = Field(default=5, ge=0)
    workers: int = Field(default=1, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RIDEGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RIDEGRAPH_LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.dataset.rides_path)
        print(config.analytics.top_k)

    Environment variables prefixed with RIDEGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RIDEGRAPH_")

    dataset: DatasetConfig = Field(default_factory=DatasetConfig)
    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
