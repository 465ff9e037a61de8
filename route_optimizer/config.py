"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the tunable values of
the route optimizer: the search depth bound, the mode speed table, the
traffic multipliers, the u-turn penalty, and the top-N count.

Configuration can be overridden via environment variables:
- ROUTE_SEARCH_MAX_DEPTH=4
- ROUTE_COST_U_TURN_PENALTY_MINUTES=3
- ROUTE_RANK_TOP_N=3
- ROUTE_GRAPH_DATA_DIR=/path/to/data
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchConfig(BaseSettings):
    """Path enumeration configuration.

    Environment variables prefixed with ROUTE_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="ROUTE_SEARCH_")

    # Hard cap on edges per enumerated path. Longer routes are never returned.
    max_depth: int = Field(default=6, ge=0)


class CostConfig(BaseSettings):
    """Travel-time cost model configuration.

    Environment variables prefixed with ROUTE_COST_.
    """

    model_config = SettingsConfigDict(env_prefix="ROUTE_COST_")

    mode_speeds_kmh: Dict[str, float] = Field(
        default_factory=lambda: {"walk": 5.0, "bike": 15.0, "car": 30.0}
    )
    fallback_mode: str = "walk"
    traffic_sensitive_modes: Tuple[str, ...] = ("car",)
    traffic_multipliers: Dict[str, float] = Field(
        default_factory=lambda: {"LOW": 1.0, "MEDIUM": 1.1, "HIGH": 1.25}
    )
    u_turn_penalty_minutes: float = 2.0

    @property
    def modes(self) -> Tuple[str, ...]:
        """Recognized travel modes, in declaration order."""
        return tuple(self.mode_speeds_kmh)


class RankingConfig(BaseSettings):
    """Route ranking configuration.

    Environment variables prefixed with ROUTE_RANK_.
    """

    model_config = SettingsConfigDict(env_prefix="ROUTE_RANK_")

    top_n: int = Field(default=2, ge=0)


class GraphConfig(BaseSettings):
    """Seed graph data configuration.

    Environment variables prefixed with ROUTE_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="ROUTE_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    locations_file: str = "locations.csv"
    routes_file: str = "routes.csv"

    @property
    def locations_path(self) -> Path:
        """Full path to locations CSV file."""
        return self.data_dir / self.locations_file

    @property
    def routes_path(self) -> Path:
        """Full path to routes CSV file."""
        return self.data_dir / self.routes_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with ROUTE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ROUTE_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.search.max_depth)
        print(config.graph.routes_path)

    Environment variables prefixed with ROUTE_.
    """

    model_config = SettingsConfigDict(env_prefix="ROUTE_")

    search: SearchConfig = Field(default_factory=SearchConfig)
    cost: CostConfig = Field(default_factory=CostConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: ObservabilityConfig) -> None:
    """Apply the configured level and format to the root logger.

    Only entry points call this; library code just emits records.
    """
    logging.basicConfig(level=config.level.upper(), format=config.format)
