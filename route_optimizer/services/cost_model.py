"""Travel-time cost model.

Segment time is ``distance / speed * 60`` minutes, scaled by the traffic
multiplier for traffic-sensitive modes, plus a fixed penalty per u-turn.
Path values are plain sums over segments and are recomputed on every call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict

from ..config import CostConfig, get_config
from ..domain.errors import ConfigurationError
from ..domain.models import Route, RoutePath
from ..ports.graph import GraphStorePort


@dataclass
class CostModel:
    """Computes segment and path travel times for a travel mode.

    Unrecognized modes travel at the fallback mode's speed. The u-turn
    penalty applies to every mode, walking included.

    Attributes:
        store: The road network the paths refer to
        config: Speeds, traffic multipliers and penalties
    """

    store: GraphStorePort
    config: CostConfig = field(default_factory=lambda: get_config().cost)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.config.fallback_mode not in self.config.mode_speeds_kmh:
            raise ConfigurationError(
                f"Fallback mode '{self.config.fallback_mode}' has no speed",
                setting_name="fallback_mode",
            )
        for mode, speed in self.config.mode_speeds_kmh.items():
            if speed <= 0:
                raise ConfigurationError(
                    f"Speed for mode '{mode}' must be positive, got {speed}",
                    setting_name="mode_speeds_kmh",
                )

    def resolve_mode(self, mode: str) -> str:
        """Return the mode actually used for costing; unknown modes fall back."""
        if mode not in self.config.mode_speeds_kmh:
            self._logger.debug(
                "Unknown travel mode, using fallback mode",
                extra={"mode": mode, "fallback": self.config.fallback_mode},
            )
            return self.config.fallback_mode
        return mode

    def speed_kmh(self, mode: str) -> float:
        """Return the speed for a mode, falling back for unknown modes."""
        return self.config.mode_speeds_kmh[self.resolve_mode(mode)]

    def edge_time(self, route: Route, mode: str) -> float:
        """Travel time of one route segment in minutes.

        Args:
            route: The segment.
            mode: Travel mode, e.g. 'walk', 'bike' or 'car'.

        Returns:
            Minutes, unrounded.
        """
        mode = self.resolve_mode(mode)
        minutes = route.distance_km / self.config.mode_speeds_kmh[mode] * 60

        if mode in self.config.traffic_sensitive_modes:
            minutes *= self.config.traffic_multipliers.get(route.traffic.name, 1.0)

        return minutes + route.u_turns * self.config.u_turn_penalty_minutes

    def path_time(self, path: RoutePath, mode: str) -> float:
        """Total travel time of a path in minutes."""
        return sum(self.edge_time(self.store.route(index), mode) for index in path)

    def path_distance(self, path: RoutePath) -> float:
        """Total distance of a path in kilometers."""
        return sum(self.store.route(index).distance_km for index in path)

    def has_construction(self, path: RoutePath) -> bool:
        """Check if any segment of a path is under construction."""
        return any(self.store.route(index).construction for index in path)

    def mode_times(self, path: RoutePath) -> Dict[str, float]:
        """Travel time of a path for every recognized mode."""
        return {mode: self.path_time(path, mode) for mode in self.config.modes}
