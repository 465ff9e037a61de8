"""Route ranking and recommendation.

Two views over the same enumerated paths:
- top_routes: the fastest alternatives for a mode
- recommend: the fastest construction-free route, or the fastest
  construction-affected one when nothing else exists
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..config import RankingConfig, get_config
from ..domain.models import (
    RankedRoute,
    Recommendation,
    RecommendationStatus,
    RoutePath,
)
from .cost_model import CostModel


@dataclass
class RouteRanker:
    """Orders candidate paths under a travel mode.

    Attributes:
        cost_model: Computes per-path aggregates
        config: Ranking configuration (top-N count)
    """

    cost_model: CostModel
    config: RankingConfig = field(default_factory=lambda: get_config().ranking)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def rank(self, paths: Iterable[RoutePath], mode: str) -> List[RankedRoute]:
        """Compute aggregates for every path, keeping enumeration order."""
        return [
            RankedRoute(
                path=path,
                time_minutes=self.cost_model.path_time(path, mode),
                distance_km=self.cost_model.path_distance(path),
                has_construction=self.cost_model.has_construction(path),
            )
            for path in paths
        ]

    def top_routes(
        self, paths: Iterable[RoutePath], mode: str, n: Optional[int] = None
    ) -> List[RankedRoute]:
        """Return the ``n`` fastest routes, best first.

        Equal times are ordered by shorter distance, then by enumeration
        order (the sort is stable).

        Args:
            paths: Candidate paths.
            mode: Travel mode used for timing.
            n: How many routes to keep; defaults to ``config.top_n``.

        Returns:
            At most ``n`` ranked routes; empty for no candidates.

        Raises:
            ValueError: If ``n`` is negative.
        """
        if n is None:
            n = self.config.top_n
        if n < 0:
            raise ValueError(f"Route count must be non-negative, got {n}")
        ranked = sorted(
            self.rank(paths, mode),
            key=lambda r: (r.time_minutes, r.distance_km),
        )
        return ranked[:n]

    def recommend(self, paths: Iterable[RoutePath], mode: str) -> Recommendation:
        """Pick the single best route.

        Construction-free routes always win over construction-affected
        ones, even slower. Clean routes are ordered by time then distance;
        blocked routes by time only.

        Args:
            paths: Candidate paths.
            mode: Travel mode used for timing.

        Returns:
            A recommendation whose status tells which pool it came from,
            or NO_ROUTE when there are no candidates.
        """
        ranked = self.rank(paths, mode)
        clean = sorted(
            (r for r in ranked if not r.has_construction),
            key=lambda r: (r.time_minutes, r.distance_km),
        )
        blocked = sorted(
            (r for r in ranked if r.has_construction),
            key=lambda r: r.time_minutes,
        )

        self._logger.debug(
            "Routes partitioned",
            extra={"mode": mode, "clean": len(clean), "blocked": len(blocked)},
        )

        if clean:
            return Recommendation(RecommendationStatus.CLEAR, clean[0])
        if blocked:
            return Recommendation(RecommendationStatus.CONSTRUCTION_ONLY, blocked[0])
        return Recommendation(RecommendationStatus.NO_ROUTE)
