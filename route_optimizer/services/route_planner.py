"""Route planner service - Main orchestrator.

This service validates a (start, end, mode) query, enumerates the
candidate paths, and ranks them into a RoutePlan.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import (
    LocationNotFoundError,
    NoRouteFoundError,
    RouteOptimizerError,
    SameLocationError,
)
from ..domain.models import RoutePlan
from ..ports.graph import GraphStorePort, PathEnumeratorPort
from .route_ranker import RouteRanker


@dataclass
class RoutePlannerService:
    """Main service for answering route queries.

    This service orchestrates:
    1. Query validation
    2. Path enumeration
    3. Top-N ranking
    4. Recommendation

    Attributes:
        store: The road network
        enumerator: Lists candidate paths
        ranker: Orders and selects among candidates
    """

    store: GraphStorePort
    enumerator: PathEnumeratorPort
    ranker: RouteRanker

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def plan(self, start: int, end: int, mode: str) -> RoutePlan:
        """Plan a trip between two locations.

        Args:
            start: Zero-based index of the start location.
            end: Zero-based index of the destination location.
            mode: Travel mode, e.g. 'walk', 'bike' or 'car'.

        Returns:
            RoutePlan with every candidate path, the fastest alternatives
            and the recommendation.

        Raises:
            LocationNotFoundError: If either index is out of range.
            SameLocationError: If start and end are the same location.
            NoRouteFoundError: If no path exists within the depth bound.
        """
        for index in (start, end):
            if not self.store.has_location(index):
                raise LocationNotFoundError(
                    f"Location not found: {index}",
                    index=index,
                )

        if start == end:
            raise SameLocationError(
                "Destination cannot be the same as start location",
                index=start,
            )

        paths = self.enumerator.find_all_paths(start, end)
        if not paths:
            raise NoRouteFoundError(
                f"No route from {self.store.location(start).name} "
                f"to {self.store.location(end).name}",
                start=self.store.location(start).name,
                end=self.store.location(end).name,
            )

        plan = RoutePlan(
            start=start,
            end=end,
            mode=mode,
            paths=tuple(paths),
            top_routes=tuple(self.ranker.top_routes(paths, mode)),
            recommendation=self.ranker.recommend(paths, mode),
        )
        self._logger.info(
            "Route planned",
            extra={
                "start": start,
                "end": end,
                "mode": mode,
                "paths": plan.num_paths,
                "status": plan.recommendation.status.name,
            },
        )
        return plan

    def plan_safe(
        self, start: int, end: int, mode: str
    ) -> tuple[Optional[RoutePlan], Optional[str]]:
        """Plan a trip, returning an error message instead of raising.

        Returns:
            Tuple of (RoutePlan or None, error message or None).
        """
        try:
            return self.plan(start, end, mode), None
        except NoRouteFoundError:
            return None, "No routes found!"
        except RouteOptimizerError as e:
            return None, f"Error: {e.message}"
