"""Plain-text route renderer.

Produces the console report: segment listings, the available-routes
block and the recommendation block. Numbers use general format, so
3.0 prints as ``3`` and 9.24 as ``9.24``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ...domain.models import (
    RankedRoute,
    Recommendation,
    RecommendationStatus,
    RoutePath,
    RoutePlan,
)
from ...ports.graph import GraphStorePort
from ...services.cost_model import CostModel

RULE = "-" * 50
MODE_LABELS = {"walk": "Walking", "bike": "Biking", "car": "Driving"}


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass
class TextRouteRenderer:
    """Route renderer producing plain text.

    This adapter implements RouteRendererPort.

    Attributes:
        store: The road network, for location names and segment details
        cost_model: Computes the time estimates shown per route
    """

    store: GraphStorePort
    cost_model: CostModel

    def render_route(
        self, path: RoutePath, mode: str, show_all_modes: bool = False
    ) -> str:
        """Render one route segment by segment.

        Args:
            path: Edge indices of the route.
            mode: Travel mode for the single estimate.
            show_all_modes: Show an estimate for every recognized mode instead.

        Returns:
            The multi-line report, ending with a blank line.
        """
        lines: List[str] = []
        for number, index in enumerate(path, start=1):
            route = self.store.route(index)
            lines.extend(
                [
                    f"Segment {number}: {self.store.location(route.start).name}"
                    f" -> {self.store.location(route.end).name}",
                    f"  Distance: {_num(route.distance_km)} km",
                    f"  U-Turns: {route.u_turns}",
                    f"  Traffic: {route.traffic.label}",
                    f"  Construction: {'Yes' if route.construction else 'No'}",
                ]
            )

        lines.append(RULE)
        lines.append(f"Total Distance: {_num(self.cost_model.path_distance(path))} km")
        lines.append(
            "Construction: "
            f"{'Present' if self.cost_model.has_construction(path) else 'None'}"
        )

        if show_all_modes:
            lines.append("Time Estimates:")
            for each, minutes in self.cost_model.mode_times(path).items():
                label = MODE_LABELS.get(each, each.capitalize())
                lines.append(f"  {label}: {_num(minutes)} mins")
        else:
            lines.append(
                f"Estimated Travel Time ({mode}): "
                f"{_num(self.cost_model.path_time(path, mode))} mins"
            )

        return "\n".join(lines) + "\n"

    def render_top_routes(self, routes: Sequence[RankedRoute], mode: str) -> str:
        """Render the fastest alternatives, each with every mode's estimate."""
        parts = ["", "=" * 20 + " AVAILABLE ROUTES " + "=" * 20]
        for number, ranked in enumerate(routes, start=1):
            parts.append("")
            parts.append(f"Route Option {number}:")
            parts.append(RULE)
            parts.append(self.render_route(ranked.path, mode, show_all_modes=True))
        return "\n".join(parts)

    def render_recommendation(self, recommendation: Recommendation, mode: str) -> str:
        """Render the recommended route, or the no-route message."""
        parts = ["", "=" * 20 + " RECOMMENDATION " + "=" * 20, ""]

        if recommendation.route is None:
            parts.append("No available routes found!")
            return "\n".join(parts) + "\n"

        if recommendation.status is RecommendationStatus.CONSTRUCTION_ONLY:
            parts.append("! All routes have construction! Showing fastest available:")
        else:
            parts.append("* Best Route (No Construction):")
        parts.append(self.render_route(recommendation.route.path, mode))
        return "\n".join(parts)

    def render_plan(self, plan: RoutePlan) -> str:
        """Render the available routes followed by the recommendation."""
        return self.render_top_routes(plan.top_routes, plan.mode) + (
            self.render_recommendation(plan.recommendation, plan.mode)
        )
