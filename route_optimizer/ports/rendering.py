"""Rendering port - Abstraction for route output.

This protocol defines the contract for turning ranked routes and
recommendations into something a user can read.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import RankedRoute, Recommendation, RoutePath, RoutePlan


class RouteRendererPort(Protocol):
    """Port for route rendering.

    Implementation: adapters/rendering/text_renderer.py
    """

    def render_route(
        self, path: RoutePath, mode: str, show_all_modes: bool = False
    ) -> str:
        """Render one route segment by segment."""
        ...

    def render_top_routes(self, routes: Sequence[RankedRoute], mode: str) -> str:
        """Render the fastest alternatives."""
        ...

    def render_recommendation(self, recommendation: Recommendation, mode: str) -> str:
        """Render the recommended route."""
        ...

    def render_plan(self, plan: RoutePlan) -> str:
        """Render a complete query result."""
        ...
