"""Services layer - Application orchestration.

Available services:
- CostModel: Segment and path travel times per mode
- RouteRanker: Top-N ranking and construction-aware recommendation
- RoutePlannerService: Main service answering route queries
"""

from .cost_model import CostModel
from .route_planner import RoutePlannerService
from .route_ranker import RouteRanker

__all__ = ["CostModel", "RouteRanker", "RoutePlannerService"]
