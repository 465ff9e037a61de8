"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    InvalidReferenceError,
    LocationNotFoundError,
    NoRouteFoundError,
    RouteOptimizerError,
    SameLocationError,
)
from .models import (
    Location,
    RankedRoute,
    Recommendation,
    RecommendationStatus,
    Route,
    RoutePath,
    RoutePlan,
    Traffic,
)

__all__ = [
    # Models
    "Location",
    "Route",
    "RoutePath",
    "Traffic",
    "RankedRoute",
    "Recommendation",
    "RecommendationStatus",
    "RoutePlan",
    # Errors
    "RouteOptimizerError",
    "InvalidReferenceError",
    "GraphError",
    "LocationNotFoundError",
    "SameLocationError",
    "NoRouteFoundError",
    "ConfigurationError",
]
