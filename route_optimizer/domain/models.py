"""Immutable domain models for the route optimizer.

All models are frozen dataclasses with slots. Locations and routes are
stored in flat lists and referenced by stable integer index, so a path
is simply a tuple of route (edge) indices.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple

# Ordered edge indices; consecutive routes are contiguous and no location repeats.
RoutePath = Tuple[int, ...]


class Traffic(Enum):
    """Traffic level observed on a route."""

    LOW = auto()
    MEDIUM = auto()
    HIGH = auto()

    @property
    def label(self) -> str:
        """Display label, e.g. 'Medium'."""
        return self.name.capitalize()


class RecommendationStatus(Enum):
    """Outcome of a route recommendation."""

    CLEAR = auto()
    CONSTRUCTION_ONLY = auto()
    NO_ROUTE = auto()


@dataclass(frozen=True, slots=True)
class Location:
    """A named point of the road network."""

    name: str


@dataclass(frozen=True, slots=True)
class Route:
    """A directed road segment between two locations.

    Attributes:
        start: Index of the origin location
        end: Index of the destination location
        distance_km: Segment length in kilometers
        u_turns: Number of u-turns required along the segment
        traffic: Traffic level on the segment
        construction: Whether the segment is under construction
    """

    start: int
    end: int
    distance_km: float
    u_turns: int = 0
    traffic: Traffic = Traffic.LOW
    construction: bool = False

    def __post_init__(self) -> None:
        """Validate segment attributes."""
        if not math.isfinite(self.distance_km) or self.distance_km <= 0:
            raise ValueError(
                f"Distance must be positive and finite, got {self.distance_km}"
            )
        if self.u_turns < 0:
            raise ValueError(
                f"U-turn count must be non-negative, got {self.u_turns}"
            )


@dataclass(frozen=True, slots=True)
class RankedRoute:
    """A path paired with its aggregates under one travel mode.

    Computed fresh for every query and never stored.

    Attributes:
        path: Edge indices forming the route
        time_minutes: Total travel time for the ranked mode
        distance_km: Total distance of the route
        has_construction: Whether any segment is under construction
    """

    path: RoutePath
    time_minutes: float
    distance_km: float
    has_construction: bool = False


@dataclass(frozen=True, slots=True)
class Recommendation:
    """The single best route for a query, if any."""

    status: RecommendationStatus
    route: Optional[RankedRoute] = None

    @property
    def found(self) -> bool:
        """Check if a route was recommended."""
        return self.route is not None


@dataclass(frozen=True, slots=True)
class RoutePlan:
    """Everything computed for one (start, end, mode) query.

    Attributes:
        start: Index of the start location
        end: Index of the destination location
        mode: Travel mode used for ranking
        paths: All enumerated paths, in enumeration order
        top_routes: Fastest routes, best first
        recommendation: The recommended route
    """

    start: int
    end: int
    mode: str
    paths: Tuple[RoutePath, ...] = field(default_factory=tuple)
    top_routes: Tuple[RankedRoute, ...] = field(default_factory=tuple)
    recommendation: Recommendation = field(
        default_factory=lambda: Recommendation(RecommendationStatus.NO_ROUTE)
    )

    @property
    def num_paths(self) -> int:
        """Return the number of enumerated paths."""
        return len(self.paths)
