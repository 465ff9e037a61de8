"""Typed domain errors for the route optimizer.

All errors inherit from RouteOptimizerError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RouteOptimizerError(Exception):
    """Base error for the route optimizer domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidReferenceError(RouteOptimizerError):
    """A location or route index is out of range in the graph store.

    Attributes:
        index: The offending index
        kind: Either 'location' or 'route'
    """

    index: int = -1
    kind: str = "location"


@dataclass
class GraphError(RouteOptimizerError):
    """Seed graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class LocationNotFoundError(RouteOptimizerError):
    """A query references a location that does not exist.

    Attributes:
        index: The requested location index
    """

    index: int = -1


@dataclass
class SameLocationError(RouteOptimizerError):
    """Start and destination of a query are the same location.

    Attributes:
        index: The shared location index
    """

    index: int = -1


@dataclass
class NoRouteFoundError(RouteOptimizerError):
    """No path exists between the requested locations within the depth bound.

    Attributes:
        start: Start location name
        end: Destination location name
    """

    start: str = ""
    end: str = ""


@dataclass
class ConfigurationError(RouteOptimizerError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
