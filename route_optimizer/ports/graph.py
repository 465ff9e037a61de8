"""Graph ports - Abstractions for graph storage, loading and path search.

These protocols define the contracts for holding the road network,
populating it from seed data, and enumerating paths through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Protocol, Sequence, Tuple

if TYPE_CHECKING:
    from ..domain.models import Location, Route, RoutePath, Traffic


class GraphStorePort(Protocol):
    """Port for the in-memory road network.

    Implementation: adapters/graph/memory_store.py

    Locations and routes are populated once at setup time and are
    read-only while queries run.
    """

    def add_location(self, name: str) -> int:
        """Add a location and return its index."""
        ...

    def add_route(
        self,
        start: int,
        end: int,
        distance_km: float,
        u_turns: int = 0,
        traffic: Traffic = ...,
        construction: bool = False,
    ) -> int:
        """Add a directed route and return its edge index.

        Raises:
            InvalidReferenceError: If either endpoint is out of range.
        """
        ...

    def locations(self) -> Sequence[Location]:
        """Return all locations in index order."""
        ...

    def routes(self) -> Sequence[Route]:
        """Return all routes in edge index order."""
        ...

    def location(self, index: int) -> Location:
        """Return a location by index."""
        ...

    def route(self, index: int) -> Route:
        """Return a route by edge index."""
        ...

    def routes_from(self, index: int) -> Iterator[Tuple[int, Route]]:
        """Yield (edge index, route) pairs leaving a location."""
        ...

    def has_location(self, index: int) -> bool:
        """Check if a location index is in range."""
        ...


class GraphRepositoryPort(Protocol):
    """Port for loading the road network from seed data.

    Implementation: adapters/graph/csv_repository.py
    """

    def load(self) -> GraphStorePort:
        """Load the road network.

        Returns:
            A populated graph store.
        """
        ...


class PathEnumeratorPort(Protocol):
    """Port for simple-path enumeration.

    Implementation: adapters/graph/dfs_enumerator.py
    """

    def find_all_paths(self, start: int, end: int) -> List[RoutePath]:
        """Find every simple path from start to end within the depth bound.

        Args:
            start: Index of the start location.
            end: Index of the destination location.

        Returns:
            Paths as tuples of edge indices. Empty if either index is
            out of range or no path exists.
        """
        ...
