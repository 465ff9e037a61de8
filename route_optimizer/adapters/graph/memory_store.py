"""In-memory graph store adapter.

Locations and routes live in flat lists and reference each other by
index. An outgoing edge list per location keeps neighbour lookup cheap.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

from ...domain.errors import InvalidReferenceError
from ...domain.models import Location, Route, Traffic


@dataclass
class InMemoryGraphStore:
    """Graph store backed by Python lists.

    This adapter implements GraphStorePort. Multiple routes may share the
    same ordered pair of locations, and routes may exist in one direction
    only.
    """

    _locations: List[Location] = field(default_factory=list, repr=False)
    _routes: List[Route] = field(default_factory=list, repr=False)
    _outgoing: List[List[int]] = field(default_factory=list, repr=False)

    def add_location(self, name: str) -> int:
        """Add a location.

        Args:
            name: Display name of the location.

        Returns:
            The index of the new location.
        """
        self._locations.append(Location(name=name))
        self._outgoing.append([])
        return len(self._locations) - 1

    def add_route(
        self,
        start: int,
        end: int,
        distance_km: float,
        u_turns: int = 0,
        traffic: Traffic = Traffic.LOW,
        construction: bool = False,
    ) -> int:
        """Add a directed route between two existing locations.

        Args:
            start: Index of the origin location.
            end: Index of the destination location.
            distance_km: Segment length in kilometers.
            u_turns: Number of u-turns along the segment.
            traffic: Traffic level on the segment.
            construction: Whether the segment is under construction.

        Returns:
            The edge index of the new route.

        Raises:
            InvalidReferenceError: If either endpoint is out of range.
        """
        for index in (start, end):
            if not self.has_location(index):
                raise InvalidReferenceError(
                    f"Invalid location reference: {index}",
                    index=index,
                    kind="location",
                )

        self._routes.append(
            Route(
                start=start,
                end=end,
                distance_km=distance_km,
                u_turns=u_turns,
                traffic=traffic,
                construction=construction,
            )
        )
        edge_index = len(self._routes) - 1
        self._outgoing[start].append(edge_index)
        return edge_index

    def locations(self) -> Sequence[Location]:
        """Return all locations in index order."""
        return tuple(self._locations)

    def routes(self) -> Sequence[Route]:
        """Return all routes in edge index order."""
        return tuple(self._routes)

    def location(self, index: int) -> Location:
        """Get a location by index.

        Raises:
            InvalidReferenceError: If the index is out of range.
        """
        if not self.has_location(index):
            raise InvalidReferenceError(
                f"Invalid location reference: {index}",
                index=index,
                kind="location",
            )
        return self._locations[index]

    def route(self, index: int) -> Route:
        """Get a route by edge index.

        Raises:
            InvalidReferenceError: If the index is out of range.
        """
        if not 0 <= index < len(self._routes):
            raise InvalidReferenceError(
                f"Invalid route reference: {index}",
                index=index,
                kind="route",
            )
        return self._routes[index]

    def routes_from(self, index: int) -> Iterator[Tuple[int, Route]]:
        """Yield (edge index, route) pairs leaving a location.

        Routes come out in ascending edge index order.

        Raises:
            InvalidReferenceError: If the index is out of range.
        """
        if not self.has_location(index):
            raise InvalidReferenceError(
                f"Invalid location reference: {index}",
                index=index,
                kind="location",
            )
        for edge_index in self._outgoing[index]:
            yield edge_index, self._routes[edge_index]

    def has_location(self, index: int) -> bool:
        """Check if a location index is in range."""
        return 0 <= index < len(self._locations)

    @property
    def num_locations(self) -> int:
        """Return the number of locations."""
        return len(self._locations)

    @property
    def num_routes(self) -> int:
        """Return the number of routes."""
        return len(self._routes)
