"""Depth-first path enumerator adapter.

This adapter wraps the search in graph/search.py and adds:
- Depth bound from configuration
- Out-of-range handling (no error, no paths)
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ...config import SearchConfig, get_config
from ...domain.models import RoutePath
from ...graph.search import find_all_paths
from ...ports.graph import GraphStorePort


@dataclass
class DepthFirstPathEnumerator:
    """Path enumerator using bounded depth-first search.

    This adapter implements PathEnumeratorPort. Paths longer than
    ``config.max_depth`` edges are never produced, even if they are the
    only way to reach the destination.

    Attributes:
        store: The road network to search
        config: Search configuration (depth bound)
    """

    store: GraphStorePort
    config: SearchConfig = field(default_factory=lambda: get_config().search)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_all_paths(self, start: int, end: int) -> List[RoutePath]:
        """Find every simple path from start to end within the depth bound.

        Args:
            start: Index of the start location.
            end: Index of the destination location.

        Returns:
            Paths as tuples of edge indices, in enumeration order. Empty
            if either index is out of range. ``start == end`` yields the
            single empty path.
        """
        if not (self.store.has_location(start) and self.store.has_location(end)):
            self._logger.debug(
                "Location out of range, no paths",
                extra={"start": start, "end": end},
            )
            return []

        paths = find_all_paths(
            self.store.routes_from, start, end, self.config.max_depth
        )
        self._logger.debug(
            "Paths enumerated",
            extra={
                "start": start,
                "end": end,
                "count": len(paths),
                "max_depth": self.config.max_depth,
            },
        )
        return paths
