"""CSV Graph Repository adapter.

This adapter populates an InMemoryGraphStore from two CSV files:
- locations.csv: location_id,name
- routes.csv: from_location_id,to_location_id,distance_km,u_turns,traffic,construction

Location ids are only used to resolve route endpoints; the store
indexes locations by their row order.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError, InvalidReferenceError
from ...domain.models import Traffic
from .memory_store import InMemoryGraphStore

_TRUE_VALUES = {"1", "true", "yes", "y"}


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort. The loaded store is
    cached; call clear_cache() to reload.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _store: Optional[InMemoryGraphStore] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> InMemoryGraphStore:
        """Load the road network from CSV files.

        Returns:
            A populated graph store.

        Raises:
            GraphError: If the files cannot be read or contain bad rows.
        """
        if self._store is not None:
            return self._store

        self._logger.debug(
            "Loading graph",
            extra={
                "locations_path": str(self.config.locations_path),
                "routes_path": str(self.config.routes_path),
            },
        )

        store = InMemoryGraphStore()
        ids = self._load_locations(store)
        self._load_routes(store, ids)

        self._store = store
        self._logger.info(
            "Graph loaded",
            extra={"locations": store.num_locations, "routes": store.num_routes},
        )
        return store

    def _load_locations(self, store: InMemoryGraphStore) -> Dict[str, int]:
        """Add every location row to the store and map ids to indices."""
        path = self.config.locations_path
        ids: Dict[str, int] = {}

        try:
            with path.open(newline="", encoding="utf-8") as f:
                for row in csv.DictReader(f):
                    location_id = (row.get("location_id") or "").strip()
                    name = (row.get("name") or "").strip()

                    if not location_id:
                        continue
                    if location_id in ids:
                        raise GraphError(
                            f"Duplicate location id: {location_id}",
                            file_path=str(path),
                        )

                    ids[location_id] = store.add_location(name or location_id)
        except OSError as e:
            raise GraphError(
                "Failed to read locations",
                file_path=str(path),
                cause=e,
            )

        return ids

    def _load_routes(self, store: InMemoryGraphStore, ids: Dict[str, int]) -> None:
        """Add every route row to the store."""
        path = self.config.routes_path

        try:
            with path.open(newline="", encoding="utf-8") as f:
                for line_no, row in enumerate(csv.DictReader(f), start=2):
                    try:
                        store.add_route(
                            start=ids[row["from_location_id"].strip()],
                            end=ids[row["to_location_id"].strip()],
                            distance_km=float(row["distance_km"]),
                            u_turns=int(row.get("u_turns") or 0),
                            traffic=Traffic[(row.get("traffic") or "LOW").strip().upper()],
                            construction=(row.get("construction") or "")
                            .strip()
                            .lower()
                            in _TRUE_VALUES,
                        )
                    except (KeyError, ValueError, AttributeError, InvalidReferenceError) as e:
                        raise GraphError(
                            f"Invalid route on line {line_no}",
                            file_path=str(path),
                            cause=e,
                        )
        except OSError as e:
            raise GraphError(
                "Failed to read routes",
                file_path=str(path),
                cause=e,
            )

    def clear_cache(self) -> None:
        """Clear the cached store."""
        self._store = None
        self._logger.debug("Graph cache cleared")
