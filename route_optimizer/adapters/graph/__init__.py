"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- InMemoryGraphStore: Holds locations and routes in flat lists
- CSVGraphRepository: Loads the road network from CSV files
- DepthFirstPathEnumerator: Lists simple paths with a depth bound
"""

from .csv_repository import CSVGraphRepository
from .dfs_enumerator import DepthFirstPathEnumerator
from .memory_store import InMemoryGraphStore

__all__ = ["InMemoryGraphStore", "CSVGraphRepository", "DepthFirstPathEnumerator"]
