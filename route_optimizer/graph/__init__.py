"""Graph algorithms over the in-memory road network.

This subpackage contains the path search used by the enumerator adapter.
"""

from .search import find_all_paths

__all__ = ["find_all_paths"]
