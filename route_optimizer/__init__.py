"""Top-level package for the route optimizer.

The package enumerates every simple path between two locations of a
small road network, scores each path under a travel-mode cost model,
and recommends the fastest construction-free route.
"""

__version__ = "0.1.0"
