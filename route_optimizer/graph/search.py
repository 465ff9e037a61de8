"""Exhaustive simple-path enumeration.

This module implements the depth-bounded search that lists every path
between two locations of the road network in which no location repeats.
"""

from typing import Callable, Iterable, List, Tuple

from ..domain.models import Route, RoutePath

# Maps a location index to its outgoing (edge index, route) pairs.
Neighbours = Callable[[int], Iterable[Tuple[int, Route]]]


def find_all_paths(
    routes_from: Neighbours, start: int, end: int, max_depth: int
) -> List[RoutePath]:
    """Enumerate simple paths from ``start`` to ``end``.

    Parameters
    ----------
    routes_from:
        Callable returning the outgoing ``(edge_index, route)`` pairs of a
        location, in ascending edge index order.
    start:
        Index of the start location.
    end:
        Index of the destination location.
    max_depth:
        Maximum number of edges in a returned path. Branches that would
        exceed it are abandoned, so longer routes are never reported.

    Returns
    -------
    list[tuple[int, ...]]
        Paths as tuples of edge indices, in depth-first order (lower edge
        indices explored first). Reaching ``end`` closes a branch. When
        ``start == end`` the single empty path ``()`` is returned.
    """
    paths: List[RoutePath] = []
    # Each frame owns its own visited set and path, so sibling branches
    # never see each other's partial state.
    stack: List[Tuple[int, frozenset, RoutePath]] = [(start, frozenset((start,)), ())]

    while stack:
        current, visited, path = stack.pop()

        if current == end:
            paths.append(path)
            continue

        if len(path) >= max_depth:
            continue

        children = [
            (route.end, visited | {route.end}, path + (index,))
            for index, route in routes_from(current)
            if route.end not in visited
        ]
        # Reversed so the lowest edge index is popped first.
        stack.extend(reversed(children))

    return paths
