import pytest

from route_optimizer.adapters.graph import InMemoryGraphStore
from route_optimizer.domain.errors import InvalidReferenceError
from route_optimizer.domain.models import Location, Traffic
from route_optimizer.graph.search import find_all_paths


def _chain(length: int) -> InMemoryGraphStore:
    """0 -> 1 -> ... -> length, edge i goes from i to i + 1."""
    store = InMemoryGraphStore()
    for i in range(length + 1):
        store.add_location(f"L{i}")
    for i in range(length):
        store.add_route(i, i + 1, 1.0)
    return store


def _visited_locations(store, start, path):
    locations = [start]
    for index in path:
        locations.append(store.route(index).end)
    return locations


def test_store_assigns_sequential_indices():
    store = InMemoryGraphStore()

    assert store.add_location("Home") == 0
    assert store.add_location("School") == 1
    assert store.add_route(0, 1, 3.0) == 0
    assert store.add_route(1, 0, 3.0) == 1
    assert store.locations() == (Location("Home"), Location("School"))


def test_store_rejects_out_of_range_endpoints():
    store = InMemoryGraphStore()
    store.add_location("Home")

    with pytest.raises(InvalidReferenceError) as excinfo:
        store.add_route(0, 5, 1.0)

    assert excinfo.value.index == 5
    assert excinfo.value.kind == "location"
    assert store.num_routes == 0


def test_store_lookup_errors():
    store = InMemoryGraphStore()
    store.add_location("Home")

    with pytest.raises(InvalidReferenceError):
        store.route(0)
    with pytest.raises(InvalidReferenceError):
        store.location(1)
    with pytest.raises(InvalidReferenceError):
        list(store.routes_from(-1))


def test_store_keeps_parallel_routes(triangle_store):
    triangle_store.add_route(0, 1, 10.0, 2, Traffic.HIGH, True)

    outgoing = list(triangle_store.routes_from(0))

    assert [index for index, _ in outgoing] == [0, 2, 3]
    assert outgoing[2][1].construction is True


def test_route_validates_attributes():
    store = InMemoryGraphStore()
    store.add_location("A")
    store.add_location("B")

    with pytest.raises(ValueError):
        store.add_route(0, 1, 0.0)
    with pytest.raises(ValueError):
        store.add_route(0, 1, 1.0, u_turns=-1)


@pytest.mark.parametrize("distance", [float("nan"), float("inf"), -float("inf")])
def test_route_rejects_non_finite_distance(distance):
    store = InMemoryGraphStore()
    store.add_location("A")
    store.add_location("B")

    with pytest.raises(ValueError):
        store.add_route(0, 1, distance)
    assert store.routes() == ()


def test_find_all_paths_triangle(triangle_store, enumerator_for):
    paths = enumerator_for(triangle_store).find_all_paths(0, 2)

    assert paths == [(0, 1), (2,)]


def test_find_all_paths_is_complete_within_bound(diamond_store, enumerator_for):
    paths = enumerator_for(diamond_store).find_all_paths(0, 3)

    assert set(paths) == {(0, 2), (0, 4, 3), (1, 3), (1, 5, 2)}
    # Lower edge indices are explored first.
    assert paths == [(0, 2), (0, 4, 3), (1, 3), (1, 5, 2)]


def test_find_all_paths_never_revisits(diamond_store, enumerator_for):
    enumerator = enumerator_for(diamond_store)

    for start in range(4):
        for end in range(4):
            if start == end:
                continue
            for path in enumerator.find_all_paths(start, end):
                visited = _visited_locations(diamond_store, start, path)
                assert len(visited) == len(set(visited))
                assert visited[-1] == end


def test_find_all_paths_respects_depth_bound(enumerator_for):
    store = _chain(8)
    enumerator = enumerator_for(store)

    assert enumerator.find_all_paths(0, 6) == [(0, 1, 2, 3, 4, 5)]
    assert enumerator.find_all_paths(0, 7) == []
    assert enumerator.find_all_paths(1, 7) == [(1, 2, 3, 4, 5, 6)]


def test_find_all_paths_depth_bound_is_configurable(diamond_store, enumerator_for):
    paths = enumerator_for(diamond_store, max_depth=2).find_all_paths(0, 3)

    assert set(paths) == {(0, 2), (1, 3)}
    assert all(len(path) <= 2 for path in paths)


def test_find_all_paths_parallel_routes_are_distinct_paths():
    store = InMemoryGraphStore()
    store.add_location("A")
    store.add_location("B")
    store.add_route(0, 1, 1.0)
    store.add_route(0, 1, 2.0)

    assert find_all_paths(store.routes_from, 0, 1, 6) == [(0,), (1,)]


def test_find_all_paths_ignores_routes_beyond_destination():
    store = _chain(3)
    # A route leaving the destination back into the path.
    store.add_route(2, 1, 1.0)

    assert find_all_paths(store.routes_from, 0, 2, 6) == [(0, 1)]


def test_find_all_paths_out_of_range_returns_empty(triangle_store, enumerator_for):
    enumerator = enumerator_for(triangle_store)

    assert enumerator.find_all_paths(0, 3) == []
    assert enumerator.find_all_paths(-1, 2) == []
    assert enumerator.find_all_paths(7, 8) == []


def test_find_all_paths_same_location_is_single_empty_path(
    triangle_store, enumerator_for
):
    assert enumerator_for(triangle_store).find_all_paths(1, 1) == [()]


def test_find_all_paths_unreachable_returns_empty(triangle_store, enumerator_for):
    # No route leaves C.
    assert enumerator_for(triangle_store).find_all_paths(2, 0) == []
