from pathlib import Path

import pytest

from route_optimizer.adapters.graph import CSVGraphRepository
from route_optimizer.config import GraphConfig
from route_optimizer.domain.errors import GraphError
from route_optimizer.domain.models import Traffic

LOCATIONS = "location_id,name\nA,Alpha\nB,Beta\n"


def _write(tmp_path: Path, locations: str, routes: str) -> GraphConfig:
    (tmp_path / "locations.csv").write_text(locations, encoding="utf-8")
    (tmp_path / "routes.csv").write_text(routes, encoding="utf-8")
    return GraphConfig(data_dir=tmp_path)


def test_seed_network_loads():
    store = CSVGraphRepository(GraphConfig()).load()

    names = [loc.name for loc in store.locations()]
    assert names == ["Home", "School", "Mall", "Park", "Hospital", "Office"]
    assert store.num_routes == 20

    home_to_mall = store.route(10)
    assert (home_to_mall.start, home_to_mall.end) == (0, 2)
    assert home_to_mall.distance_km == pytest.approx(4.2)
    assert home_to_mall.traffic is Traffic.MEDIUM
    assert home_to_mall.construction is False
    assert store.route(2).construction is True


def test_seed_routes_are_symmetric():
    store = CSVGraphRepository(GraphConfig()).load()
    routes = store.routes()

    pairs = {(r.start, r.end) for r in routes}
    assert all((end, start) in pairs for start, end in pairs)


def test_load_parses_columns(tmp_path):
    config = _write(
        tmp_path,
        LOCATIONS,
        "from_location_id,to_location_id,distance_km,u_turns,traffic,construction\n"
        "A,B,2.5,3,high,Yes\n"
        "B,A,2.5,,,\n",
    )

    store = CSVGraphRepository(config).load()

    forward, backward = store.routes()
    assert (forward.u_turns, forward.traffic, forward.construction) == (
        3,
        Traffic.HIGH,
        True,
    )
    assert (backward.u_turns, backward.traffic, backward.construction) == (
        0,
        Traffic.LOW,
        False,
    )


def test_load_is_cached(tmp_path):
    config = _write(tmp_path, LOCATIONS, "from_location_id,to_location_id,distance_km\n")
    repository = CSVGraphRepository(config)

    first = repository.load()
    assert repository.load() is first

    repository.clear_cache()
    assert repository.load() is not first


def test_unknown_location_id(tmp_path):
    config = _write(
        tmp_path,
        LOCATIONS,
        "from_location_id,to_location_id,distance_km\nA,Z,1.0\n",
    )

    with pytest.raises(GraphError) as excinfo:
        CSVGraphRepository(config).load()

    assert "line 2" in excinfo.value.message
    assert isinstance(excinfo.value.cause, KeyError)


@pytest.mark.parametrize(
    "row",
    [
        "A,B,abc,0,LOW,false",
        "A,B,1.0,0,JAMMED,false",
        "A,B,-1.0,0,LOW,false",
        "A,B,nan,0,LOW,false",
        "A,B,inf,0,LOW,false",
    ],
)
def test_invalid_route_rows(tmp_path, row):
    config = _write(
        tmp_path,
        LOCATIONS,
        "from_location_id,to_location_id,distance_km,u_turns,traffic,construction\n"
        + row
        + "\n",
    )

    with pytest.raises(GraphError):
        CSVGraphRepository(config).load()


def test_duplicate_location_id(tmp_path):
    config = _write(tmp_path, LOCATIONS + "A,Again\n", "from_location_id\n")

    with pytest.raises(GraphError, match="Duplicate"):
        CSVGraphRepository(config).load()


def test_missing_file(tmp_path):
    with pytest.raises(GraphError) as excinfo:
        CSVGraphRepository(GraphConfig(data_dir=tmp_path)).load()

    assert isinstance(excinfo.value.cause, OSError)
    assert excinfo.value.file_path == str(tmp_path / "locations.csv")
