"""Shared fixtures: small hand-built road networks."""

from __future__ import annotations

import pytest

from route_optimizer.adapters.graph import DepthFirstPathEnumerator, InMemoryGraphStore
from route_optimizer.config import CostConfig, RankingConfig, SearchConfig, reset_config
from route_optimizer.domain.models import Traffic
from route_optimizer.services import CostModel, RouteRanker


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def triangle_store() -> InMemoryGraphStore:
    """A=0, B=1, C=2 with A->B, B->C and a direct A->C."""
    store = InMemoryGraphStore()
    a = store.add_location("A")
    b = store.add_location("B")
    c = store.add_location("C")
    store.add_route(a, b, 3, 0, Traffic.LOW, False)
    store.add_route(b, c, 2, 0, Traffic.LOW, False)
    store.add_route(a, c, 4.2, 0, Traffic.MEDIUM, False)
    return store


@pytest.fixture
def diamond_store() -> InMemoryGraphStore:
    """A=0, B=1, C=2, D=3; B and C are linked both ways, D links back to A."""
    store = InMemoryGraphStore()
    for name in "ABCD":
        store.add_location(name)
    store.add_route(0, 1, 1.0)  # 0: A->B
    store.add_route(0, 2, 1.0)  # 1: A->C
    store.add_route(1, 3, 1.0)  # 2: B->D
    store.add_route(2, 3, 1.0)  # 3: C->D
    store.add_route(1, 2, 1.0)  # 4: B->C
    store.add_route(2, 1, 1.0)  # 5: C->B
    store.add_route(3, 0, 1.0)  # 6: D->A
    return store


@pytest.fixture
def enumerator_for():
    def build(store, max_depth: int = 6) -> DepthFirstPathEnumerator:
        return DepthFirstPathEnumerator(store, SearchConfig(max_depth=max_depth))

    return build


@pytest.fixture
def ranker_for():
    def build(store, top_n: int = 2) -> RouteRanker:
        return RouteRanker(CostModel(store, CostConfig()), RankingConfig(top_n=top_n))

    return build
