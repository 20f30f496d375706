"""
Tests for the layered BFS solver.

Tests cover:
- Hand-derived scenarios (railways only, airports only, mixed)
- Properties: no-edge networks, symmetry, triangle inequality
- Agreement with a plain adjacency-dict BFS on random networks
- Search statistics and queue limits
"""

import itertools

import numpy as np
import pytest

from src.hopsearch.exceptions import InvalidCityError, QueueCapacityError
from src.hopsearch.graph import build_rail_graph
from src.hopsearch.solver import UNREACHABLE, search, solve


def graph_of(num_cities, airports=(), railways=()):
    return build_rail_graph(
        num_cities,
        np.array(airports, dtype=np.int64),
        np.array(railways, dtype=np.int64),
    )


# -------------------------
# Scenarios
# -------------------------


@pytest.mark.parametrize(
    "num_cities,airports,railways,source,target,expected",
    [
        # railway line 0-1-2-3
        (4, [], [(0, 1), (1, 2), (2, 3)], 0, 3, 3),
        # same, queried backwards
        (4, [], [(0, 1), (1, 2), (2, 3)], 3, 0, 3),
        # direct railway
        (2, [], [(0, 1)], 0, 1, 1),
        # two airports, no railways: city -> hub -> city
        (2, [0, 1], [], 0, 1, 2),
        # airport shortcut beats a long railway line
        (6, [0, 5], [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5)], 0, 5, 2),
        # railway beats the airport route
        (3, [0, 2], [(0, 2)], 0, 2, 1),
        # railway to an airport city, then fly
        (4, [1, 3], [(0, 1)], 0, 3, 3),
        # edge (1,2) plus an airport at city 3 alone cannot connect 1 and 3
        (3, [2], [(0, 1)], 0, 2, UNREACHABLE),
        # single airport links nothing
        (3, [0], [(1, 2)], 0, 2, UNREACHABLE),
        # disconnected, no airports
        (4, [], [(0, 1), (2, 3)], 0, 3, UNREACHABLE),
        # source equals target
        (3, [], [(0, 1)], 1, 1, 0),
        # source equals target on an isolated city
        (3, [], [], 2, 2, 0),
        # cycle: shortest way round
        (6, [], [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0)], 0, 4, 2),
    ],
)
def test_scenarios(num_cities, airports, railways, source, target, expected) -> None:
    graph = graph_of(num_cities, airports, railways)
    assert solve(graph, source, target) == expected


def test_unreachable_is_negative() -> None:
    assert UNREACHABLE < 0


# -------------------------
# Properties
# -------------------------


@pytest.mark.parametrize("num_cities", [1, 2, 5])
def test_no_edges_only_self_reachable(num_cities: int) -> None:
    graph = graph_of(num_cities)
    for s, t in itertools.product(range(num_cities), repeat=2):
        assert solve(graph, s, t) == (0 if s == t else UNREACHABLE)


@pytest.mark.parametrize("seed", range(4))
def test_symmetry(random_network, seed: int) -> None:
    n, airports, railways = random_network(seed, num_cities=15, num_railways=12)
    graph = build_rail_graph(n, airports, railways)
    for s, t in itertools.combinations(range(n), 2):
        assert solve(graph, s, t) == solve(graph, t, s)


@pytest.mark.parametrize("seed", range(3))
def test_triangle_inequality(random_network, seed: int) -> None:
    n, airports, railways = random_network(seed, num_cities=12, num_railways=14)
    graph = build_rail_graph(n, airports, railways)
    hops = {
        (u, v): solve(graph, u, v) for u, v in itertools.product(range(n), repeat=2)
    }
    for u, v, w in itertools.product(range(n), repeat=3):
        if UNREACHABLE in (hops[(u, v)], hops[(v, w)]):
            continue
        assert hops[(u, w)] != UNREACHABLE
        assert hops[(u, w)] <= hops[(u, v)] + hops[(v, w)]


@pytest.mark.parametrize("seed", range(4))
def test_unconnected_airports_are_two_hops_apart(seed: int) -> None:
    rng = np.random.default_rng(seed)
    n = 10
    airports = rng.choice(n, size=4, replace=False)
    graph = graph_of(n, airports.tolist(), [])
    for a, b in itertools.permutations(airports.tolist(), 2):
        assert solve(graph, a, b) == 2


@pytest.mark.parametrize("seed", range(10))
def test_matches_reference_bfs(random_network, reference_bfs, seed: int) -> None:
    n, airports, railways = random_network(seed, num_cities=40, num_railways=45)
    graph = build_rail_graph(n, airports, railways)
    for s, t in itertools.product(range(0, n, 3), range(1, n, 4)):
        expected = reference_bfs(n, airports.tolist(), railways.tolist(), s, t)
        assert solve(graph, s, t) == expected


# -------------------------
# Statistics and limits
# -------------------------


class TestSearch:
    def test_stats_for_line(self) -> None:
        graph = graph_of(3, [], [(0, 1), (1, 2)])
        hops, stats = search(graph, 0, 2)
        assert hops == 2
        # 0 and 1 are expanded, each has neighbors and pushes a boundary
        assert stats.expanded == 2
        assert stats.boundaries == 2

    def test_isolated_source_pushes_no_boundary(self) -> None:
        graph = graph_of(2)
        hops, stats = search(graph, 0, 1)
        assert hops == UNREACHABLE
        assert stats.expanded == 1
        assert stats.boundaries == 0

    def test_queue_grows_from_capacity_one(self) -> None:
        star = [(0, i) for i in range(1, 50)]
        graph = graph_of(50, [], star)
        hops, stats = search(graph, 1, 49, initial_capacity=1)
        assert hops == 2
        assert stats.queue_capacity >= 32

    def test_queue_limit_aborts_search(self) -> None:
        star = [(0, i) for i in range(1, 50)]
        graph = graph_of(50, [], star)
        with pytest.raises(QueueCapacityError):
            solve(graph, 0, 49, initial_capacity=2, max_queue_capacity=8)

    @pytest.mark.parametrize("source,target", [(-1, 0), (0, 3), (3, 0)])
    def test_endpoints_must_be_real_cities(self, source: int, target: int) -> None:
        # Node 3 is the hub, not a city
        graph = graph_of(3, [0], [])
        with pytest.raises(InvalidCityError):
            solve(graph, source, target)
