"""Shared fixtures: random networks and a reference BFS."""

from collections import defaultdict, deque
from typing import Callable, Dict, List, Tuple

import numpy as np
import pytest

from src.hopsearch.solver import UNREACHABLE


def reference_hops(
    num_cities: int,
    airports: List[int],
    railways: List[Tuple[int, int]],
    source: int,
    target: int,
) -> int:
    """Plain adjacency-dict BFS over 0-indexed cities plus hub ``num_cities``."""
    hub = num_cities
    adjacency: Dict[int, List[int]] = defaultdict(list)
    for a in airports:
        adjacency[a].append(hub)
        adjacency[hub].append(a)
    for u, v in railways:
        adjacency[u].append(v)
        adjacency[v].append(u)

    dist = {source: 0}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        if node == target:
            return dist[node]
        for nxt in adjacency[node]:
            if nxt not in dist:
                dist[nxt] = dist[node] + 1
                queue.append(nxt)
    return UNREACHABLE


@pytest.fixture
def reference_bfs() -> Callable[..., int]:
    return reference_hops


@pytest.fixture
def random_network() -> Callable[..., Tuple[int, np.ndarray, np.ndarray]]:
    """Factory for seeded random 0-indexed networks."""

    def _make(
        seed: int,
        num_cities: int = 30,
        num_railways: int = 35,
        num_airports: int = 3,
    ) -> Tuple[int, np.ndarray, np.ndarray]:
        rng = np.random.default_rng(seed)
        airports = rng.choice(num_cities, size=num_airports, replace=False)
        railways = rng.integers(0, num_cities, size=(num_railways, 2))
        return num_cities, airports.astype(np.int64), railways.astype(np.int64)

    return _make
