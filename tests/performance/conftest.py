"""
Shared fixtures for performance benchmarks.

Key design principle: build expensive inputs once at module scope,
then benchmark only the hot paths.
"""

from typing import Tuple

import numpy as np
import pytest

from src.hopsearch.graph import RailGraph, build_rail_graph


def synthetic_network(
    num_cities: int, num_railways: int, num_airports: int, seed: int = 42
) -> Tuple[int, np.ndarray, np.ndarray]:
    rng = np.random.default_rng(seed)
    airports = rng.choice(num_cities, size=num_airports, replace=False).astype(np.int64)
    railways = rng.integers(0, num_cities, size=(num_railways, 2), dtype=np.int64)
    return num_cities, airports, railways


@pytest.fixture(scope="module")
def network_10k():
    return synthetic_network(10_000, 20_000, 50)


@pytest.fixture(scope="module")
def network_100k():
    return synthetic_network(100_000, 200_000, 500)


@pytest.fixture(scope="module")
def graph_100k(network_100k) -> RailGraph:
    return build_rail_graph(*network_100k)


@pytest.fixture(scope="module")
def line_graph_50k() -> RailGraph:
    """Long railway line: deepest possible BFS for its size."""
    n = 50_000
    cities = np.arange(n - 1, dtype=np.int64)
    railways = np.column_stack([cities, cities + 1])
    return build_rail_graph(n, np.array([], dtype=np.int64), railways)
