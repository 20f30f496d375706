"""Pytest configuration for service tests."""

import pytest

from src.rail_router.config import SolverConfig
from src.rail_router.ports.network_reader import NetworkReader
from src.rail_router.schemas.network import RailNetwork


class MockNetworkReader(NetworkReader):
    """In-memory reader for testing."""

    def __init__(self, network: RailNetwork):
        self._network = network
        self.call_count = 0

    def read(self) -> RailNetwork:
        self.call_count += 1
        return self._network

    @property
    def name(self) -> str:
        return "Mock Reader"


@pytest.fixture
def mock_reader_factory():
    return MockNetworkReader


@pytest.fixture
def small_config() -> SolverConfig:
    """Tiny initial queue so growth is exercised."""
    return SolverConfig(initial_queue_capacity=1)
