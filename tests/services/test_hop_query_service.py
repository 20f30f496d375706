"""
Tests for HopQueryService.

Tests cover:
- Answers for reachable, unreachable and trivial queries
- Reader orchestration
- Config propagation (queue sizing and limits)
- Performance logging
"""

import logging

import pytest

from src.hopsearch.exceptions import QueueCapacityError
from src.rail_router.config import SolverConfig
from src.rail_router.schemas.network import RailNetwork
from src.rail_router.services import HopQueryService


@pytest.fixture
def service() -> HopQueryService:
    return HopQueryService()


@pytest.fixture
def mixed_network() -> RailNetwork:
    """1-2-3 by rail, 3 and 6 have airports, 6-5-4 by rail."""
    return RailNetwork.create(
        num_cities=6,
        source=1,
        target=4,
        airports=[3, 6],
        railways=[(1, 2), (2, 3), (6, 5), (5, 4)],
    )


class TestAnswer:
    def test_route_through_hub(self, service: HopQueryService, mixed_network) -> None:
        # 1-2-3 (2) + 3-hub-6 (2) + 6-5-4 (2)
        result = service.answer(mixed_network)
        assert result.hops == 6
        assert result.format() == "6"

    def test_unreachable(self, service: HopQueryService) -> None:
        network = RailNetwork.create(4, 1, 4, railways=[(1, 2), (3, 4)])
        result = service.answer(network)
        assert result.hops is None
        assert result.format() == "Impossible"

    def test_same_city(self, service: HopQueryService) -> None:
        network = RailNetwork.create(2, 2, 2)
        assert service.answer(network).hops == 0

    def test_timings_and_stats_recorded(self, service: HopQueryService, mixed_network) -> None:
        result = service.answer(mixed_network)
        assert result.build_ms >= 0.0
        assert result.search_ms >= 0.0
        assert result.stats is not None
        assert result.stats.expanded > 0

    def test_default_config(self, service: HopQueryService) -> None:
        assert service.config == SolverConfig()


class TestAnswerFrom:
    def test_reads_once_and_answers(
        self, service: HopQueryService, mixed_network, mock_reader_factory
    ) -> None:
        reader = mock_reader_factory(mixed_network)
        result = service.answer_from(reader)
        assert reader.call_count == 1
        assert result.hops == 6


class TestConfig:
    def test_small_queue_grows(self, small_config: SolverConfig, mixed_network) -> None:
        result = HopQueryService(small_config).answer(mixed_network)
        assert result.hops == 6
        assert result.stats.queue_capacity > 1

    def test_queue_limit_propagates(self) -> None:
        star = RailNetwork.create(
            num_cities=40,
            source=1,
            target=40,
            railways=[(1, i) for i in range(2, 41)],
        )
        config = SolverConfig(initial_queue_capacity=2, max_queue_capacity=4)
        with pytest.raises(QueueCapacityError):
            HopQueryService(config).answer(star)


class TestLogging:
    def test_logs_summary_at_info(self, service, mixed_network, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="src.rail_router.services"):
            service.answer(mixed_network)
        messages = [r.getMessage() for r in caplog.records]
        assert any("Hop query 1 -> 4: 6" in m for m in messages)

    def test_logs_graph_size_at_debug(self, service, mixed_network, caplog) -> None:
        with caplog.at_level(logging.DEBUG):
            service.answer(mixed_network)
        messages = [r.getMessage() for r in caplog.records]
        assert any("Graph built" in m and "7 nodes" in m for m in messages)
