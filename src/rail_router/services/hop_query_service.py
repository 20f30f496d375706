"""
Hop Query Service - Domain orchestrator for rail/air hop queries.

Coordinates the interaction between:
- NetworkReader (query input)
- Graph builder (CSR construction)
- Layered BFS solver
- SolverConfig (queue sizing)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Optional

from src.hopsearch.graph import load_rail_graph
from src.hopsearch.solver import search
from src.rail_router.config import SolverConfig
from src.rail_router.schemas.result import HopResult

if TYPE_CHECKING:
    from src.rail_router.ports.network_reader import NetworkReader
    from src.rail_router.schemas.network import RailNetwork

logger = logging.getLogger(__name__)


class HopQueryService:
    """
    Domain service answering one hop query per call.

    Orchestrates the query:
    1. Builds the CSR graph from the validated network
    2. Runs the layered BFS from source to target
    3. Wraps the outcome in a HopResult
    4. Logs performance metrics

    This service is stateless; graphs are not kept between calls.

    Attributes:
        _config: Queue sizing settings.
    """

    def __init__(self, config: Optional[SolverConfig] = None) -> None:
        """
        Initialize the service.

        Args:
            config: Solver settings. Defaults to SolverConfig().
        """
        self._config = config or SolverConfig()

    @property
    def config(self) -> SolverConfig:
        return self._config

    def answer(self, network: RailNetwork) -> HopResult:
        """
        Compute the minimum hop count for a validated query.

        Args:
            network: Validated RailNetwork (1-indexed).

        Returns:
            HopResult with the hop count, or no hops when unreachable.

        Raises:
            QueueCapacityError: If the search exceeds the queue limit.
        """
        start_time = time.perf_counter()

        # 1. Build graph
        graph = load_rail_graph(network)
        build_time = time.perf_counter() - start_time

        logger.debug(
            "Graph built in %.3fms (%d nodes, %d adjacency entries)",
            build_time * 1000,
            graph.num_nodes,
            graph.num_entries,
        )

        # 2. Search (0-indexed)
        search_start = time.perf_counter()
        hops, stats = search(
            graph,
            network.source - 1,
            network.target - 1,
            initial_capacity=self._config.initial_queue_capacity,
            max_queue_capacity=self._config.max_queue_capacity,
        )
        search_time = time.perf_counter() - search_start

        result = HopResult.from_search(
            hops,
            stats=stats,
            build_ms=build_time * 1000,
            search_ms=search_time * 1000,
        )

        logger.info(
            "Hop query %d -> %d: %s in %.3fms (build: %.3fms, search: %.3fms, "
            "expanded: %d)",
            network.source,
            network.target,
            result.format(),
            (time.perf_counter() - start_time) * 1000,
            result.build_ms,
            result.search_ms,
            stats.expanded,
        )

        return result

    def answer_from(self, reader: NetworkReader) -> HopResult:
        """
        Read a query and answer it.

        Args:
            reader: Source of the query.

        Returns:
            HopResult for the query read.
        """
        read_start = time.perf_counter()
        network = reader.read()
        logger.debug(
            "%s read in %.3fms (%d cities, %d railways, %d airports)",
            reader.name,
            (time.perf_counter() - read_start) * 1000,
            network.num_cities,
            network.num_railways,
            network.num_airports,
        )
        return self.answer(network)
