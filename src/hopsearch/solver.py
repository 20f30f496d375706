"""
Layered breadth-first search over a RailGraph.

No per-node distance array is kept. Instead, layer boundaries travel
through the work queue: each expanded node with at least one neighbor
enqueues ``LayerBoundary(d + 1)`` ahead of its children, and dequeuing a
boundary sets the distance counter ``d``. A node dequeued while the
counter equals ``d`` is ``d - 1`` hops from the source.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .circular_queue import DEFAULT_CAPACITY, CircularQueue
from .exceptions import InvalidCityError
from .graph import RailGraph
from .queue_items import LayerBoundary, Node, QueueItem

logger = logging.getLogger(__name__)

# Returned when the target cannot be reached; no hop count is negative
UNREACHABLE = -1


@dataclass(frozen=True, slots=True)
class SearchStats:
    """
    Counters from a single search run.

    Attributes:
        expanded: Nodes whose neighbor slices were scanned.
        boundaries: Layer markers enqueued.
        queue_capacity: Queue capacity when the search ended.
    """

    expanded: int
    boundaries: int
    queue_capacity: int


def _check_endpoint(graph: RailGraph, node: int, context: str) -> None:
    if not 0 <= node < graph.num_cities:
        raise InvalidCityError(node + 1, graph.num_cities, context)


def search(
    graph: RailGraph,
    source: int,
    target: int,
    initial_capacity: int = DEFAULT_CAPACITY,
    max_queue_capacity: Optional[int] = None,
) -> Tuple[int, SearchStats]:
    """
    Find the hop distance from source to target, with run statistics.

    Args:
        graph: Frozen CSR graph.
        source: 0-indexed source city.
        target: 0-indexed target city.
        initial_capacity: Starting queue capacity.
        max_queue_capacity: Queue growth limit (None = unbounded).

    Returns:
        Tuple of (hop count or UNREACHABLE, SearchStats).

    Raises:
        InvalidCityError: If source or target is not a real city.
        QueueCapacityError: If the queue hits its growth limit. The
            search is aborted.
    """
    _check_endpoint(graph, source, "source")
    _check_endpoint(graph, target, "target")

    degree = graph.degree
    offset = graph.offset
    neighbors = graph.neighbors

    queue: CircularQueue[QueueItem] = CircularQueue(initial_capacity, max_queue_capacity)
    visited = np.zeros(graph.num_nodes, dtype=bool)

    distance = 1
    expanded = 0
    boundaries = 0

    queue.enqueue(Node(source))
    visited[source] = True

    while not queue.is_empty():
        item = queue.dequeue()

        if isinstance(item, LayerBoundary):
            distance = item.distance
            continue

        node = item.city
        if node == target:
            return distance - 1, SearchStats(expanded, boundaries, queue.capacity)

        start = int(offset[node])
        count = int(degree[node])
        expanded += 1
        if count > 0:
            queue.enqueue(LayerBoundary(distance + 1))
            boundaries += 1
        for city in neighbors[start : start + count].tolist():
            if not visited[city]:
                queue.enqueue(Node(city))
                visited[city] = True

    return UNREACHABLE, SearchStats(expanded, boundaries, queue.capacity)


def solve(
    graph: RailGraph,
    source: int,
    target: int,
    initial_capacity: int = DEFAULT_CAPACITY,
    max_queue_capacity: Optional[int] = None,
) -> int:
    """
    Minimum number of hops from source to target.

    A route through the airport hub costs two hops (airport to hub, hub
    to airport). ``source == target`` gives 0.

    Args:
        graph: Frozen CSR graph.
        source: 0-indexed source city.
        target: 0-indexed target city.
        initial_capacity: Starting queue capacity.
        max_queue_capacity: Queue growth limit (None = unbounded).

    Returns:
        Hop count, or UNREACHABLE.
    """
    hops, stats = search(graph, source, target, initial_capacity, max_queue_capacity)
    logger.debug(
        "Search %d -> %d: hops=%d, expanded=%d, boundaries=%d, queue capacity=%d",
        source,
        target,
        hops,
        stats.expanded,
        stats.boundaries,
        stats.queue_capacity,
    )
    return hops
