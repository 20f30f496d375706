"""
Compressed adjacency (CSR) graph of cities, railways and the airport hub.

Implements two-pass construction (degree count, then stable placement) with:
- One flat neighbor array sized up front from the edge count
- Per-node slices addressed by an exclusive prefix sum over degrees
- Numpy-vectorized passes (no per-edge Python loop, no reallocation)
- Read-only arrays after construction
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from .exceptions import InvalidCityError, InvalidNetworkError

if TYPE_CHECKING:
    from src.rail_router.schemas.network import RailNetwork

logger = logging.getLogger(__name__)


# =============================================================================
# RAIL GRAPH: Immutable CSR adjacency
# =============================================================================


@dataclass(frozen=True, eq=False)
class RailGraph:
    """
    Immutable undirected graph in compressed sparse row form.

    Node ``v`` in ``0..num_cities-1`` is a real city; node ``hub`` (equal
    to ``num_cities``) is the virtual node linked to every airport city,
    so any two airports are exactly two hops apart.

    The neighbors of ``v`` are ``neighbors[offset[v] : offset[v] + degree[v]]``.
    ``offset`` has one extra trailing entry equal to ``len(neighbors)``.

    Note: eq=False because the numpy array fields make the generated
    ``__eq__`` ambiguous.

    Attributes:
        num_cities: Number of real cities.
        degree: Neighbor count per node, length ``num_nodes``.
        offset: Slice start per node, length ``num_nodes + 1``.
        neighbors: Flat adjacency, length ``2 * (railways + airports)``.
    """

    num_cities: int
    degree: np.ndarray
    offset: np.ndarray
    neighbors: np.ndarray

    def __post_init__(self) -> None:
        """Validate array shapes."""
        if self.num_cities < 1:
            raise InvalidNetworkError(f"num_cities must be >= 1, got {self.num_cities}")
        if len(self.degree) != self.num_nodes:
            raise ValueError(
                f"degree has {len(self.degree)} entries, expected {self.num_nodes}"
            )
        if len(self.offset) != self.num_nodes + 1:
            raise ValueError(
                f"offset has {len(self.offset)} entries, expected {self.num_nodes + 1}"
            )
        if int(self.offset[-1]) != len(self.neighbors):
            raise ValueError(
                f"offset ends at {int(self.offset[-1])}, "
                f"but neighbors has {len(self.neighbors)} entries"
            )

    @property
    def hub(self) -> int:
        """Index of the virtual airport hub."""
        return self.num_cities

    @property
    def num_nodes(self) -> int:
        """Real cities plus the hub."""
        return self.num_cities + 1

    @property
    def num_entries(self) -> int:
        """Total adjacency entries (twice the number of inserted links)."""
        return len(self.neighbors)

    def is_hub(self, node: int) -> bool:
        return node == self.num_cities

    def neighbors_of(self, node: int) -> np.ndarray:
        """
        Zero-copy view of a node's neighbor slice.

        Args:
            node: Node index in ``0..num_nodes-1``.

        Returns:
            Read-only array of adjacent node indices.
        """
        start = int(self.offset[node])
        return self.neighbors[start : start + int(self.degree[node])]


# =============================================================================
# BUILD: Degree count and stable placement
# =============================================================================


def _check_range(values: np.ndarray, num_cities: int, context: str) -> None:
    if values.size == 0:
        return
    bad = (values < 0) | (values >= num_cities)
    if bad.any():
        city = int(values[np.argmax(bad)])
        # Report 1-indexed, as the city appears in the input
        raise InvalidCityError(city + 1, num_cities, context)


def build_rail_graph(
    num_cities: int,
    airports: np.ndarray,
    railways: np.ndarray,
) -> RailGraph:
    """
    Build the CSR graph from 0-indexed airport cities and railway pairs.

    The algorithm:
    1. Lay out directed entries: each airport ``a`` gives ``(a, hub)`` and
       ``(hub, a)``, each railway ``(u, v)`` gives ``(u, v)`` and ``(v, u)``.
       Airports come first, then railways, in input order.
    2. First pass: count entries per source node (``degree``).
    3. Exclusive prefix sum of ``degree`` fixes every node's slice.
    4. Second pass: place each entry at ``offset[src] + cursor[src]`` and
       advance the cursor. A stable sort by source performs exactly these
       placements at once, in the same order a sequential cursor would.

    Memory: O(n + m + k). Time: O(n + (m + k) log(m + k)); the passes are
    linear, the stable sort (timsort on int64) is not.

    Args:
        num_cities: Number of real cities (``n``).
        airports: 0-indexed airport cities, shape ``(k,)``.
        railways: 0-indexed railway endpoints, shape ``(m, 2)``.

    Returns:
        Frozen RailGraph with ``num_cities + 1`` nodes.

    Raises:
        InvalidNetworkError: If ``num_cities < 1`` or ``railways`` is
            not an ``(m, 2)`` array.
        InvalidCityError: If any endpoint is outside ``0..num_cities-1``.
    """
    if num_cities < 1:
        raise InvalidNetworkError(f"num_cities must be >= 1, got {num_cities}")

    airports = np.asarray(airports, dtype=np.int64).reshape(-1)
    railways = np.asarray(railways, dtype=np.int64)
    if railways.size == 0:
        railways = railways.reshape(0, 2)
    if railways.ndim != 2 or railways.shape[1] != 2:
        raise InvalidNetworkError(
            f"railways must have shape (m, 2), got {railways.shape}"
        )

    _check_range(airports, num_cities, "airports")
    _check_range(railways.reshape(-1), num_cities, "railways")

    hub = num_cities
    num_nodes = num_cities + 1

    # 1. Directed entries: even slots go one way, odd slots the other
    links = np.concatenate(
        [
            np.column_stack([airports, np.full(airports.size, hub, dtype=np.int64)]),
            railways,
        ]
    )
    sources = np.empty(2 * len(links), dtype=np.int64)
    targets = np.empty(2 * len(links), dtype=np.int64)
    sources[0::2] = links[:, 0]
    sources[1::2] = links[:, 1]
    targets[0::2] = links[:, 1]
    targets[1::2] = links[:, 0]

    # 2. First pass: degrees
    degree = np.bincount(sources, minlength=num_nodes).astype(np.int64)

    # 3. Slice starts, with a closing bound at offset[num_nodes]
    offset = np.zeros(num_nodes + 1, dtype=np.int64)
    np.cumsum(degree, out=offset[1:])

    # 4. Second pass: cursor placement as a stable sort by source
    order = np.argsort(sources, kind="stable")
    neighbors = targets[order]

    for arr in (degree, offset, neighbors):
        arr.flags.writeable = False

    logger.debug(
        "Built rail graph: %d nodes, %d railways, %d airports, %d adjacency entries",
        num_nodes,
        len(railways),
        len(airports),
        len(neighbors),
    )

    return RailGraph(
        num_cities=num_cities,
        degree=degree,
        offset=offset,
        neighbors=neighbors,
    )


def load_rail_graph(network: RailNetwork) -> RailGraph:
    """
    Build the graph for a validated, 1-indexed RailNetwork.

    Args:
        network: Parsed query input.

    Returns:
        Frozen RailGraph over the network's cities and the hub.
    """
    return build_rail_graph(
        num_cities=network.num_cities,
        airports=network.airports - 1,
        railways=network.railways - 1,
    )
