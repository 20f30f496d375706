"""
Hop query result schema.

Standardizes the interface between the solver and output formatting.
"""

from dataclasses import dataclass
from typing import Optional

from src.hopsearch.solver import UNREACHABLE, SearchStats

IMPOSSIBLE_TEXT = "Impossible"


@dataclass(frozen=True)
class HopResult:
    """
    Immutable outcome of one hop query.

    Attributes:
        hops: Minimum hop count, or None when no route exists.
        stats: Search counters, if the search ran.
        build_ms: Graph construction time in milliseconds.
        search_ms: Search time in milliseconds.
    """

    hops: Optional[int]
    stats: Optional[SearchStats] = None
    build_ms: float = 0.0
    search_ms: float = 0.0

    def __post_init__(self) -> None:
        """Validate hop count."""
        if self.hops is not None and self.hops < 0:
            raise ValueError(f"hops must be >= 0 or None, got {self.hops}")

    @property
    def reachable(self) -> bool:
        return self.hops is not None

    def format(self) -> str:
        """Single output line: the hop count, or ``Impossible``."""
        if self.hops is None:
            return IMPOSSIBLE_TEXT
        return str(self.hops)

    @classmethod
    def from_search(
        cls,
        hops: int,
        stats: Optional[SearchStats] = None,
        build_ms: float = 0.0,
        search_ms: float = 0.0,
    ) -> "HopResult":
        """
        Factory method mapping the solver's UNREACHABLE sentinel to None.

        Args:
            hops: Solver return value.
            stats: Search counters.
            build_ms: Graph construction time in milliseconds.
            search_ms: Search time in milliseconds.

        Returns:
            HopResult instance.
        """
        return cls(
            hops=None if hops == UNREACHABLE else hops,
            stats=stats,
            build_ms=build_ms,
            search_ms=search_ms,
        )
