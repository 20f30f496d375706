from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Node:
    """A city (or the hub) waiting to be expanded."""

    city: int


@dataclass(frozen=True, slots=True)
class LayerBoundary:
    """
    Marker separating BFS layers in the work queue.

    When dequeued, the solver's distance counter becomes ``distance``.
    Nodes dequeued afterwards are ``distance - 1`` hops from the source.
    """

    distance: int


QueueItem = Union[Node, LayerBoundary]
