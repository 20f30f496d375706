"""
Growable circular queue used as the BFS work queue.

The buffer is a ring of ``capacity`` slots. When an insertion finds it
full, the ring is duplicated into a buffer of twice the size: the old
contents land at offset 0 and again at offset ``capacity``. Whatever the
head position, logical element ``i`` is then still found at
``(start + i) % capacity`` for the new capacity, so no wrap-around bounds
have to be computed.
"""

from __future__ import annotations

import logging
from typing import Generic, Iterator, List, Optional, TypeVar

from .exceptions import EmptyQueueError, QueueCapacityError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY = 128


class CircularQueue(Generic[T]):
    """
    FIFO queue backed by a power-of-two-growable ring buffer.

    Attributes:
        _elements: Physical slots; ``len(_elements) == capacity``.
        _start: Physical index of the logical head.
        _size: Number of live elements.
        _max_capacity: Growth limit, or None for unbounded.
    """

    __slots__ = ("_elements", "_start", "_size", "_max_capacity")

    def __init__(
        self,
        initial_capacity: int = DEFAULT_CAPACITY,
        max_capacity: Optional[int] = None,
    ) -> None:
        """
        Create an empty queue.

        Args:
            initial_capacity: Number of slots to allocate. Must be > 0.
            max_capacity: Largest capacity the queue may grow to.

        Raises:
            ValueError: If a capacity is not strictly positive, or the
                limit is below the initial capacity.
        """
        if initial_capacity <= 0:
            raise ValueError(f"initial_capacity must be > 0, got {initial_capacity}")
        if max_capacity is not None and max_capacity < initial_capacity:
            raise ValueError(
                f"max_capacity ({max_capacity}) must be >= "
                f"initial_capacity ({initial_capacity})"
            )
        self._elements: List[Optional[T]] = [None] * initial_capacity
        self._start = 0
        self._size = 0
        self._max_capacity = max_capacity

    @property
    def capacity(self) -> int:
        return len(self._elements)

    @property
    def start(self) -> int:
        return self._start

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __iter__(self) -> Iterator[T]:
        """Yield live elements head to tail without consuming them."""
        capacity = len(self._elements)
        for i in range(self._size):
            yield self._elements[(self._start + i) % capacity]  # type: ignore[misc]

    def _grow(self) -> None:
        capacity = len(self._elements)
        new_capacity = capacity * 2
        if self._max_capacity is not None and new_capacity > self._max_capacity:
            raise QueueCapacityError(new_capacity, self._max_capacity)
        self._elements = self._elements + self._elements
        logger.debug("Queue grew from %d to %d slots", capacity, new_capacity)

    def enqueue(self, item: T) -> None:
        """
        Append an item at the tail, doubling the buffer if it is full.

        Raises:
            QueueCapacityError: If doubling would exceed ``max_capacity``.
                The queue is left unchanged.
        """
        if self._size == len(self._elements):
            self._grow()
        index = (self._start + self._size) % len(self._elements)
        self._elements[index] = item
        self._size += 1

    def dequeue(self) -> T:
        """
        Remove and return the head item.

        Callers must check ``is_empty()`` first.

        Raises:
            EmptyQueueError: If the queue holds no elements.
        """
        if self._size == 0:
            raise EmptyQueueError()
        item = self._elements[self._start]
        self._elements[self._start] = None
        self._size -= 1
        self._start = (self._start + 1) % len(self._elements)
        return item  # type: ignore[return-value]

    def __repr__(self) -> str:
        return (
            f"CircularQueue(size={self._size}, capacity={len(self._elements)}, "
            f"start={self._start})"
        )
