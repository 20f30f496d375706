"""
Custom exceptions for the hopsearch module.

Provides a hierarchy of exceptions for clear error handling
and debugging of graph construction and hop-count searches.
"""


class HopSearchError(Exception):
    """Base exception for all hopsearch module errors."""

    pass


class ValidationError(HopSearchError):
    """Base exception for input validation errors."""

    pass


class InvalidNetworkError(ValidationError):
    """Raised when the network header (city, railway, airport counts) is invalid."""

    pass


class InvalidCityError(ValidationError):
    """Raised when a city index falls outside the network."""

    def __init__(self, city: int, num_cities: int, context: str = "network") -> None:
        self.city = city
        self.num_cities = num_cities
        self.context = context
        message = f"City {city} in {context} is outside 1..{num_cities}"
        super().__init__(message)


class MalformedInputError(ValidationError):
    """Raised when the input stream cannot be parsed as integers of the right shape."""

    pass


class TruncatedInputError(MalformedInputError):
    """Raised when the input stream ends before all declared values were read."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        message = f"Input ended early: expected {expected} integers, got {actual}"
        super().__init__(message)


class QueueError(HopSearchError):
    """Base exception for circular queue misuse and exhaustion."""

    pass


class EmptyQueueError(QueueError):
    """
    Raised when dequeuing from an empty queue.

    This signals a bug in the caller, which must check ``is_empty()``
    before dequeuing. It is never raised for bad input.
    """

    def __init__(self, message: str = "Dequeue from an empty queue") -> None:
        super().__init__(message)


class QueueCapacityError(QueueError):
    """Raised when the queue would have to grow past its capacity limit."""

    def __init__(self, requested: int, limit: int) -> None:
        self.requested = requested
        self.limit = limit
        message = f"Queue cannot grow to {requested} slots (limit {limit})"
        super().__init__(message)
