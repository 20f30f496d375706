"""
Input validation for the hopsearch module.

Provides validation functions that check a query before the graph is
built, ensuring fail-fast behavior with clear error messages. City
indices here are 1-indexed, as they appear in the input.
"""

import numpy as np

from .exceptions import (
    InvalidCityError,
    InvalidNetworkError,
    MalformedInputError,
)


def validate_counts(num_cities: int, num_railways: int, num_airports: int) -> None:
    """
    Validate the header counts.

    Raises:
        InvalidNetworkError: If there are no cities or a count is negative.
    """
    if num_cities < 1:
        raise InvalidNetworkError(f"Network needs at least one city, got {num_cities}")
    if num_railways < 0:
        raise InvalidNetworkError(f"Railway count must be >= 0, got {num_railways}")
    if num_airports < 0:
        raise InvalidNetworkError(f"Airport count must be >= 0, got {num_airports}")


def validate_city(city: int, num_cities: int, context: str) -> None:
    """
    Validate a single 1-indexed city.

    Raises:
        InvalidCityError: If city is outside ``1..num_cities``.
    """
    if not 1 <= city <= num_cities:
        raise InvalidCityError(city, num_cities, context)


def validate_cities(cities: np.ndarray, num_cities: int, context: str) -> None:
    """
    Validate an array of 1-indexed cities (vectorized).

    Raises:
        InvalidCityError: Naming the first offending city.
    """
    if cities.size == 0:
        return
    flat = cities.reshape(-1)
    bad = (flat < 1) | (flat > num_cities)
    if bad.any():
        raise InvalidCityError(int(flat[np.argmax(bad)]), num_cities, context)


def validate_network_inputs(
    num_cities: int,
    airports: np.ndarray,
    railways: np.ndarray,
    source: int,
    target: int,
) -> None:
    """
    Validate all inputs of a hop query.

    This is the main validation entry point that performs all checks
    in the correct order for fail-fast behavior.

    Args:
        num_cities: Number of cities.
        airports: 1-indexed airport cities, shape ``(k,)``.
        railways: 1-indexed railway endpoints, shape ``(m, 2)``.
        source: 1-indexed source city.
        target: 1-indexed target city.

    Raises:
        InvalidNetworkError: If counts are invalid.
        MalformedInputError: If array shapes are wrong.
        InvalidCityError: If any city is out of range.
    """
    # 1. Shapes (no data scan)
    if airports.ndim != 1:
        raise MalformedInputError(f"airports must be one-dimensional, got shape {airports.shape}")
    if railways.ndim != 2 or railways.shape[1] != 2:
        raise MalformedInputError(f"railways must have shape (m, 2), got {railways.shape}")

    # 2. Counts
    validate_counts(num_cities, len(railways), len(airports))

    # 3. Endpoints (cheap scalar checks)
    validate_city(source, num_cities, "source")
    validate_city(target, num_cities, "target")

    # 4. Airports and railways (array scans)
    validate_cities(airports, num_cities, "airports")
    validate_cities(railways, num_cities, "railways")
