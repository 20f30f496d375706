"""
Schema definitions for the rail router.

Pandera-validated tables and frozen dataclasses as the data contracts.
"""

from .network import (
    AirportDataFrame,
    AirportSchema,
    RailNetwork,
    RailwayDataFrame,
    RailwaySchema,
)
from .result import IMPOSSIBLE_TEXT, HopResult

__all__ = [
    # Input
    "RailNetwork",
    "RailwaySchema",
    "AirportSchema",
    "RailwayDataFrame",
    "AirportDataFrame",
    # Output
    "HopResult",
    "IMPOSSIBLE_TEXT",
]
