"""
Rail network schemas using Pandera.

Defines the contract for query input flowing into the graph builder.
Tabular input is validated once at the boundary, not per-row.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd
import pandera as pa
from pandera.typing import DataFrame, Series

from src.hopsearch.validation import validate_network_inputs


class RailwaySchema(pa.DataFrameModel):
    """
    One row per undirected railway between two 1-indexed cities.

    Upper bounds depend on the city count and are checked by
    ``validate_network_inputs``.
    """

    from_city: Series[int] = pa.Field(
        ge=1,
        nullable=False,
        description="First endpoint (1-indexed city)",
    )
    to_city: Series[int] = pa.Field(
        ge=1,
        nullable=False,
        description="Second endpoint (1-indexed city)",
    )

    class Config:
        strict = True
        coerce = True
        name = "RailwaySchema"
        ordered = True


class AirportSchema(pa.DataFrameModel):
    """One row per city that has an airport."""

    city: Series[int] = pa.Field(
        ge=1,
        nullable=False,
        description="Airport city (1-indexed)",
    )

    class Config:
        strict = True
        coerce = True
        name = "AirportSchema"


RailwayDataFrame = DataFrame[RailwaySchema]
AirportDataFrame = DataFrame[AirportSchema]

IntArrayLike = Union[np.ndarray, Sequence[int], Sequence[Sequence[int]]]


@dataclass(frozen=True, eq=False)
class RailNetwork:
    """
    Immutable, validated hop query.

    All city numbers are 1-indexed, as read from the input. Arrays are
    made read-only after validation.

    Note: eq=False because the numpy array fields make the generated
    ``__eq__`` ambiguous.

    Attributes:
        num_cities: Number of cities (``n``).
        source: Source city (``s``).
        target: Target city (``t``).
        airports: Airport cities, shape ``(k,)``.
        railways: Railway endpoints, shape ``(m, 2)``.
    """

    num_cities: int
    source: int
    target: int
    airports: np.ndarray
    railways: np.ndarray

    def __post_init__(self) -> None:
        """Validate the query and freeze its arrays."""
        validate_network_inputs(
            self.num_cities, self.airports, self.railways, self.source, self.target
        )
        self.airports.flags.writeable = False
        self.railways.flags.writeable = False

    @property
    def num_railways(self) -> int:
        return len(self.railways)

    @property
    def num_airports(self) -> int:
        return len(self.airports)

    @classmethod
    def create(
        cls,
        num_cities: int,
        source: int,
        target: int,
        airports: Optional[IntArrayLike] = None,
        railways: Optional[IntArrayLike] = None,
    ) -> "RailNetwork":
        """
        Factory method accepting plain sequences.

        Copies the inputs into int64 arrays so the caller's data is never
        frozen or aliased.

        Args:
            num_cities: Number of cities.
            source: 1-indexed source city.
            target: 1-indexed target city.
            airports: Airport cities (None = no airports).
            railways: ``(from, to)`` pairs (None = no railways).

        Returns:
            Validated RailNetwork instance.
        """
        airport_arr = np.array([] if airports is None else airports, dtype=np.int64)
        railway_arr = np.array([] if railways is None else railways, dtype=np.int64)
        if railway_arr.size == 0:
            railway_arr = railway_arr.reshape(0, 2)
        return cls(
            num_cities=int(num_cities),
            source=int(source),
            target=int(target),
            airports=airport_arr,
            railways=railway_arr,
        )

    @classmethod
    def from_frames(
        cls,
        num_cities: int,
        source: int,
        target: int,
        airports: pd.DataFrame,
        railways: pd.DataFrame,
    ) -> "RailNetwork":
        """
        Build a network from tabular input.

        Args:
            num_cities: Number of cities.
            source: 1-indexed source city.
            target: 1-indexed target city.
            airports: Frame matching AirportSchema.
            railways: Frame matching RailwaySchema.

        Returns:
            Validated RailNetwork instance.

        Raises:
            pandera.errors.SchemaError: If a frame violates its schema.
        """
        airports = AirportSchema.validate(airports)
        railways = RailwaySchema.validate(railways)
        return cls.create(
            num_cities=num_cities,
            source=source,
            target=target,
            airports=airports["city"].to_numpy(dtype=np.int64),
            railways=railways[["from_city", "to_city"]].to_numpy(dtype=np.int64),
        )

    def railways_frame(self) -> RailwayDataFrame:
        """Railway table as a validated DataFrame."""
        df = pd.DataFrame(self.railways, columns=["from_city", "to_city"])
        return RailwaySchema.validate(df)

    def airports_frame(self) -> AirportDataFrame:
        """Airport table as a validated DataFrame."""
        df = pd.DataFrame({"city": self.airports})
        return AirportSchema.validate(df)
