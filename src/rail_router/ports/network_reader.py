"""
Network Reader port interface.

Defines the abstract contract for sources that produce hop queries.
Implementations handle the specifics of different input formats.
"""

from abc import ABC, abstractmethod

from src.rail_router.schemas.network import RailNetwork


class NetworkReader(ABC):
    """
    Abstract interface for hop query sources.

    Readers return a validated RailNetwork. Validation happens at the
    boundary (in RailNetwork construction), not in the solver.

    Implementations:
    - TokenStreamReader: whitespace-delimited integers from a byte stream
    """

    @abstractmethod
    def read(self) -> RailNetwork:
        """
        Read one complete query.

        Returns:
            Validated RailNetwork.

        Raises:
            MalformedInputError: If the input cannot be parsed.
            TruncatedInputError: If the input ends early.
            ValidationError: If the parsed query is invalid.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this reader.

        Returns:
            Reader identifier (e.g., "Token stream").
        """
        ...
