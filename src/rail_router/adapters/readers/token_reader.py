"""
Token Stream Reader - byte stream to RailNetwork adapter.

Parses the plain-text query format:

    n m k s t
    <k airport cities>
    <m railway pairs>

All values are whitespace-delimited integers; line breaks carry no
meaning. Scanner state lives in the reader instance, one per query.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, List, Union

import numpy as np

from src.hopsearch.exceptions import MalformedInputError, TruncatedInputError
from src.rail_router.ports.network_reader import NetworkReader
from src.rail_router.schemas.network import RailNetwork

logger = logging.getLogger(__name__)

HEADER_SIZE = 5


class TokenStreamReader(NetworkReader):
    """
    Reads one hop query from a binary stream.

    The stream is consumed in full on ``read()``.

    Attributes:
        _stream: Source of raw bytes.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "TokenStreamReader":
        """Reader over the contents of a file."""
        return cls(io.BytesIO(Path(path).read_bytes()))

    @classmethod
    def from_text(cls, text: str) -> "TokenStreamReader":
        """Reader over an in-memory string."""
        return cls(io.BytesIO(text.encode("ascii")))

    @property
    def name(self) -> str:
        return "Token stream"

    def _tokenize(self) -> List[bytes]:
        return self._stream.read().split()

    @staticmethod
    def _to_ints(tokens: List[bytes]) -> np.ndarray:
        try:
            return np.array([int(tok) for tok in tokens], dtype=np.int64)
        except (ValueError, OverflowError) as e:
            raise MalformedInputError(f"Expected integer tokens: {e}") from e

    def read(self) -> RailNetwork:
        """
        Parse the stream into a RailNetwork.

        Returns:
            Validated RailNetwork.

        Raises:
            MalformedInputError: If a token is not an integer.
            TruncatedInputError: If fewer values than declared are present.
            ValidationError: If counts or cities are out of range.
        """
        tokens = self._tokenize()

        if len(tokens) < HEADER_SIZE:
            raise TruncatedInputError(HEADER_SIZE, len(tokens))
        n, m, k, s, t = (int(v) for v in self._to_ints(tokens[:HEADER_SIZE]))
        if m < 0 or k < 0:
            raise MalformedInputError(f"Counts must be non-negative, got m={m}, k={k}")

        expected = HEADER_SIZE + k + 2 * m
        if len(tokens) < expected:
            raise TruncatedInputError(expected, len(tokens))
        if len(tokens) > expected:
            logger.debug("Ignoring %d trailing tokens", len(tokens) - expected)

        body = self._to_ints(tokens[HEADER_SIZE:expected])
        airports = body[:k]
        railways = body[k:].reshape(m, 2)

        logger.debug(
            "Read query: %d cities, %d railways, %d airports, %d -> %d",
            n,
            m,
            k,
            s,
            t,
        )

        return RailNetwork(
            num_cities=n,
            source=s,
            target=t,
            airports=airports.copy(),
            railways=railways.copy(),
        )
