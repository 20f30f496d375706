"""
Reader adapters for hop query input.
"""

from src.rail_router.adapters.readers.token_reader import TokenStreamReader

__all__ = [
    "TokenStreamReader",
]
