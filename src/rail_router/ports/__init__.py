"""
Port interfaces for the rail router.

Ports define the abstract interfaces that the service layer uses to
communicate with input sources.
"""

from src.rail_router.ports.network_reader import NetworkReader

__all__ = [
    "NetworkReader",
]
