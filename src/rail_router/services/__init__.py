"""
Domain services for the rail router.

Services orchestrate the interaction between ports (readers) and the
hopsearch core (graph construction, search).
"""

from src.rail_router.services.hop_query_service import HopQueryService

__all__ = ["HopQueryService"]
