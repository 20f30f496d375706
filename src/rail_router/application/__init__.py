"""
Application layer for the rail router.

Command line entry point and process-level logging setup.
"""

from src.rail_router.application.cli import main
from src.rail_router.application.logging_setup import setup_logging

__all__ = ["main", "setup_logging"]
