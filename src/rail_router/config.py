"""
Configuration module for the rail router.

Centralizes solver defaults and reads overrides from the environment
(optionally from a ``.env`` file).
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from src.hopsearch.circular_queue import DEFAULT_CAPACITY

ENV_QUEUE_CAPACITY = "RAILHOP_QUEUE_CAPACITY"
ENV_MAX_QUEUE_CAPACITY = "RAILHOP_MAX_QUEUE_CAPACITY"
ENV_LOG_LEVEL = "RAILHOP_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SolverConfig:
    """
    Solver and logging settings.

    Attributes:
        initial_queue_capacity: Starting BFS queue capacity.
        max_queue_capacity: Queue growth limit (None = unbounded).
        log_level: Root logger level name.
    """

    initial_queue_capacity: int = DEFAULT_CAPACITY
    max_queue_capacity: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.initial_queue_capacity <= 0:
            raise ValueError(
                f"initial_queue_capacity must be > 0, got {self.initial_queue_capacity}"
            )
        if (
            self.max_queue_capacity is not None
            and self.max_queue_capacity < self.initial_queue_capacity
        ):
            raise ValueError(
                f"max_queue_capacity ({self.max_queue_capacity}) must be >= "
                f"initial_queue_capacity ({self.initial_queue_capacity})"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level}")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def load_config() -> SolverConfig:
    """
    Build a SolverConfig from environment variables.

    Loads a ``.env`` file first if one is present. Unset variables keep
    their defaults.

    Returns:
        Validated SolverConfig.

    Raises:
        ValueError: If a variable holds an invalid value.
    """
    load_dotenv()

    capacity = _env_int(ENV_QUEUE_CAPACITY)
    return SolverConfig(
        initial_queue_capacity=capacity if capacity is not None else DEFAULT_CAPACITY,
        max_queue_capacity=_env_int(ENV_MAX_QUEUE_CAPACITY),
        log_level=os.getenv(ENV_LOG_LEVEL, "WARNING"),
    )
