"""Core layer for the race tracker service.

This module provides the domain entities, the error kinds they raise, and
the storage contracts the application layer depends on.
"""

from .entities import (
    NIL_ID,
    EmailAddress,
    Race,
    RaceResult,
    Runner,
    is_nil_id,
    new_id,
    pace_min_per_km,
)
from .repositories import RaceRepository, RunnerRepository

__all__ = [
    "NIL_ID",
    "EmailAddress",
    "Race",
    "RaceResult",
    "Runner",
    "is_nil_id",
    "new_id",
    "pace_min_per_km",
    "RaceRepository",
    "RunnerRepository",
]
