"""Storage adapters for the race tracker service."""

from .memory import InMemoryRaceRepository, InMemoryRunnerRepository

__all__ = ["InMemoryRaceRepository", "InMemoryRunnerRepository"]
