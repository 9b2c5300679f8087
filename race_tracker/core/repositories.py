"""Storage contracts consumed by the application services."""

import uuid
from typing import List, Optional, Protocol

from .entities import Race, RaceResult, Runner


class RunnerRepository(Protocol):
    """Protocol for runner storage implementations."""

    async def add(self, runner: Runner) -> None:
        """Store a new runner."""
        ...

    async def get_by_id(self, runner_id: uuid.UUID) -> Optional[Runner]:
        """Get a runner by ID, or None if it is not stored."""
        ...

    async def update(self, runner: Runner) -> None:
        """Replace the stored copy of a runner."""
        ...

    async def get_all(self) -> List[Runner]:
        """Get all stored runners."""
        ...

    async def delete(self, runner_id: uuid.UUID) -> None:
        """Delete a runner.

        Raises:
            RunnerNotFoundError: If no runner has the given ID
        """
        ...


class RaceRepository(Protocol):
    """Protocol for race and race result storage implementations."""

    async def save_race(self, race: Race) -> None:
        """Store a race."""
        ...

    async def get_race(self, race_id: uuid.UUID) -> Race:
        """Get a race by ID.

        Raises:
            RaceNotFoundError: If no race has the given ID
        """
        ...

    async def save_race_result(self, result: RaceResult) -> None:
        """Store a race result and index it under its runner."""
        ...

    async def get_race_results(self, runner_id: uuid.UUID) -> List[RaceResult]:
        """Get a runner's results in the order they were saved.

        Returns an empty list when the runner has no results.
        """
        ...
