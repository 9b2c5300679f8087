"""In-memory storage for runners, races and race results."""

import copy
import threading
import uuid
from typing import Dict, List, Optional

import structlog

from ...core.entities import Race, RaceResult, Runner
from ...core.errors import RaceNotFoundError, RunnerNotFoundError

logger = structlog.get_logger()


class InMemoryRunnerRepository:
    """Runner repository backed by a dict keyed on runner ID.

    Runners are copied on the way in and out, so a stored runner only
    changes through ``update``. Reads and writes share one exclusive lock.
    """

    def __init__(self):
        self._runners: Dict[uuid.UUID, Runner] = {}
        self._lock = threading.Lock()

    async def add(self, runner: Runner) -> None:
        with self._lock:
            self._runners[runner.id] = copy.copy(runner)

    async def get_by_id(self, runner_id: uuid.UUID) -> Optional[Runner]:
        with self._lock:
            runner = self._runners.get(runner_id)
            return copy.copy(runner) if runner is not None else None

    async def update(self, runner: Runner) -> None:
        with self._lock:
            self._runners[runner.id] = copy.copy(runner)

    async def get_all(self) -> List[Runner]:
        """Get all runners in insertion order."""
        with self._lock:
            return [copy.copy(runner) for runner in self._runners.values()]

    async def delete(self, runner_id: uuid.UUID) -> None:
        with self._lock:
            if runner_id not in self._runners:
                raise RunnerNotFoundError(f"id {runner_id} not found")
            del self._runners[runner_id]
        logger.debug("Deleted runner", runner_id=str(runner_id))


class InMemoryRaceRepository:
    """Race repository backed by dicts.

    Results are indexed per runner so that reads return them in the order
    they were saved. One lock guards all three maps; no await happens while
    it is held, so concurrent tasks and threads both see consistent state.
    The lock is exclusive for reads as well as writes, since ``threading``
    has no shared reader lock. Races and results are frozen, so they are
    stored without copying.
    """

    def __init__(self):
        self._races: Dict[uuid.UUID, Race] = {}
        self._race_results: Dict[uuid.UUID, RaceResult] = {}
        self._results_by_runner: Dict[uuid.UUID, List[uuid.UUID]] = {}
        self._lock = threading.Lock()

    async def get_race(self, race_id: uuid.UUID) -> Race:
        """Get a race by ID.

        Raises:
            RaceNotFoundError: If no race has the given ID
        """
        with self._lock:
            race = self._races.get(race_id)
        if race is None:
            raise RaceNotFoundError(f"race with ID {race_id} not found")
        return race

    async def save_race(self, race: Race) -> None:
        with self._lock:
            self._races[race.id] = race

    async def save_race_result(self, result: RaceResult) -> None:
        with self._lock:
            self._race_results[result.id] = result
            self._results_by_runner.setdefault(result.runner_id, []).append(result.id)

    async def get_race_results(self, runner_id: uuid.UUID) -> List[RaceResult]:
        with self._lock:
            result_ids = self._results_by_runner.get(runner_id, [])
            return [
                self._race_results[result_id]
                for result_id in result_ids
                if result_id in self._race_results
            ]
