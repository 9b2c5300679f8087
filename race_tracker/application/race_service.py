"""Race use cases: creating races, logging results and reading them back."""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional

import structlog

from ..core.entities import Race, RaceResult, is_nil_id, pace_min_per_km
from ..core.errors import (
    EmptyRaceIDError,
    EmptyRunnerIDError,
    InvalidAverageHeartRateError,
    InvalidFinishTimeError,
)
from ..core.repositories import RaceRepository

logger = structlog.get_logger()


@dataclass(frozen=True)
class ResultItem:
    """Flat read model of a logged race result."""

    id: uuid.UUID
    runner_id: uuid.UUID
    race_id: uuid.UUID
    finish_time: timedelta
    pace: float  # min/km
    heart_rate_avg: int
    notes: str

    @classmethod
    def from_result(cls, result: RaceResult) -> "ResultItem":
        return cls(
            id=result.id,
            runner_id=result.runner_id,
            race_id=result.race_id,
            finish_time=result.finish_time,
            pace=result.pace,
            heart_rate_avg=result.heart_rate_avg,
            notes=result.notes,
        )


class RaceService:
    """Application service for races and race results.

    Input checks that need no storage run first, so invalid requests
    never reach the repository.
    """

    def __init__(self, repository: RaceRepository):
        self.repository = repository

    async def create_race(
        self,
        name: str,
        location: str,
        date: datetime,
        distance_km: float,
        elevation_gain: float,
    ) -> uuid.UUID:
        """Create and store a race.

        Validation is the Race entity's; its errors propagate unchanged.

        Returns:
            The new race's ID
        """
        race = Race.create(name, location, date, distance_km, elevation_gain)

        await self.repository.save_race(race)

        logger.info("Created race", race_id=str(race.id), distance_km=distance_km)
        return race.id

    async def add_result(
        self,
        runner_id: Optional[uuid.UUID],
        race_id: Optional[uuid.UUID],
        finish_time: timedelta,
        avg_hr: int,
        notes: str = "",
    ) -> uuid.UUID:
        """Log a runner's result for a race.

        Pace is derived from the finish time and the stored race distance.

        Args:
            runner_id: Runner who ran the race
            race_id: Race that was run
            finish_time: Time from start to finish
            avg_hr: Average heart rate over the race
            notes: Free-text notes

        Returns:
            The new result's ID

        Raises:
            EmptyRunnerIDError: If runner_id is unset
            EmptyRaceIDError: If race_id is unset
            InvalidFinishTimeError: If finish_time is not positive
            InvalidAverageHeartRateError: If avg_hr is not positive
            RaceNotFoundError: If the race is not stored
        """
        if is_nil_id(runner_id):
            raise EmptyRunnerIDError("runner ID cannot be empty")
        if is_nil_id(race_id):
            raise EmptyRaceIDError("race ID cannot be empty")
        if finish_time <= timedelta(0):
            raise InvalidFinishTimeError("finish time must be greater than zero")
        if avg_hr <= 0:
            raise InvalidAverageHeartRateError("average heart rate must be positive")

        race = await self.repository.get_race(race_id)

        pace = pace_min_per_km(finish_time, race.distance_km)
        result = RaceResult.create(runner_id, race_id, finish_time, pace, avg_hr, notes)

        await self.repository.save_race_result(result)

        logger.info(
            "Logged race result",
            result_id=str(result.id),
            runner_id=str(runner_id),
            race_id=str(race_id),
            pace=round(pace, 2),
        )
        return result.id

    async def get_results(self, runner_id: Optional[uuid.UUID]) -> List[ResultItem]:
        """Get all results logged by a runner, in storage order.

        Raises:
            EmptyRunnerIDError: If runner_id is unset
        """
        if is_nil_id(runner_id):
            raise EmptyRunnerIDError("runner ID cannot be empty")

        results = await self.repository.get_race_results(runner_id)
        return [ResultItem.from_result(r) for r in results]
