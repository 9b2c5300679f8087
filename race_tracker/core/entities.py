"""Core entities for the race tracker service."""

import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

from .errors import (
    EmptyLocationError,
    EmptyNameError,
    EmptyRaceIDError,
    EmptyRunnerIDError,
    InvalidDistanceError,
    InvalidElevationError,
    InvalidEmailError,
    InvalidFinishTimeError,
    InvalidHeartRateError,
    InvalidPaceError,
)

# All-zero UUID, the canonical "unset" identity
NIL_ID = uuid.UUID(int=0)

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def new_id() -> uuid.UUID:
    """Generate a fresh random identity."""
    return uuid.uuid4()


def is_nil_id(value: Optional[uuid.UUID]) -> bool:
    """Check whether an identity is unset."""
    return value is None or value == NIL_ID


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def pace_min_per_km(finish_time: timedelta, distance_km: float) -> float:
    """Pace in minutes per kilometer for a finish time over a distance."""
    return finish_time.total_seconds() / 60 / distance_km


@dataclass(frozen=True)
class EmailAddress:
    """A validated email address."""

    value: str

    @classmethod
    def parse(cls, value: str) -> "EmailAddress":
        """Validate a raw address.

        Raises:
            InvalidEmailError: If the address does not match the expected format
        """
        if not value or not EMAIL_PATTERN.fullmatch(value):
            raise InvalidEmailError("invalid email address")
        return cls(value)

    def __str__(self) -> str:
        return self.value


class Runner:
    """A registered race participant.

    Identity, email address and creation time are read-only. The name can
    only change through ``rename``.
    """

    def __init__(
        self,
        runner_id: uuid.UUID,
        name: str,
        email_address: EmailAddress,
        created_at: Optional[datetime] = None,
    ):
        self._id = runner_id
        self._name = name
        self._email_address = email_address
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email_address(self) -> EmailAddress:
        return self._email_address

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @classmethod
    def create(cls, name: str, email: str) -> "Runner":
        """Create a new runner with a fresh identity.

        Args:
            name: Display name, must not be empty
            email: Raw email address

        Raises:
            EmptyNameError: If the name is empty
            InvalidEmailError: If the email address is malformed
        """
        return cls.load(new_id(), name, email, utc_now())

    @classmethod
    def load(
        cls,
        runner_id: uuid.UUID,
        name: str,
        email: str,
        created_at: datetime,
    ) -> "Runner":
        """Rehydrate a stored runner, re-running the entity validation."""
        _require_name(name)
        return cls(runner_id, name, EmailAddress.parse(email), created_at)

    def rename(self, new_name: str) -> None:
        """Change the runner's name.

        Raises:
            EmptyNameError: If the new name is empty
        """
        _require_name(new_name)
        self._name = new_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Runner):
            return NotImplemented
        return (self._id, self._name, self._email_address, self._created_at) == (
            other._id,
            other._name,
            other._email_address,
            other._created_at,
        )

    def __repr__(self) -> str:
        return (
            f"Runner(id={self._id!r}, name={self._name!r}, "
            f"email_address={self._email_address!r}, created_at={self._created_at!r})"
        )

    def __str__(self) -> str:
        return f"Runner({self.name} <{self.email_address}>)"


@dataclass(frozen=True)
class Race:
    """A race event such as a marathon or a trail run."""

    id: uuid.UUID
    name: str
    location: str
    date: datetime
    distance_km: float
    elevation_gain: float

    @classmethod
    def create(
        cls,
        name: str,
        location: str,
        date: datetime,
        distance_km: float,
        elevation_gain: float,
    ) -> "Race":
        """Create a new race.

        Checks run in order: name, location, distance, elevation.

        Raises:
            EmptyNameError: If the name is empty
            EmptyLocationError: If the location is empty
            InvalidDistanceError: If distance_km is not greater than zero
            InvalidElevationError: If elevation_gain is negative
        """
        _require_name(name)
        if not location:
            raise EmptyLocationError("location cannot be empty")
        if distance_km <= 0:
            raise InvalidDistanceError("distance_km must be greater than 0")
        if elevation_gain < 0:
            raise InvalidElevationError("elevation_gain cannot be negative")

        return cls(
            id=new_id(),
            name=name,
            location=location,
            date=date,
            distance_km=distance_km,
            elevation_gain=elevation_gain,
        )

    def __str__(self) -> str:
        return f"Race({self.name}, {self.location}, {self.distance_km}km)"


@dataclass(frozen=True)
class RaceResult:
    """A runner's logged outcome for one race."""

    id: uuid.UUID
    runner_id: uuid.UUID
    race_id: uuid.UUID
    finish_time: timedelta
    pace: float  # min/km
    heart_rate_avg: int
    notes: str = ""
    logged_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        runner_id: uuid.UUID,
        race_id: uuid.UUID,
        finish_time: timedelta,
        pace: float,
        heart_rate_avg: int,
        notes: str = "",
    ) -> "RaceResult":
        """Create a new race result stamped with the current time.

        Raises:
            EmptyRunnerIDError: If runner_id is unset
            EmptyRaceIDError: If race_id is unset
            InvalidFinishTimeError: If finish_time is not positive
            InvalidPaceError: If pace is not positive
            InvalidHeartRateError: If heart_rate_avg is not positive
        """
        if is_nil_id(runner_id):
            raise EmptyRunnerIDError("runner ID cannot be empty")
        if is_nil_id(race_id):
            raise EmptyRaceIDError("race ID cannot be empty")
        if finish_time <= timedelta(0):
            raise InvalidFinishTimeError("finish time must be greater than 0")
        if pace <= 0:
            raise InvalidPaceError("pace must be greater than 0")
        if heart_rate_avg <= 0:
            raise InvalidHeartRateError("average heart rate must be positive")

        return cls(
            id=new_id(),
            runner_id=runner_id,
            race_id=race_id,
            finish_time=finish_time,
            pace=pace,
            heart_rate_avg=heart_rate_avg,
            notes=notes,
        )


def _require_name(name: str) -> None:
    if not name:
        raise EmptyNameError("name cannot be empty")
