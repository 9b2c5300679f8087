"""Domain errors for the race tracker service.

Every failure the core can report has its own exception class so callers
can branch on the kind. Validation errors are caller-fixable, not-found
errors mean the referenced record is absent from storage.
"""


class RaceTrackerError(Exception):
    """Base exception for race tracker errors."""

    pass


class ValidationError(RaceTrackerError):
    """Input rejected by a domain or application validation rule."""

    pass


class EmptyNameError(ValidationError):
    """Name cannot be empty."""

    pass


class InvalidEmailError(ValidationError):
    """Email address does not match the expected format."""

    pass


class EmptyLocationError(ValidationError):
    """Race location cannot be empty."""

    pass


class InvalidDistanceError(ValidationError):
    """Race distance must be greater than zero."""

    pass


class InvalidElevationError(ValidationError):
    """Race elevation gain cannot be negative."""

    pass


class EmptyRunnerIDError(ValidationError):
    """Runner ID is missing or the nil UUID."""

    pass


class EmptyRaceIDError(ValidationError):
    """Race ID is missing or the nil UUID."""

    pass


class InvalidFinishTimeError(ValidationError):
    """Finish time must be greater than zero."""

    pass


class InvalidPaceError(ValidationError):
    """Pace must be greater than zero."""

    pass


class InvalidHeartRateError(ValidationError):
    """Average heart rate must be positive."""

    pass


class InvalidAverageHeartRateError(InvalidHeartRateError):
    """Average heart rate rejected before any storage access."""

    pass


class NotFoundError(RaceTrackerError):
    """Requested record does not exist in storage."""

    pass


class RunnerNotFoundError(NotFoundError):
    """Runner not found."""

    pass


class RaceNotFoundError(NotFoundError):
    """Race not found."""

    pass
