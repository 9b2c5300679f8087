"""Application layer for the race tracker service.

Wires the use-case services to whichever storage and notification
implementations the caller provides.
"""

from dataclasses import dataclass
from typing import Optional

from ..config import Config, get_config, is_config_initialized
from ..core.repositories import RaceRepository, RunnerRepository
from .notification import Notification, NotificationService
from .race_service import RaceService, ResultItem
from .runner_service import RunnerService


@dataclass
class Services:
    """Services exposed by the application layer."""

    runner_service: RunnerService
    race_service: RaceService


def build_services(
    runner_repository: RunnerRepository,
    race_repository: RaceRepository,
    notification_service: NotificationService,
    config: Optional[Config] = None,
) -> Services:
    """Create the application services.

    Welcome notification texts come from ``config`` when one is given,
    otherwise from the process-wide configuration if it is initialized.
    """
    if config is None and is_config_initialized():
        config = get_config()

    runner_kwargs = {}
    if config is not None:
        runner_kwargs = {
            "welcome_subject_template": config.welcome_subject_template,
            "welcome_message": config.welcome_message,
        }

    return Services(
        runner_service=RunnerService(runner_repository, notification_service, **runner_kwargs),
        race_service=RaceService(race_repository),
    )


__all__ = [
    "Notification",
    "NotificationService",
    "RaceService",
    "ResultItem",
    "RunnerService",
    "Services",
    "build_services",
]
