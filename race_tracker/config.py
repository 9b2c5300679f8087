"""Configuration management for the race tracker service."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from decouple import Choices, config


class Environment(Enum):
    """Supported deployment environments."""

    DEVELOPMENT = "development"
    CI = "CI"
    PRODUCTION = "production"


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class Config:
    """Configuration for the race tracker service."""

    # Environment configuration
    environment: Environment = Environment.DEVELOPMENT

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"

    # Welcome notification sent to newly registered runners
    welcome_subject_template: str = "Welcome {name}"
    welcome_message: str = "Welcome to the race tracker service!"

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables.

        Raises:
            ValueError: If an enumerated setting has an unsupported value
        """
        env = Environment(
            config(
                "ENVIRONMENT",
                default="development",
                cast=Choices(["development", "CI", "production"]),
            )
        )

        return cls(
            environment=env,
            # Logging
            log_level=config("LOG_LEVEL", default="INFO", cast=Choices(LOG_LEVELS)),
            log_format=config("LOG_FORMAT", default="json", cast=Choices(["json", "text"])),
            # Notifications
            welcome_subject_template=config("WELCOME_SUBJECT_TEMPLATE", default="Welcome {name}"),
            welcome_message=config(
                "WELCOME_MESSAGE", default="Welcome to the race tracker service!"
            ),
        )

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == Environment.CI

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


_config: Optional[Config] = None


def init_config() -> Config:
    """Load configuration from the environment and keep it process-wide."""
    global _config
    _config = Config.from_env()
    return _config


def get_config() -> Config:
    """Get the process-wide configuration.

    Raises:
        RuntimeError: If init_config() has not been called
    """
    if _config is None:
        raise RuntimeError("Configuration not initialized. Call init_config() first.")
    return _config


def reset_config() -> None:
    """Drop the process-wide configuration."""
    global _config
    _config = None


def is_config_initialized() -> bool:
    """Check whether init_config() has been called."""
    return _config is not None
