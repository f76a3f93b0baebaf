"""Environment variable loading and validation."""

import os
from typing import Optional

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(self, log_level: Optional[str] = None, environment: Optional[str] = None):
        self.log_level = log_level
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    Optional environment variables:
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: Label attached to every log record (default: local)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    log_level = os.getenv("LOG_LEVEL")
    environment = os.getenv("ENVIRONMENT")

    if log_level:
        log_level = log_level.strip().upper()
        if log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                "Environment variable validation failed",
                errors=[
                    f"Invalid LOG_LEVEL: '{log_level}'. "
                    f"Must be one of: {', '.join(VALID_LOG_LEVELS)}"
                ],
                suggestions=[
                    "Unset LOG_LEVEL to use the level from config.yaml",
                    "Check the LOG_LEVEL entry in your .env file",
                ],
            )

    if environment is not None:
        environment = environment.strip() or None

    return EnvironmentConfig(log_level=log_level or None, environment=environment)
