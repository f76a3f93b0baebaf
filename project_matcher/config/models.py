"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class ScoringConfig(BaseModel):
    """Weights and thresholds for scoring projects against an email.

    The defaults rank a project number above a full address, a full address
    above a street prefix, and a street prefix above a project name.
    """

    code_weight: int = Field(10, ge=0, description="Points when the project number appears")
    location_full_weight: int = Field(
        8, ge=0, description="Points when the full address appears"
    )
    location_prefix_weight: int = Field(
        5, ge=0, description="Points when only the street number and name appear"
    )
    name_weight: int = Field(3, ge=0, description="Points when the project name appears")
    min_name_length: int = Field(
        4, ge=1, description="Shorter project names are never matched"
    )
    min_prefix_length: int = Field(
        5, ge=1, description="Shorter street prefixes are never matched"
    )
    prefix_token_count: int = Field(
        2, ge=1, le=10, description="Address tokens that form the street prefix"
    )
    max_suggestions: Optional[int] = Field(
        None, ge=1, description="Cap on returned suggestions (None = unlimited)"
    )

    model_config = {"frozen": True, "extra": "forbid"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "extra": "forbid"}


class AppConfig(BaseModel):
    """Root configuration object for the project matcher."""

    scoring: ScoringConfig = Field(
        default_factory=ScoringConfig, description="Scoring weights and thresholds"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def validate_scoring_has_signal(self):
        """Reject configurations where no rule can ever score."""
        scoring = self.scoring
        total = (
            scoring.code_weight
            + scoring.location_full_weight
            + scoring.location_prefix_weight
            + scoring.name_weight
        )
        if total == 0:
            raise ValueError(
                "At least one scoring weight must be greater than zero; "
                "with all weights at 0 no project can ever be suggested"
            )
        return self
