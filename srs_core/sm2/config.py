"""
Scheduler configuration.

One SchedulerConfig per scheduler instance. Values come from keyword
overrides, then SRS_* environment variables (a .env file is honoured),
then the model defaults.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from srs_core.sm2.constants import MIN_EASE_FACTOR
from srs_core.sm2.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Load environment
load_dotenv()


# Environment variable name for each config field
ENV_VARS = {
    "min_interval": "SRS_MIN_INTERVAL",
    "max_interval": "SRS_MAX_INTERVAL",
    "initial_interval": "SRS_INITIAL_INTERVAL",
    "default_ease_factor": "SRS_DEFAULT_EASE_FACTOR",
}


class SchedulerConfig(BaseModel):
    """
    Interval bounds and starting values for an SM-2 scheduler.

    Invalid values raise ConfigurationError, whether the model is built
    directly or through load_config.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    min_interval: int = Field(1, description="Floor for any interval; reset value on failure")
    max_interval: int = Field(365, description="Ceiling for interval growth")
    initial_interval: int = Field(1, description="Interval of new cards and of the post-6-day step")
    default_ease_factor: float = Field(2.5, description="Ease factor of new cards")

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid scheduler configuration: {exc}") from exc

    @model_validator(mode="after")
    def _check_bounds(self) -> "SchedulerConfig":
        problems = []
        for name in ("min_interval", "max_interval", "initial_interval", "default_ease_factor"):
            if getattr(self, name) <= 0:
                problems.append(f"{name} must be positive")
        if self.min_interval > self.max_interval:
            problems.append("min_interval must not exceed max_interval")
        if not self.min_interval <= self.initial_interval <= self.max_interval:
            problems.append("initial_interval must lie within [min_interval, max_interval]")
        if self.default_ease_factor < MIN_EASE_FACTOR:
            problems.append(f"default_ease_factor must be at least {MIN_EASE_FACTOR}")
        if problems:
            raise ValueError("; ".join(problems))
        return self


def _values_from_env() -> dict:
    """Collect config values from SRS_* environment variables that are set."""
    values = {}
    for field_name, env_var in ENV_VARS.items():
        raw = os.getenv(env_var)
        if raw is not None and raw.strip() != "":
            values[field_name] = raw.strip()
    return values


def load_config(**overrides) -> SchedulerConfig:
    """
    Build a SchedulerConfig from overrides, environment and defaults.

    Args:
        **overrides: Field values that take precedence over the environment.
            Overrides passed as None are ignored.

    Returns:
        Validated, immutable SchedulerConfig

    Raises:
        ConfigurationError: If any value has the wrong type, is non-positive,
            or the interval bounds are inconsistent.
    """
    values = _values_from_env()
    values.update({k: v for k, v in overrides.items() if v is not None})

    config = SchedulerConfig(**values)
    logger.debug("Scheduler config loaded: %s", config.model_dump())
    return config
