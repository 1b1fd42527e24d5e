"""
Exceptions raised by the SM-2 scheduler.
"""

from __future__ import annotations


class SchedulerError(Exception):
    """Base class for scheduler errors."""


class ConfigurationError(SchedulerError):
    """Scheduler configuration is invalid. Raised at construction time."""


class InvalidQualityError(SchedulerError, ValueError):
    """Quality score is not an integer in [0, 5]."""

    def __init__(self, quality: object):
        self.quality = quality
        super().__init__(f"quality must be an integer between 0 and 5, got {quality!r}")
