"""
Interval Calculation

SM-2 step function for the next review interval (in days).

Rules, evaluated in order:
1. Failure (quality < 3)       -> min_interval
2. current_interval == 1       -> 6
3. current_interval == 6       -> initial_interval
4. Any other interval          -> round(current_interval * ease_factor)
Success results are clamped to [min_interval, max_interval].

Known quirk: steps 2 and 3 match on the literal interval value rather than
on a repetition counter. With the default initial_interval of 1 a card
cycles 1 -> 6 -> 1 -> 6 on consecutive successes and never reaches the
growth branch. Cards whose interval reaches 1 or 6 through growth or
clamping are also sent down these steps. The behaviour is kept as is until
someone decides whether it is intended.
"""

from __future__ import annotations

import math

from srs_core.sm2.config import SchedulerConfig
from srs_core.sm2.constants import FIRST_STEP_INTERVAL, SECOND_STEP_INTERVAL
from srs_core.sm2.quality import is_success, validate_quality


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def clamp_interval(interval: int, config: SchedulerConfig) -> int:
    """Clamp an interval to [min_interval, max_interval]."""
    return max(config.min_interval, min(config.max_interval, interval))


def calculate_next_interval(
    current_interval: int,
    quality: int,
    ease_factor: float,
    config: SchedulerConfig
) -> int:
    """
    Calculate the next review interval.

    Args:
        current_interval: Interval (days) the card was scheduled with
        quality: Recall quality (0-5)
        ease_factor: Card's ease factor before this review
        config: Scheduler configuration

    Returns:
        Next interval in days, within [min_interval, max_interval]

    Raises:
        InvalidQualityError: If quality is outside [0, 5]
    """
    quality = validate_quality(quality)

    # Failed recall: start over, ease factor and history are irrelevant
    if not is_success(quality):
        return config.min_interval

    if current_interval == FIRST_STEP_INTERVAL:
        next_interval = SECOND_STEP_INTERVAL
    elif current_interval == SECOND_STEP_INTERVAL:
        # Drops back to initial_interval (see module docstring)
        next_interval = config.initial_interval
    else:
        next_interval = round_half_up(current_interval * ease_factor)

    return clamp_interval(next_interval, config)
