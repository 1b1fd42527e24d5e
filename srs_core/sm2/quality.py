"""
Quality score checks shared by the interval and ease-factor updates.
"""

from __future__ import annotations

from srs_core.sm2.constants import PASSING_QUALITY, QUALITY_MAX, QUALITY_MIN
from srs_core.sm2.errors import InvalidQualityError


def validate_quality(quality: int) -> int:
    """
    Return quality as a plain int, rejecting anything outside [0, 5].

    Out-of-range scores are rejected rather than clamped. Booleans and
    non-integers (including floats like 4.0) are rejected as well.

    Raises:
        InvalidQualityError: If quality is not an integer in [0, 5]
    """
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise InvalidQualityError(quality)
    if not QUALITY_MIN <= quality <= QUALITY_MAX:
        raise InvalidQualityError(quality)
    return int(quality)


def is_success(quality: int) -> bool:
    """True if the quality score counts as a successful recall (>= 3)."""
    return quality >= PASSING_QUALITY
