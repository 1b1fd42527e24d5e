"""
Ease Factor Updates

SM-2 ease-factor update, floored at MIN_EASE_FACTOR.

    delta = 0.1 - (5 - q) * (0.08 + (5 - q) * 0.02)
    EF'   = max(1.3, EF + delta)

Effect by quality:
- 5: EF grows by 0.1
- 4: EF unchanged
- 3: EF drops by 0.14
- 0: EF drops by 0.8, never below 1.3
"""

from __future__ import annotations

from srs_core.sm2.constants import MIN_EASE_FACTOR
from srs_core.sm2.quality import validate_quality


def ease_factor_delta(quality: int) -> float:
    """Raw SM-2 ease-factor change for a quality score."""
    q = validate_quality(quality)
    return 0.1 - (5 - q) * (0.08 + (5 - q) * 0.02)


def update_ease_factor(ease_factor: float, quality: int) -> float:
    """
    Compute the new ease factor after a review.

    Args:
        ease_factor: Current ease factor
        quality: Recall quality (0-5)

    Returns:
        New ease factor, never below 1.3

    Raises:
        InvalidQualityError: If quality is outside [0, 5]
    """
    return max(MIN_EASE_FACTOR, ease_factor + ease_factor_delta(quality))
