"""
Constants for study statistics and daily review planning.
"""

from __future__ import annotations

from typing import Final


# A card counts as mastered once all three hold
MASTERED_MIN_EASE_FACTOR: Final[float] = 2.2
MASTERED_MIN_INTERVAL: Final[int] = 21
MASTERED_MIN_STREAK: Final[int] = 3

# A card is overdue once it has been due for more than this many days
OVERDUE_GRACE_DAYS: Final[int] = 1

# Baseline number of reviews per day by learner level
BASE_DAILY_REVIEWS: Final[dict[str, int]] = {
    "beginner": 15,
    "intermediate": 25,
    "advanced": 35,
}

# Backlog thresholds and adjustments, as multiples of the baseline
BACKLOG_HIGH_RATIO: Final[float] = 1.5
BACKLOG_LOW_RATIO: Final[float] = 0.5
BACKLOG_HIGH_FACTOR: Final[float] = 1.3
BACKLOG_LOW_FACTOR: Final[float] = 0.7

CARD_COLUMNS: Final[list[str]] = [
    "card_id",
    "interval",
    "ease_factor",
    "next_review_date",
    "success_streak",
    "mastery_level",
]
EVENT_COLUMNS: Final[list[str]] = ["card_id", "timestamp", "quality", "day_utc"]
