"""
Review Card - SM-2 Card State

Defines the per-item review state and the factory for new cards.

Key concepts:
- Interval: days until the card is shown again
- Ease factor: multiplier controlling interval growth (floored at 1.3)
- Success streak: consecutive successful recalls, drives the mastery tier

Cards are immutable. Reviews produce a new card via dataclasses.replace.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from srs_core.sm2.config import SchedulerConfig
from srs_core.sm2.constants import DEFAULT_DIFFICULTY


@dataclass(frozen=True)
class ReviewCard:
    """
    Review state for one study item of one learner.

    content_id is a weak reference to the phrase or flashcard; it is
    carried along but never resolved here.
    """
    id: str
    content_id: str

    # Informational tag (easy/medium/hard), not read by the algorithm
    difficulty: str

    # Scheduling parameters
    interval: int  # days
    ease_factor: float
    next_review_date: datetime

    # Review tracking
    review_count: int
    success_streak: int
    mistake_count: int = 0  # Failed reviews (quality < 3) over the card's lifetime
    last_reviewed: Optional[datetime] = None  # None until the first review
    recent_qualities: tuple[int, ...] = ()  # Last 10 quality scores, oldest first


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(moment: datetime) -> datetime:
    """Convert a datetime to UTC; naive values are taken to be UTC already."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def add_days(timestamp: datetime, days: int) -> datetime:
    """Shift a timestamp by a whole number of days."""
    return timestamp + timedelta(days=days)


def create_card(
    card_id: str,
    content_id: str,
    config: Optional[SchedulerConfig] = None,
    now: Optional[datetime] = None
) -> ReviewCard:
    """
    Initialize a card that has never been reviewed.

    New cards are due immediately.

    Args:
        card_id: Stable identifier for the card
        content_id: Reference to the underlying learning content
        config: Scheduler configuration (defaults to SchedulerConfig())
        now: Creation time (defaults to now; naive values are taken as UTC)

    Returns:
        New ReviewCard with configured defaults
    """
    if config is None:
        config = SchedulerConfig()
    now = utc_now() if now is None else as_utc(now)

    return ReviewCard(
        id=card_id,
        content_id=content_id,
        difficulty=DEFAULT_DIFFICULTY,
        interval=config.initial_interval,
        ease_factor=config.default_ease_factor,
        next_review_date=now,
        review_count=0,
        success_streak=0,
    )
