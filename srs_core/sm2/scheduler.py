"""
Scheduler - SM-2 Card Lifecycle

Pure SM-2 scheduling and state updates (no storage calls).

Main workflow:
1. Load card (caller's responsibility)
2. Compute next interval and ease factor from the pre-review state
3. Update review count and success streak
4. Return a new card (+ event record from process_review)
5. Persist the returned card (caller's responsibility)

The scheduler holds only its frozen config, so one instance can be shared
between threads. Two reviews of the same card racing against storage are
the caller's problem: the last write wins unless the store serializes them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Tuple

from srs_core.sm2 import ease, intervals
from srs_core.sm2.card import ReviewCard, add_days, as_utc, create_card, utc_now
from srs_core.sm2.config import SchedulerConfig, load_config
from srs_core.sm2.constants import RECENT_QUALITY_WINDOW
from srs_core.sm2.quality import is_success, validate_quality

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReviewEvent:
    """
    Log entry for a single review of a card.

    Captures the scheduling state before and after the review so the
    caller can store it next to the updated card.
    """
    card_id: str
    content_id: str
    timestamp: datetime
    quality: int

    # State before review
    interval_before: int
    ease_factor_before: float

    # State after review
    interval_after: int
    ease_factor_after: float
    review_count_after: int
    success_streak_after: int

    is_success: bool


class SM2Scheduler:
    """
    SM-2 scheduler bound to one configuration.

    Usage:
        scheduler = SM2Scheduler(max_interval=180)
        card = scheduler.create_card("card-1", "phrase-42")
        card = scheduler.update_card(card, 4)
    """

    def __init__(self, config: Optional[SchedulerConfig] = None, **overrides):
        """
        Args:
            config: Ready-made configuration. When omitted, one is built with
                load_config(**overrides).
            **overrides: Config field values (min_interval, max_interval,
                initial_interval, default_ease_factor)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        if config is None:
            config = load_config(**overrides)
        elif overrides:
            config = load_config(**{**config.model_dump(), **overrides})
        self.config = config

    def __repr__(self):
        return f"<SM2Scheduler({self.config!r})>"

    def calculate_next_interval(self, current_interval: int, quality: int, ease_factor: float) -> int:
        """Next interval in days for a card reviewed with the given quality."""
        return intervals.calculate_next_interval(current_interval, quality, ease_factor, self.config)

    def update_ease_factor(self, ease_factor: float, quality: int) -> float:
        """New ease factor after a review, floored at 1.3."""
        return ease.update_ease_factor(ease_factor, quality)

    def create_card(self, card_id: str, content_id: str, now: Optional[datetime] = None) -> ReviewCard:
        """New card using this scheduler's configuration."""
        return create_card(card_id, content_id, config=self.config, now=now)

    def update_card(
        self,
        card: ReviewCard,
        quality: int,
        now: Optional[datetime] = None
    ) -> ReviewCard:
        """
        Advance a card's state after a review.

        Both the interval and the ease factor are derived from the card's
        pre-review values. The input card is left untouched.

        Args:
            card: Card as it was before the review
            quality: Recall quality (0-5)
            now: Review time (defaults to now; naive values are taken as UTC)

        Returns:
            New ReviewCard with id and content_id preserved

        Raises:
            InvalidQualityError: If quality is outside [0, 5]
        """
        quality = validate_quality(quality)
        now = utc_now() if now is None else as_utc(now)

        new_interval = self.calculate_next_interval(card.interval, quality, card.ease_factor)
        new_ease_factor = self.update_ease_factor(card.ease_factor, quality)
        if is_success(quality):
            new_streak, new_mistakes = card.success_streak + 1, card.mistake_count
        else:
            new_streak, new_mistakes = 0, card.mistake_count + 1

        updated = replace(
            card,
            interval=new_interval,
            ease_factor=new_ease_factor,
            review_count=card.review_count + 1,
            success_streak=new_streak,
            mistake_count=new_mistakes,
            next_review_date=add_days(now, new_interval),
            last_reviewed=now,
            recent_qualities=(card.recent_qualities + (quality,))[-RECENT_QUALITY_WINDOW:],
        )

        logger.debug(
            "Card %s reviewed (q=%d): interval %d -> %d, ease %.2f -> %.2f, streak %d",
            card.id, quality, card.interval, new_interval,
            card.ease_factor, new_ease_factor, new_streak
        )
        return updated

    def process_review(
        self,
        card: ReviewCard,
        quality: int,
        now: Optional[datetime] = None
    ) -> Tuple[ReviewCard, ReviewEvent]:
        """
        Review a card and build the matching event record.

        No storage calls. Caller is responsible for:
        1. Loading the card
        2. Saving the returned card without further changes
        3. Persisting the event

        Returns:
            Tuple of (updated_card, review_event)
        """
        now = utc_now() if now is None else as_utc(now)

        updated = self.update_card(card, quality, now=now)
        event = ReviewEvent(
            card_id=card.id,
            content_id=card.content_id,
            timestamp=now,
            quality=int(quality),
            interval_before=card.interval,
            ease_factor_before=card.ease_factor,
            interval_after=updated.interval,
            ease_factor_after=updated.ease_factor,
            review_count_after=updated.review_count,
            success_streak_after=updated.success_streak,
            is_success=is_success(quality),
        )
        return updated, event

