"""
Service layer to assemble study statistics and review plans.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

import pandas as pd

from srs_core.analytics.constants import (
    BACKLOG_HIGH_FACTOR,
    BACKLOG_HIGH_RATIO,
    BACKLOG_LOW_FACTOR,
    BACKLOG_LOW_RATIO,
    BASE_DAILY_REVIEWS,
)
from srs_core.analytics.metrics import (
    build_day_index,
    compute_column_mean,
    compute_due_count,
    compute_mastered_count,
    compute_mastery_distribution,
    compute_overdue_count,
    compute_reviews_per_day,
    compute_success_rate,
)
from srs_core.analytics.queries import (
    load_cards_df,
    load_recent_qualities,
    load_review_events_df,
)
from srs_core.analytics.types import LearnerLevel, StudyStatistics
from srs_core.sm2.card import ReviewCard, utc_now
from srs_core.sm2.queue import get_due_cards
from srs_core.sm2.scheduler import ReviewEvent

logger = logging.getLogger(__name__)


def build_study_statistics(
    cards: Iterable[ReviewCard],
    now: Optional[datetime] = None
) -> StudyStatistics:
    """
    Build the deck summary shown on progress screens.

    Args:
        cards: The learner's cards
        now: Reference time (defaults to now, UTC)

    Returns:
        StudyStatistics; all counts and averages are zero for an empty deck
    """
    if now is None:
        now = utc_now()

    cards = list(cards)
    cards_df = load_cards_df(cards)
    qualities = load_recent_qualities(cards)

    total = len(cards_df)
    mastered = compute_mastered_count(cards_df)

    stats = StudyStatistics(
        total_cards=total,
        due_today=compute_due_count(cards_df, now),
        overdue=compute_overdue_count(cards_df, now),
        mastered=mastered,
        learning=total - mastered,
        average_ease_factor=compute_column_mean(cards_df, "ease_factor"),
        average_interval=compute_column_mean(cards_df, "interval"),
        success_rate=compute_success_rate(qualities),
        mastery_distribution=compute_mastery_distribution(cards_df),
    )
    logger.info(
        "Study statistics: %d cards, %d due, %d overdue, %d mastered",
        stats.total_cards, stats.due_today, stats.overdue, stats.mastered
    )
    return stats


def calculate_optimal_daily_reviews(
    cards: Iterable[ReviewCard],
    learner_level: LearnerLevel,
    now: Optional[datetime] = None
) -> int:
    """
    Suggested number of reviews for today given the learner's backlog.

    Starts from a per-level baseline (15/25/35):
    - Large backlog (> 1.5x baseline): up to 1.3x baseline
    - Small backlog (< 0.5x baseline): at least 0.7x baseline
    - Otherwise: baseline, capped at the number of due cards

    Raises:
        ValueError: If learner_level is unknown
    """
    if learner_level not in BASE_DAILY_REVIEWS:
        raise ValueError(
            f"Unknown learner level {learner_level!r}; "
            f"expected one of {sorted(BASE_DAILY_REVIEWS)}"
        )

    base = BASE_DAILY_REVIEWS[learner_level]
    due = len(get_due_cards(cards, now))

    if due > base * BACKLOG_HIGH_RATIO:
        return min(int(base * BACKLOG_HIGH_FACTOR), due)
    if due < base * BACKLOG_LOW_RATIO:
        return max(int(base * BACKLOG_LOW_FACTOR), due)
    return min(base, due)


def compute_daily_review_counts(events: Iterable[ReviewEvent]) -> pd.Series:
    """
    Reviews per UTC day across the whole event range (missing days are 0).
    """
    events_df = load_review_events_df(events)
    day_index = build_day_index(events_df)
    return compute_reviews_per_day(events_df, day_index)
