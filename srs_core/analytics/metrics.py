"""
Metric computations for study statistics.
"""

from __future__ import annotations

from datetime import datetime

import pandas as pd

from srs_core.analytics.constants import (
    MASTERED_MIN_EASE_FACTOR,
    MASTERED_MIN_INTERVAL,
    MASTERED_MIN_STREAK,
    OVERDUE_GRACE_DAYS,
)
from srs_core.sm2.constants import PASSING_QUALITY
from srs_core.sm2.mastery import MasteryLevel


def as_utc_timestamp(moment: datetime) -> pd.Timestamp:
    """
    Convert a datetime to a UTC pandas Timestamp (naive values are taken as UTC).
    """
    ts = pd.Timestamp(moment)
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


def compute_due_count(cards_df: pd.DataFrame, now: datetime) -> int:
    """
    Number of cards due at `now`.
    """
    if cards_df.empty:
        return 0
    return int((cards_df["next_review_date"] <= as_utc_timestamp(now)).sum())


def compute_overdue_count(cards_df: pd.DataFrame, now: datetime) -> int:
    """
    Number of cards that have been due for more than the grace period.
    """
    if cards_df.empty:
        return 0
    cutoff = as_utc_timestamp(now) - pd.Timedelta(days=OVERDUE_GRACE_DAYS)
    return int((cards_df["next_review_date"] < cutoff).sum())


def compute_mastered_count(cards_df: pd.DataFrame) -> int:
    """
    Cards with a high ease factor, a long interval and a solid success streak.
    """
    if cards_df.empty:
        return 0
    mastered = (
        (cards_df["ease_factor"] >= MASTERED_MIN_EASE_FACTOR)
        & (cards_df["interval"] >= MASTERED_MIN_INTERVAL)
        & (cards_df["success_streak"] >= MASTERED_MIN_STREAK)
    )
    return int(mastered.sum())


def compute_column_mean(cards_df: pd.DataFrame, column: str) -> float:
    """
    Mean of a numeric card column, 0.0 for an empty deck.
    """
    if cards_df.empty:
        return 0.0
    return float(cards_df[column].astype("float64").mean())


def compute_success_rate(qualities: pd.Series) -> float:
    """
    Share of recorded quality scores that were successful recalls.
    """
    if qualities.empty:
        return 0.0
    return float((qualities >= PASSING_QUALITY).mean())


def compute_mastery_distribution(cards_df: pd.DataFrame) -> dict[str, int]:
    """
    Card count per mastery level. Every level is present, zero if unused.
    """
    levels = [level.value for level in MasteryLevel]
    if cards_df.empty:
        return {level: 0 for level in levels}

    counts = cards_df["mastery_level"].value_counts()
    return {level: int(counts.get(level, 0)) for level in levels}


def build_day_index(events_df: pd.DataFrame) -> pd.DatetimeIndex:
    """
    Build a dense UTC day index spanning the event range.
    """
    if events_df.empty:
        return pd.DatetimeIndex([], tz="UTC")
    start = events_df["day_utc"].min()
    end = events_df["day_utc"].max()
    return pd.date_range(start=start, end=end, freq="D")


def compute_reviews_per_day(
    events_df: pd.DataFrame,
    day_index: pd.DatetimeIndex
) -> pd.Series:
    """
    Review count per UTC day, zero-filled for days without reviews.
    """
    if events_df.empty or len(day_index) == 0:
        return pd.Series(dtype="int64")

    daily = events_df.groupby("day_utc").size()
    return daily.reindex(day_index, fill_value=0).astype("int64")
