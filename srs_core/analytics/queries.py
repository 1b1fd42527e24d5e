"""
Frame-building helpers for analytics.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from srs_core.analytics.constants import CARD_COLUMNS, EVENT_COLUMNS
from srs_core.sm2.card import ReviewCard
from srs_core.sm2.mastery import get_mastery_level
from srs_core.sm2.scheduler import ReviewEvent


def load_cards_df(cards: Iterable[ReviewCard]) -> pd.DataFrame:
    """
    One row per card with the fields the statistics need.
    """
    rows = [
        {
            "card_id": card.id,
            "interval": card.interval,
            "ease_factor": card.ease_factor,
            "next_review_date": card.next_review_date,
            "success_streak": card.success_streak,
            "mastery_level": get_mastery_level(card).value,
        }
        for card in cards
    ]
    if not rows:
        return pd.DataFrame(columns=CARD_COLUMNS)

    df = pd.DataFrame(rows)
    df["next_review_date"] = pd.to_datetime(df["next_review_date"], utc=True)
    return df


def load_recent_qualities(cards: Iterable[ReviewCard]) -> pd.Series:
    """
    All quality scores still kept on the cards, flattened into one series.
    """
    qualities = [q for card in cards for q in card.recent_qualities]
    return pd.Series(qualities, dtype="int64")


def load_review_events_df(events: Iterable[ReviewEvent]) -> pd.DataFrame:
    """
    Review events as a dataframe sorted by time, with a UTC day column.
    """
    rows = [
        {"card_id": e.card_id, "timestamp": e.timestamp, "quality": e.quality}
        for e in events
    ]
    if not rows:
        return pd.DataFrame(columns=EVENT_COLUMNS)

    df = pd.DataFrame(rows)
    df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True)
    df["day_utc"] = df["timestamp"].dt.floor("D")
    df = df.sort_values("timestamp").reset_index(drop=True)
    return df
