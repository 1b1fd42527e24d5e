"""
Due queue selection.

A card is due when its next_review_date is at or before the reference time.
A naive reference time is read as UTC, like every stored card date.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from srs_core.sm2.card import ReviewCard, as_utc, utc_now
from srs_core.sm2.constants import (
    EASE_PRIORITY_WEIGHT,
    MISTAKE_PRIORITY_WEIGHT,
    PRIORITY_EASE_REFERENCE,
)


def is_card_due(card: ReviewCard, now: Optional[datetime] = None) -> bool:
    """True if the card's next review date is at or before `now`."""
    now = utc_now() if now is None else as_utc(now)
    return card.next_review_date <= now


def get_due_cards(cards: Iterable[ReviewCard], now: Optional[datetime] = None) -> list[ReviewCard]:
    """
    Filter cards down to the ones due for review.

    Keeps the input order; no urgency sorting is applied (see
    sort_cards_by_urgency). Returns an empty list when nothing is due.

    Args:
        cards: Cards to check
        now: Reference time, captured once for the whole call (defaults to now, UTC)

    Returns:
        Due cards in input order
    """
    now = utc_now() if now is None else as_utc(now)
    return [card for card in cards if is_card_due(card, now)]


def review_priority_bonus(card: ReviewCard) -> float:
    """Extra priority for cards the learner keeps failing or finds hard."""
    return (
        card.mistake_count * MISTAKE_PRIORITY_WEIGHT
        + (PRIORITY_EASE_REFERENCE - card.ease_factor) * EASE_PRIORITY_WEIGHT
    )


def sort_cards_by_urgency(cards: Iterable[ReviewCard], now: Optional[datetime] = None) -> list[ReviewCard]:
    """
    Due cards ordered by review priority.

    Most overdue first. Cards due at the same moment are ranked by
    review_priority_bonus: more mistakes and a lower ease factor come first.
    Python's sort is stable, so remaining ties keep their input order.
    """
    now = utc_now() if now is None else as_utc(now)
    due = get_due_cards(cards, now)
    return sorted(due, key=lambda card: (card.next_review_date, -review_priority_bonus(card)))
