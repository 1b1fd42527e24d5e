"""
Mastery classification and display helpers.

These helpers feed progress screens. They accept missing values and fall
back to safe defaults instead of raising.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

from srs_core.sm2.card import ReviewCard
from srs_core.sm2.constants import ADVANCED_STREAK, INTERMEDIATE_STREAK, MASTER_STREAK


class MasteryLevel(str, Enum):
    """Coarse, streak-derived progress tier."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    MASTER = "Master"


def get_mastery_level(card: Optional[ReviewCard]) -> MasteryLevel:
    """
    Mastery tier from the card's success streak.

    Thresholds:
        streak < 2       -> Beginner
        2 <= streak < 5  -> Intermediate
        5 <= streak < 10 -> Advanced
        streak >= 10     -> Master

    A missing card is a Beginner.
    """
    if card is None:
        return MasteryLevel.BEGINNER

    streak = card.success_streak
    if streak >= MASTER_STREAK:
        return MasteryLevel.MASTER
    if streak >= ADVANCED_STREAK:
        return MasteryLevel.ADVANCED
    if streak >= INTERMEDIATE_STREAK:
        return MasteryLevel.INTERMEDIATE
    return MasteryLevel.BEGINNER


def get_difficulty_description(difficulty: Optional[str]) -> str:
    """Difficulty tag as shown to the learner ("Easy" when missing)."""
    if difficulty is None:
        return "Easy"
    return difficulty


def get_next_review_description(review_date: Optional[Union[datetime, date]]) -> str:
    """
    Short date (M/D/YYYY) of the next review, or "Soon" when unknown.
    """
    if review_date is None:
        return "Soon"
    return f"{review_date.month}/{review_date.day}/{review_date.year}"
