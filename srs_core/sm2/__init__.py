"""
SM-2 - SuperMemo-2 Spaced Repetition Scheduler

Main API for scheduling vocabulary review cards.

This module implements an SM-2 variant with:
- Short first steps (1 day, then 6 days), then growth by ease factor
- Ease factor updates floored at 1.3
- Immutable card state: every review returns a new card
- Streak-based mastery tiers for progress reporting

Quick start:
    from srs_core import sm2

    scheduler = sm2.SM2Scheduler()
    card = scheduler.create_card("card-1", "phrase-42")

    # Process a review (algorithm only, no storage calls)
    card, event = scheduler.process_review(card, sm2.RecallQuality.HESITANT)

    # Get due cards
    due_cards = sm2.get_due_cards(cards)
"""

# Core scheduler API
from srs_core.sm2.scheduler import ReviewEvent, SM2Scheduler

# Card model
from srs_core.sm2.card import ReviewCard, create_card

# Algorithm pieces (for advanced usage)
from srs_core.sm2.intervals import calculate_next_interval
from srs_core.sm2.ease import update_ease_factor

# Due queue
from srs_core.sm2.queue import get_due_cards, is_card_due, sort_cards_by_urgency

# Mastery and display helpers
from srs_core.sm2.mastery import (
    MasteryLevel,
    get_difficulty_description,
    get_mastery_level,
    get_next_review_description
)

# Configuration and errors
from srs_core.sm2.config import SchedulerConfig, load_config
from srs_core.sm2.errors import ConfigurationError, InvalidQualityError, SchedulerError

# Constants
from srs_core.sm2.constants import (
    RecallQuality,
    MIN_EASE_FACTOR,
    PASSING_QUALITY
)


__all__ = [
    # Core algorithm
    "SM2Scheduler",
    "ReviewEvent",
    "calculate_next_interval",
    "update_ease_factor",

    # Card model
    "ReviewCard",
    "create_card",

    # Due queue
    "is_card_due",
    "get_due_cards",
    "sort_cards_by_urgency",

    # Mastery
    "MasteryLevel",
    "get_mastery_level",
    "get_difficulty_description",
    "get_next_review_description",

    # Configuration and errors
    "SchedulerConfig",
    "load_config",
    "SchedulerError",
    "ConfigurationError",
    "InvalidQualityError",

    # Enums and parameters
    "RecallQuality",
    "MIN_EASE_FACTOR",
    "PASSING_QUALITY",
]
