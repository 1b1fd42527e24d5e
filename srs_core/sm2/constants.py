"""
SM-2 Constants and Parameters

All fixed numbers used by the scheduling algorithm in one place.
Configurable values (interval bounds, starting ease) live in config.py.
"""

from enum import IntEnum


# ---- Recall Quality ----

class RecallQuality(IntEnum):
    """Learner's self-reported recall quality (0-5)."""
    BLACKOUT = 0             # Complete blackout, no knowledge
    INCORRECT = 1            # Incorrect response, partial knowledge
    INCORRECT_WITH_HINT = 2  # Incorrect, but remembered once shown
    DIFFICULT = 3            # Correct response with difficulty
    HESITANT = 4             # Correct response with slight hesitation
    PERFECT = 5              # Immediate, confident response


QUALITY_MIN = 0
QUALITY_MAX = 5
PASSING_QUALITY = 3  # quality >= 3 is a successful recall


# ---- Ease Factor ----

MIN_EASE_FACTOR = 1.3


# ---- Step Intervals ----
# The first two growth steps are keyed on the literal value of the
# current interval, not on a repetition counter.

FIRST_STEP_INTERVAL = 1
SECOND_STEP_INTERVAL = 6


# ---- Card Defaults ----

DEFAULT_DIFFICULTY = "medium"
RECENT_QUALITY_WINDOW = 10  # Number of quality scores kept on a card


# ---- Mastery Thresholds (success streak) ----

INTERMEDIATE_STREAK = 2
ADVANCED_STREAK = 5
MASTER_STREAK = 10


# ---- Review Priority ----
# Tie-break score for cards due at the same moment:
# mistake_count * MISTAKE_PRIORITY_WEIGHT
#   + (PRIORITY_EASE_REFERENCE - ease_factor) * EASE_PRIORITY_WEIGHT

MISTAKE_PRIORITY_WEIGHT = 0.1
EASE_PRIORITY_WEIGHT = 0.05
PRIORITY_EASE_REFERENCE = 3.0
