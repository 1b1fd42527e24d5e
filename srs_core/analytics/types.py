"""
Types for study statistics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


LearnerLevel = Literal["beginner", "intermediate", "advanced"]


@dataclass(frozen=True)
class StudyStatistics:
    """
    Snapshot of a learner's deck at one point in time.
    """
    total_cards: int
    due_today: int
    overdue: int
    mastered: int
    learning: int
    average_ease_factor: float
    average_interval: float
    success_rate: float
    mastery_distribution: dict[str, int]
