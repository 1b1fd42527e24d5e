"""
Analytics package exports.
"""

from srs_core.analytics.service import (
    build_study_statistics,
    calculate_optimal_daily_reviews,
    compute_daily_review_counts,
)
from srs_core.analytics.types import LearnerLevel, StudyStatistics

__all__ = [
    "build_study_statistics",
    "calculate_optimal_daily_reviews",
    "compute_daily_review_counts",
    "LearnerLevel",
    "StudyStatistics",
]
