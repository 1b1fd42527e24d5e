"""
Tests for study statistics and daily review planning.
"""

from dataclasses import replace
from datetime import timedelta

import pytest

from srs_core.analytics import (
    StudyStatistics,
    build_study_statistics,
    calculate_optimal_daily_reviews,
    compute_daily_review_counts,
)
from srs_core.sm2 import create_card
from tests.conftest import NOW


@pytest.fixture
def deck():
    base = create_card("base", "phrase", now=NOW)
    return [
        # Overdue, mastered, Intermediate
        replace(base, id="c1", next_review_date=NOW - timedelta(days=2), ease_factor=2.5,
                interval=30, success_streak=4, recent_qualities=(4, 5, 3)),
        # Due right now, struggling, Beginner
        replace(base, id="c2", next_review_date=NOW, ease_factor=1.3,
                interval=1, success_streak=0, recent_qualities=(1, 2)),
        # Not due, mastered, Master
        replace(base, id="c3", next_review_date=NOW + timedelta(days=5), ease_factor=2.6,
                interval=25, success_streak=10, recent_qualities=(5, 5, 5, 5, 4)),
    ]


def _due_cards(count):
    base = create_card("base", "phrase", now=NOW - timedelta(hours=1))
    return [replace(base, id=f"c{i}") for i in range(count)]


class TestBuildStudyStatistics:

    def test_empty_deck(self):
        stats = build_study_statistics([], NOW)
        assert stats == StudyStatistics(
            total_cards=0,
            due_today=0,
            overdue=0,
            mastered=0,
            learning=0,
            average_ease_factor=0.0,
            average_interval=0.0,
            success_rate=0.0,
            mastery_distribution={"Beginner": 0, "Intermediate": 0, "Advanced": 0, "Master": 0},
        )

    def test_counts(self, deck):
        stats = build_study_statistics(deck, NOW)
        assert stats.total_cards == 3
        assert stats.due_today == 2
        assert stats.overdue == 1
        assert stats.mastered == 2
        assert stats.learning == 1

    def test_averages(self, deck):
        stats = build_study_statistics(deck, NOW)
        assert stats.average_ease_factor == pytest.approx(6.4 / 3)
        assert stats.average_interval == pytest.approx(56 / 3)

    def test_success_rate(self, deck):
        # 8 of the 10 kept scores are >= 3
        assert build_study_statistics(deck, NOW).success_rate == pytest.approx(0.8)

    def test_mastery_distribution(self, deck):
        assert build_study_statistics(deck, NOW).mastery_distribution == {
            "Beginner": 1,
            "Intermediate": 1,
            "Advanced": 0,
            "Master": 1,
        }

    def test_cards_reviewed_by_scheduler(self, scheduler):
        card = create_card("c", "p", now=NOW)
        card = scheduler.update_card(card, 5, now=NOW)
        card = scheduler.update_card(card, 1, now=NOW)

        stats = build_study_statistics([card], NOW)
        assert stats.due_today == 0
        assert stats.success_rate == pytest.approx(0.5)


class TestOptimalDailyReviews:

    def test_large_backlog_is_capped(self):
        # beginner baseline 15, 30 due > 22.5 -> int(15 * 1.3)
        assert calculate_optimal_daily_reviews(_due_cards(30), "beginner", NOW) == 19

    def test_small_backlog_is_raised(self):
        # 2 due < 7.5 -> int(15 * 0.7)
        assert calculate_optimal_daily_reviews(_due_cards(2), "beginner", NOW) == 10

    def test_normal_backlog(self):
        assert calculate_optimal_daily_reviews(_due_cards(12), "beginner", NOW) == 12
        assert calculate_optimal_daily_reviews(_due_cards(20), "beginner", NOW) == 15

    def test_level_changes_baseline(self):
        assert calculate_optimal_daily_reviews(_due_cards(30), "intermediate", NOW) == 25
        assert calculate_optimal_daily_reviews(_due_cards(30), "advanced", NOW) == 30

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            calculate_optimal_daily_reviews([], "expert", NOW)

    def test_naive_now_matches_aware_now(self):
        cards = _due_cards(30)
        naive = NOW.replace(tzinfo=None)
        assert calculate_optimal_daily_reviews(cards, "beginner", naive) == \
            calculate_optimal_daily_reviews(cards, "beginner", NOW)


class TestDailyReviewCounts:

    def test_no_events(self):
        assert compute_daily_review_counts([]).empty

    def test_counts_are_zero_filled(self, scheduler, base_card):
        events = []
        card = base_card
        for when in [NOW, NOW + timedelta(hours=2), NOW + timedelta(days=2)]:
            card, event = scheduler.process_review(card, 4, now=when)
            events.append(event)

        counts = compute_daily_review_counts(events)
        assert counts.tolist() == [2, 0, 1]
        assert counts.index[0].day == NOW.day
