"""
Tests for the next-interval step function.
"""

import pytest

from srs_core.sm2 import InvalidQualityError, SM2Scheduler


class TestFailure:
    """Quality below 3 always resets to min_interval."""

    def test_failure_resets_to_min_interval(self, scheduler):
        assert scheduler.calculate_next_interval(10, 2, 2.5) == 1

    @pytest.mark.parametrize("quality", [0, 1, 2])
    @pytest.mark.parametrize("current_interval", [1, 6, 15, 30, 365])
    @pytest.mark.parametrize("ease_factor", [1.3, 2.5, 3.0])
    def test_failure_ignores_interval_and_ease(self, scheduler, quality, current_interval, ease_factor):
        assert scheduler.calculate_next_interval(current_interval, quality, ease_factor) == 1

    def test_failure_uses_custom_min_interval(self):
        scheduler = SM2Scheduler(min_interval=5, initial_interval=5)
        assert scheduler.calculate_next_interval(10, 0, 2.5) == 5


class TestSteps:
    """Literal interval values 1 and 6 select the first two steps."""

    @pytest.mark.parametrize("quality", [3, 4, 5])
    def test_interval_one_steps_to_six(self, scheduler, quality):
        assert scheduler.calculate_next_interval(1, quality, 2.5) == 6

    def test_interval_six_drops_to_initial_interval(self, scheduler):
        # Known quirk: 6 maps back to initial_interval instead of growing
        assert scheduler.calculate_next_interval(6, 4, 2.5) == 1

    def test_interval_six_uses_custom_initial_interval(self):
        scheduler = SM2Scheduler(initial_interval=2)
        assert scheduler.calculate_next_interval(6, 4, 2.5) == 2

    def test_steps_ignore_ease_factor(self, scheduler):
        assert scheduler.calculate_next_interval(1, 5, 1.3) == 6
        assert scheduler.calculate_next_interval(6, 5, 3.0) == 1

    def test_first_step_is_clamped_to_min_interval(self):
        scheduler = SM2Scheduler(min_interval=10, initial_interval=10)
        assert scheduler.calculate_next_interval(1, 4, 2.5) == 10

    def test_first_step_is_clamped_to_max_interval(self):
        scheduler = SM2Scheduler(max_interval=5)
        assert scheduler.calculate_next_interval(1, 4, 2.5) == 5


class TestGrowth:
    """Any other interval grows by the ease factor."""

    @pytest.mark.parametrize("quality", [3, 4, 5])
    def test_growth_by_ease_factor(self, scheduler, quality):
        assert scheduler.calculate_next_interval(10, quality, 2.5) == 25

    def test_large_interval_with_high_ease(self, scheduler):
        assert scheduler.calculate_next_interval(100, 5, 3.0) == 300

    def test_growth_is_capped_at_max_interval(self, scheduler):
        assert scheduler.calculate_next_interval(200, 5, 2.5) == 365
        assert scheduler.calculate_next_interval(300, 5, 3.0) == 365

    def test_growth_uses_custom_max_interval(self):
        scheduler = SM2Scheduler(max_interval=180)
        assert scheduler.calculate_next_interval(200, 5, 3.0) == 180

    def test_halves_round_up(self, scheduler):
        # 5 * 2.5 = 12.5
        assert scheduler.calculate_next_interval(5, 4, 2.5) == 13

    def test_fractions_round_to_nearest(self, scheduler):
        # 2 * 1.3 = 2.6, 4 * 1.3 = 5.2
        assert scheduler.calculate_next_interval(2, 3, 1.3) == 3
        assert scheduler.calculate_next_interval(4, 3, 1.3) == 5


class TestQualityValidation:

    @pytest.mark.parametrize("quality", [-1, 6, 10, 3.5, 4.0, "4", None, True])
    def test_invalid_quality_is_rejected(self, scheduler, quality):
        with pytest.raises(InvalidQualityError):
            scheduler.calculate_next_interval(10, quality, 2.5)

    def test_invalid_quality_is_a_value_error(self, scheduler):
        with pytest.raises(ValueError):
            scheduler.calculate_next_interval(10, 7, 2.5)
