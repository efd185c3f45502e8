"""Tests for the per-kind confidence calculators."""

import pytest

from builders import make_asteroid, make_conjunction, make_context, make_debris
from skywatch.confidence import (
    asteroid_confidence,
    conjunction_confidence,
    debris_confidence,
    lower_confidence,
)
from skywatch.models import ConfidenceLevel, OrbitStability

HIGH, MEDIUM, LOW = ConfidenceLevel.HIGH, ConfidenceLevel.MEDIUM, ConfidenceLevel.LOW


class TestLowerConfidence:
    """Downgrades only ever lower the level."""

    @pytest.mark.parametrize("current,candidate,expected", [
        (HIGH, MEDIUM, MEDIUM),
        (HIGH, LOW, LOW),
        (MEDIUM, HIGH, MEDIUM),
        (LOW, HIGH, LOW),
        (LOW, MEDIUM, LOW),
    ])
    def test_lower_of_two(self, current, candidate, expected):
        assert lower_confidence(current, candidate) is expected


class TestAsteroidConfidence:

    def test_missing_age_and_uncertainty_read_as_fresh_and_precise(self):
        confidence = asteroid_confidence(make_asteroid())

        assert confidence.level is HIGH
        assert confidence.reason == "Data is recent and precise."
        assert confidence.observation_age_hours == 0.0
        assert confidence.error_margin_km == 10_000.0
        assert confidence.orbit_stability is OrbitStability.STABLE

    def test_default_margin_is_not_above_moderate_threshold(self):
        """Exactly 10,000 km stays high."""
        assert asteroid_confidence(make_asteroid(orbital_uncertainty=10_000.0)).level is HIGH

    def test_observations_older_than_48h_lower_to_medium(self):
        assert asteroid_confidence(make_asteroid(observation_age_hours=50)).level is MEDIUM

    def test_observations_older_than_7_days_lower_to_low(self):
        assert asteroid_confidence(make_asteroid(observation_age_hours=200)).level is LOW

    def test_moderate_uncertainty_lowers_to_medium(self):
        assert asteroid_confidence(make_asteroid(orbital_uncertainty=20_000)).level is MEDIUM

    def test_high_uncertainty_lowers_to_low(self):
        assert asteroid_confidence(make_asteroid(orbital_uncertainty=200_000)).level is LOW

    def test_reasons_accumulate_and_lowest_level_wins(self):
        confidence = asteroid_confidence(
            make_asteroid(observation_age_hours=50, orbital_uncertainty=200_000)
        )

        assert confidence.level is LOW
        assert "48 hours" in confidence.reason
        assert "100,000 km" in confidence.reason


class TestConjunctionConfidence:

    def test_lead_time_within_a_day_firms_up_to_high(self):
        conjunction = make_conjunction(lead_time_hours=10, probability_of_collision=1e-6)
        assert conjunction_confidence(conjunction, make_context()).level is HIGH

    def test_long_lead_time_stays_medium(self):
        conjunction = make_conjunction(lead_time_hours=100, probability_of_collision=1e-8)
        confidence = conjunction_confidence(conjunction, make_context())

        assert confidence.level is MEDIUM
        assert "negligible" in confidence.reason

    def test_missing_probability_holds_at_medium(self):
        conjunction = make_conjunction(lead_time_hours=2, probability_of_collision=None)
        confidence = conjunction_confidence(conjunction, make_context())

        assert confidence.level is MEDIUM
        assert "not calculated" in confidence.reason

    def test_stale_context_data_forces_low(self):
        conjunction = make_conjunction(lead_time_hours=2, probability_of_collision=1e-6)
        confidence = conjunction_confidence(conjunction, make_context(data_age_hours=30))

        assert confidence.level is LOW
        assert "stale" in confidence.reason

    def test_error_margin_is_tenth_of_miss_distance(self):
        conjunction = make_conjunction(miss_distance_km=25.0)
        confidence = conjunction_confidence(conjunction, make_context(data_age_hours=3))

        assert confidence.error_margin_km == pytest.approx(2.5)
        assert confidence.observation_age_hours == 3
        assert confidence.orbit_stability is OrbitStability.STABLE


class TestDebrisConfidence:

    def test_tight_window_on_fresh_data_is_high(self):
        confidence = debris_confidence(make_debris(uncertainty_minutes=10, data_age_hours=1))

        assert confidence.level is HIGH
        assert confidence.orbit_stability is OrbitStability.CHAOTIC
        assert confidence.error_margin_km == 0.0

    def test_one_to_three_hour_window_is_medium(self):
        assert debris_confidence(make_debris(uncertainty_minutes=90)).level is MEDIUM

    def test_wide_window_is_low(self):
        assert debris_confidence(make_debris(uncertainty_minutes=200)).level is LOW

    def test_stale_data_overrides_tight_window(self):
        assert debris_confidence(make_debris(uncertainty_minutes=10, data_age_hours=100)).level is LOW
