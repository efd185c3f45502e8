"""Tests for asteroid close-approach decisions."""

import pytest

from builders import fixed_clock, make_asteroid, make_context
from skywatch.asteroid_interpreter import interpret_asteroid
from skywatch.errors import InterpretationError
from skywatch.models import AlertLevel, ConfidenceLevel, EventType, RelevanceLevel
from skywatch.public_alert import BANNED_WORDS


def _interpret(**overrides):
    return interpret_asteroid(make_asteroid(**overrides), make_context(), fixed_clock)


class TestAsteroidScenarios:

    def test_tiny_close_rock_is_suppressed(self):
        decision = _interpret(
            diameter_min_km=0.001,
            diameter_max_km=0.001,
            miss_distance_km=10_000,
            potentially_hazardous_flag=False,
        )

        assert decision.relevance.research is RelevanceLevel.NONE
        assert decision.suppressed is True
        assert decision.suppression_reason == "No audience-relevant factors identified"
        assert decision.public_alert is None

    def test_hazardous_pass_inside_lunar_distance_is_monitor_not_actionable(self):
        decision = _interpret(potentially_hazardous_flag=True, miss_distance_km=100_000, impact_probability=0)

        assert decision.relevance.civilian is RelevanceLevel.MONITOR
        assert decision.suppressed is False

    def test_routine_distant_rock_is_suppressed(self):
        decision = _interpret(diameter_min_km=0.01, diameter_max_km=0.02, miss_distance_km=5_000_000)

        assert decision.suppressed is True
        assert decision.relevance.civilian is RelevanceLevel.NONE
        assert decision.summary == "433 Eros: No action required"

    def test_sentry_object_is_shown_to_research(self):
        decision = _interpret(sentry_flag=True, potentially_hazardous_flag=True, miss_distance_km=100_000)

        assert decision.suppressed is False
        assert decision.relevance.research is RelevanceLevel.MONITOR


class TestPublicAlertAttachment:

    def test_civilian_relevant_decision_carries_alert(self):
        decision = _interpret(potentially_hazardous_flag=True, miss_distance_km=100_000)
        alert = decision.public_alert

        assert alert is not None
        assert alert.alert_level is AlertLevel.SCIENTIFIC_INTEREST
        assert alert.language == "English"
        assert "433 Eros" in alert.message

    def test_alert_contains_no_alarming_words(self):
        decision = _interpret(potentially_hazardous_flag=True, sentry_flag=True, miss_distance_km=50_000)
        message = decision.public_alert.message.lower()

        for word in ("impact", "collision", "disaster", "dangerous", "threat"):
            assert word not in message
        assert set(BANNED_WORDS) >= {"impact", "collision", "panic"}

    def test_research_only_decision_has_no_alert(self):
        decision = _interpret(sentry_flag=True)

        assert decision.relevance.civilian is RelevanceLevel.NONE
        assert decision.public_alert is None

    def test_object_name_with_banned_substring_still_interprets(self):
        decision = _interpret(
            name="3102 Hitchcock",
            potentially_hazardous_flag=True,
            miss_distance_km=100_000,
        )
        assert "Hitchcock" in decision.public_alert.message


class TestAsteroidProperties:

    @pytest.mark.parametrize("probability,expected", [
        (None, RelevanceLevel.NONE),
        (0.0, RelevanceLevel.NONE),
        (0.01, RelevanceLevel.NONE),
        (0.0101, RelevanceLevel.ACTIONABLE),
        (0.9, RelevanceLevel.ACTIONABLE),
    ])
    def test_civilian_actionable_only_through_impact_probability(self, probability, expected):
        assert _interpret(impact_probability=probability).relevance.civilian is expected

    @pytest.mark.parametrize("age,margin", [(200.0, None), (None, 500_000.0), (300.0, 300_000.0)])
    @pytest.mark.parametrize("probability", [None, 0.5])
    def test_low_confidence_never_actionable(self, age, margin, probability):
        decision = _interpret(
            observation_age_hours=age,
            orbital_uncertainty=margin,
            impact_probability=probability,
            sentry_flag=True,
            potentially_hazardous_flag=True,
            miss_distance_km=50_000,
        )

        assert decision.confidence.level is ConfidenceLevel.LOW
        assert RelevanceLevel.ACTIONABLE not in decision.relevance.levels()
        assert decision.relevance.civilian is RelevanceLevel.NONE

    def test_silent_relevance_is_always_suppressed(self):
        for overrides in (
            {"diameter_min_km": 0.001, "diameter_max_km": 0.002},
            {"diameter_min_km": 0.01, "diameter_max_km": 0.02, "miss_distance_km": 9_000_000},
            {"diameter_min_km": 0.005, "diameter_max_km": 0.006, "observation_age_hours": 500},
        ):
            decision = _interpret(**overrides)
            assert decision.relevance.is_silent()
            assert decision.suppressed is True

    def test_repeat_calls_agree(self):
        first = _interpret(potentially_hazardous_flag=True, miss_distance_km=100_000)
        second = _interpret(potentially_hazardous_flag=True, miss_distance_km=100_000)

        assert first.relevance == second.relevance
        assert first.confidence == second.confidence
        assert first.explanation == second.explanation
        assert first.public_alert == second.public_alert


class TestAsteroidDecisionShape:

    def test_decision_id_prefix(self):
        decision = _interpret()

        assert decision.event_type is EventType.ASTEROID
        assert decision.decision_id.startswith("asteroid-2000433-")

    def test_technical_summary_lists_key_figures(self):
        summary = _interpret(impact_probability=0.0001).technical_summary

        assert "Diameter: 200-400 m" in summary
        assert "Impact Probability: 1.00e-04" in summary
        assert summary.count(" | ") == 8

    def test_explanation_uses_lunar_distances(self):
        decision = _interpret(miss_distance_km=768_800)
        assert "2.0x Lunar Distance" in decision.explanation.why_probably_not_dangerous


class TestAsteroidValidation:

    @pytest.mark.parametrize("overrides,fragment", [
        ({"diameter_min_km": 0.5, "diameter_max_km": 0.1}, "diameter_min_km exceeds"),
        ({"miss_distance_km": -1.0}, "miss_distance_km"),
        ({"velocity_km_s": float("nan")}, "velocity_km_s"),
        ({"impact_probability": 1.5}, "impact_probability"),
        ({"orbital_uncertainty": -3.0}, "orbital_uncertainty"),
    ])
    def test_malformed_input_raises(self, overrides, fragment):
        with pytest.raises(InterpretationError, match=fragment):
            _interpret(**overrides)
