"""Tests for debris re-entry decisions."""

import pytest
from pydantic import ValidationError

from builders import INTERPRETED_AT, fixed_clock, make_context, make_debris
from skywatch.debris_interpreter import interpret_debris
from skywatch.errors import InterpretationError
from skywatch.models import ConfidenceLevel, EventType, RelevanceLevel


def _interpret(reentry_in_hours=1.0, **overrides):
    return interpret_debris(make_debris(reentry_in_hours, **overrides), make_context(), fixed_clock)


class TestDebrisScenarios:

    def test_tiny_fragment_is_suppressed_for_mass(self):
        decision = _interpret(mass_kg=5)

        assert decision.suppressed is True
        assert "Mass" in decision.suppression_reason
        assert decision.relevance.is_silent()

    def test_large_imminent_reentry_on_fresh_data(self):
        decision = _interpret(mass_kg=22_000, uncertainty_minutes=10, data_age_hours=1)

        assert decision.suppressed is False
        assert decision.confidence.level is ConfidenceLevel.HIGH
        assert decision.relevance.civilian is RelevanceLevel.MONITOR

    def test_wide_window_drops_civilian_relevance(self):
        decision = _interpret(mass_kg=22_000, uncertainty_minutes=200, data_age_hours=1)

        assert decision.confidence.level is ConfidenceLevel.LOW
        assert decision.relevance.civilian is RelevanceLevel.NONE
        assert decision.suppressed is False

    def test_controlled_reentry_is_always_suppressed(self):
        decision = _interpret(is_controlled_reentry=True)

        assert decision.suppressed is True
        assert decision.relevance.is_silent()

    def test_overdue_reentry_is_still_interpreted(self):
        decision = _interpret(-2.0)

        assert decision.suppressed is False
        assert decision.relevance.civilian is RelevanceLevel.MONITOR


class TestDebrisDecisionShape:

    def test_ids_and_timestamps(self):
        decision = _interpret()
        epoch_ms = int(INTERPRETED_AT.timestamp() * 1000)

        assert decision.event_id == "2024-001B"
        assert decision.event_type is EventType.DEBRIS
        assert decision.decision_id.startswith(f"debris-2024-001B-{epoch_ms}-")
        assert len(decision.decision_id.rsplit("-", 1)[1]) == 8
        assert decision.interpreted_at == INTERPRETED_AT

    def test_decision_ids_are_unique_within_one_clock_tick(self):
        assert _interpret().decision_id != _interpret().decision_id

    def test_source_snapshot_is_the_input(self):
        debris = make_debris()
        decision = interpret_debris(debris, make_context(), fixed_clock)

        assert decision.source_snapshot == debris
        assert decision.model_dump(mode="json")["source_snapshot"] == debris.model_dump(mode="json")

    def test_source_snapshot_cannot_be_changed(self):
        decision = _interpret()

        with pytest.raises(ValidationError):
            decision.source_snapshot.mass_kg = 1.0
        with pytest.raises(TypeError):
            decision.source_snapshot["mass_kg"] = 1.0
        assert decision.source_snapshot.mass_kg == 22_000.0

    def test_summaries(self):
        shown = _interpret()
        hidden = _interpret(mass_kg=5)

        assert shown.summary == "Debris CZ-5B R/B: Re-entry in ~1.0h"
        assert hidden.summary == "Debris CZ-5B R/B: No action required"
        assert "Mass: 22,000 kg" in shown.technical_summary
        assert " | " in shown.technical_summary

    def test_unnamed_debris_uses_id(self):
        assert _interpret(name=None).summary.startswith("Debris 2024-001B:")

    def test_explanation_always_present(self):
        for decision in (_interpret(), _interpret(mass_kg=5)):
            explanation = decision.explanation
            assert explanation.why_this_might_matter
            assert explanation.why_probably_not_dangerous
            assert explanation.what_would_change_assessment


class TestDebrisProperties:

    @pytest.mark.parametrize("mass", [1_000.0, 22_000.0, 5.0])
    @pytest.mark.parametrize("window", [10.0, 90.0, 500.0])
    @pytest.mark.parametrize("reentry", [-1.0, 1.0, 48.0, 400.0])
    def test_controlled_reentry_suppressed_regardless(self, mass, window, reentry):
        decision = _interpret(reentry, mass_kg=mass, uncertainty_minutes=window, is_controlled_reentry=True)
        assert decision.suppressed is True

    @pytest.mark.parametrize("window,age", [(10.0, 1.0), (200.0, 1.0), (10.0, 100.0), (500.0, 10.0)])
    def test_low_confidence_never_actionable(self, window, age):
        decision = _interpret(0.5, mass_kg=50_000, uncertainty_minutes=window, data_age_hours=age)
        if decision.confidence.level is ConfidenceLevel.LOW:
            assert RelevanceLevel.ACTIONABLE not in decision.relevance.levels()

    def test_repeat_calls_agree(self):
        first, second = _interpret(), _interpret()

        assert first.relevance == second.relevance
        assert first.confidence == second.confidence
        assert first.suppressed == second.suppressed
        assert first.explanation == second.explanation


class TestDebrisValidation:

    @pytest.mark.parametrize("field,value", [
        ("mass_kg", -1.0),
        ("mass_kg", float("nan")),
        ("uncertainty_minutes", -5.0),
        ("data_age_hours", float("inf")),
    ])
    def test_malformed_input_raises(self, field, value):
        with pytest.raises(InterpretationError, match="debris 2024-001B"):
            _interpret(**{field: value})

    def test_interpretation_error_is_value_error(self):
        with pytest.raises(ValueError):
            _interpret(mass_kg=-10)
