"""Suppression gate: should anyone be shown this event at all?

Most space events are noise, and a suppressed event does not exist for any UI,
notification or alert surface. The gate is audience-agnostic.

Asteroids and conjunctions are suppressed after relevance is computed, iff no
audience has any relevance. Asteroids have no hard pre-checks of their own:
small, distant and stale objects are already silenced by the relevance rules.

Debris runs hard checks *before* relevance, first match wins:
    1. mass < 10 kg                         below tracking threshold
    2. re-entry more than 7 days away       far future
    3. controlled re-entry                  routine operation, for everyone
    4. data > 72 h old AND window > 180 min stale and uncertain
"""

from __future__ import annotations

from dataclasses import dataclass

from skywatch import thresholds as t
from skywatch.models import DebrisInput, RelevanceMatrix


@dataclass(frozen=True)
class SuppressionResult:
    suppressed: bool
    reason: str | None = None


NOT_SUPPRESSED = SuppressionResult(suppressed=False)


def asteroid_suppression(relevance: RelevanceMatrix) -> SuppressionResult:
    if relevance.is_silent():
        return SuppressionResult(True, "No audience-relevant factors identified")
    return NOT_SUPPRESSED


def conjunction_suppression(relevance: RelevanceMatrix) -> SuppressionResult:
    if relevance.is_silent():
        return SuppressionResult(True, "Conjunction does not meet relevance thresholds")
    return NOT_SUPPRESSED


def debris_suppression(debris: DebrisInput, hours_until_reentry: float) -> SuppressionResult:
    if debris.mass_kg < t.DEBRIS_ALWAYS_SUPPRESS_BELOW_KG:
        return SuppressionResult(True, "Mass below tracking threshold (<10kg)")

    if hours_until_reentry / 24.0 > t.DEBRIS_FAR_OUT_SUPPRESSION_DAYS:
        return SuppressionResult(True, "Re-entry is more than 7 days away (far future)")

    if debris.is_controlled_reentry:
        return SuppressionResult(True, "Controlled re-entry (routine operation)")

    if (
        debris.data_age_hours > t.DEBRIS_STALE_DATA_H
        and debris.uncertainty_minutes > t.DEBRIS_LOW_CONFIDENCE_UNCERTAINTY_MIN
    ):
        return SuppressionResult(True, "Data too stale and uncertain")

    return NOT_SUPPRESSED
