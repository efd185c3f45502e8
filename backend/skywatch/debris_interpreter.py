"""Debris re-entry interpretation.

Hard suppression checks run before relevance. Time to re-entry is measured
from ``context.current_time``, so a re-entry already in the past reads as
negative hours and counts as imminent.
"""

from __future__ import annotations

import logging

from skywatch.clock import Clock, hours_between, utc_now
from skywatch.confidence import debris_confidence
from skywatch.errors import require_non_negative
from skywatch.explanation import debris_explanation, debris_summary, debris_technical_summary
from skywatch.models import (
    DebrisInput,
    DecisionObject,
    EventType,
    RelevanceMatrix,
    SystemContext,
    new_decision_id,
)
from skywatch.relevance import debris_relevance
from skywatch.suppression import debris_suppression

logger = logging.getLogger(__name__)


def validate_debris(debris: DebrisInput) -> None:
    kind = EventType.DEBRIS
    require_non_negative(kind, debris.id, "mass_kg", debris.mass_kg)
    require_non_negative(kind, debris.id, "uncertainty_minutes", debris.uncertainty_minutes)
    require_non_negative(kind, debris.id, "data_age_hours", debris.data_age_hours)
    require_non_negative(kind, debris.id, "inclination_deg", debris.inclination_deg)


def interpret_debris(
    debris: DebrisInput,
    context: SystemContext,
    clock: Clock = utc_now,
) -> DecisionObject:
    """Interpret one debris re-entry. Raises :class:`InterpretationError` on malformed input."""
    validate_debris(debris)
    hours_until_reentry = hours_between(context.current_time, debris.predicted_reentry_time)

    confidence = debris_confidence(debris)
    suppression = debris_suppression(debris, hours_until_reentry)
    if suppression.suppressed:
        relevance = RelevanceMatrix.silent()
    else:
        relevance = debris_relevance(debris, confidence, hours_until_reentry)

    interpreted_at = clock()
    decision = DecisionObject(
        decision_id=new_decision_id("debris", debris.id, interpreted_at),
        event_id=debris.id,
        event_type=EventType.DEBRIS,
        interpreted_at=interpreted_at,
        relevance=relevance,
        confidence=confidence,
        explanation=debris_explanation(debris, relevance, confidence, suppression, hours_until_reentry),
        suppressed=suppression.suppressed,
        suppression_reason=suppression.reason,
        summary=debris_summary(debris, suppression, hours_until_reentry),
        technical_summary=debris_technical_summary(debris, confidence, hours_until_reentry),
        source_snapshot=debris,
    )
    logger.debug(
        "Debris %s: %.1fh to re-entry, confidence=%s suppressed=%s",
        debris.id,
        hours_until_reentry,
        confidence.level.value,
        decision.suppressed,
    )
    return decision
