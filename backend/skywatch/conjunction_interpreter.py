"""Satellite / ISS conjunction interpretation.

Conjunctions are never civilian-relevant. Routine avoidance with enough lead
time stays quiet; only the emergency window without maneuver capability
escalates to ``actionable``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from skywatch.clock import Clock, utc_now
from skywatch.confidence import conjunction_confidence
from skywatch.errors import require_non_negative, require_probability
from skywatch.explanation import (
    conjunction_explanation,
    conjunction_summary,
    conjunction_technical_summary,
)
from skywatch.filters import get_interpretation_stats
from skywatch.models import (
    ConjunctionInput,
    DecisionObject,
    EventType,
    InterpretationStats,
    RelevanceMatrix,
    SystemContext,
    new_decision_id,
)
from skywatch.relevance import conjunction_relevance
from skywatch.suppression import conjunction_suppression

logger = logging.getLogger(__name__)


def conjunction_event_id(conjunction: ConjunctionInput) -> str:
    return f"{conjunction.primary_object.norad_id}-{conjunction.secondary_object.norad_id}"


def validate_conjunction(conjunction: ConjunctionInput, context: SystemContext) -> None:
    kind, event_id = EventType.CONJUNCTION, conjunction_event_id(conjunction)
    require_non_negative(kind, event_id, "miss_distance_km", conjunction.miss_distance_km)
    require_non_negative(kind, event_id, "relative_velocity_km_s", conjunction.relative_velocity_km_s)
    require_non_negative(kind, event_id, "lead_time_hours", conjunction.lead_time_hours)
    require_non_negative(kind, event_id, "context.data_age_hours", context.data_age_hours)
    require_probability(kind, event_id, "probability_of_collision", conjunction.probability_of_collision)


def interpret_conjunction(
    conjunction: ConjunctionInput,
    context: SystemContext,
    clock: Clock = utc_now,
) -> DecisionObject:
    """Interpret one conjunction. Raises :class:`InterpretationError` on malformed input."""
    validate_conjunction(conjunction, context)
    event_id = conjunction_event_id(conjunction)

    confidence = conjunction_confidence(conjunction, context)
    relevance = conjunction_relevance(conjunction, confidence)
    suppression = conjunction_suppression(relevance)
    if suppression.suppressed:
        relevance = RelevanceMatrix.silent()

    interpreted_at = clock()
    decision = DecisionObject(
        decision_id=new_decision_id("conj", event_id, interpreted_at),
        event_id=event_id,
        event_type=EventType.CONJUNCTION,
        interpreted_at=interpreted_at,
        relevance=relevance,
        confidence=confidence,
        explanation=conjunction_explanation(conjunction),
        suppressed=suppression.suppressed,
        suppression_reason=suppression.reason,
        summary=conjunction_summary(conjunction, suppression, relevance),
        technical_summary=conjunction_technical_summary(conjunction, confidence),
        source_snapshot=conjunction,
    )
    logger.debug(
        "Conjunction %s: confidence=%s suppressed=%s iss=%s operator=%s",
        event_id,
        confidence.level.value,
        decision.suppressed,
        relevance.iss.value,
        relevance.satellite_operator.value,
    )
    return decision


@dataclass
class ConjunctionBatch:
    decisions: list[DecisionObject] = field(default_factory=list)
    stats: InterpretationStats | None = None


def interpret_conjunctions(
    conjunctions: list[ConjunctionInput],
    context: SystemContext,
    clock: Clock = utc_now,
) -> ConjunctionBatch:
    """Interpret a list of conjunctions and count ISS / operator relevance.

    Unlike :func:`skywatch.interpreter.interpret`, a malformed conjunction
    raises out of this helper.
    """
    decisions = [interpret_conjunction(c, context, clock) for c in conjunctions]
    return ConjunctionBatch(decisions=decisions, stats=get_interpretation_stats(decisions))
