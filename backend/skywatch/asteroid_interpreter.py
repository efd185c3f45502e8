"""Asteroid close-approach interpretation.

Input -> confidence -> relevance -> suppression -> explanation -> decision.
A public alert is attached only when the decision is shown and civilians
have some relevance.
"""

from __future__ import annotations

import logging

from skywatch.clock import Clock, utc_now
from skywatch.confidence import asteroid_confidence
from skywatch.errors import InterpretationError, require_non_negative, require_probability
from skywatch.explanation import asteroid_explanation, asteroid_summary, asteroid_technical_summary
from skywatch.models import (
    AsteroidInput,
    DecisionObject,
    EventType,
    RelevanceLevel,
    RelevanceMatrix,
    SystemContext,
    new_decision_id,
)
from skywatch.public_alert import alert_data_from_asteroid, build_public_alert
from skywatch.relevance import asteroid_relevance
from skywatch.suppression import asteroid_suppression

logger = logging.getLogger(__name__)


def validate_asteroid(asteroid: AsteroidInput) -> None:
    kind, event_id = EventType.ASTEROID, asteroid.object_id
    for field in (
        "diameter_min_km",
        "diameter_max_km",
        "velocity_km_s",
        "miss_distance_km",
        "orbital_uncertainty",
        "observation_age_hours",
    ):
        require_non_negative(kind, event_id, field, getattr(asteroid, field))
    if asteroid.diameter_min_km > asteroid.diameter_max_km:
        raise InterpretationError(kind, event_id, "diameter_min_km exceeds diameter_max_km")
    require_probability(kind, event_id, "impact_probability", asteroid.impact_probability)


def interpret_asteroid(
    asteroid: AsteroidInput,
    context: SystemContext,
    clock: Clock = utc_now,
) -> DecisionObject:
    """Interpret one asteroid close approach.

    Raises :class:`InterpretationError` on malformed input. ``context`` is
    accepted for a uniform assembler signature; asteroid rules read nothing
    from it.
    """
    validate_asteroid(asteroid)

    confidence = asteroid_confidence(asteroid)
    relevance = asteroid_relevance(asteroid, confidence)
    suppression = asteroid_suppression(relevance)
    if suppression.suppressed:
        relevance = RelevanceMatrix.silent()

    public_alert = None
    if not suppression.suppressed and relevance.civilian is not RelevanceLevel.NONE:
        public_alert = build_public_alert(alert_data_from_asteroid(asteroid))

    interpreted_at = clock()
    decision = DecisionObject(
        decision_id=new_decision_id("asteroid", asteroid.object_id, interpreted_at),
        event_id=asteroid.object_id,
        event_type=EventType.ASTEROID,
        interpreted_at=interpreted_at,
        relevance=relevance,
        confidence=confidence,
        explanation=asteroid_explanation(asteroid, relevance, confidence),
        suppressed=suppression.suppressed,
        suppression_reason=suppression.reason,
        summary=asteroid_summary(asteroid, suppression),
        technical_summary=asteroid_technical_summary(asteroid, confidence),
        source_snapshot=asteroid,
        public_alert=public_alert,
    )
    logger.debug(
        "Asteroid %s: confidence=%s suppressed=%s relevance=%s",
        asteroid.object_id,
        confidence.level.value,
        decision.suppressed,
        relevance.model_dump(mode="json"),
    )
    return decision
