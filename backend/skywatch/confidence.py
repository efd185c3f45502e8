"""Confidence model: how much the input data can be trusted.

Each event kind derives a three-level rating (low / medium / high) from data
freshness and measurement uncertainty:

    Asteroid:    start high; observation age > 48 h or error margin > 10,000 km
                 lowers to medium; age > 7 days or margin > 100,000 km lowers
                 to low.
    Conjunction: starts medium; a short lead time firms the prediction up to
                 high; a missing collision probability holds it at medium;
                 stale TLE context data forces low.
    Debris:      high for a tight window (<= 60 min) on fresh data; medium for
                 a 60-180 min window; low for a wider window or data older
                 than 72 h.

Downgrades only ever lower the level. Nothing downstream of these functions
may raise it; confidence caps relevance, it never lifts it.
"""

from __future__ import annotations

from skywatch import thresholds as t
from skywatch.models import (
    AsteroidInput,
    ConfidenceLevel,
    ConfidenceModel,
    ConjunctionInput,
    DebrisInput,
    OrbitStability,
    SystemContext,
)


def lower_confidence(current: ConfidenceLevel, candidate: ConfidenceLevel) -> ConfidenceLevel:
    """Return the lower of two levels."""
    return candidate if candidate.rank < current.rank else current


def _join_reasons(reasons: list[str], default: str) -> str:
    if not reasons:
        return default
    return ". ".join(reasons) + "."


# ---------------------------------------------------------------------------
# Asteroids
# ---------------------------------------------------------------------------


def asteroid_confidence(asteroid: AsteroidInput) -> ConfidenceModel:
    """Confidence from observation age and orbital error margin.

    Missing observation age reads as fresh (0 h). Missing orbital uncertainty
    reads as the 10,000 km default, which is not above the moderate threshold.
    """
    age = asteroid.observation_age_hours if asteroid.observation_age_hours is not None else 0.0
    margin = (
        asteroid.orbital_uncertainty
        if asteroid.orbital_uncertainty is not None
        else t.ASTEROID_DEFAULT_ERROR_MARGIN_KM
    )

    level = ConfidenceLevel.HIGH
    reasons: list[str] = []

    if age > t.ASTEROID_MAX_AGE_MEDIUM_CONFIDENCE_H:
        level = lower_confidence(level, ConfidenceLevel.LOW)
        reasons.append("Observation data is stale (> 7 days old)")
    elif age > t.ASTEROID_MAX_AGE_HIGH_CONFIDENCE_H:
        level = lower_confidence(level, ConfidenceLevel.MEDIUM)
        reasons.append("Observation data is more than 48 hours old")

    if margin > t.ASTEROID_HIGH_UNCERTAINTY_KM:
        level = lower_confidence(level, ConfidenceLevel.LOW)
        reasons.append("Orbital uncertainty is very high (> 100,000 km)")
    elif margin > t.ASTEROID_MODERATE_UNCERTAINTY_KM:
        level = lower_confidence(level, ConfidenceLevel.MEDIUM)
        reasons.append("Moderate orbital uncertainty (> 10,000 km)")

    return ConfidenceModel(
        level=level,
        reason=_join_reasons(reasons, "Data is recent and precise."),
        observation_age_hours=age,
        error_margin_km=margin,
        orbit_stability=OrbitStability.STABLE,
    )


# ---------------------------------------------------------------------------
# Conjunctions
# ---------------------------------------------------------------------------


def conjunction_confidence(conjunction: ConjunctionInput, context: SystemContext) -> ConfidenceModel:
    """Confidence from lead time, presence of a collision probability and context data age."""
    reasons: list[str] = []
    lead = conjunction.lead_time_hours

    if lead > t.CONJUNCTION_LONG_LEAD_TIME_H:
        level = ConfidenceLevel.MEDIUM
        reasons.append("Sufficient lead time for trajectory refinement")
    elif lead > t.CONJUNCTION_ROUTINE_LEAD_TIME_H:
        level = ConfidenceLevel.MEDIUM
        reasons.append("Moderate lead time - predictions may refine")
    elif lead > t.CONJUNCTION_EMERGENCY_LEAD_TIME_H:
        level = ConfidenceLevel.HIGH
        reasons.append("Limited lead time - predictions becoming stable")
    else:
        level = ConfidenceLevel.HIGH
        reasons.append("Short lead time - high confidence in prediction")

    pc = conjunction.probability_of_collision
    if pc is None:
        reasons.append("Collision probability not calculated")
        level = lower_confidence(level, ConfidenceLevel.MEDIUM)
    elif pc < t.CONJUNCTION_PC_NEGLIGIBLE:
        reasons.append("Collision probability is negligible")
    elif pc < t.CONJUNCTION_PC_ESCALATION:
        reasons.append("Collision probability is very low")
    else:
        reasons.append("Elevated collision probability detected")

    if context.data_age_hours > t.CONJUNCTION_STALE_DATA_H:
        reasons.append("TLE data may be stale")
        level = lower_confidence(level, ConfidenceLevel.LOW)

    return ConfidenceModel(
        level=level,
        reason=_join_reasons(reasons, "Standard assessment."),
        observation_age_hours=context.data_age_hours,
        error_margin_km=conjunction.miss_distance_km * t.CONJUNCTION_ERROR_MARGIN_FRACTION,
        orbit_stability=OrbitStability.STABLE,
    )


# ---------------------------------------------------------------------------
# Debris
# ---------------------------------------------------------------------------


def debris_confidence(debris: DebrisInput) -> ConfidenceModel:
    """Confidence from the re-entry uncertainty window and data age.

    Stale data overrides a tight window. Re-entry is inherently a decaying,
    chaotic trajectory, so orbit stability is always reported as chaotic.
    """
    window = debris.uncertainty_minutes

    if window > t.DEBRIS_LOW_CONFIDENCE_UNCERTAINTY_MIN:
        level = ConfidenceLevel.LOW
        reason = "High uncertainty window (> 180 min)"
    elif debris.data_age_hours > t.DEBRIS_STALE_DATA_H:
        level = ConfidenceLevel.LOW
        reason = "Data is stale (> 72h old)"
    elif window > t.DEBRIS_MODERATE_UNCERTAINTY_MIN:
        level = ConfidenceLevel.MEDIUM
        reason = "Moderate uncertainty window (1-3 hours)"
    else:
        level = ConfidenceLevel.HIGH
        reason = "Low uncertainty, fresh data"

    return ConfidenceModel(
        level=level,
        reason=_join_reasons([reason], ""),
        observation_age_hours=debris.data_age_hours,
        error_margin_km=0.0,
        orbit_stability=OrbitStability.CHAOTIC,
    )
