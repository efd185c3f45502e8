"""Relevance calculator: who should care, and how much.

Every audience starts at ``none``; only an explicit rule lifts it, and no rule
lifts an audience past its own ceiling:

    Asteroid:    civilians reach ``actionable`` only through a reported impact
                 probability above 1%. Low confidence caps research at ``low``
                 and leaves every other audience at ``none``.
    Conjunction: civilians are never relevant. ISS and satellite operators
                 escalate by miss distance, emergency lead time and collision
                 probability, and only on non-low confidence.
    Debris:      civilians top out at ``monitor`` (no ground-hazard data is
                 ever supplied). A final pass caps ``actionable`` at
                 ``monitor`` on low confidence.
"""

from __future__ import annotations

from skywatch import thresholds as t
from skywatch.models import (
    AsteroidInput,
    ConfidenceLevel,
    ConfidenceModel,
    ConjunctionInput,
    DebrisInput,
    PrimaryObjectType,
    RelevanceLevel,
    RelevanceMatrix,
)

NONE = RelevanceLevel.NONE
LOW = RelevanceLevel.LOW
MONITOR = RelevanceLevel.MONITOR
ACTIONABLE = RelevanceLevel.ACTIONABLE


def cap_relevance(level: RelevanceLevel, ceiling: RelevanceLevel) -> RelevanceLevel:
    """Lower ``level`` to ``ceiling`` if it sits above it. Never raises a level."""
    return ceiling if level.rank > ceiling.rank else level


def mean_diameter_km(asteroid: AsteroidInput) -> float:
    return (asteroid.diameter_min_km + asteroid.diameter_max_km) / 2


def has_high_collision_probability(conjunction: ConjunctionInput) -> bool:
    pc = conjunction.probability_of_collision
    return pc is not None and pc > t.CONJUNCTION_PC_ESCALATION


def is_large_imminent_reentry(debris: DebrisInput, hours_until_reentry: float) -> bool:
    return (
        debris.mass_kg >= t.DEBRIS_LARGE_OBJECT_MIN_KG
        and hours_until_reentry < t.DEBRIS_IMMINENT_REENTRY_H
    )


# ---------------------------------------------------------------------------
# Asteroids
# ---------------------------------------------------------------------------


def asteroid_relevance(asteroid: AsteroidInput, confidence: ConfidenceModel) -> RelevanceMatrix:
    diameter = mean_diameter_km(asteroid)
    large = diameter >= t.ASTEROID_MIN_DIAMETER_CIVILIAN_KM

    research = NONE
    if diameter >= t.ASTEROID_MIN_DIAMETER_TRACKING_KM:
        # Small rocks on distant passes stay silent unless flagged
        if (
            asteroid.miss_distance_km < t.ASTEROID_ROUTINE_PASS_KM
            or large
            or asteroid.sentry_flag
            or asteroid.potentially_hazardous_flag
        ):
            research = LOW
        if asteroid.sentry_flag or (asteroid.potentially_hazardous_flag and large):
            research = MONITOR

    if confidence.level is ConfidenceLevel.LOW:
        # Researchers may still want it to improve the orbit; nobody else does
        return RelevanceMatrix(research=cap_relevance(research, LOW))

    civilian = NONE
    if asteroid.potentially_hazardous_flag and asteroid.miss_distance_km < t.LUNAR_DISTANCE_KM:
        civilian = MONITOR
    if (
        asteroid.impact_probability is not None
        and asteroid.impact_probability > t.ASTEROID_CIVILIAN_ACTIONABLE_PROBABILITY
    ):
        civilian = ACTIONABLE

    return RelevanceMatrix(civilian=civilian, research=research)


# ---------------------------------------------------------------------------
# Conjunctions
# ---------------------------------------------------------------------------


def conjunction_relevance(conjunction: ConjunctionInput, confidence: ConfidenceModel) -> RelevanceMatrix:
    primary_type = conjunction.primary_object.object_type
    close = conjunction.miss_distance_km < t.CONJUNCTION_MONITOR_DISTANCE_KM
    emergency = conjunction.lead_time_hours < t.CONJUNCTION_EMERGENCY_LEAD_TIME_H
    can_maneuver = conjunction.maneuver_possible
    high_pc = has_high_collision_probability(conjunction)
    trusted = confidence.level is not ConfidenceLevel.LOW

    iss = NONE
    if primary_type is PrimaryObjectType.ISS and close and trusted:
        if emergency and not can_maneuver:
            iss = ACTIONABLE
        elif emergency or high_pc:
            iss = MONITOR
        else:
            # Routine avoidance is possible
            iss = LOW

    operator = NONE
    if primary_type is PrimaryObjectType.SATELLITE and close and trusted:
        if emergency and high_pc and not can_maneuver:
            operator = ACTIONABLE
        elif emergency or high_pc:
            operator = MONITOR
        elif conjunction.miss_distance_km < t.CONJUNCTION_OPERATOR_CLOSE_KM:
            operator = LOW

    research = NONE
    if close or high_pc:
        research = LOW
    if high_pc and conjunction.probability_of_collision > t.CONJUNCTION_PC_RESEARCH_MONITOR:
        research = MONITOR

    return RelevanceMatrix(civilian=NONE, satellite_operator=operator, iss=iss, research=research)


# ---------------------------------------------------------------------------
# Debris
# ---------------------------------------------------------------------------


def debris_relevance(
    debris: DebrisInput,
    confidence: ConfidenceModel,
    hours_until_reentry: float,
) -> RelevanceMatrix:
    large_imminent = is_large_imminent_reentry(debris, hours_until_reentry)
    trusted = confidence.level is not ConfidenceLevel.LOW

    civilian = MONITOR if large_imminent and trusted else NONE
    operator = MONITOR if large_imminent else LOW
    research = ACTIONABLE if large_imminent and trusted else MONITOR

    matrix = RelevanceMatrix(civilian=civilian, satellite_operator=operator, research=research)
    if not trusted:
        matrix = RelevanceMatrix(
            civilian=cap_relevance(matrix.civilian, MONITOR),
            satellite_operator=cap_relevance(matrix.satellite_operator, MONITOR),
            iss=cap_relevance(matrix.iss, MONITOR),
            research=cap_relevance(matrix.research, MONITOR),
        )
    return matrix
