"""Read-only projections over decision batches: audience filter, stats, health."""

from __future__ import annotations

from collections.abc import Iterable

from skywatch.models import (
    Audience,
    DecisionObject,
    HealthAssessment,
    HealthStatus,
    InterpretationStats,
    RelevanceLevel,
)

# --- Health thresholds ---
HEALTHY_MIN_SUPPRESSION_RATE = 0.80
HEALTHY_MAX_CIVILIAN_RATE = 0.10
WARNING_MIN_SUPPRESSION_RATE = 0.50
WARNING_MAX_CIVILIAN_RATE = 0.25


# ISS operations are not a filterable audience
_AUDIENCE_FIELDS = {
    Audience.CIVILIAN: "civilian",
    Audience.OPERATOR: "satellite_operator",
    Audience.RESEARCHER: "research",
}


def filter_for_audience(decisions: Iterable[DecisionObject], audience: Audience | str) -> list[DecisionObject]:
    """Drop suppressed decisions and those irrelevant to ``audience``.

    ``Audience.ALL`` returns everything, suppressed decisions included. Plain
    strings are accepted; an unknown audience raises ValueError.
    """
    audience = Audience(audience)
    decisions = list(decisions)
    if audience is Audience.ALL:
        return decisions
    field = _AUDIENCE_FIELDS[audience]
    return [
        d for d in decisions
        if not d.suppressed and getattr(d.relevance, field) is not RelevanceLevel.NONE
    ]


def get_interpretation_stats(decisions: Iterable[DecisionObject]) -> InterpretationStats:
    decisions = list(decisions)
    return InterpretationStats(
        total=len(decisions),
        suppressed=sum(1 for d in decisions if d.suppressed),
        civilian_relevant=sum(1 for d in decisions if d.relevance.civilian is not RelevanceLevel.NONE),
        operator_relevant=sum(1 for d in decisions if d.relevance.satellite_operator is not RelevanceLevel.NONE),
        iss_relevant=sum(1 for d in decisions if d.relevance.iss is not RelevanceLevel.NONE),
    )


def assess_health(stats: InterpretationStats) -> HealthAssessment:
    """Healthy when >= 80% suppressed and <= 10% civilian-relevant; warning at
    >= 50% / <= 25%; failing otherwise. An empty batch is healthy."""
    if stats.total == 0:
        return HealthAssessment(status=HealthStatus.HEALTHY, suppression_rate=1.0, civilian_rate=0.0)

    suppression_rate = stats.suppressed / stats.total
    civilian_rate = stats.civilian_relevant / stats.total

    if suppression_rate >= HEALTHY_MIN_SUPPRESSION_RATE and civilian_rate <= HEALTHY_MAX_CIVILIAN_RATE:
        status = HealthStatus.HEALTHY
    elif suppression_rate >= WARNING_MIN_SUPPRESSION_RATE and civilian_rate <= WARNING_MAX_CIVILIAN_RATE:
        status = HealthStatus.WARNING
    else:
        status = HealthStatus.FAILING

    return HealthAssessment(status=status, suppression_rate=suppression_rate, civilian_rate=civilian_rate)
