"""Role-specific views of a decision.

The same decision reads differently per role: civilians get a reassuring
headline and never see technical detail, operators get the technical line
with confidence and action flags, researchers get everything. Views only
project a decision; they never escalate relevance or strip fields.
"""

from __future__ import annotations

from collections.abc import Iterable

from skywatch.models import (
    Audience,
    CivilianTone,
    CivilianView,
    ConfidenceLevel,
    DecisionObject,
    EventType,
    OperatorConfidence,
    OperatorView,
    RelevanceLevel,
    ResearcherView,
    RoleBasedOutput,
)

_CIVILIAN_TONES = {
    RelevanceLevel.LOW: CivilianTone.INFORMATIONAL,
    RelevanceLevel.MONITOR: CivilianTone.NOTABLE,
    RelevanceLevel.ACTIONABLE: CivilianTone.MONITORING,
}

_CONFIDENCE_NOTES = {
    ConfidenceLevel.HIGH: "This assessment is based on high-quality tracking data.",
    ConfidenceLevel.MEDIUM: "This assessment is based on good tracking data.",
    ConfidenceLevel.LOW: "Additional observations may refine this assessment.",
}


def _civilian_headline(decision: DecisionObject) -> str:
    level = decision.relevance.civilian
    if decision.event_type is EventType.ASTEROID:
        if level is RelevanceLevel.LOW:
            return "Asteroid Flyby"
        if level is RelevanceLevel.MONITOR:
            return "Notable Asteroid Pass"
        return "Asteroid Under Close Observation"
    if decision.event_type is EventType.CONJUNCTION:
        return "Satellite Tracking Event"
    return "Re-entry Being Tracked"


def format_for_civilian(decision: DecisionObject) -> CivilianView | None:
    """None unless the decision is shown and civilians have some relevance."""
    if decision.suppressed or decision.relevance.civilian is RelevanceLevel.NONE:
        return None

    explanation = decision.explanation
    return CivilianView(
        event_id=decision.event_id,
        headline=_civilian_headline(decision),
        summary=explanation.why_probably_not_dangerous,
        detail=explanation.why_this_might_matter,
        confidence_note=_CONFIDENCE_NOTES[decision.confidence.level],
        tone=_CIVILIAN_TONES[decision.relevance.civilian],
        primary_message=explanation.why_probably_not_dangerous,
        public_alert=decision.public_alert,
    )


def format_for_operator(decision: DecisionObject) -> OperatorView | None:
    if decision.suppressed:
        return None

    relevance = decision.relevance
    operational = (relevance.satellite_operator, relevance.iss)
    confidence = decision.confidence
    return OperatorView(
        event_id=decision.event_id,
        summary=decision.summary,
        technical_details=decision.technical_summary or "N/A",
        confidence=OperatorConfidence(
            level=confidence.level,
            reason=confidence.reason,
            error_margin_km=confidence.error_margin_km,
            observation_age_hours=confidence.observation_age_hours,
        ),
        action_required=RelevanceLevel.ACTIONABLE in operational,
        monitoring_required=RelevanceLevel.MONITOR in operational,
        assessment_factors=decision.explanation.what_would_change_assessment,
    )


def format_for_researcher(decision: DecisionObject) -> ResearcherView | None:
    if decision.suppressed:
        return None

    return ResearcherView(
        event_id=decision.event_id,
        event_type=decision.event_type,
        interpreted_at=decision.interpreted_at,
        relevance_matrix=decision.relevance,
        confidence_model=decision.confidence,
        explanation=decision.explanation,
        suppressed=decision.suppressed,
        suppression_reason=decision.suppression_reason,
        technical_summary=decision.technical_summary,
        source_snapshot=decision.source_snapshot,
    )


def generate_role_based_outputs(decision: DecisionObject) -> RoleBasedOutput:
    return RoleBasedOutput(
        civilian=format_for_civilian(decision),
        operator=format_for_operator(decision),
        researcher=format_for_researcher(decision),
    )


_FORMATTERS = {
    Audience.CIVILIAN: format_for_civilian,
    Audience.OPERATOR: format_for_operator,
    Audience.RESEARCHER: format_for_researcher,
}


def format_decisions_for_audience(
    decisions: Iterable[DecisionObject],
    audience: Audience | str,
) -> list[CivilianView | OperatorView | ResearcherView]:
    """Format each decision for one role, skipping those the role does not see."""
    audience = Audience(audience)
    if audience is Audience.ALL:
        raise ValueError("format_decisions_for_audience needs a single audience, not 'all'")
    formatter = _FORMATTERS[audience]
    views = []
    for decision in decisions:
        view = formatter(decision)
        if view is not None:
            views.append(view)
    return views
