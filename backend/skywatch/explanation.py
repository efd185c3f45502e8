"""Explanation generator: plain-language text for already-made decisions.

Only describes results computed upstream (confidence, relevance, suppression);
it never classifies anything itself. Distances are expressed in lunar
distances, sizes and masses in human-readable buckets. The goal of the
wording is to neutralise fear, not amplify it.
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
    RiskExplanation,
)
from skywatch.suppression import SuppressionResult

# ---------------------------------------------------------------------------
# Wording helpers
# ---------------------------------------------------------------------------


def lunar_distances(distance_km: float) -> float:
    return distance_km / t.LUNAR_DISTANCE_KM


def asteroid_size_category(diameter_m: float) -> str:
    if diameter_m < 10:
        return "small"
    if diameter_m < 50:
        return "building"
    if diameter_m < 150:
        return "stadium"
    if diameter_m < 500:
        return "significant"
    return "large"


_ASTEROID_SIZE_PHRASES = {
    "small": "a small object that would burn up entirely in the atmosphere",
    "building": "roughly the size of a large building",
    "stadium": "roughly stadium-sized",
    "significant": "a significant object",
    "large": "a large asteroid",
}


def describe_asteroid_size(diameter_m: float) -> str:
    return _ASTEROID_SIZE_PHRASES[asteroid_size_category(diameter_m)]


def describe_debris_mass(mass_kg: float) -> str:
    if mass_kg < t.DEBRIS_LIKELY_BURNUP_MAX_KG:
        return "small object expected to burn up"
    if mass_kg < t.DEBRIS_LARGE_OBJECT_MIN_KG:
        return "medium-sized object"
    return "large object"


def format_lead_time(hours: float) -> str:
    hours = max(hours, 0.0)
    if hours < 1:
        return f"{round(hours * 60)} minutes"
    if hours < 24:
        return f"{hours:.1f} hours"
    return f"{hours / 24:.1f} days"


def debris_label(debris: DebrisInput) -> str:
    return debris.name or debris.id


# ---------------------------------------------------------------------------
# Asteroids
# ---------------------------------------------------------------------------


def _asteroid_pass_phrase(asteroid: AsteroidInput) -> str:
    if asteroid.miss_distance_km > t.ASTEROID_DISTANT_PASS_KM:
        return "Extremely distant pass."
    return f"Passes at {lunar_distances(asteroid.miss_distance_km):.1f}x Lunar Distance."


def asteroid_explanation(
    asteroid: AsteroidInput,
    relevance: RelevanceMatrix,
    confidence: ConfidenceModel,
) -> RiskExplanation:
    diameter_m = (asteroid.diameter_min_km + asteroid.diameter_max_km) / 2 * 1000

    matter = "Routine orbital pass."
    if relevance.research is RelevanceLevel.MONITOR:
        matter = "Object of interest for orbital monitoring."
    if asteroid.sentry_flag:
        matter = "Listed on the Sentry risk table, so it is already under continuous monitoring."
    if relevance.civilian is RelevanceLevel.MONITOR:
        matter = "Flagged as potentially hazardous and passing closer than the Moon."
    elif relevance.civilian is RelevanceLevel.ACTIONABLE:
        matter = "Monitoring agencies report an impact probability above 1%."

    safe = f"{_asteroid_pass_phrase(asteroid)} The object is {describe_asteroid_size(diameter_m)}."

    if confidence.level is ConfidenceLevel.LOW:
        change = "New observations reducing the orbital uncertainty."
    else:
        change = "A significant orbit revision from new observations, or a reported impact probability above 1%."

    return RiskExplanation(
        why_this_might_matter=matter,
        why_probably_not_dangerous=safe,
        what_would_change_assessment=change,
    )


def asteroid_summary(asteroid: AsteroidInput, suppression: SuppressionResult) -> str:
    if suppression.suppressed:
        return f"{asteroid.name}: No action required"
    return f"{asteroid.name}: {_asteroid_pass_phrase(asteroid)}"


def asteroid_technical_summary(asteroid: AsteroidInput, confidence: ConfidenceModel) -> str:
    ip = f"{asteroid.impact_probability:.2e}" if asteroid.impact_probability is not None else "N/A"
    return " | ".join([
        f"Object: {asteroid.name} ({asteroid.object_id})",
        f"Diameter: {asteroid.diameter_min_km * 1000:.0f}-{asteroid.diameter_max_km * 1000:.0f} m",
        f"Miss Distance: {asteroid.miss_distance_km:,.0f} km ({lunar_distances(asteroid.miss_distance_km):.2f} LD)",
        f"Velocity: {asteroid.velocity_km_s:.2f} km/s",
        f"Approach: {asteroid.approach_time.isoformat()}",
        f"PHA: {'Yes' if asteroid.potentially_hazardous_flag else 'No'}",
        f"Sentry: {'Yes' if asteroid.sentry_flag else 'No'}",
        f"Impact Probability: {ip}",
        f"Confidence: {confidence.level.value}",
    ])


# ---------------------------------------------------------------------------
# Conjunctions
# ---------------------------------------------------------------------------


def conjunction_explanation(conjunction: ConjunctionInput) -> RiskExplanation:
    is_iss = conjunction.primary_object.object_type is PrimaryObjectType.ISS
    secondary = conjunction.secondary_object.name
    lead = format_lead_time(conjunction.lead_time_hours)

    if is_iss:
        matter = (
            f"The ISS has a predicted close approach with {secondary} in {lead}. "
            "Space agencies routinely track thousands of such events."
        )
    else:
        matter = (
            f"{conjunction.primary_object.name} has a predicted close approach with {secondary} in {lead}. "
            "Satellite operators routinely manage such conjunctions."
        )

    if conjunction.maneuver_possible and conjunction.lead_time_hours > t.CONJUNCTION_ROUTINE_LEAD_TIME_H:
        safe = (
            "Routine orbital avoidance is possible. "
            f"With {lead} lead time, operators can plan and execute maneuvers if necessary. "
            "This is a normal part of space operations."
        )
    elif conjunction.maneuver_possible:
        safe = (
            "Maneuver capability exists, though the timeline is compressed. "
            "Operators are experienced in managing such situations."
        )
    elif conjunction.miss_distance_km > t.CONJUNCTION_COMFORTABLE_MISS_KM:
        safe = (
            f"The predicted miss distance of {conjunction.miss_distance_km:.1f} km is sufficient to avoid "
            "collision. Space objects pass at these distances regularly."
        )
    else:
        safe = (
            "While this is a close approach, space agencies have procedures for such events. "
            "Trajectory predictions continue to be refined."
        )

    pc = conjunction.probability_of_collision
    if pc is not None:
        change = (
            f"Current collision probability: {pc * 100:.2e}%. "
            f"Assessment would change if probability exceeds {t.CONJUNCTION_PC_ESCALATION * 100:.2f}% "
            "with reduced lead time."
        )
    else:
        change = (
            "Assessment would change with: (1) Updated tracking data showing closer approach, "
            "(2) Loss of maneuver capability, or (3) Calculated collision probability exceeding thresholds."
        )

    return RiskExplanation(
        why_this_might_matter=matter,
        why_probably_not_dangerous=safe,
        what_would_change_assessment=change,
    )


def conjunction_summary(
    conjunction: ConjunctionInput,
    suppression: SuppressionResult,
    relevance: RelevanceMatrix,
) -> str:
    if suppression.suppressed:
        return f"{conjunction.primary_object.name}: No action required"

    secondary = conjunction.secondary_object.name
    lead = format_lead_time(conjunction.lead_time_hours)

    if conjunction.primary_object.object_type is PrimaryObjectType.ISS:
        if relevance.iss is RelevanceLevel.ACTIONABLE:
            return f"ISS: Close approach with {secondary} in {lead} - Elevated attention"
        if relevance.iss is RelevanceLevel.MONITOR:
            return f"ISS: Tracking conjunction with {secondary} ({lead})"
        return f"ISS: Routine tracking - {secondary} ({lead})"

    return f"{conjunction.primary_object.name}: Conjunction tracking ({conjunction.miss_distance_km:.1f} km)"


def conjunction_technical_summary(conjunction: ConjunctionInput, confidence: ConfidenceModel) -> str:
    pc = conjunction.probability_of_collision
    primary = conjunction.primary_object
    secondary = conjunction.secondary_object
    return " | ".join([
        f"Primary: {primary.name} ({primary.norad_id})",
        f"Secondary: {secondary.name} ({secondary.norad_id})",
        f"TCA: {conjunction.tca.isoformat()}",
        f"Miss Distance: {conjunction.miss_distance_km:.2f} km",
        f"Rel Velocity: {conjunction.relative_velocity_km_s:.2f} km/s",
        f"Lead Time: {conjunction.lead_time_hours:.1f} hrs",
        f"Pc: {pc:.2e}" if pc is not None else "Pc: N/A",
        f"Maneuver: {'Yes' if conjunction.maneuver_possible else 'No'}",
        f"Confidence: {confidence.level.value}",
    ])


# ---------------------------------------------------------------------------
# Debris
# ---------------------------------------------------------------------------


def debris_explanation(
    debris: DebrisInput,
    relevance: RelevanceMatrix,
    confidence: ConfidenceModel,
    suppression: SuppressionResult,
    hours_until_reentry: float,
) -> RiskExplanation:
    label = debris_label(debris)
    lead = format_lead_time(hours_until_reentry)

    if suppression.suppressed:
        matter = f"Event suppressed: {suppression.reason}."
    elif relevance.civilian is not RelevanceLevel.NONE:
        matter = f"Large object re-entry expected within {lead}."
    else:
        matter = (
            f"Tracking re-entry of {label} ({debris.mass_kg:,.0f} kg, "
            f"{describe_debris_mass(debris.mass_kg)}) in about {lead}."
        )

    if debris.mass_kg < t.DEBRIS_LARGE_OBJECT_MIN_KG:
        safe = "Most space debris burns up completely in the atmosphere."
    else:
        safe = (
            "Object is large, but statistical risk to the ground is extremely low. "
            "Most re-entries occur over oceans."
        )
    if confidence.level is ConfidenceLevel.LOW:
        safe += " High uncertainty means the prediction is approximate."

    return RiskExplanation(
        why_this_might_matter=matter,
        why_probably_not_dangerous=safe,
        what_would_change_assessment="Updated tracking data narrowing the re-entry window.",
    )


def debris_summary(debris: DebrisInput, suppression: SuppressionResult, hours_until_reentry: float) -> str:
    label = debris_label(debris)
    if suppression.suppressed:
        return f"Debris {label}: No action required"
    return f"Debris {label}: Re-entry in ~{hours_until_reentry:.1f}h"


def debris_technical_summary(
    debris: DebrisInput,
    confidence: ConfidenceModel,
    hours_until_reentry: float,
) -> str:
    inclination = f"{debris.inclination_deg:.1f} deg" if debris.inclination_deg is not None else "N/A"
    return " | ".join([
        f"Object: {debris_label(debris)} ({debris.id})",
        f"Mass: {debris.mass_kg:,.0f} kg",
        f"Re-entry: {debris.predicted_reentry_time.isoformat()} (+/- {debris.uncertainty_minutes:.0f} min)",
        f"Hours Until: {hours_until_reentry:.1f}",
        f"Inclination: {inclination}",
        f"Controlled: {'Yes' if debris.is_controlled_reentry else 'No'}",
        f"Data Age: {debris.data_age_hours:.1f} hrs",
        f"Confidence: {confidence.level.value}",
    ])
