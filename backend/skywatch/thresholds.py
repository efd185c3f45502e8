"""Interpretation thresholds per event kind.

Distance alone never triggers relevance. Every constant here only gates or
classifies data the interpreter is handed; none of them feeds a physical model.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Shared reference units
# ---------------------------------------------------------------------------

LUNAR_DISTANCE_KM: float = 384_400.0
AU_KM: float = 149_597_870.7

# ---------------------------------------------------------------------------
# Asteroids
# ---------------------------------------------------------------------------

# Minimum mean diameter (km) for any tracking interest (10 m)
ASTEROID_MIN_DIAMETER_TRACKING_KM: float = 0.01

# Mean diameter (km) considered large enough for broader interest (100 m)
ASTEROID_MIN_DIAMETER_CIVILIAN_KM: float = 0.1

# Passes further than this only interest researchers when large or flagged
ASTEROID_ROUTINE_PASS_KM: float = 2_000_000.0

# Passes further than this are described as extremely distant
ASTEROID_DISTANT_PASS_KM: float = 5_000_000.0

# Observation age (hours) thresholds for medium / low confidence
ASTEROID_MAX_AGE_HIGH_CONFIDENCE_H: float = 48.0
ASTEROID_MAX_AGE_MEDIUM_CONFIDENCE_H: float = 168.0

# Orbital error margin (km) thresholds for medium / low confidence
ASTEROID_MODERATE_UNCERTAINTY_KM: float = 10_000.0
ASTEROID_HIGH_UNCERTAINTY_KM: float = 100_000.0

# Error margin assumed when the source reports none
ASTEROID_DEFAULT_ERROR_MARGIN_KM: float = 10_000.0

# Reported impact probability above which civilians may be told (the only
# civilian-actionable trigger)
ASTEROID_CIVILIAN_ACTIONABLE_PROBABILITY: float = 0.01

# ---------------------------------------------------------------------------
# Conjunctions
# ---------------------------------------------------------------------------

# Miss distance (km) below which an approach is tracked at all
CONJUNCTION_MONITOR_DISTANCE_KM: float = 50.0

# Miss distance (km) below which a satellite operator gets a low-level heads-up
CONJUNCTION_OPERATOR_CLOSE_KM: float = 10.0

# Miss distance (km) above which the pass is described as comfortably clear
CONJUNCTION_COMFORTABLE_MISS_KM: float = 5.0

# Lead time (hours) that leaves room for routine avoidance planning
CONJUNCTION_ROUTINE_LEAD_TIME_H: float = 24.0

# Lead time (hours) below which the event is in the emergency window
CONJUNCTION_EMERGENCY_LEAD_TIME_H: float = 4.0

# Lead time (hours) beyond which predictions are still expected to refine
CONJUNCTION_LONG_LEAD_TIME_H: float = 72.0

# Collision probability thresholds
CONJUNCTION_PC_ESCALATION: float = 1e-4
CONJUNCTION_PC_RESEARCH_MONITOR: float = 1e-3
CONJUNCTION_PC_NEGLIGIBLE: float = 1e-7

# Context data age (hours) beyond which TLE-derived predictions are stale
CONJUNCTION_STALE_DATA_H: float = 24.0

# Fraction of the miss distance reported as error margin
CONJUNCTION_ERROR_MARGIN_FRACTION: float = 0.1

# ---------------------------------------------------------------------------
# Debris re-entry
# ---------------------------------------------------------------------------

# Mass (kg) below which an object is never surfaced
DEBRIS_ALWAYS_SUPPRESS_BELOW_KG: float = 10.0

# Mass (kg) below which complete burn-up is expected
DEBRIS_LIKELY_BURNUP_MAX_KG: float = 500.0

# Mass (kg) considered a large object
DEBRIS_LARGE_OBJECT_MIN_KG: float = 2_000.0

# Re-entries further out than this (days) are suppressed
DEBRIS_FAR_OUT_SUPPRESSION_DAYS: float = 7.0

# Re-entries closer than this (hours) are imminent
DEBRIS_IMMINENT_REENTRY_H: float = 2.0

# Uncertainty window (minutes) thresholds for medium / low confidence
DEBRIS_MODERATE_UNCERTAINTY_MIN: float = 60.0
DEBRIS_LOW_CONFIDENCE_UNCERTAINTY_MIN: float = 180.0

# Data age (hours) beyond which tracking data is stale
DEBRIS_STALE_DATA_H: float = 72.0
