from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator


def _as_utc(value: datetime) -> datetime:
    """Naive timestamps are read as UTC; aware ones are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


# --- Closed variants ---

class RelevanceLevel(str, Enum):
    """Audience-specific importance tier, ordered none < low < monitor < actionable."""

    NONE = "none"
    LOW = "low"
    MONITOR = "monitor"
    ACTIONABLE = "actionable"

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)


class ConfidenceLevel(str, Enum):
    """Trust in the input data, ordered low < medium < high."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)


class OrbitStability(str, Enum):
    STABLE = "stable"
    UNCERTAIN = "uncertain"
    CHAOTIC = "chaotic"


class EventType(str, Enum):
    ASTEROID = "asteroid"
    CONJUNCTION = "conjunction"
    DEBRIS = "debris"


class Audience(str, Enum):
    CIVILIAN = "civilian"
    OPERATOR = "operator"
    RESEARCHER = "researcher"
    ALL = "all"


class AlertLevel(str, Enum):
    INFORMATIONAL = "LEVEL 1"
    MONITORING_WATCH = "LEVEL 2"
    SCIENTIFIC_INTEREST = "LEVEL 3"


class PrimaryObjectType(str, Enum):
    ISS = "iss"
    SATELLITE = "satellite"
    DEBRIS = "debris"


class SecondaryObjectType(str, Enum):
    SATELLITE = "satellite"
    DEBRIS = "debris"
    UNKNOWN = "unknown"


class OrbitRegime(str, Enum):
    LEO = "LEO"
    MEO = "MEO"
    GEO = "GEO"
    HEO = "HEO"


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    WARNING = "warning"
    FAILING = "failing"


# --- Inputs (raw measured / reported quantities only) ---

class AsteroidInput(BaseModel):
    """Asteroid close approach, shaped like normalized NeoWs data."""

    model_config = ConfigDict(frozen=True)

    object_id: str
    name: str
    diameter_min_km: float
    diameter_max_km: float
    velocity_km_s: float = Field(description="Relative velocity (km/s)")
    miss_distance_km: float
    approach_time: UtcDatetime
    orbital_uncertainty: float | None = Field(default=None, description="Orbital error margin (km)")
    observation_age_hours: float | None = None
    potentially_hazardous_flag: bool = Field(description="Raw NASA PHA flag (not trusted on its own)")
    sentry_flag: bool = False
    impact_probability: float | None = Field(default=None, description="Reported impact probability (0-1)")


class PrimaryObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    norad_id: int
    name: str
    object_type: PrimaryObjectType
    orbit_regime: OrbitRegime


class SecondaryObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    norad_id: int
    name: str
    object_type: SecondaryObjectType


class ConjunctionInput(BaseModel):
    """Close approach between a tracked space asset and another object."""

    model_config = ConfigDict(frozen=True)

    primary_object: PrimaryObject
    secondary_object: SecondaryObject
    tca: UtcDatetime = Field(description="Time of closest approach")
    miss_distance_km: float
    relative_velocity_km_s: float
    probability_of_collision: float | None = None
    lead_time_hours: float = Field(description="Hours until TCA")
    maneuver_possible: bool


class DebrisInput(BaseModel):
    """Predicted debris re-entry."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    mass_kg: float
    predicted_reentry_time: UtcDatetime
    uncertainty_minutes: float = Field(description="Re-entry window uncertainty (minutes)")
    data_age_hours: float
    inclination_deg: float | None = None
    is_controlled_reentry: bool = False


class SystemContext(BaseModel):
    """Per-request parameters shared by every event in one interpretation call."""

    model_config = ConfigDict(frozen=True)

    current_time: UtcDatetime
    prediction_horizon_hours: float = 168
    data_age_hours: float = 1
    dry_run: bool = False


# --- Interpretation building blocks ---

class ConfidenceModel(BaseModel):
    """Explicit confidence signal. Always fully populated."""

    model_config = ConfigDict(frozen=True)

    level: ConfidenceLevel
    reason: str
    observation_age_hours: float
    error_margin_km: float
    orbit_stability: OrbitStability
    observation_count: int | None = None
    last_observation: UtcDatetime | None = None


class RelevanceMatrix(BaseModel):
    model_config = ConfigDict(frozen=True)

    civilian: RelevanceLevel = RelevanceLevel.NONE
    satellite_operator: RelevanceLevel = RelevanceLevel.NONE
    iss: RelevanceLevel = RelevanceLevel.NONE
    research: RelevanceLevel = RelevanceLevel.NONE

    @classmethod
    def silent(cls) -> RelevanceMatrix:
        return cls()

    def levels(self) -> tuple[RelevanceLevel, ...]:
        return (self.civilian, self.satellite_operator, self.iss, self.research)

    def is_silent(self) -> bool:
        return all(level is RelevanceLevel.NONE for level in self.levels())

    def highest(self) -> RelevanceLevel:
        return max(self.levels(), key=lambda level: level.rank)


class RiskExplanation(BaseModel):
    """Three mandatory strings, present on every decision (suppressed or not)."""

    model_config = ConfigDict(frozen=True)

    why_this_might_matter: str
    why_probably_not_dangerous: str
    what_would_change_assessment: str


class PublicAlertData(BaseModel):
    """Verified asteroid figures used to word a public alert."""

    asteroid_name: str
    distance_au: float
    diameter_meters: float
    velocity_km_s: float
    risk_score: float | None = Field(default=None, description="Internal only, never shown")
    pei_value: float | None = Field(default=None, description="Planetary Exposure Index, internal only")
    is_sentry_monitored: bool = False
    is_potentially_hazardous: bool = False


class PublicAlert(BaseModel):
    model_config = ConfigDict(frozen=True)

    alert_level: AlertLevel
    language: str = "English"
    message: str


# --- Decision Object (sole output) ---

def new_decision_id(prefix: str, event_id: str, interpreted_at: datetime) -> str:
    """``{prefix}-{event_id}-{epoch_ms}-{8 hex}``; the random tail keeps ids unique within one call."""
    epoch_ms = int(interpreted_at.timestamp() * 1000)
    return f"{prefix}-{event_id}-{epoch_ms}-{uuid.uuid4().hex[:8]}"


class DecisionObject(BaseModel):
    """Immutable result of interpreting one event.

    Consumers may read and filter decisions. They may not escalate relevance
    or drop the confidence and explanation fields.
    """

    model_config = ConfigDict(frozen=True)

    decision_id: str
    event_id: str
    event_type: EventType
    interpreted_at: UtcDatetime
    relevance: RelevanceMatrix
    confidence: ConfidenceModel
    explanation: RiskExplanation
    suppressed: bool
    suppression_reason: str | None = None
    summary: str
    technical_summary: str | None = None
    source_snapshot: AsteroidInput | ConjunctionInput | DebrisInput
    public_alert: PublicAlert | None = None

    @model_validator(mode="after")
    def _check_gating(self) -> DecisionObject:
        if self.relevance.is_silent() and not self.suppressed:
            raise ValueError("decision with no relevance for any audience must be suppressed")
        if self.suppressed and not self.relevance.is_silent():
            raise ValueError("suppressed decision must carry all-none relevance")
        if self.confidence.level is ConfidenceLevel.LOW and self.relevance.highest() is RelevanceLevel.ACTIONABLE:
            raise ValueError("low confidence decision cannot be actionable")
        if self.suppressed and self.public_alert is not None:
            raise ValueError("suppressed decision cannot carry a public alert")
        return self


# --- Batch envelope ---

class InterpretationRequest(BaseModel):
    asteroids: list[AsteroidInput] = []
    conjunctions: list[ConjunctionInput] = []
    debris: list[DebrisInput] = []
    context: SystemContext
    audience: Audience = Audience.ALL

    @property
    def event_count(self) -> int:
        return len(self.asteroids) + len(self.conjunctions) + len(self.debris)


class InterpretationResponse(BaseModel):
    decisions: list[DecisionObject] = []
    suppressed_count: int
    relevant_count: int = Field(
        description="Decisions that are not suppressed. Not relevance to any particular audience."
    )
    interpreted_at: UtcDatetime
    processing_time_ms: float

    @property
    def unsuppressed_count(self) -> int:
        """Clearer name for ``relevant_count``."""
        return self.relevant_count


class InterpretationStats(BaseModel):
    total: int
    suppressed: int
    civilian_relevant: int
    operator_relevant: int
    iss_relevant: int


class HealthAssessment(BaseModel):
    """Is the layer staying quiet enough? Most events should end up suppressed."""

    status: HealthStatus
    suppression_rate: float
    civilian_rate: float


# --- Role views (read-only projections of a decision) ---

class CivilianTone(str, Enum):
    INFORMATIONAL = "informational"
    NOTABLE = "notable"
    MONITORING = "monitoring"


class CivilianView(BaseModel):
    model_config = ConfigDict(frozen=True)

    event_id: str
    headline: str
    summary: str
    detail: str
    confidence_note: str
    tone: CivilianTone
    show_technical: bool = False
    primary_message: str
    public_alert: PublicAlert | None = None


class OperatorConfidence(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: ConfidenceLevel
    reason: str
    error_margin_km: float
    observation_age_hours: float


class OperatorView(BaseModel):
    model_config = ConfigDict(frozen=True)

    event_id: str
    summary: str
    technical_details: str
    confidence: OperatorConfidence
    action_required: bool
    monitoring_required: bool
    assessment_factors: str
    show_uncertainty: bool = True


class ResearcherView(BaseModel):
    model_config = ConfigDict(frozen=True)

    event_id: str
    event_type: EventType
    interpreted_at: UtcDatetime
    relevance_matrix: RelevanceMatrix
    confidence_model: ConfidenceModel
    explanation: RiskExplanation
    suppressed: bool
    suppression_reason: str | None = None
    technical_summary: str | None = None
    source_snapshot: AsteroidInput | ConjunctionInput | DebrisInput
    show_all_data: bool = True


class RoleBasedOutput(BaseModel):
    civilian: CivilianView | None = None
    operator: OperatorView | None = None
    researcher: ResearcherView | None = None


# --- API payloads ---

class AlertGenerateRequest(PublicAlertData):
    language: str = "English"


class HealthResponse(BaseModel):
    status: str = "ok"


class InterpretApiResponse(BaseModel):
    """HTTP envelope: decisions visible to the audience, plus role-formatted views for a single audience."""

    decisions: list[DecisionObject] | None = None
    formatted: list[CivilianView | OperatorView | ResearcherView] | None = None
    total_events: int
    suppressed_count: int
    relevant_count: int
    stats: InterpretationStats
    health: HealthAssessment
    interpreted_at: UtcDatetime
    processing_time_ms: float
