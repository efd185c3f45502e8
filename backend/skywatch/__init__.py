"""
Skywatch Interpretation Layer.

A deterministic rules engine that turns asteroid close approaches, satellite
conjunctions and debris re-entries into immutable Decision Objects: relevance
per audience, confidence, suppression and a plain-language explanation.

Usage:
    from skywatch import interpret
    response = interpret(InterpretationRequest(...))

    python -m skywatch.batch_report            # sample batch report
    uvicorn skywatch.main:app --reload         # HTTP service

Environment variables:
    SKYWATCH_LOG_LEVEL, SKYWATCH_CORS_ORIGINS, SKYWATCH_MAX_BATCH_SIZE,
    SKYWATCH_DEFAULT_HORIZON_HOURS, SKYWATCH_DEFAULT_DATA_AGE_HOURS,
    SKYWATCH_ALERT_LLM_ENABLED, SKYWATCH_ALERT_MODEL_ID,
    AWS_REGION, AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY
"""

from skywatch.asteroid_interpreter import interpret_asteroid
from skywatch.conjunction_interpreter import interpret_conjunction, interpret_conjunctions
from skywatch.debris_interpreter import interpret_debris
from skywatch.errors import InterpretationError
from skywatch.filters import assess_health, filter_for_audience, get_interpretation_stats
from skywatch.interpreter import interpret
from skywatch.models import DecisionObject, InterpretationRequest, InterpretationResponse

__all__ = [
    "DecisionObject",
    "InterpretationError",
    "InterpretationRequest",
    "InterpretationResponse",
    "assess_health",
    "filter_for_audience",
    "get_interpretation_stats",
    "interpret",
    "interpret_asteroid",
    "interpret_conjunction",
    "interpret_conjunctions",
    "interpret_debris",
]
