"""/api/interpret: run a batch of space events through the interpretation layer."""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from skywatch.clock import utc_now
from skywatch.config import Settings, get_settings
from skywatch.filters import assess_health, filter_for_audience, get_interpretation_stats
from skywatch.formatters import format_decisions_for_audience
from skywatch.interpreter import interpret
from skywatch.models import Audience, InterpretApiResponse, InterpretationRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_request(body: Any, settings: Settings) -> InterpretationRequest:
    if not isinstance(body, dict) or body.get("context") is None:
        raise HTTPException(status_code=400, detail="Missing required field: context")

    context = body["context"]
    if isinstance(context, dict):
        context = {
            "prediction_horizon_hours": settings.default_horizon_hours,
            "data_age_hours": settings.default_data_age_hours,
            **context,
        }
        if context.get("current_time") is None:
            context["current_time"] = utc_now()
        body = {**body, "context": context}

    try:
        return InterpretationRequest.model_validate(body)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False, include_context=False)) from exc


@router.post("/api/interpret", response_model=InterpretApiResponse)
async def interpret_batch(request: Request, settings: Settings = Depends(get_settings)):
    """Interpret asteroids, conjunctions and debris in one call.

    ``audience=all`` returns every decision, suppressed ones included. Any
    other audience returns only the decisions that role sees, plus their
    role-formatted views.
    """
    try:
        body = await request.json()
    except json.JSONDecodeError:
        raise HTTPException(status_code=400, detail="Request body must be valid JSON")

    interpretation_request = _parse_request(body, settings)

    if interpretation_request.event_count > settings.max_batch_size:
        raise HTTPException(
            status_code=413,
            detail=f"Batch of {interpretation_request.event_count} events exceeds limit of {settings.max_batch_size}",
        )

    try:
        response = interpret(interpretation_request)
    except Exception:
        logger.exception("Interpretation request failed")
        raise HTTPException(status_code=500, detail="Interpretation failed")

    stats = get_interpretation_stats(response.decisions)
    audience = interpretation_request.audience

    decisions = filter_for_audience(response.decisions, audience)
    formatted = None
    if audience is not Audience.ALL:
        formatted = format_decisions_for_audience(decisions, audience)

    return InterpretApiResponse(
        decisions=decisions,
        formatted=formatted,
        total_events=len(response.decisions),
        suppressed_count=response.suppressed_count,
        relevant_count=response.relevant_count,
        stats=stats,
        health=assess_health(stats),
        interpreted_at=response.interpreted_at,
        processing_time_ms=response.processing_time_ms,
    )


@router.get("/api/interpret")
async def interpret_usage():
    return {
        "endpoint": "/api/interpret",
        "method": "POST",
        "description": "Interpretation layer: converts raw space data into audience-specific decisions",
        "usage": {
            "request": {
                "asteroids": "Array of AsteroidInput (optional)",
                "conjunctions": "Array of ConjunctionInput (optional)",
                "debris": "Array of DebrisInput (optional)",
                "context": {
                    "current_time": "ISO 8601 timestamp (default now)",
                    "prediction_horizon_hours": "Number (default 168)",
                    "data_age_hours": "Number (default 1)",
                    "dry_run": "Boolean (default false)",
                },
                "audience": "'civilian' | 'operator' | 'researcher' | 'all' (default 'all')",
            },
            "response": {
                "decisions": "Array of DecisionObject (all of them for audience=all, otherwise those the audience sees)",
                "formatted": "Role-formatted output (when a specific audience is requested)",
                "stats": "Interpretation statistics",
                "health": "Suppression / civilian rate health check",
            },
        },
        "principles": [
            "Most events should result in suppression (no alert)",
            "Silence is a valid and often correct outcome",
            "Different audiences see different interpretations",
            "Uncertainty lowers visibility, not increases it",
        ],
        "health_check": {
            "healthy": "suppression_rate >= 80%, civilian_rate <= 10%",
            "warning": "suppression_rate >= 50%, civilian_rate <= 25%",
            "failing": "Too many alerts reaching users",
        },
    }
