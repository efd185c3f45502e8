"""/api/alerts/generate: public-facing asteroid alert messages."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from skywatch.agents.alert_agent import SUPPORTED_LANGUAGES, PublicAlertAgent
from skywatch.config import Settings, get_settings
from skywatch.models import AlertGenerateRequest, PublicAlert, PublicAlertData

logger = logging.getLogger(__name__)

router = APIRouter()


def get_alert_agent(settings: Settings = Depends(get_settings)) -> PublicAlertAgent:
    return PublicAlertAgent(settings=settings)


@router.post("/api/alerts/generate", response_model=PublicAlert)
async def generate_alert(request: AlertGenerateRequest, agent: PublicAlertAgent = Depends(get_alert_agent)):
    data = PublicAlertData.model_validate(request.model_dump(exclude={"language"}))
    try:
        return await agent.run(data, language=request.language)
    except ValueError:
        logger.exception("Failed to generate alert for %s", data.asteroid_name)
        raise HTTPException(status_code=500, detail="Failed to generate alert")


@router.get("/api/alerts/generate")
async def alert_usage():
    return {
        "endpoint": "/api/alerts/generate",
        "method": "POST",
        "description": "Generate a public-facing asteroid alert message",
        "supported_languages": list(SUPPORTED_LANGUAGES),
        "required_fields": ["asteroid_name", "distance_au", "diameter_meters", "velocity_km_s"],
        "optional_fields": [
            "language",
            "risk_score",
            "pei_value",
            "is_sentry_monitored",
            "is_potentially_hazardous",
        ],
    }
