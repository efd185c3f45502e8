"""FastAPI application: CORS, route registration, health check."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skywatch.config import get_settings
from skywatch.models import HealthResponse
from skywatch.routes.alerts import router as alerts_router
from skywatch.routes.interpret import router as interpret_router

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# get_settings() loads .env before anything else
settings = get_settings()

logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

app = FastAPI(
    title="Skywatch Interpretation Layer",
    description="Turns asteroid, conjunction and debris data into audience-specific decisions",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(interpret_router)
app.include_router(alerts_router)


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(status="ok")
