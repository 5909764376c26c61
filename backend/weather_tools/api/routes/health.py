"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if no OpenWeather API key is configured

Design Decisions:
    - Readiness checks configuration only, never calls OpenWeather: probes must
      not spend the provider quota
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from weather_tools.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "weather-tools-api"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — requires an OpenWeather API key."""
    if not get_settings().openweather_api_key:
        logger.warning("Readiness check failed: OPENWEATHER_API_KEY not set")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "api_key_missing",
            },
        )
    return {"status": "ready", "checks": {"openweather_api_key": "configured"}}
