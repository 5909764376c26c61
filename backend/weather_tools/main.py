"""Weather Tools API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WeatherToolsError → {"error": message} with its status
    - CORS configured from settings (not hardcoded)
    - OpenWeather client created on startup and closed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module thin
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weather_tools.api.error_handlers import register_error_handlers
from weather_tools.api.routes import health, tools
from weather_tools.api.routes.health import SERVICE_VERSION
from weather_tools.config import get_settings
from weather_tools.infrastructure.observability import setup_logging
from weather_tools.infrastructure.openweather_client import (
    close_weather_client, init_weather_client,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_weather_client(
        settings.openweather_api_key,
        base_url=settings.openweather_base_url,
        units=settings.openweather_units,
        timeout_seconds=settings.upstream_timeout_seconds,
    )
    if not settings.openweather_api_key:
        logger.warning("OPENWEATHER_API_KEY is not set; upstream calls will be rejected")
    logger.info("Weather Tools API started")
    yield
    await close_weather_client()
    logger.info("Weather Tools API shutting down")


app = FastAPI(
    title="Weather Tools API", version=SERVICE_VERSION, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(tools.router)

register_error_handlers(app)
