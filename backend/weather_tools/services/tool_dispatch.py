"""Tool Dispatch — explicit routing from tool name to validated handler call.

Invariants:
    - Every tool->handler mapping is visible — no getattr magic, no auto-discovery
    - Unknown tools raise ToolNotFoundError (404) before any validation
    - Input is validated against the tool's model before the handler runs;
      a violation raises ToolValidationError (400) and no upstream call is made
    - Exactly one handler runs per execute()

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
    - MappingProxyType over plain dict: the table cannot change after __init__
    - Handlers instantiated per-dispatch with the shared OpenWeather client
"""

import logging
from types import MappingProxyType
from typing import Any, Awaitable, Callable

from pydantic import BaseModel, ValidationError

from weather_tools.core.domain_types import ToolName
from weather_tools.core.errors import (
    ErrorContext, ToolNotFoundError, ToolValidationError,
)
from weather_tools.infrastructure.openweather_client import OpenWeatherClient
from weather_tools.services.define_weather_tools import TOOL_INPUTS
from weather_tools.services.handle_geo import GeoHandlers
from weather_tools.services.handle_weather import WeatherHandlers

logger = logging.getLogger(__name__)

ToolHandler = Callable[[Any], Awaitable[dict]]


class ToolDispatch:
    """Routes tool name -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, client: OpenWeatherClient):
        weather = WeatherHandlers(client)
        geo = GeoHandlers(client)

        # Adding a tool requires editing this mapping and ToolName
        self._handlers: MappingProxyType[ToolName, ToolHandler] = MappingProxyType({
            ToolName.CURRENT_WEATHER: weather.current_weather,
            ToolName.FORECAST: weather.forecast,
            ToolName.DETAILED_WEATHER: weather.detailed_weather,
            ToolName.COMPARE_WEATHER: weather.compare_weather,
            ToolName.AIR_QUALITY: geo.air_quality,
            ToolName.WEATHER_ALERTS: geo.weather_alerts,
        })

    async def execute(self, tool_name: object, input_data: Any) -> dict:
        """Resolve, validate, run. Returns the handler's result dict."""
        tool = resolve_tool(tool_name)
        tool_input = validate_tool_input(tool, input_data)
        logger.info(f"Dispatching {tool.value}", extra={"tool_name": tool.value})
        result = await self._handlers[tool](tool_input)
        if "error" in result:
            logger.info(
                f"{tool.value} returned in-band error: {result['error']}",
                extra={"tool_name": tool.value},
            )
        return result


def resolve_tool(tool_name: object) -> ToolName:
    """Wire name or descriptive alias → ToolName; anything else is a 404."""
    if not isinstance(tool_name, str):
        raise ToolNotFoundError(tool_name)
    try:
        return ToolName(tool_name)
    except ValueError:
        raise ToolNotFoundError(
            tool_name, ErrorContext(tool_name=tool_name),
        )


def validate_tool_input(tool: ToolName, input_data: Any) -> BaseModel:
    model = TOOL_INPUTS[tool]
    try:
        return model.model_validate(input_data)
    except ValidationError as e:
        fields = [_field_path(err["loc"]) for err in e.errors()]
        raise ToolValidationError(
            describe_violations(e), fields,
            ErrorContext(tool_name=tool.value),
        )


def describe_violations(exc: ValidationError) -> str:
    """'input.cities: List should have at least 2 items ...; ...'"""
    return "; ".join(
        f"{_field_path(err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def _field_path(loc: tuple) -> str:
    return ".".join(["input", *(str(part) for part in loc)])
