"""Weather Handlers — city-name tools backed by current/forecast endpoints (4 methods).

Invariants:
    - Each handler receives an already-validated input model
    - Upstream non-success is returned as {"error": message}, never raised
    - compare_weather issues all city calls concurrently and joins them all;
      results are positional, so output order == input order
    - One failing city in compare_weather yields {"city", "error"} for that
      entry only

Design Decisions:
    - asyncio.gather over TaskGroup: gather returns results by position and,
      since each coroutine folds its own errors, never short-circuits
    - Reshaping delegated to core/reshape_responses.py (handlers only do IO)
"""

import asyncio
import logging

from weather_tools.core.errors import UpstreamAPIError, UpstreamUnavailableError
from weather_tools.core.reshape_responses import (
    reshape_comparison_entry,
    reshape_current,
    reshape_detailed,
    reshape_forecast,
)
from weather_tools.infrastructure.openweather_client import OpenWeatherClient
from weather_tools.schemas.tool_request import CitiesInput, CityInput

logger = logging.getLogger(__name__)


class WeatherHandlers:
    """Current conditions, forecast, detailed breakdown, multi-city comparison."""

    def __init__(self, client: OpenWeatherClient):
        self.client = client

    async def current_weather(self, tool_input: CityInput) -> dict:
        try:
            data = await self.client.current_weather(tool_input.city)
        except UpstreamAPIError as e:
            return {"error": e.message}
        return reshape_current(data)

    async def forecast(self, tool_input: CityInput) -> dict:
        """Daily-ish series: every 8th 3-hour record."""
        try:
            data = await self.client.forecast(tool_input.city)
        except UpstreamAPIError as e:
            return {"error": e.message}
        return reshape_forecast(data)

    async def detailed_weather(self, tool_input: CityInput) -> dict:
        try:
            data = await self.client.current_weather(tool_input.city)
        except UpstreamAPIError as e:
            return {"error": e.message}
        return reshape_detailed(data)

    async def compare_weather(self, tool_input: CitiesInput) -> dict:
        results = await asyncio.gather(
            *(self._compare_one(city) for city in tool_input.cities),
        )
        return {"comparison": list(results), "count": len(results)}

    async def _compare_one(self, city: str) -> dict:
        try:
            data = await self.client.current_weather(city)
        except (UpstreamAPIError, UpstreamUnavailableError) as e:
            logger.info(
                f"compareWeather: '{city}' failed: {e.message}",
                extra={"city": city, "error_code": e.code},
            )
            return {"city": city, "error": e.message}
        return reshape_comparison_entry(data)
