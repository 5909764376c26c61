"""Geo Handlers — coordinate-based tools that geocode first (2 methods).

Invariants:
    - Geocode runs first; zero matches → {"error": "City not found"} and the
      coordinate query is never issued
    - The first geocode match is used
    - Upstream non-success on either call → {"error": message}
    - Result "city" echoes the name as the caller sent it

Design Decisions:
    - One Call "subscription not active" errors get no special treatment:
      they are ordinary upstream errors
"""

import logging

from weather_tools.core.errors import UpstreamAPIError
from weather_tools.core.reshape_responses import reshape_air_quality, reshape_alerts
from weather_tools.infrastructure.openweather_client import OpenWeatherClient
from weather_tools.schemas.openweather import GeocodeMatch
from weather_tools.schemas.tool_request import CityInput

logger = logging.getLogger(__name__)

CITY_NOT_FOUND = "City not found"


class GeoHandlers:
    """Air quality and weather alerts — both keyed by coordinates."""

    def __init__(self, client: OpenWeatherClient):
        self.client = client

    async def air_quality(self, tool_input: CityInput) -> dict:
        try:
            match = await self._locate(tool_input.city)
            if match is None:
                return {"error": CITY_NOT_FOUND}
            data = await self.client.air_pollution(match.lat, match.lon)
        except UpstreamAPIError as e:
            return {"error": e.message}
        return reshape_air_quality(tool_input.city, data)

    async def weather_alerts(self, tool_input: CityInput) -> dict:
        try:
            match = await self._locate(tool_input.city)
            if match is None:
                return {"error": CITY_NOT_FOUND}
            data = await self.client.one_call(match.lat, match.lon)
        except UpstreamAPIError as e:
            return {"error": e.message}
        return reshape_alerts(tool_input.city, data)

    async def _locate(self, city: str) -> GeocodeMatch | None:
        matches = await self.client.geocode(city, limit=1)
        if not matches:
            logger.info(f"Geocoding found no match for '{city}'", extra={"city": city})
            return None
        return matches[0]
