"""Service test fixtures — handlers and dispatch over the fake upstream.

Invariants:
    - Every test gets a fresh FakeOpenWeather (no shared routes or call logs)
    - Handlers and dispatch share the same OpenWeatherClient instance

Design Decisions:
    - Real OpenWeatherClient + MockTransport instead of mocking the client:
      exercises URL building and error mapping on every handler test
"""

import pytest

from weather_tools.services.handle_geo import GeoHandlers
from weather_tools.services.handle_weather import WeatherHandlers
from weather_tools.services.tool_dispatch import ToolDispatch


@pytest.fixture
def weather_handlers(weather_client) -> WeatherHandlers:
    return WeatherHandlers(weather_client)


@pytest.fixture
def geo_handlers(weather_client) -> GeoHandlers:
    return GeoHandlers(weather_client)


@pytest.fixture
def dispatch(weather_client) -> ToolDispatch:
    return ToolDispatch(weather_client)
