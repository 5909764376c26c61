"""API test fixtures — FastAPI app over the fake upstream.

Invariants:
    - get_weather_client dependency overridden with the MockTransport-backed client
    - Overrides cleared after each test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from weather_tools.infrastructure.openweather_client import get_weather_client
from weather_tools.main import app


@pytest.fixture
async def api_client(weather_client):
    """FastAPI test client with the OpenWeather client overridden."""
    app.dependency_overrides[get_weather_client] = lambda: weather_client
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
