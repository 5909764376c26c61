"""Root conftest — shared test configuration and upstream double."""

import os

import pytest

# Ensure tests don't accidentally use a real API key
os.environ.setdefault("OPENWEATHER_API_KEY", "ow-test-fake-key")

from weather_tools.infrastructure.openweather_client import OpenWeatherClient  # noqa: E402
from tests.fake_openweather import FakeOpenWeather  # noqa: E402


@pytest.fixture
def fake_upstream() -> FakeOpenWeather:
    return FakeOpenWeather()


@pytest.fixture
async def weather_client(fake_upstream):
    """OpenWeatherClient wired to the fake upstream via MockTransport."""
    client = OpenWeatherClient(
        "ow-test-fake-key", transport=fake_upstream.transport(),
    )
    yield client
    await client.aclose()
