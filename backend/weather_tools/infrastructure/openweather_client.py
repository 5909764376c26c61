"""OpenWeather Client — wraps httpx.AsyncClient with typed responses and error mapping.

Invariants:
    - Every request carries the shared API key as the appid query parameter
    - Non-success status (4xx/5xx): UpstreamAPIError with the provider's message
    - Transport failures and unreadable bodies: UpstreamUnavailableError
    - No retry, no caching: one call in, one response out
    - Successful bodies are parsed into schemas/openweather.py models

Design Decisions:
    - Wrapper over raw client: isolates URL building and error mapping from handlers
    - Singleton weather_client initialized on startup: FastAPI lifespan manages
      the connection pool (no global import side effects)
    - Optional transport parameter: tests inject httpx.MockTransport
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from weather_tools.core.errors import (
    ErrorContext, UpstreamAPIError, UpstreamUnavailableError,
)
from weather_tools.schemas.openweather import (
    AirPollutionResponse,
    CurrentWeatherResponse,
    ForecastResponse,
    GeocodeMatch,
    OneCallResponse,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

CURRENT_WEATHER_PATH = "/data/2.5/weather"
FORECAST_PATH = "/data/2.5/forecast"
GEOCODE_PATH = "/geo/1.0/direct"
AIR_POLLUTION_PATH = "/data/2.5/air_pollution"
ONE_CALL_PATH = "/data/3.0/onecall"

# One Call sections we never read; only alerts (and current) come back
ONE_CALL_EXCLUDE = ("minutely", "hourly", "daily")

_GEOCODE_MATCHES = TypeAdapter(list[GeocodeMatch])


class OpenWeatherClient:
    """Typed async access to the OpenWeather endpoints used by the tools."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openweathermap.org",
        units: str = "metric",
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.units = units
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    # ─── Endpoints ───────────────────────────────────────────────

    async def current_weather(self, city: str) -> CurrentWeatherResponse:
        data = await self._get_json(
            CURRENT_WEATHER_PATH, {"q": city, "units": self.units}, city,
        )
        return self._parse(CurrentWeatherResponse, data, CURRENT_WEATHER_PATH)

    async def forecast(self, city: str) -> ForecastResponse:
        """5-day forecast in 3-hour steps (up to 40 records)."""
        data = await self._get_json(
            FORECAST_PATH, {"q": city, "units": self.units}, city,
        )
        return self._parse(ForecastResponse, data, FORECAST_PATH)

    async def geocode(self, city: str, limit: int = 1) -> list[GeocodeMatch]:
        """Resolve a city name to candidate coordinates (possibly none)."""
        data = await self._get_json(
            GEOCODE_PATH, {"q": city, "limit": limit}, city,
        )
        try:
            return _GEOCODE_MATCHES.validate_python(data)
        except ValidationError as e:
            raise self._unexpected_shape(GEOCODE_PATH, e)

    async def air_pollution(self, lat: float, lon: float) -> AirPollutionResponse:
        data = await self._get_json(
            AIR_POLLUTION_PATH, {"lat": lat, "lon": lon},
        )
        return self._parse(AirPollutionResponse, data, AIR_POLLUTION_PATH)

    async def one_call(self, lat: float, lon: float) -> OneCallResponse:
        """One Call 3.0 — needs its own subscription on the OpenWeather account."""
        data = await self._get_json(
            ONE_CALL_PATH,
            {"lat": lat, "lon": lon, "exclude": ",".join(ONE_CALL_EXCLUDE)},
        )
        return self._parse(OneCallResponse, data, ONE_CALL_PATH)

    # ─── Transport ───────────────────────────────────────────────

    async def _get_json(
        self, path: str, params: dict[str, Any], city: str | None = None,
    ) -> Any:
        """GET path with appid; returns decoded JSON or raises a mapped error."""
        context = ErrorContext(city=city, debug_info={"path": path})
        try:
            response = await self.client.get(
                path, params={**params, "appid": self.api_key},
            )
        except httpx.TimeoutException:
            logger.error(
                f"OpenWeather timeout on {path}",
                extra={"upstream_path": path, "city": city},
            )
            raise UpstreamUnavailableError("request timed out", context=context)
        except httpx.HTTPError as e:
            logger.error(
                f"OpenWeather transport error on {path}: {e}",
                extra={"upstream_path": path, "city": city},
            )
            raise UpstreamUnavailableError(str(e) or type(e).__name__, context=context)

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            message = _upstream_message(data, response)
            logger.warning(
                f"OpenWeather {response.status_code} on {path}: {message}",
                extra={
                    "upstream_path": path,
                    "upstream_status": response.status_code,
                    "city": city,
                },
            )
            raise UpstreamAPIError(message, response.status_code, context=context)

        if data is None:
            raise UpstreamUnavailableError(
                f"unreadable response from {path}", context=context,
            )
        return data

    def _parse(self, model: type[ModelT], data: Any, path: str) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise self._unexpected_shape(path, e)

    @staticmethod
    def _unexpected_shape(path: str, e: ValidationError) -> UpstreamUnavailableError:
        logger.error(
            f"Unexpected OpenWeather payload on {path}: {e.error_count()} error(s)",
            extra={"upstream_path": path},
        )
        return UpstreamUnavailableError(f"unexpected response from {path}")


def _upstream_message(data: Any, response: httpx.Response) -> str:
    """Provider's own message when present, else the HTTP reason phrase."""
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return response.reason_phrase or f"HTTP {response.status_code}"


# Singleton (initialized on startup)
weather_client: OpenWeatherClient | None = None


def init_weather_client(api_key: str, **kwargs) -> OpenWeatherClient:
    global weather_client
    weather_client = OpenWeatherClient(api_key, **kwargs)
    return weather_client


async def close_weather_client() -> None:
    global weather_client
    if weather_client is not None:
        await weather_client.aclose()
        weather_client = None


def get_weather_client() -> OpenWeatherClient:
    """FastAPI dependency for the shared OpenWeather client."""
    if not weather_client:
        raise RuntimeError("Weather client not initialized")
    return weather_client
