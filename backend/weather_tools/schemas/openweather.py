"""OpenWeather Schemas — typed models for the upstream endpoints we consume.

Invariants:
    - Only fields read by the reshaping functions are declared
    - Integer readings (pressure, humidity, wind deg, cloud cover) stay ints:
      int | float keeps whatever type the provider sent
    - Unknown upstream fields are ignored (extra="ignore")
    - Optional sub-fields default explicitly (alerts → [], weather → [])

Design Decisions:
    - One model per endpoint family: current, forecast, geocode,
      air pollution, one-call
    - Models describe the provider's JSON, so field names follow its
      snake_case/abbreviated spelling (temp_min, dt_txt, deg)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Upstream(BaseModel):
    model_config = ConfigDict(extra="ignore")


# ─── Shared blocks ───────────────────────────────────────────────

class WeatherCondition(_Upstream):
    main: str | None = None
    description: str | None = None


class MainReadings(_Upstream):
    temp: float | None = None
    feels_like: float | None = None
    temp_min: float | None = None
    temp_max: float | None = None
    pressure: int | float | None = None
    humidity: int | float | None = None


class Wind(_Upstream):
    speed: float | None = None
    deg: int | float | None = None


class Clouds(_Upstream):
    all: int | float | None = None


class SunTimes(_Upstream):
    country: str | None = None
    sunrise: int | None = None
    sunset: int | None = None


# ─── Current weather (/data/2.5/weather) ─────────────────────────

class CurrentWeatherResponse(_Upstream):
    name: str | None = None
    main: MainReadings = Field(default_factory=MainReadings)
    weather: list[WeatherCondition] = Field(default_factory=list)
    wind: Wind = Field(default_factory=Wind)
    clouds: Clouds = Field(default_factory=Clouds)
    sys: SunTimes = Field(default_factory=SunTimes)
    visibility: int | None = None

    @property
    def condition(self) -> WeatherCondition:
        """First reported condition; empty when upstream omits the list."""
        return self.weather[0] if self.weather else WeatherCondition()


# ─── Forecast (/data/2.5/forecast) ───────────────────────────────

class ForecastRecord(_Upstream):
    dt_txt: str | None = None
    main: MainReadings = Field(default_factory=MainReadings)
    weather: list[WeatherCondition] = Field(default_factory=list)

    @property
    def condition(self) -> WeatherCondition:
        return self.weather[0] if self.weather else WeatherCondition()


class ForecastCity(_Upstream):
    name: str | None = None


class ForecastResponse(_Upstream):
    records: list[ForecastRecord] = Field(default_factory=list, alias="list")
    city: ForecastCity = Field(default_factory=ForecastCity)


# ─── Geocoding (/geo/1.0/direct) ─────────────────────────────────

class GeocodeMatch(_Upstream):
    name: str | None = None
    lat: float
    lon: float
    country: str | None = None


# ─── Air pollution (/data/2.5/air_pollution) ─────────────────────

class AirQualityIndex(_Upstream):
    aqi: int


class PollutantComponents(_Upstream):
    co: float | None = None
    no2: float | None = None
    o3: float | None = None
    pm2_5: float | None = None
    pm10: float | None = None


class AirPollutionSample(_Upstream):
    main: AirQualityIndex
    components: PollutantComponents = Field(default_factory=PollutantComponents)


class AirPollutionResponse(_Upstream):
    samples: list[AirPollutionSample] = Field(min_length=1, alias="list")


# ─── One Call 3.0 (/data/3.0/onecall) ────────────────────────────

class OneCallResponse(_Upstream):
    # Alert objects are passed through untouched
    alerts: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator("alerts", mode="before")
    @classmethod
    def null_alerts_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v
