"""Reshape Responses — pure transforms from typed OpenWeather models to tool results.

Invariants:
    - No IO: every function takes parsed upstream models and returns plain dicts
    - Forecast sampling keeps records at indices 0, 8, 16, ... (one per ~24h)
    - AQI labels are looked up 1-based; out-of-range indexes yield None
    - Epoch timestamps render as ISO-8601 UTC with milliseconds and a Z suffix

Design Decisions:
    - Output keys are camelCase (feelsLike, windSpeed, hasAlerts): they are the
      published result contract, not Python identifiers
    - Separated from handlers so the derivation logic is testable without HTTP
"""

from datetime import datetime, timezone

from weather_tools.core.domain_types import AQI_LABELS, FORECAST_RECORDS_PER_DAY
from weather_tools.schemas.openweather import (
    AirPollutionResponse,
    CurrentWeatherResponse,
    ForecastRecord,
    ForecastResponse,
    OneCallResponse,
)


# ─── Derivations ─────────────────────────────────────────────────

def describe_air_quality(aqi: int) -> str | None:
    """Map OpenWeather AQI (1 = Good ... 5 = Very Poor) to its label."""
    if 1 <= aqi <= len(AQI_LABELS):
        return AQI_LABELS[aqi - 1]
    return None


def sample_daily(
    records: list[ForecastRecord], step: int = FORECAST_RECORDS_PER_DAY,
) -> list[ForecastRecord]:
    """Downsample 3-hour records to one per day."""
    return records[::step]


def epoch_to_iso(seconds: int | None) -> str | None:
    """Epoch seconds → '2024-01-01T07:30:00.000Z'."""
    if seconds is None:
        return None
    moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ─── Tool results ────────────────────────────────────────────────

def reshape_current(data: CurrentWeatherResponse) -> dict:
    return {
        "city": data.name,
        "temp": data.main.temp,
        "description": data.condition.description,
    }


def reshape_forecast(data: ForecastResponse) -> dict:
    forecast = [
        {
            "date": record.dt_txt,
            "temp": record.main.temp,
            "description": record.condition.description,
        }
        for record in sample_daily(data.records)
    ]
    return {"city": data.city.name, "forecast": forecast}


def reshape_air_quality(city: str, data: AirPollutionResponse) -> dict:
    """First pollution sample → AQI, label and the five tracked pollutants."""
    sample = data.samples[0]
    components = sample.components
    return {
        "city": city,
        "aqi": sample.main.aqi,
        "quality": describe_air_quality(sample.main.aqi),
        "components": {
            "co": components.co,
            "no2": components.no2,
            "o3": components.o3,
            "pm2_5": components.pm2_5,
            "pm10": components.pm10,
        },
    }


def reshape_detailed(data: CurrentWeatherResponse) -> dict:
    """Full breakdown: temperature group, wind, atmosphere, sun times.

    Units: wind speed m/s, direction degrees, humidity %, pressure hPa,
    visibility meters, cloud cover %.
    """
    return {
        "city": data.name,
        "country": data.sys.country,
        "temperature": {
            "current": data.main.temp,
            "feelsLike": data.main.feels_like,
            "min": data.main.temp_min,
            "max": data.main.temp_max,
        },
        "weather": {
            "main": data.condition.main,
            "description": data.condition.description,
        },
        "wind": {
            "speed": data.wind.speed,
            "direction": data.wind.deg,
        },
        "humidity": data.main.humidity,
        "pressure": data.main.pressure,
        "visibility": data.visibility,
        "clouds": data.clouds.all,
        "sun": {
            "sunrise": epoch_to_iso(data.sys.sunrise),
            "sunset": epoch_to_iso(data.sys.sunset),
        },
    }


def reshape_comparison_entry(data: CurrentWeatherResponse) -> dict:
    return {
        "city": data.name,
        "temp": data.main.temp,
        "feelsLike": data.main.feels_like,
        "description": data.condition.description,
        "humidity": data.main.humidity,
        "windSpeed": data.wind.speed,
    }


def reshape_alerts(city: str, data: OneCallResponse) -> dict:
    return {
        "city": city,
        "alerts": data.alerts,
        "hasAlerts": len(data.alerts) > 0,
    }
