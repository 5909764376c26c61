"""Domain Types — tool names and fixed lookup tables.

Invariants:
    - ToolName is the closed set of dispatchable operations (exactly 6)
    - Descriptive aliases (fetch-current-weather, ...) resolve to the same members
    - AQI_LABELS is indexed 1-based by the OpenWeather AQI (1–5)

Design Decisions:
    - str Enum: members compare equal to their wire names and serialize to JSON
      without custom encoders
    - Aliases via _missing_ so ToolName("compare-weather") works without
      duplicating members
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class ToolName(str, Enum):
    """Dispatchable tools — values are the canonical wire names."""
    CURRENT_WEATHER = "getWeather"
    FORECAST = "getForecast"
    AIR_QUALITY = "getAirQuality"
    DETAILED_WEATHER = "getDetailedWeather"
    COMPARE_WEATHER = "compareWeather"
    WEATHER_ALERTS = "getWeatherAlerts"

    @classmethod
    def _missing_(cls, value: object) -> "ToolName | None":
        if isinstance(value, str):
            return _TOOL_ALIASES.get(value)
        return None


_TOOL_ALIASES = {
    "fetch-current-weather": ToolName.CURRENT_WEATHER,
    "fetch-forecast": ToolName.FORECAST,
    "fetch-air-quality": ToolName.AIR_QUALITY,
    "fetch-detailed-weather": ToolName.DETAILED_WEATHER,
    "compare-weather": ToolName.COMPARE_WEATHER,
    "fetch-alerts": ToolName.WEATHER_ALERTS,
}


# ─── Lookup Tables ───────────────────────────────────────────────

AQI_LABELS = ("Good", "Fair", "Moderate", "Poor", "Very Poor")

# 3-hour forecast records per day
FORECAST_RECORDS_PER_DAY = 8
