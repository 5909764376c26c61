"""Tool Request Schemas — envelope and per-tool input shapes.

Invariants:
    - Every city name (CityInput.city and each CitiesInput.cities entry) is a
      JSON string, stripped of surrounding whitespace, non-empty afterwards
    - CitiesInput.cities: 2–5 city names
    - Unknown fields in tool inputs are rejected (extra="forbid")
    - Nothing is coerced: numbers are not accepted where strings are expected

Design Decisions:
    - ToolRequest.tool typed as Any: an unknown or missing tool is a 404
      decided by dispatch, not a 400 decided here
    - strict=True over per-field StrictStr: the whole input contract is strict
    - CityText shared by both input models so single- and multi-city tools
      accept exactly the same names
"""

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

MIN_COMPARE_CITIES = 2
MAX_COMPARE_CITIES = 5


def _strip_city(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("city cannot be empty or whitespace")
    return v


CityText = Annotated[str, Field(min_length=1), AfterValidator(_strip_city)]


class ToolRequest(BaseModel):
    """Inbound envelope — {"tool": ..., "input": ...}."""
    tool: Any = None
    input: Any = None


class _ToolInput(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)


class CityInput(_ToolInput):
    """Single-city tools: getWeather, getForecast, getAirQuality, ..."""
    city: CityText = Field(description="City name, e.g. 'London' or 'Paris,FR'")


class CitiesInput(_ToolInput):
    """Multi-city tool: compareWeather."""
    cities: list[CityText] = Field(
        min_length=MIN_COMPARE_CITIES,
        max_length=MAX_COMPARE_CITIES,
        description="Between 2 and 5 city names",
    )
