"""Define Weather Tools — descriptions and input shapes for the six tools.

Invariants:
    - Exactly one entry per ToolName member, in enum order
    - Input shapes are the pydantic models dispatch validates against, so the
      advertised input_schema can never drift from what is enforced

Design Decisions:
    - Descriptors in a dedicated file: explicit, no auto-discovery
    - MappingProxyType: the tables are read-only after import
"""

from types import MappingProxyType

from pydantic import BaseModel

from weather_tools.core.domain_types import ToolName
from weather_tools.schemas.tool_request import CitiesInput, CityInput

TOOL_INPUTS: MappingProxyType[ToolName, type[BaseModel]] = MappingProxyType({
    ToolName.CURRENT_WEATHER: CityInput,
    ToolName.FORECAST: CityInput,
    ToolName.AIR_QUALITY: CityInput,
    ToolName.DETAILED_WEATHER: CityInput,
    ToolName.COMPARE_WEATHER: CitiesInput,
    ToolName.WEATHER_ALERTS: CityInput,
})

TOOL_DESCRIPTIONS: MappingProxyType[ToolName, str] = MappingProxyType({
    ToolName.CURRENT_WEATHER:
        "Fetches current weather for the specified city",
    ToolName.FORECAST:
        "Fetches 5-day weather forecast for the specified city",
    ToolName.AIR_QUALITY:
        "Fetches current air quality index (AQI) for the specified city",
    ToolName.DETAILED_WEATHER:
        "Fetches detailed weather including feels like, humidity, wind, "
        "pressure, and sunrise/sunset times",
    ToolName.COMPARE_WEATHER:
        "Compares current weather between multiple cities (max 5 cities)",
    ToolName.WEATHER_ALERTS:
        "Fetches weather alerts and warnings for the specified city "
        "(One Call API required)",
})


def list_tools() -> list[dict]:
    """Tool catalogue: name, description and JSON schema of the input."""
    return [
        {
            "name": tool.value,
            "description": TOOL_DESCRIPTIONS[tool],
            "input_schema": TOOL_INPUTS[tool].model_json_schema(),
        }
        for tool in ToolName
    ]
