"""Tool Routes — end-to-end tests of the HTTP contract.

Tests cover:
    - 200 with the tool result for valid calls
    - 200 with {"error": ...} for upstream failures (not 4xx/5xx)
    - 404 {"error": "Tool not found"} for unknown or missing tool
    - 400 for unparseable / non-object bodies and shape violations
    - 502 when OpenWeather is unreachable
    - Tool catalogue lists all six tools with schemas
    - Integer readings stay JSON integers
    - Malformed bodies are logged with the request path
"""

import logging

import httpx
import pytest

from weather_tools.infrastructure.openweather_client import (
    AIR_POLLUTION_PATH, CURRENT_WEATHER_PATH, FORECAST_PATH, GEOCODE_PATH,
)
from tests.fake_openweather import (
    current_weather_payload, error_payload, forecast_payload,
)


async def test_get_weather_ok(api_client, fake_upstream):
    fake_upstream.reply(CURRENT_WEATHER_PATH, current_weather_payload())
    resp = await api_client.post("/", json={"tool": "getWeather", "input": {"city": "London"}})
    assert resp.status_code == 200
    assert resp.json() == {"city": "London", "temp": 12.5, "description": "light rain"}


async def test_detailed_weather_keeps_integer_readings(api_client, fake_upstream):
    fake_upstream.reply(CURRENT_WEATHER_PATH, current_weather_payload())
    resp = await api_client.post(
        "/", json={"tool": "getDetailedWeather", "input": {"city": "London"}},
    )
    body = resp.json()
    for value in (body["humidity"], body["pressure"], body["clouds"],
                  body["wind"]["direction"]):
        assert isinstance(value, int)


async def test_alias_name_is_accepted(api_client, fake_upstream):
    fake_upstream.reply(FORECAST_PATH, forecast_payload(40))
    resp = await api_client.post(
        "/", json={"tool": "fetch-forecast", "input": {"city": "London"}},
    )
    assert resp.status_code == 200
    assert len(resp.json()["forecast"]) == 5


async def test_upstream_error_is_200_with_error_body(api_client, fake_upstream):
    fake_upstream.reply(
        CURRENT_WEATHER_PATH, error_payload("city not found", "404"), status_code=404,
    )
    resp = await api_client.post("/", json={"tool": "getWeather", "input": {"city": "Xq"}})
    assert resp.status_code == 200
    assert resp.json() == {"error": "city not found"}


async def test_city_not_found_is_200(api_client, fake_upstream):
    fake_upstream.reply(GEOCODE_PATH, [])
    resp = await api_client.post("/", json={"tool": "getAirQuality", "input": {"city": "Xq"}})
    assert resp.status_code == 200
    assert resp.json() == {"error": "City not found"}
    assert fake_upstream.calls_to(AIR_POLLUTION_PATH) == []


@pytest.mark.parametrize("body", [
    {"tool": "getTides", "input": {"city": "London"}},
    {"tool": "getweather", "input": {"city": "London"}},
    {"input": {"city": "London"}},
    {"tool": 12},
])
async def test_unknown_tool_is_404(body, api_client, fake_upstream):
    resp = await api_client.post("/", json=body)
    assert resp.status_code == 404
    assert resp.json() == {"error": "Tool not found"}
    assert fake_upstream.requests == []


@pytest.mark.parametrize("content", [b"", b"{not json", b"\xff\xfe"])
async def test_unparseable_body_is_400(content, api_client):
    resp = await api_client.post(
        "/", content=content, headers={"content-type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"]


@pytest.mark.parametrize("body", [[], "getWeather", 3])
async def test_non_object_body_is_400(body, api_client):
    resp = await api_client.post("/", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Request body must be a JSON object"}


@pytest.mark.parametrize("kwargs", [
    {"content": b"{not json", "headers": {"content-type": "application/json"}},
    {"json": ["getWeather"]},
])
async def test_malformed_body_is_logged(kwargs, api_client, caplog):
    with caplog.at_level(logging.INFO, logger="weather_tools.api.routes.tools"):
        resp = await api_client.post("/", **kwargs)
    assert resp.status_code == 400
    (record,) = [
        r for r in caplog.records if r.name == "weather_tools.api.routes.tools"
    ]
    assert record.path == "/"


@pytest.mark.parametrize("tool,tool_input", [
    ("getWeather", {}),
    ("getWeather", {"city": 1}),
    ("getForecast", {"city": ""}),
    ("getAirQuality", {"city": "   "}),
    ("compareWeather", {"cities": ["   ", "London"]}),
    ("getDetailedWeather", None),
    ("getWeatherAlerts", {"city": "Oslo", "extra": 1}),
])
async def test_shape_violation_is_400(tool, tool_input, api_client, fake_upstream):
    resp = await api_client.post("/", json={"tool": tool, "input": tool_input})
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("input")
    assert fake_upstream.requests == []


@pytest.mark.parametrize("count,status", [(1, 400), (2, 200), (5, 200), (6, 400)])
async def test_compare_city_count_bounds(count, status, api_client, fake_upstream):
    fake_upstream.reply(CURRENT_WEATHER_PATH, current_weather_payload())
    cities = [f"City{i}" for i in range(count)]
    resp = await api_client.post(
        "/", json={"tool": "compareWeather", "input": {"cities": cities}},
    )
    assert resp.status_code == status
    if status == 200:
        assert resp.json()["count"] == count
        assert len(fake_upstream.requests) == count
    else:
        assert fake_upstream.requests == []


async def test_unreachable_upstream_is_502(api_client, fake_upstream):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    fake_upstream.route(CURRENT_WEATHER_PATH, refuse)
    resp = await api_client.post("/", json={"tool": "getWeather", "input": {"city": "London"}})
    assert resp.status_code == 502
    assert resp.json()["error"].startswith("Weather provider unavailable")


async def test_tool_catalogue(api_client):
    resp = await api_client.get("/api/v1/tools")
    assert resp.status_code == 200
    tools = resp.json()["tools"]
    assert [t["name"] for t in tools] == [
        "getWeather", "getForecast", "getAirQuality",
        "getDetailedWeather", "compareWeather", "getWeatherAlerts",
    ]
    compare = tools[4]
    assert compare["input_schema"]["properties"]["cities"]["minItems"] == 2
    assert compare["input_schema"]["properties"]["cities"]["maxItems"] == 5
    assert "city" in tools[0]["input_schema"]["required"]
