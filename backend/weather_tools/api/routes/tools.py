"""Tool Routes — the single tool-call entry point and the tool catalogue.

Invariants:
    - POST / takes {"tool": ..., "input": ...} and always answers JSON
    - A body that is not JSON, or not a JSON object, is a 400 with the parse message
    - Handler results (including in-band {"error": ...}) are returned with 200

Design Decisions:
    - Body read from Request instead of a pydantic body parameter: an unknown
      tool must be a 404 even when its input is garbage, which FastAPI's
      automatic body validation would turn into a 422 first
    - ToolDispatch built per request via Depends: tests override
      get_weather_client, not the dispatcher
"""

import logging

from fastapi import APIRouter, Depends, Request

from weather_tools.core.errors import MalformedRequestError
from weather_tools.infrastructure.openweather_client import (
    OpenWeatherClient, get_weather_client,
)
from weather_tools.schemas.tool_request import ToolRequest
from weather_tools.services.define_weather_tools import list_tools
from weather_tools.services.tool_dispatch import ToolDispatch

logger = logging.getLogger(__name__)
router = APIRouter(tags=["tools"])


def get_tool_dispatch(
    client: OpenWeatherClient = Depends(get_weather_client),
) -> ToolDispatch:
    return ToolDispatch(client)


async def read_envelope(request: Request) -> ToolRequest:
    """Decode the raw body into the tool envelope or raise MalformedRequestError."""
    try:
        body = await request.json()
    except ValueError as e:
        logger.info(
            f"Unparseable tool request body: {e}", extra={"path": request.url.path},
        )
        raise MalformedRequestError(str(e))
    if not isinstance(body, dict):
        logger.info(
            f"Tool request body is {type(body).__name__}, not an object",
            extra={"path": request.url.path},
        )
        raise MalformedRequestError("Request body must be a JSON object")
    return ToolRequest.model_validate(body)


@router.post("/")
async def call_tool(
    request: Request, dispatch: ToolDispatch = Depends(get_tool_dispatch),
):
    """Dispatch one tool call."""
    envelope = await read_envelope(request)
    return await dispatch.execute(envelope.tool, envelope.input)


@router.get("/api/v1/tools")
async def get_tools():
    """Catalogue of available tools with their input schemas."""
    return {"tools": list_tools()}
