"""Error Handlers — global exception handlers for the Weather Tools API.

Invariants:
    - WeatherToolsError → its http_status with {"error": message}
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Two-layer handler: domain (WeatherToolsError), catch-all (Exception)
    - No RequestValidationError handler: the tool route parses its own body,
      so input problems arrive as ToolValidationError / MalformedRequestError
    - Log level follows severity: request mistakes are WARNING, upstream
      outages are ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from weather_tools.core.errors import WeatherToolsError, ErrorSeverity

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Weather Tools domain/infrastructure error handler."""

    @app.exception_handler(WeatherToolsError)
    async def weather_tools_error_handler(
        request: Request, exc: WeatherToolsError,
    ):
        """Handle all Weather Tools domain/infrastructure errors."""
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "tool_name": exc.context.tool_name,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )
