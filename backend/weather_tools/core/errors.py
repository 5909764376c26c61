"""Error Hierarchy — typed, categorized exceptions for all Weather Tools failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() always produces the flat {"error": message} envelope
    - Request errors are 400/404; upstream transport errors are 502
    - UpstreamAPIError never reaches the HTTP layer: handlers fold it into
      an in-band {"error": message} result with status 200

Design Decisions:
    - Single hierarchy with WeatherToolsError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tool_name: str | None = None
    city: str | None = None
    debug_info: dict[str, Any] | None = None


class WeatherToolsError(Exception):
    """Base exception for all Weather Tools errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Request Errors (400-level) ─────────────────────────────────

class MalformedRequestError(WeatherToolsError):
    """Request envelope could not be decoded."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "MALFORMED_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class ToolValidationError(WeatherToolsError):
    """Tool input failed shape validation."""
    def __init__(
        self, message: str, fields: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.fields = fields or []


class ToolNotFoundError(WeatherToolsError):
    """Requested tool is not registered."""
    def __init__(self, tool_name: object, context: ErrorContext | None = None):
        super().__init__(
            "Tool not found", "TOOL_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING,
            context, 404,
        )
        self.tool_name = tool_name


# ─── Upstream Errors ────────────────────────────────────────────

class UpstreamAPIError(WeatherToolsError):
    """OpenWeather answered with a non-success status."""
    def __init__(
        self, message: str, upstream_status: int,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UPSTREAM_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.WARNING, context, 502,
        )
        self.upstream_status = upstream_status


class UpstreamUnavailableError(WeatherToolsError):
    """OpenWeather could not be reached or returned an unreadable body."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Weather provider unavailable: {message}",
            "UPSTREAM_UNAVAILABLE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
