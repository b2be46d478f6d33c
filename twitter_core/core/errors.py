"""Error Hierarchy — typed, categorized exceptions for every client failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Construction-time errors (InvalidArgumentError, ConfigurationError) are raised eagerly
    - Call-time errors (DecodeError, TransportError, TwitterApiError) propagate to the
      caller of the service method — nothing is logged-and-swallowed
    - No credentials ever appear in messages or to_dict() output

Design Decisions:
    - Single hierarchy with TwitterCoreError base: callers catch one type for everything
    - InvalidArgumentError is also a ValueError, ConfigurationError also a TypeError:
      generic stdlib handlers keep working
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
    CONFIGURATION = "configuration"
    SERIALIZATION = "serialization"
    TRANSPORT = "transport"
    EXTERNAL_API = "external_api"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    service: str | None = None
    endpoint: str | None = None
    http_status: int | None = None
    debug_info: dict[str, Any] | None = None


class TwitterCoreError(Exception):
    """Base exception for all client errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a structured error envelope (for logs and reports)."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "service": self.context.service,
                    "endpoint": self.context.endpoint,
                    "http_status": self.context.http_status,
                },
            }
        }


# ─── Construction Errors ─────────────────────────────────────────

class InvalidArgumentError(TwitterCoreError, ValueError):
    """Malformed construction input (e.g. missing session)."""
    def __init__(self, message: str, argument: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.argument = argument


class ConfigurationError(TwitterCoreError, TypeError):
    """Service type does not follow the endpoint declaration convention."""
    def __init__(
        self, message: str, service_type: object = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        if service_type is not None and ctx.service is None:
            ctx.service = getattr(service_type, "__name__", repr(service_type))
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.service_type = service_type


# ─── Call Errors ─────────────────────────────────────────────────

class DecodeError(TwitterCoreError):
    """Response payload does not parse into the declared response shape."""
    def __init__(
        self, message: str, response_type: object = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Could not decode response: {message}",
            "DECODE_ERROR", ErrorCategory.SERIALIZATION,
            ErrorSeverity.ERROR, context,
        )
        self.response_type = response_type


class TransportError(TwitterCoreError):
    """Network-level failure (connect, timeout, TLS)."""
    def __init__(self, message: str, error_type: str, context: ErrorContext | None = None):
        super().__init__(
            f"Transport error ({error_type}): {message}",
            "TRANSPORT_ERROR", ErrorCategory.TRANSPORT,
            ErrorSeverity.CRITICAL, context,
        )
        self.error_type = error_type


@dataclass(frozen=True)
class RateLimit:
    """Rate-limit window reported by x-rate-limit-* response headers."""
    limit: int | None = None
    remaining: int | None = None
    reset: int | None = None      # epoch seconds


class TwitterApiError(TwitterCoreError):
    """Twitter answered with an HTTP error status."""
    def __init__(
        self,
        status_code: int,
        api_error_code: int | None = None,
        api_message: str | None = None,
        rate_limit: RateLimit | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.http_status = status_code
        detail = api_message or "no error message in response"
        if api_error_code is not None:
            detail = f"[{api_error_code}] {detail}"
        severity = ErrorSeverity.CRITICAL if status_code >= 500 else ErrorSeverity.ERROR
        super().__init__(
            f"Twitter API error (HTTP {status_code}): {detail}",
            "TWITTER_API_ERROR", ErrorCategory.EXTERNAL_API,
            severity, ctx,
        )
        self.status_code = status_code
        self.api_error_code = api_error_code
        self.api_message = api_message
        self.rate_limit = rate_limit or RateLimit()
