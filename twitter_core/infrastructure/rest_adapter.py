"""REST Adapter — turns declared ApiService types into live instances and runs their calls.

Invariants:
    - create() is pure: validates the declaration, returns a new instance, caches nothing
    - A malformed service type raises ConfigurationError at create(), never at first call
    - httpx.TransportError -> TransportError; HTTP >= 400 -> TwitterApiError;
      undecodable body -> DecodeError. All propagate to the caller, none retried
    - Shared state (http client, codec, base URL) is read-only after construction

Design Decisions:
    - Adapter is both factory and executor: services hold only a reference to it
    - Endpoint.host picks a TwitterApi host per endpoint ("upload" for media);
      unknown host names are a ConfigurationError at create()
"""

import logging
from typing import Any, TypeVar

import httpx

from twitter_core.core.endpoint import ApiService, PreparedCall, check_service_definition
from twitter_core.core.errors import (
    ConfigurationError, ErrorContext, RateLimit, TransportError, TwitterApiError,
)
from twitter_core.core.twitter_api import TwitterApi
from twitter_core.infrastructure.json_codec import JsonCodec

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=ApiService)


class RestAdapter:
    """Remote call factory bound to one transport, codec and set of hosts."""

    def __init__(self, http_client: httpx.Client, api: TwitterApi, codec: JsonCodec):
        self._http = http_client
        self._api = api
        self._codec = codec

    @property
    def api(self) -> TwitterApi:
        return self._api

    def create(self, service_type: type[S]) -> S:
        """Build a service instance for service_type. Raises ConfigurationError."""
        endpoints = check_service_definition(service_type)
        for attr, endpoint in endpoints.items():
            if self._api.resolve_host(endpoint.host) is None:
                raise ConfigurationError(
                    f"{service_type.__name__}.{attr}: unknown host '{endpoint.host}'",
                    service_type,
                )
        logger.debug(
            f"Created {service_type.__name__} ({len(endpoints)} endpoints)",
            extra={"service": service_type.__name__},
        )
        return service_type(self)

    def url_for(self, call: PreparedCall) -> str:
        return f"{self._api.resolve_host(call.host)}{call.path}"

    def execute(self, call: PreparedCall) -> Any:
        """Send one bound call and decode its response."""
        context = ErrorContext(service=call.service, endpoint=call.endpoint)
        try:
            response = self._http.request(
                call.method,
                self.url_for(call),
                params=call.query or None,
                data=dict(call.form) or None,
                files=call.files or None,
            )
        except httpx.TimeoutException as e:
            raise TransportError(str(e) or "request timed out", "timeout", context) from e
        except httpx.TransportError as e:
            raise TransportError(str(e) or type(e).__name__, type(e).__name__, context) from e

        if response.status_code >= 400:
            error = api_error_from(response, context)
            logger.warning(
                error.message,
                extra={
                    "service": call.service, "endpoint": call.endpoint,
                    "http_status": response.status_code, "error_code": error.code,
                },
            )
            raise error
        return self._codec.decode(response.content, call.response, context)


# ─── Error mapping ───────────────────────────────────────────────

def api_error_from(response: httpx.Response, context: ErrorContext) -> TwitterApiError:
    """Build a TwitterApiError from an error response (body may not be JSON)."""
    code, message = _first_api_error(response)
    return TwitterApiError(
        response.status_code,
        api_error_code=code,
        api_message=message,
        rate_limit=rate_limit_from(response.headers),
        context=context,
    )


def _first_api_error(response: httpx.Response) -> tuple[int | None, str | None]:
    try:
        body = response.json()
    except ValueError:
        return None, None
    errors = body.get("errors") if isinstance(body, dict) else None
    if not isinstance(errors, list) or not errors or not isinstance(errors[0], dict):
        return None, None
    first = errors[0]
    code = first.get("code")
    message = first.get("message")
    return (
        code if isinstance(code, int) else None,
        message if isinstance(message, str) else None,
    )


def rate_limit_from(headers: httpx.Headers) -> RateLimit:
    return RateLimit(
        limit=_int_header(headers, "x-rate-limit-limit"),
        remaining=_int_header(headers, "x-rate-limit-remaining"),
        reset=_int_header(headers, "x-rate-limit-reset"),
    )


def _int_header(headers: httpx.Headers, name: str) -> int | None:
    value = headers.get(name)
    try:
        return int(value) if value is not None else None
    except ValueError:
        return None
