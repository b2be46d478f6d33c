"""HTTP Transport — the one signed httpx.Client shared by every service of a client.

Invariants:
    - Every request passes through OAuth1aAuth (signed before it leaves the process)
    - Timeouts come from settings, independently of the service registry
    - Only connect-level retries (httpx.HTTPTransport retries); no HTTP-level retry
    - Event hooks log method, path and status only — never headers, never bodies

Design Decisions:
    - Builder function over subclassing httpx.Client: one place for timeouts/headers/TLS
    - `verify` is the TLS hook (ssl.SSLContext or bool), the counterpart of a socket factory
    - `transport` injectable: tests pass httpx.MockTransport
"""

import logging
import ssl

import httpx

from twitter_core.config import Settings
from twitter_core.core.session import Session, TwitterAuthConfig
from twitter_core.infrastructure.auth_interceptor import OAuth1aAuth

logger = logging.getLogger(__name__)


def build_http_client(
    session: Session,
    auth_config: TwitterAuthConfig,
    settings: Settings,
    *,
    verify: ssl.SSLContext | bool = True,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create the signed `httpx.Client` for one API client."""
    auth = OAuth1aAuth(session, auth_config)
    if transport is None:
        transport = httpx.HTTPTransport(
            verify=verify, retries=settings.http_connect_retries,
        )
    return httpx.Client(
        auth=auth,
        transport=transport,
        timeout=httpx.Timeout(
            settings.http_timeout_seconds,
            connect=settings.http_connect_timeout_seconds,
        ),
        headers={
            "User-Agent": settings.user_agent,
            "Accept": "application/json",
        },
        event_hooks={
            "request": [_log_request],
            "response": [_log_response],
        },
    )


def _log_request(request: httpx.Request) -> None:
    logger.debug(
        f"{request.method} {request.url.path}",
        extra={"method": request.method, "path": request.url.path},
    )


def _log_response(response: httpx.Response) -> None:
    request = response.request
    logger.debug(
        f"{request.method} {request.url.path} -> {response.status_code}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "http_status": response.status_code,
        },
    )
