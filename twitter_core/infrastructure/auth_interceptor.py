"""Auth Interceptor — signs every outgoing request with OAuth 1.0a user credentials.

Invariants:
    - Construction fails (InvalidArgumentError) without a session or auth config —
      before any request can be attempted
    - Every request gets a fresh nonce + timestamp: no signature is ever reused
    - Signed parameters = query params + form params of x-www-form-urlencoded bodies;
      multipart bodies are not signed
    - Credentials are never logged and never kept outside this object

Design Decisions:
    - httpx.Auth subclass: the transport calls auth_flow() per request, for every service
    - requires_request_body=True: form bodies must be readable to be signed
    - nonce/clock injectable: signatures are reproducible in tests
"""

from collections.abc import Callable, Generator

import httpx

from twitter_core.core.errors import InvalidArgumentError
from twitter_core.core.oauth1a import (
    build_authorization_header, new_nonce, new_timestamp, parse_query,
)
from twitter_core.core.session import Session, TwitterAuthConfig


_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class OAuth1aAuth(httpx.Auth):
    """Per-request OAuth 1.0a signer for httpx clients."""

    requires_request_body = True

    def __init__(
        self,
        session: Session,
        auth_config: TwitterAuthConfig,
        nonce_factory: Callable[[], str] = new_nonce,
        clock: Callable[[], str] = new_timestamp,
    ):
        if session is None:
            raise InvalidArgumentError("Session must not be null.", "session")
        if auth_config is None:
            raise InvalidArgumentError("Auth config must not be null.", "auth_config")
        self._session = session
        self._auth_config = auth_config
        self._nonce_factory = nonce_factory
        self._clock = clock

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = self.authorization_for(request)
        yield request

    def authorization_for(self, request: httpx.Request) -> str:
        """Compute the Authorization header value for one request."""
        token = self._session.auth_token
        return build_authorization_header(
            method=request.method,
            url=str(request.url),
            request_params=signed_parameters(request),
            consumer_key=self._auth_config.consumer_key,
            consumer_secret=self._auth_config.consumer_secret.get_secret_value(),
            token=token.token,
            token_secret=token.secret.get_secret_value(),
            nonce=self._nonce_factory(),
            timestamp=self._clock(),
        )

    def __repr__(self) -> str:
        return f"OAuth1aAuth(session_id={self._session.id})"


def signed_parameters(request: httpx.Request) -> list[tuple[str, str]]:
    """Query parameters plus form-body parameters that enter the signature."""
    params = parse_query(request.url.query.decode("ascii"))
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() == _FORM_CONTENT_TYPE:
        params.extend(parse_query(request.content.decode("utf-8")))
    return params
