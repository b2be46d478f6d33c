"""OAuth 1.0a Signing — pure HMAC-SHA1 request signing (RFC 5849).

Invariants:
    - Percent-encoding is RFC 3986 (only ALPHA / DIGIT / "-._~" left unencoded)
    - Parameters sorted by encoded key, then encoded value
    - Base URL is scheme + host (+ non-default port) + path — no query, no fragment
    - '+' in a query string is an encoded space (application/x-www-form-urlencoded)
    - Functions are deterministic given nonce + timestamp; only new_nonce/new_timestamp are not

Design Decisions:
    - No OAuth library: the signing surface is ~5 functions and stays testable against
      Twitter's published "Creating a signature" example
"""

import base64
import hashlib
import hmac
import secrets
import time
from collections.abc import Iterable
from urllib.parse import parse_qsl, quote, urlsplit, urlunsplit

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"

_DEFAULT_PORTS = {"http": 80, "https": 443}

Params = Iterable[tuple[str, str]]


def percent_encode(value: str) -> str:
    """RFC 3986 encoding — '~' is unreserved, everything else outside [A-Za-z0-9-._] is encoded."""
    return quote(value, safe="~")


def normalize_url(url: str) -> str:
    """Signature base URL: lowercase scheme/host, default port dropped, query stripped."""
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    host = (parts.hostname or "").lower()
    port = parts.port
    netloc = host if port is None or _DEFAULT_PORTS.get(scheme) == port else f"{host}:{port}"
    return urlunsplit((scheme, netloc, parts.path or "/", "", ""))


def parse_query(query: str) -> list[tuple[str, str]]:
    """Decode a query/form string into (key, value) pairs, keeping blank values."""
    return parse_qsl(query, keep_blank_values=True)


def normalize_parameters(params: Params) -> str:
    encoded = sorted(
        (percent_encode(k), percent_encode(v)) for k, v in params
    )
    return "&".join(f"{k}={v}" for k, v in encoded)


def signature_base_string(method: str, url: str, params: Params) -> str:
    return "&".join((
        method.upper(),
        percent_encode(normalize_url(url)),
        percent_encode(normalize_parameters(params)),
    ))


def signing_key(consumer_secret: str, token_secret: str | None) -> str:
    return f"{percent_encode(consumer_secret)}&{percent_encode(token_secret or '')}"


def sign_hmac_sha1(base_string: str, key: str) -> str:
    digest = hmac.new(
        key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha1,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def new_nonce() -> str:
    return secrets.token_hex(16)


def new_timestamp() -> str:
    return str(int(time.time()))


def build_authorization_header(
    *,
    method: str,
    url: str,
    request_params: Params,
    consumer_key: str,
    consumer_secret: str,
    token: str | None,
    token_secret: str | None,
    nonce: str,
    timestamp: str,
    callback: str | None = None,
) -> str:
    """Compute the `Authorization: OAuth ...` header value for one request.

    request_params are the query parameters plus, for form-encoded bodies,
    the form parameters. oauth_* parameters are generated here.
    """
    oauth_params = {
        "oauth_consumer_key": consumer_key,
        "oauth_nonce": nonce,
        "oauth_signature_method": SIGNATURE_METHOD,
        "oauth_timestamp": timestamp,
        "oauth_version": OAUTH_VERSION,
    }
    if token:
        oauth_params["oauth_token"] = token
    if callback:
        oauth_params["oauth_callback"] = callback

    base = signature_base_string(
        method, url, [*request_params, *oauth_params.items()],
    )
    oauth_params["oauth_signature"] = sign_hmac_sha1(
        base, signing_key(consumer_secret, token_secret),
    )
    header = ", ".join(
        f'{percent_encode(k)}="{percent_encode(v)}"'
        for k, v in sorted(oauth_params.items())
    )
    return f"OAuth {header}"
