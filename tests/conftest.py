"""Root conftest — shared credentials, settings and mock-transport clients.

Invariants:
    - No test ever reaches the network: every client is built over httpx.MockTransport
    - Fake app credentials in the environment, never real ones
"""

import os

# Ensure tests don't accidentally use real credentials
os.environ.setdefault("TWITTER_CONSUMER_KEY", "test-consumer-key")
os.environ.setdefault("TWITTER_CONSUMER_SECRET", "test-consumer-secret")

import httpx
import pytest

from twitter_core.config import Settings
from twitter_core.core.session import TwitterAuthConfig, TwitterAuthToken, TwitterSession
from twitter_core.services.api_client import TwitterApiClient


@pytest.fixture
def auth_config():
    return TwitterAuthConfig(consumer_key="ck-123", consumer_secret="cs-456")


@pytest.fixture
def session():
    return TwitterSession(
        auth_token=TwitterAuthToken(token="tok-789", secret="ts-000"),
        id=42,
        user_name="jack",
    )


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def mock_api():
    """Controllable fake Twitter API.

    Returns dict with:
      - requests: list of httpx.Request seen by the transport
      - routes: dict[path, httpx.Response | callable(request) -> httpx.Response]
      - transport: httpx.MockTransport serving routes (404 for unknown paths)
    """
    requests = []
    routes = {}

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        route = routes.get(request.url.path)
        if route is None:
            return httpx.Response(
                404, json={"errors": [{"code": 34, "message": "Sorry, that page does not exist."}]},
            )
        return route(request) if callable(route) else route

    return {
        "requests": requests,
        "routes": routes,
        "transport": httpx.MockTransport(handler),
    }


@pytest.fixture
def client(auth_config, session, settings, mock_api):
    with TwitterApiClient(
        auth_config, session, settings=settings, transport=mock_api["transport"],
    ) as c:
        yield c
