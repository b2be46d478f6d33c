"""Twitter API Client — authenticated access to Twitter API endpoints.

Invariants:
    - session is checked before anything else is built: a None session raises
      InvalidArgumentError with no transport, codec or factory created
    - One signed httpx.Client, one JsonCodec, one RestAdapter per client, built in
      __init__ and read-only afterwards
    - get_service(T) returns the same instance for T on every call, from every thread
    - The typed accessors are exactly get_service(<ServiceType>) — nothing more

Design Decisions:
    - Extend by subclassing and calling get_service() with any ApiService subclass:
      the factory needs no changes for new endpoints
    - close()/context manager release the httpx connection pool
"""

import logging
import ssl
from typing import TypeVar

import httpx

from twitter_core.config import Settings, get_settings
from twitter_core.core.endpoint import ApiService, check_service_definition
from twitter_core.core.errors import InvalidArgumentError
from twitter_core.core.session import Session, TwitterAuthConfig
from twitter_core.core.twitter_api import TwitterApi
from twitter_core.infrastructure.http_transport import build_http_client
from twitter_core.infrastructure.json_codec import JsonCodec
from twitter_core.infrastructure.rest_adapter import RestAdapter
from twitter_core.services.core_provider import TwitterCore
from twitter_core.services.define_account_service import AccountService
from twitter_core.services.define_collection_service import CollectionService
from twitter_core.services.define_configuration_service import ConfigurationService
from twitter_core.services.define_favorite_service import FavoriteService
from twitter_core.services.define_list_service import ListService
from twitter_core.services.define_media_service import MediaService
from twitter_core.services.define_search_service import SearchService
from twitter_core.services.define_statuses_service import StatusesService
from twitter_core.services.service_registry import ServiceRegistry

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=ApiService)


class TwitterApiClient:
    """Signed Twitter API client exposing lazily-created, cached services."""

    def __init__(
        self,
        auth_config: TwitterAuthConfig,
        session: Session,
        api: TwitterApi | None = None,
        verify: ssl.SSLContext | bool = True,
        *,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        if session is None:
            raise InvalidArgumentError("Session must not be null.", "session")
        if auth_config is None:
            raise InvalidArgumentError("Auth config must not be null.", "auth_config")

        settings = settings or get_settings()
        self._session = session
        self._http = build_http_client(
            session, auth_config, settings, verify=verify, transport=transport,
        )
        api = api or TwitterApi(
            base_host_url=settings.api_base_url,
            upload_host_url=settings.upload_base_url,
        )
        self._adapter = RestAdapter(self._http, api, JsonCodec())
        self._services = ServiceRegistry(self._adapter.create)
        logger.debug(f"TwitterApiClient ready for session {session.id}")

    @classmethod
    def from_core(
        cls,
        session: Session,
        core: TwitterCore,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> "TwitterApiClient":
        """Build a client from a TwitterCore provider; only the session varies."""
        if session is None:
            raise InvalidArgumentError("Session must not be null.", "session")
        return cls(
            core.auth_config, session, core.api, core.verify,
            settings=core.settings, transport=transport,
        )

    @property
    def session(self) -> Session:
        return self._session

    # ─── Services ────────────────────────────────────────────────

    def get_account_service(self) -> AccountService:
        return self.get_service(AccountService)

    def get_favorite_service(self) -> FavoriteService:
        return self.get_service(FavoriteService)

    def get_statuses_service(self) -> StatusesService:
        return self.get_service(StatusesService)

    def get_search_service(self) -> SearchService:
        return self.get_service(SearchService)

    def get_list_service(self) -> ListService:
        return self.get_service(ListService)

    def get_collection_service(self) -> CollectionService:
        """CollectionService is expected to change upstream."""
        return self.get_service(CollectionService)

    def get_configuration_service(self) -> ConfigurationService:
        return self.get_service(ConfigurationService)

    def get_media_service(self) -> MediaService:
        """Media endpoints live on the upload host."""
        return self.get_service(MediaService)

    def get_service(self, service_type: type[S]) -> S:
        """Instance of service_type bound to this client's signed transport.

        Created on first use, then cached for the client's lifetime.
        Raises ConfigurationError if service_type is not a valid ApiService.
        """
        if not isinstance(service_type, type):
            # non-types may be unhashable; reject before the registry lookup
            check_service_definition(service_type)
        return self._services.get(service_type)

    # ─── Lifecycle ───────────────────────────────────────────────

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "TwitterApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
