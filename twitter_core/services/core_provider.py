"""TwitterCore — explicit provider of process-level client configuration.

Invariants:
    - Immutable once built: auth config, TLS verification, hosts and settings
    - Missing app credentials raise InvalidArgumentError when the provider is built,
      not when the first request is signed

Design Decisions:
    - Passed explicitly to TwitterApiClient.from_core(): no ambient global holder,
      tests build their own provider
"""

import ssl
from dataclasses import dataclass, field

from pydantic import ValidationError

from twitter_core.config import Settings, get_settings
from twitter_core.core.errors import InvalidArgumentError
from twitter_core.core.session import TwitterAuthConfig
from twitter_core.core.twitter_api import TwitterApi


@dataclass(frozen=True)
class TwitterCore:
    auth_config: TwitterAuthConfig
    api: TwitterApi = field(default_factory=TwitterApi)
    verify: ssl.SSLContext | bool = True
    settings: Settings = field(default_factory=get_settings)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "TwitterCore":
        """Build a provider from TWITTER_* settings (cached settings by default)."""
        settings = settings or get_settings()
        try:
            auth_config = TwitterAuthConfig(
                consumer_key=settings.consumer_key,
                consumer_secret=settings.consumer_secret,
            )
        except ValidationError as e:
            raise InvalidArgumentError(
                "TWITTER_CONSUMER_KEY and TWITTER_CONSUMER_SECRET must be set "
                f"({e.error_count()} invalid field(s))",
                "settings",
            ) from e
        return cls(
            auth_config=auth_config,
            api=TwitterApi(
                base_host_url=settings.api_base_url,
                upload_host_url=settings.upload_base_url,
            ),
            verify=settings.verify_tls,
            settings=settings,
        )
