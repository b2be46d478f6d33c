"""Configuration Service — server-side limits (t.co URL length, photo sizes, ...)."""

from twitter_core.core.endpoint import ApiService, Endpoint
from twitter_core.schemas.configuration import Configuration


class ConfigurationService(ApiService):
    configuration = Endpoint(
        "GET", "/1.1/help/configuration.json",
        response=Configuration,
    )
