"""Configuration — server-side limits from /1.1/help/configuration.json."""

from pydantic import Field

from twitter_core.schemas.base import TwitterModel
from twitter_core.schemas.entities import Sizes


class Configuration(TwitterModel):
    dm_text_character_limit: int = 0
    non_username_paths: list[str] = Field(default_factory=list)
    photo_size_limit: int = 0
    photo_sizes: Sizes | None = None
    short_url_length_https: int = 0
