"""Entities — URLs, mentions, hashtags, symbols and media extracted from tweet text.

Invariants:
    - indices is always a list ([start, end] when present, [] when absent or null)
    - TweetEntities lists are never None
"""

from pydantic import Field

from twitter_core.schemas.base import TwitterModel


class Entity(TwitterModel):
    indices: list[int] = Field(default_factory=list)

    @property
    def start(self) -> int | None:
        return self.indices[0] if len(self.indices) == 2 else None

    @property
    def end(self) -> int | None:
        return self.indices[1] if len(self.indices) == 2 else None


class UrlEntity(Entity):
    url: str | None = None
    expanded_url: str | None = None
    display_url: str | None = None


class HashtagEntity(Entity):
    text: str = ""


class SymbolEntity(Entity):
    text: str = ""


class MentionEntity(Entity):
    id: int = 0
    id_str: str | None = None
    name: str | None = None
    screen_name: str = ""


class Size(TwitterModel):
    w: int = 0
    h: int = 0
    resize: str | None = None


class Sizes(TwitterModel):
    thumb: Size | None = None
    small: Size | None = None
    medium: Size | None = None
    large: Size | None = None


class VideoVariant(TwitterModel):
    bitrate: int = 0
    content_type: str | None = None
    url: str | None = None


class VideoInfo(TwitterModel):
    aspect_ratio: list[int] = Field(default_factory=list)
    duration_millis: int = 0
    variants: list[VideoVariant] = Field(default_factory=list)


class MediaEntity(UrlEntity):
    id: int = 0
    id_str: str | None = None
    media_url: str | None = None
    media_url_https: str | None = None
    sizes: Sizes | None = None
    source_status_id: int = 0
    source_status_id_str: str | None = None
    type: str | None = None
    video_info: VideoInfo | None = None
    ext_alt_text: str | None = None


class TweetEntities(TwitterModel):
    urls: list[UrlEntity] = Field(default_factory=list)
    user_mentions: list[MentionEntity] = Field(default_factory=list)
    media: list[MediaEntity] = Field(default_factory=list)
    hashtags: list[HashtagEntity] = Field(default_factory=list)
    symbols: list[SymbolEntity] = Field(default_factory=list)
