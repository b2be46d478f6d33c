"""Tweet — status payload, the shape most endpoints return.

Invariants:
    - Self-referencing fields (quoted_status, retweeted_status) are optional
    - display_text_range, withheld_in_countries never None
"""

from typing import Any

from pydantic import Field

from twitter_core.schemas.base import TwitterModel
from twitter_core.schemas.card import Card
from twitter_core.schemas.entities import TweetEntities
from twitter_core.schemas.user import User


class Coordinates(TwitterModel):
    type: str | None = None
    coordinates: list[float] = Field(default_factory=list)

    @property
    def longitude(self) -> float | None:
        return self.coordinates[0] if len(self.coordinates) == 2 else None

    @property
    def latitude(self) -> float | None:
        return self.coordinates[1] if len(self.coordinates) == 2 else None


class BoundingBox(TwitterModel):
    type: str | None = None
    coordinates: list[list[list[float]]] = Field(default_factory=list)


class Place(TwitterModel):
    id: str | None = None
    url: str | None = None
    place_type: str | None = None
    name: str | None = None
    full_name: str | None = None
    country_code: str | None = None
    country: str | None = None
    attributes: dict[str, str] = Field(default_factory=dict)
    bounding_box: BoundingBox | None = None


class Tweet(TwitterModel):
    id: int = 0
    id_str: str | None = None
    created_at: str | None = None
    text: str | None = None
    full_text: str | None = None
    display_text_range: list[int] = Field(default_factory=list)
    source: str | None = None
    lang: str | None = None
    truncated: bool = False
    favorited: bool = False
    retweeted: bool = False
    possibly_sensitive: bool = False
    favorite_count: int = 0
    retweet_count: int = 0
    in_reply_to_status_id: int | None = None
    in_reply_to_status_id_str: str | None = None
    in_reply_to_user_id: int | None = None
    in_reply_to_screen_name: str | None = None
    quoted_status_id: int | None = None
    user: User | None = None
    entities: TweetEntities | None = None
    extended_entities: TweetEntities | None = None
    coordinates: Coordinates | None = None
    place: Place | None = None
    card: Card | None = None
    quoted_status: "Tweet | None" = None
    retweeted_status: "Tweet | None" = None
    current_user_retweet: dict[str, Any] = Field(default_factory=dict)
    scopes: dict[str, Any] = Field(default_factory=dict)
    withheld_in_countries: list[str] = Field(default_factory=list)
    withheld_copyright: bool = False
    withheld_scope: str | None = None

    @property
    def display_text(self) -> str | None:
        return self.full_text if self.full_text is not None else self.text
