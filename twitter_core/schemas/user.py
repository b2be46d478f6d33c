"""User — public profile of a Twitter account."""

from pydantic import Field

from twitter_core.schemas.base import TwitterModel
from twitter_core.schemas.entities import UrlEntity


class UrlEntities(TwitterModel):
    urls: list[UrlEntity] = Field(default_factory=list)


class UserEntities(TwitterModel):
    url: UrlEntities | None = None
    description: UrlEntities | None = None


class User(TwitterModel):
    id: int = 0
    id_str: str | None = None
    name: str | None = None
    screen_name: str | None = None
    description: str | None = None
    location: str | None = None
    url: str | None = None
    lang: str | None = None
    created_at: str | None = None
    email: str | None = None
    profile_image_url_https: str | None = None
    profile_banner_url: str | None = None
    followers_count: int = 0
    friends_count: int = 0
    statuses_count: int = 0
    favourites_count: int = 0
    listed_count: int = 0
    verified: bool = False
    protected: bool = False
    default_profile_image: bool = False
    entities: UserEntities | None = None
    withheld_in_countries: list[str] = Field(default_factory=list)
