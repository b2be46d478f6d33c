"""Search — result page of /1.1/search/tweets.json."""

from pydantic import Field

from twitter_core.schemas.base import TwitterModel
from twitter_core.schemas.tweet import Tweet


class SearchMetadata(TwitterModel):
    max_id: int = 0
    max_id_str: str | None = None
    since_id: int = 0
    since_id_str: str | None = None
    refresh_url: str | None = None
    next_results: str | None = None
    count: int = 0
    completed_in: float = 0.0
    query: str | None = None


class Search(TwitterModel):
    statuses: list[Tweet] = Field(default_factory=list)
    search_metadata: SearchMetadata | None = None
