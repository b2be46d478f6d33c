"""Collection — curated timeline payload of /1.1/collections/entries.json.

Tweets and users arrive in id-keyed maps (objects), ordered by the timeline list
under "response".
"""

from pydantic import Field

from twitter_core.schemas.base import TwitterModel
from twitter_core.schemas.tweet import Tweet
from twitter_core.schemas.user import User


class CollectionContent(TwitterModel):
    tweets: dict[str, Tweet] = Field(default_factory=dict)
    users: dict[str, User] = Field(default_factory=dict)


class TweetRef(TwitterModel):
    id: int = 0


class TimelineItem(TwitterModel):
    tweet: TweetRef | None = None


class Position(TwitterModel):
    min_position: int = 0
    max_position: int = 0


class CollectionMetadata(TwitterModel):
    timeline_id: str | None = None
    position: Position | None = None
    timeline: list[TimelineItem] = Field(default_factory=list)


class TwitterCollection(TwitterModel):
    contents: CollectionContent | None = Field(default=None, alias="objects")
    metadata: CollectionMetadata | None = Field(default=None, alias="response")

    def ordered_tweets(self) -> list[Tweet]:
        """Tweets in timeline order; ids missing from objects are skipped."""
        if self.contents is None or self.metadata is None:
            return []
        tweets = self.contents.tweets
        return [
            tweets[str(item.tweet.id)] for item in self.metadata.timeline
            if item.tweet is not None and str(item.tweet.id) in tweets
        ]
