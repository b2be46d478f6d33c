"""Favorite Service — list, create and destroy likes."""

from twitter_core.core.endpoint import ApiService, Endpoint
from twitter_core.core.twitter_api import EXTENDED_TWEETS
from twitter_core.schemas.tweet import Tweet

Tweets = list[Tweet]


class FavoriteService(ApiService):
    list = Endpoint(
        "GET", f"/1.1/favorites/list.json?{EXTENDED_TWEETS}",
        query=("user_id", "screen_name", "count", "since_id", "max_id", "include_entities"),
        response=Tweets,
    )
    destroy = Endpoint(
        "POST", f"/1.1/favorites/destroy.json?{EXTENDED_TWEETS}",
        form=("id", "include_entities"),
        required=("id",),
        response=Tweet,
    )
    create = Endpoint(
        "POST", f"/1.1/favorites/create.json?{EXTENDED_TWEETS}",
        form=("id", "include_entities"),
        required=("id",),
        response=Tweet,
    )
