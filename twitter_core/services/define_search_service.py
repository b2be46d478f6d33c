"""Search Service — standard search over recent tweets."""

from twitter_core.core.endpoint import ApiService, Endpoint
from twitter_core.core.twitter_api import EXTENDED_TWEETS
from twitter_core.schemas.search import Search


class SearchService(ApiService):
    tweets = Endpoint(
        "GET", f"/1.1/search/tweets.json?{EXTENDED_TWEETS}",
        query=(
            "q", "geocode", "lang", "locale", "result_type", "count",
            "until", "since_id", "max_id", "include_entities",
        ),
        required=("q",),
        response=Search,
    )
