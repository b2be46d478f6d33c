"""List Service — timeline of a Twitter list (by list_id, or slug + owner)."""

from twitter_core.core.endpoint import ApiService, Endpoint
from twitter_core.core.twitter_api import EXTENDED_TWEETS
from twitter_core.schemas.tweet import Tweet


class ListService(ApiService):
    statuses = Endpoint(
        "GET", f"/1.1/lists/statuses.json?{EXTENDED_TWEETS}",
        query=(
            "list_id", "slug", "owner_screen_name", "owner_id", "since_id",
            "max_id", "count", "include_entities", "include_rts",
        ),
        response=list[Tweet],
    )
