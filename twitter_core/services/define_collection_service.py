"""Collection Service — entries of a curated collection timeline.

Expected to change upstream; prefer collection timelines built on top of it.
"""

from twitter_core.core.endpoint import ApiService, Endpoint
from twitter_core.core.twitter_api import EXTENDED_TWEETS
from twitter_core.schemas.collection import TwitterCollection


class CollectionService(ApiService):
    collection = Endpoint(
        "GET", f"/1.1/collections/entries.json?{EXTENDED_TWEETS}",
        query=("id", "count", "max_position", "min_position"),
        required=("id",),
        response=TwitterCollection,
    )
