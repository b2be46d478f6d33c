"""Statuses Service — timelines, single-tweet lookups, tweet/retweet/delete.

Timeline and lookup endpoints request extended tweets with cards
(tweet_mode=extended, include_cards=true) so full_text and card are populated.
"""

from twitter_core.core.endpoint import ApiService, Endpoint
from twitter_core.core.twitter_api import EXTENDED_TWEETS
from twitter_core.schemas.tweet import Tweet

Tweets = list[Tweet]


class StatusesService(ApiService):

    # ─── Timelines ───────────────────────────────────────────────

    mentions_timeline = Endpoint(
        "GET", f"/1.1/statuses/mentions_timeline.json?{EXTENDED_TWEETS}",
        query=(
            "count", "since_id", "max_id", "trim_user",
            "contributor_details", "include_entities",
        ),
        response=Tweets,
    )
    user_timeline = Endpoint(
        "GET", f"/1.1/statuses/user_timeline.json?{EXTENDED_TWEETS}",
        query=(
            "user_id", "screen_name", "count", "since_id", "max_id",
            "trim_user", "exclude_replies", "contributor_details", "include_rts",
        ),
        response=Tweets,
    )
    home_timeline = Endpoint(
        "GET", f"/1.1/statuses/home_timeline.json?{EXTENDED_TWEETS}",
        query=(
            "count", "since_id", "max_id", "trim_user",
            "exclude_replies", "contributor_details", "include_entities",
        ),
        response=Tweets,
    )
    retweets_of_me = Endpoint(
        "GET", f"/1.1/statuses/retweets_of_me.json?{EXTENDED_TWEETS}",
        query=(
            "count", "since_id", "max_id", "trim_user",
            "include_entities", "include_user_entities",
        ),
        response=Tweets,
    )

    # ─── Single tweets ───────────────────────────────────────────

    show = Endpoint(
        "GET", f"/1.1/statuses/show.json?{EXTENDED_TWEETS}",
        query=("id", "trim_user", "include_my_retweet", "include_entities"),
        required=("id",),
        response=Tweet,
    )
    # id: comma-separated ids (a list/tuple of ids is joined automatically)
    lookup = Endpoint(
        "GET", f"/1.1/statuses/lookup.json?{EXTENDED_TWEETS}",
        query=("id", "include_entities", "trim_user", "map"),
        required=("id",),
        response=Tweets,
    )

    # ─── Writes ──────────────────────────────────────────────────

    update = Endpoint(
        "POST", "/1.1/statuses/update.json",
        form=(
            "status", "in_reply_to_status_id", "possibly_sensitive",
            "lat", "long", "place_id", "display_coordinates",
            "trim_user", "media_ids",
        ),
        required=("status",),
        response=Tweet,
    )
    retweet = Endpoint(
        "POST", "/1.1/statuses/retweet/{id}.json",
        form=("trim_user",),
        response=Tweet,
    )
    destroy = Endpoint(
        "POST", "/1.1/statuses/destroy/{id}.json",
        form=("trim_user",),
        response=Tweet,
    )
    unretweet = Endpoint(
        "POST", "/1.1/statuses/unretweet/{id}.json",
        form=("trim_user",),
        response=Tweet,
    )
