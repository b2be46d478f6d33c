"""Account Service — credentials check for the signed-in user."""

from twitter_core.core.endpoint import ApiService, Endpoint
from twitter_core.schemas.user import User


class AccountService(ApiService):
    """GET account/verify_credentials — the User owning the session, or HTTP 401."""

    verify_credentials = Endpoint(
        "GET", "/1.1/account/verify_credentials.json",
        query=("include_entities", "skip_status", "include_email"),
        response=User,
    )
