"""Twitter API hosts — base URLs that endpoint paths are resolved against."""

from dataclasses import dataclass

API_HOST = "api"
UPLOAD_HOST = "upload"


@dataclass(frozen=True)
class TwitterApi:
    base_host_url: str = "https://api.twitter.com"
    upload_host_url: str = "https://upload.twitter.com"

    def resolve_host(self, host: str | None) -> str | None:
        """Base URL for a symbolic host name, an absolute URL as-is, None if unknown."""
        if host is None or host == API_HOST:
            return self.base_host_url.rstrip("/")
        if host == UPLOAD_HOST:
            return self.upload_host_url.rstrip("/")
        if host.startswith(("http://", "https://")):
            return host.rstrip("/")
        return None

# Query suffix asking for full_text and cards on tweet-returning endpoints
EXTENDED_TWEETS = "tweet_mode=extended&include_cards=true&cards_platform=TwitterKit-13"
