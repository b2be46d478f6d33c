"""Media — upload result of upload.twitter.com/1.1/media/upload.json."""

from twitter_core.schemas.base import TwitterModel


class Image(TwitterModel):
    w: int = 0
    h: int = 0
    image_type: str | None = None


class Media(TwitterModel):
    media_id: int = 0
    media_id_string: str | None = None
    size: int = 0
    image: Image | None = None
