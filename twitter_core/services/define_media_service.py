"""Media Service — simple (non-chunked) media upload on the upload host.

Invariants:
    - Multipart body: file parts are not part of the OAuth signature
    - media: raw bytes or a binary file; media_data: the same content base64-encoded
"""

from twitter_core.core.endpoint import ApiService, Endpoint
from twitter_core.core.twitter_api import UPLOAD_HOST
from twitter_core.schemas.media import Media


class MediaService(ApiService):
    upload = Endpoint(
        "POST", "/1.1/media/upload.json",
        form=("additional_owners",),
        files=("media", "media_data"),
        response=Media,
        host=UPLOAD_HOST,
    )
