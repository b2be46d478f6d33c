"""Credentials — app-level auth config and per-user sessions.

Invariants:
    - All credential models are frozen: immutable for the lifetime of a client
    - Secrets are SecretStr: never rendered by repr(), str() or model_dump_json()
    - TwitterAuthConfig requires non-empty consumer key and secret

Design Decisions:
    - Pydantic models over dataclasses: validation at the boundary (empty strings rejected)
    - Session is a generic base so guest/app sessions can reuse the client unchanged
"""

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


class TwitterAuthConfig(BaseModel):
    """Consumer key/secret identifying the calling application."""
    model_config = ConfigDict(frozen=True)

    consumer_key: str = Field(min_length=1)
    consumer_secret: SecretStr

    @field_validator("consumer_secret")
    @classmethod
    def secret_not_empty(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value():
            raise ValueError("consumer_secret cannot be empty")
        return v


class TwitterAuthToken(BaseModel):
    """OAuth 1.0a user token pair."""
    model_config = ConfigDict(frozen=True)

    token: str = Field(min_length=1)
    secret: SecretStr


class Session(BaseModel):
    """Credential bundle for one authenticated identity."""
    model_config = ConfigDict(frozen=True)

    auth_token: TwitterAuthToken
    id: int


class TwitterSession(Session):
    """Session of a logged-in Twitter user."""
    user_name: str = ""

    @property
    def user_id(self) -> int:
        return self.id
