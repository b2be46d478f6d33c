"""Card — rich attachment rendered for a tweet (player, summary, ...)."""

from pydantic import Field

from twitter_core.schemas.base import TwitterModel
from twitter_core.schemas.binding_values import BindingValues


class Card(TwitterModel):
    name: str | None = None
    binding_values: BindingValues = Field(default_factory=BindingValues)
