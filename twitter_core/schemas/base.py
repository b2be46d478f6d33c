"""TwitterModel — base for all payload models.

Invariants:
    - Null or absent list/map fields decode to [] / {} (normalize_collections)
    - Unknown fields ignored, models frozen after decode
    - Fields populate by name or by alias
"""

from pydantic import BaseModel, ConfigDict, model_validator

from twitter_core.core.normalize_collections import normalize_collections


class TwitterModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _empty_collections(cls, data):
        return normalize_collections(cls, data)
