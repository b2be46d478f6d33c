"""Binding Values — card payload whose entry types are chosen by an embedded tag.

Wire shape:

    "binding_values": {
        "title":     {"type": "STRING",  "string_value": "hello"},
        "thumbnail": {"type": "IMAGE",   "image_value": {"url": "...", "width": 100, "height": 50}},
        "site":      {"type": "USER",    "user_value": {"id_str": "12"}},
        "is_live":   {"type": "BOOLEAN", "boolean_value": true},
        "count":     {"type": "NUMBER",  "number_value": 3}
    }

Invariants:
    - Unknown or missing "type", or a non-object entry -> BindingValue with value None
      (never raises: one odd entry cannot break the whole card)
    - A non-object binding_values payload decodes to an empty BindingValues
    - A known type whose value member is absent/null -> value None
    - A known type whose value member has the wrong JSON type -> ValueError
      (surfaces as DecodeError through the codec)
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic_core import core_schema

from twitter_core.schemas.base import TwitterModel

TYPE_MEMBER = "type"


class BindingType(str, Enum):
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"
    NUMBER = "NUMBER"
    IMAGE = "IMAGE"
    USER = "USER"


_VALUE_MEMBERS = {
    BindingType.STRING: "string_value",
    BindingType.BOOLEAN: "boolean_value",
    BindingType.NUMBER: "number_value",
    BindingType.IMAGE: "image_value",
    BindingType.USER: "user_value",
}


class ImageValue(TwitterModel):
    url: str | None = None
    width: int = 0
    height: int = 0
    alt: str | None = None


class UserValue(TwitterModel):
    id_str: str | None = None


@dataclass(frozen=True)
class BindingValue:
    """One decoded entry. Typed accessors return None unless the tag matches."""
    type: str | None
    value: str | bool | int | float | ImageValue | UserValue | None = None

    def _if(self, tag: BindingType) -> Any:
        return self.value if self.type == tag.value else None

    @property
    def string_value(self) -> str | None:
        return self._if(BindingType.STRING)

    @property
    def boolean_value(self) -> bool | None:
        return self._if(BindingType.BOOLEAN)

    @property
    def number_value(self) -> int | float | None:
        return self._if(BindingType.NUMBER)

    @property
    def image_value(self) -> ImageValue | None:
        return self._if(BindingType.IMAGE)

    @property
    def user_value(self) -> UserValue | None:
        return self._if(BindingType.USER)

    @property
    def is_known(self) -> bool:
        return self.type in BindingType._value2member_map_

    def to_json(self) -> dict[str, Any]:
        if self.type is None:
            return {}
        out: dict[str, Any] = {TYPE_MEMBER: self.type}
        if self.is_known and self.value is not None:
            value = self.value
            if isinstance(value, TwitterModel):
                value = value.model_dump(mode="json", by_alias=True)
            out[_VALUE_MEMBERS[BindingType(self.type)]] = value
        return out


# ─── Per-type decoders ───────────────────────────────────────────

def _decode_string(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    # Numbers are accepted as their string form; bools and containers are not
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    raise ValueError(f"string_value must be a string, got {type(raw).__name__}")


def _decode_boolean(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    raise ValueError(f"boolean_value must be a boolean, got {type(raw).__name__}")


def _decode_number(raw: Any) -> int | float:
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return raw
    raise ValueError(f"number_value must be a number, got {type(raw).__name__}")


_DECODERS = {
    BindingType.STRING: _decode_string,
    BindingType.BOOLEAN: _decode_boolean,
    BindingType.NUMBER: _decode_number,
    BindingType.IMAGE: ImageValue.model_validate,
    BindingType.USER: UserValue.model_validate,
}


def decode_binding_value(raw: Any) -> BindingValue:
    """Decode one entry using its "type" tag."""
    if not isinstance(raw, dict):
        return BindingValue(type=None)
    tag = raw.get(TYPE_MEMBER)
    if not isinstance(tag, str):
        return BindingValue(type=None)
    try:
        binding_type = BindingType(tag)
    except ValueError:
        return BindingValue(type=tag)
    member = raw.get(_VALUE_MEMBERS[binding_type])
    if member is None:
        return BindingValue(type=tag)
    return BindingValue(type=tag, value=_DECODERS[binding_type](member))


class BindingValues(Mapping[str, BindingValue]):
    """Immutable keyed map of decoded binding values."""

    def __init__(self, values: Mapping[str, BindingValue] | None = None):
        self._values = dict(values or {})

    @classmethod
    def from_json(cls, payload: Any) -> "BindingValues":
        if isinstance(payload, BindingValues):
            return payload
        if not isinstance(payload, dict):
            return cls()
        return cls({
            str(key): decode_binding_value(raw) for key, raw in payload.items()
        })

    def to_json(self) -> dict[str, Any]:
        return {key: value.to_json() for key, value in self._values.items()}

    def get_value(self, key: str) -> Any:
        """Decoded value for key, or None when absent/unknown."""
        entry = self._values.get(key)
        return entry.value if entry else None

    def contains_key(self, key: str) -> bool:
        return key in self._values

    def __getitem__(self, key: str) -> BindingValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"BindingValues({self._values!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any):
        return core_schema.no_info_plain_validator_function(
            cls.from_json,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: v.to_json(),
            ),
        )
