"""Binding values — tag-driven decoding of card values.

Tests cover:
    - STRING / BOOLEAN / NUMBER / IMAGE / USER entries decode to typed values
    - Typed accessors return None for other tags
    - Unknown tag, missing tag and non-object entries decode to a safe default
    - Non-object payload decodes to an empty map
    - Wrong JSON type for a known tag is a ValueError
    - Card decoding and JSON round trip through pydantic
"""

import pytest

from twitter_core.schemas.binding_values import (
    BindingValue,
    BindingValues,
    ImageValue,
    UserValue,
    decode_binding_value,
)
from twitter_core.schemas.card import Card


def test_string_entry():
    value = decode_binding_value({"type": "STRING", "string_value": "hello"})
    assert value.string_value == "hello"
    assert value.boolean_value is None
    assert value.is_known


def test_boolean_entry():
    assert decode_binding_value({"type": "BOOLEAN", "boolean_value": True}).boolean_value is True


def test_number_entry():
    assert decode_binding_value({"type": "NUMBER", "number_value": 3.5}).number_value == 3.5


def test_image_entry():
    value = decode_binding_value({
        "type": "IMAGE",
        "image_value": {"url": "https://pbs.twimg.com/x.jpg", "width": 100, "height": 50, "alt": None},
    })
    assert value.image_value == ImageValue(url="https://pbs.twimg.com/x.jpg", width=100, height=50)


def test_user_entry():
    value = decode_binding_value({"type": "USER", "user_value": {"id_str": "12"}})
    assert value.user_value == UserValue(id_str="12")


def test_string_entry_accepts_number():
    assert decode_binding_value({"type": "STRING", "string_value": 7}).string_value == "7"


def test_unknown_tag_is_safe_default():
    value = decode_binding_value({"type": "HOLOGRAM", "hologram_value": {"x": 1}})
    assert value == BindingValue(type="HOLOGRAM")
    assert value.value is None
    assert not value.is_known


@pytest.mark.parametrize("raw", [{}, {"type": None}, {"type": 5}, "STRING", 3, None, []])
def test_malformed_entries_are_safe_default(raw):
    assert decode_binding_value(raw) == BindingValue(type=None)


def test_known_tag_without_value_member():
    assert decode_binding_value({"type": "STRING"}) == BindingValue(type="STRING")


def test_known_tag_with_wrong_value_type_raises():
    with pytest.raises(ValueError):
        decode_binding_value({"type": "BOOLEAN", "boolean_value": "yes"})


def test_binding_values_mapping_protocol():
    values = BindingValues.from_json({
        "title": {"type": "STRING", "string_value": "hello"},
        "odd": {"type": "MYSTERY"},
    })
    assert len(values) == 2
    assert "title" in values
    assert values.contains_key("odd")
    assert values["title"].string_value == "hello"
    assert values.get_value("title") == "hello"
    assert values.get_value("odd") is None
    assert values.get_value("missing") is None
    assert set(values) == {"title", "odd"}


@pytest.mark.parametrize("payload", [None, [], "x", 1])
def test_non_object_payload_is_empty(payload):
    assert len(BindingValues.from_json(payload)) == 0


def test_card_decodes_binding_values():
    card = Card.model_validate({
        "name": "summary_large_image",
        "binding_values": {
            "title": {"type": "STRING", "string_value": "hello"},
            "broken": {"type": "UNHEARD_OF"},
        },
    })
    assert card.binding_values["title"].string_value == "hello"
    assert card.binding_values["broken"].value is None


def test_card_null_binding_values_is_empty():
    assert len(Card.model_validate({"binding_values": None}).binding_values) == 0
    assert len(Card.model_validate({}).binding_values) == 0


def test_card_json_round_trip():
    raw = {
        "title": {"type": "STRING", "string_value": "hello"},
        "live": {"type": "BOOLEAN", "boolean_value": False},
        "thumb": {"type": "IMAGE", "image_value": {"url": "u", "width": 1, "height": 2, "alt": "a"}},
    }
    card = Card.model_validate({"name": "player", "binding_values": raw})
    dumped = card.model_dump(mode="json")
    assert dumped["binding_values"] == raw
