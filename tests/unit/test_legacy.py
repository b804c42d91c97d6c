"""
Unit tests for the legacy item shapes.
"""

import pytest

from wanikani_client.api.resources import Resource, payload_type_for
from wanikani_client.decoding import decode_response
from wanikani_client.errors import DecodeError
from wanikani_client.models import (
    ItemShape,
    LegacyCriticalItem,
    LegacyRadical,
    LegacyRecentUnlock,
    RadicalCharacter,
    RadicalImage,
)

from payloads import image_radical_json, kanji_json, radical_json, response_bytes, vocabulary_json


def legacy_radical_json(**overrides):
    data = {
        "level": 1,
        "meaning": "ground",
        "character": "一",
        "image_file_name": None,
        "image_content_type": None,
        "image_file_size": None,
        "image": None,
        "user_specific": None,
    }
    data.update(overrides)
    return data


class TestLegacyRadical:
    """Test cases for radicals with nullable character and image siblings."""

    def test_character_radical_converts(self):
        radical = LegacyRadical.model_validate(legacy_radical_json()).to_radical()

        assert radical.data == RadicalCharacter(character="一")
        assert radical.level == 1

    def test_image_radical_converts(self):
        legacy = LegacyRadical.model_validate(image_radical_json(character=None))

        radical = legacy.to_radical()

        assert isinstance(radical.data, RadicalImage)
        assert radical.image.url == "https://cdn.wanikani.com/images/stick.png"

    def test_neither_branch_fails_conversion(self):
        legacy = LegacyRadical.model_validate(legacy_radical_json(character=None))

        with pytest.raises(ValueError, match="neither a character nor an image"):
            legacy.to_radical()

    def test_incomplete_image_fails_conversion(self):
        legacy = LegacyRadical.model_validate(
            legacy_radical_json(character=None, image="https://cdn.wanikani.com/x.png")
        )

        with pytest.raises(ValueError):
            legacy.to_radical()


class TestLegacyPayloadTypes:
    """Test cases for decoding whole responses in the legacy shape."""

    def test_shape_selection(self):
        assert payload_type_for(Resource.KANJI, ItemShape.LEGACY) == payload_type_for(Resource.KANJI)
        assert payload_type_for(Resource.RADICALS, "legacy") != payload_type_for(Resource.RADICALS)

    def test_unknown_shape_is_rejected(self):
        with pytest.raises(ValueError):
            payload_type_for(Resource.RADICALS, "v0")

    def test_legacy_radicals(self):
        raw = response_bytes([legacy_radical_json(), legacy_radical_json(character=None)])

        envelope = decode_response(raw, payload_type_for(Resource.RADICALS, ItemShape.LEGACY))

        assert all(isinstance(radical, LegacyRadical) for radical in envelope.payload)
        assert envelope.payload[1].character is None

    def test_legacy_recent_unlocks(self):
        raw = response_bytes([
            kanji_json(unlocked_date=1000),
            vocabulary_json(unlocked_date=2000),
            radical_json(unlocked_date=3000, image=None),
        ])

        envelope = decode_response(raw, payload_type_for(Resource.RECENT_UNLOCKS, ItemShape.LEGACY))

        unlocks = envelope.payload
        assert all(isinstance(unlock, LegacyRecentUnlock) for unlock in unlocks)
        assert [unlock.type for unlock in unlocks] == ["kanji", "vocabulary", "radical"]
        assert unlocks[0].onyomi == "すい"
        assert unlocks[1].kana == "おとな"
        assert unlocks[2].image is None

    def test_legacy_critical_items(self):
        raw = response_bytes([vocabulary_json(percentage="37")])

        envelope = decode_response(raw, payload_type_for(Resource.CRITICAL_ITEMS, ItemShape.LEGACY))

        assert isinstance(envelope.payload[0], LegacyCriticalItem)
        assert envelope.payload[0].percentage == 37

    def test_legacy_shape_still_checks_type(self):
        raw = response_bytes([kanji_json(unlocked_date=1000, type="mystery")])

        with pytest.raises(DecodeError):
            decode_response(raw, payload_type_for(Resource.RECENT_UNLOCKS, ItemShape.LEGACY))
