"""
Item models: radicals, kanji, vocabulary and the records that wrap them.

The API flattens wrapper fields (``unlocked_date``, ``percentage``) and the
item's own fields into one JSON object, with a ``type`` key selecting the item
kind. Wrapper models therefore split that object into two views of the same
tree before validation: the wrapper field on one side, the whole object as an
``Item`` on the other. Radicals do the same to separate their common fields
from the character-or-image payload.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Discriminator, Field, Tag, model_validator

from .base import WaniKaniModel
from .fields import Count, EpochSeconds, Level, NullableList, OptionalEpochSeconds, Percentage


class UserSpecific(WaniKaniModel):
    """Per-user SRS state of an item; only present for an authenticated caller."""
    srs: str
    srs_numeric: Count
    unlocked_date: OptionalEpochSeconds = None
    available_date: OptionalEpochSeconds = None
    burned: bool
    burned_date: OptionalEpochSeconds = None
    meaning_correct: Count
    meaning_incorrect: Count
    meaning_max_streak: Count
    meaning_current_streak: Count
    meaning_note: Optional[str] = None
    # null for radicals
    reading_correct: Optional[Count] = None
    reading_incorrect: Optional[Count] = None
    reading_max_streak: Optional[Count] = None
    reading_current_streak: Optional[Count] = None
    reading_note: Optional[str] = None
    user_synonyms: NullableList[str] = Field(default_factory=list)


class Kanji(WaniKaniModel):
    type: Literal["kanji"] = "kanji"
    level: Level
    character: str
    meaning: str
    onyomi: str
    kunyomi: Optional[str] = None
    important_reading: str
    nanori: Optional[str] = None
    user_specific: Optional[UserSpecific] = None


class Vocabulary(WaniKaniModel):
    type: Literal["vocabulary"] = "vocabulary"
    level: Level
    character: str
    kana: str
    meaning: str
    user_specific: Optional[UserSpecific] = None


class RadicalCharacter(WaniKaniModel):
    character: str


class RadicalImage(WaniKaniModel):
    """A radical with no unicode glyph, drawn as a hosted image instead."""
    file_name: str = Field(alias="image_file_name")
    content_type: str = Field(alias="image_content_type")
    file_size: Count = Field(alias="image_file_size")
    url: str = Field(alias="image")


def _radical_data_kind(value: Any) -> str:
    if isinstance(value, dict):
        return "character" if value.get("character") is not None else "image"
    if isinstance(value, RadicalCharacter):
        return "character"
    return "image"


RadicalData = Annotated[
    Union[
        Annotated[RadicalCharacter, Tag("character")],
        Annotated[RadicalImage, Tag("image")],
    ],
    Discriminator(_radical_data_kind),
]


class Radical(WaniKaniModel):
    type: Literal["radical"] = "radical"
    level: Level
    meaning: str
    data: RadicalData
    user_specific: Optional[UserSpecific] = None

    @model_validator(mode="before")
    @classmethod
    def _split_radical_data(cls, value: Any) -> Any:
        # The glyph or image fields sit beside level/meaning in the same object
        if isinstance(value, dict) and "data" not in value:
            return {**value, "data": value}
        return value

    @property
    def character(self) -> Optional[str]:
        return self.data.character if isinstance(self.data, RadicalCharacter) else None

    @property
    def image(self) -> Optional[RadicalImage]:
        return self.data if isinstance(self.data, RadicalImage) else None


def _item_kind(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        return value.get("type")
    return getattr(value, "type", None)


Item = Annotated[
    Union[
        Annotated[Kanji, Tag("kanji")],
        Annotated[Radical, Tag("radical")],
        Annotated[Vocabulary, Tag("vocabulary")],
    ],
    Discriminator(_item_kind),
]


def _split_wrapped_item(value: Any, field_name: str) -> Any:
    """Turn a flat wrapper record into ``{field_name: ..., "item": <whole record>}``."""
    if not isinstance(value, dict) or "item" in value:
        return value
    split = {"item": value}
    if field_name in value:
        split[field_name] = value[field_name]
    return split


class RecentUnlock(WaniKaniModel):
    unlocked_date: EpochSeconds
    item: Item

    @model_validator(mode="before")
    @classmethod
    def _split_flat_record(cls, value: Any) -> Any:
        return _split_wrapped_item(value, "unlocked_date")


class CriticalItem(WaniKaniModel):
    """An item whose review accuracy is below the requested threshold."""
    percentage: Percentage
    item: Item

    @model_validator(mode="before")
    @classmethod
    def _split_flat_record(cls, value: Any) -> Any:
        return _split_wrapped_item(value, "percentage")
