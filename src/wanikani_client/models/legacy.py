"""
Legacy item shapes from earlier API revisions.

Older revisions did not tag radicals as character-or-image: ``character`` and
the ``image*`` fields were always present side by side, any of them possibly
``null``. Recent unlocks and critical items were a single flat record carrying
the union of every item kind's fields. These shapes are only used when the
client is explicitly configured with ``item_shape="legacy"``.
"""

from enum import Enum
from typing import Literal, Optional

from .base import WaniKaniModel
from .fields import Count, EpochSeconds, Level, Percentage
from .items import Radical, RadicalCharacter, RadicalImage, UserSpecific


class ItemShape(str, Enum):
    """Which revision of the item encoding to decode."""
    TAGGED = "tagged"
    LEGACY = "legacy"


class LegacyRadical(WaniKaniModel):
    level: Level
    meaning: str
    character: Optional[str] = None
    image_file_name: Optional[str] = None
    image_content_type: Optional[str] = None
    image_file_size: Optional[Count] = None
    image: Optional[str] = None
    user_specific: Optional[UserSpecific] = None

    def to_radical(self) -> Radical:
        """
        Convert to the tagged ``Radical`` shape.

        Raises:
            ValueError: If neither a character nor a complete image is present
        """
        if self.character is not None:
            data = RadicalCharacter(character=self.character)
        elif None not in (
            self.image_file_name,
            self.image_content_type,
            self.image_file_size,
            self.image,
        ):
            data = RadicalImage(
                file_name=self.image_file_name,
                content_type=self.image_content_type,
                file_size=self.image_file_size,
                url=self.image,
            )
        else:
            raise ValueError(f"radical {self.meaning!r} has neither a character nor an image")

        return Radical(
            level=self.level,
            meaning=self.meaning,
            data=data,
            user_specific=self.user_specific,
        )


class LegacyItem(WaniKaniModel):
    """Flat item record; which fields are set depends on ``type``."""
    type: Literal["kanji", "radical", "vocabulary"]
    level: Level
    meaning: str
    character: Optional[str] = None
    kana: Optional[str] = None
    image: Optional[str] = None
    onyomi: Optional[str] = None
    kunyomi: Optional[str] = None
    important_reading: Optional[str] = None
    nanori: Optional[str] = None
    user_specific: Optional[UserSpecific] = None


class LegacyRecentUnlock(LegacyItem):
    unlocked_date: EpochSeconds


class LegacyCriticalItem(LegacyItem):
    percentage: Percentage
