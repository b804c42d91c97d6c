"""User resources exposed by the API and the payload type each decodes to."""

from enum import Enum
from typing import Any, Dict, Union

from ..models import (
    CriticalItem,
    ItemShape,
    Kanji,
    LegacyCriticalItem,
    LegacyRadical,
    LegacyRecentUnlock,
    LevelProgression,
    NullableList,
    Radical,
    RecentUnlock,
    SrsDistribution,
    StudyQueue,
    Vocabulary,
)


class Resource(str, Enum):
    USER_INFORMATION = "user-information"
    STUDY_QUEUE = "study-queue"
    LEVEL_PROGRESSION = "level-progression"
    SRS_DISTRIBUTION = "srs-distribution"
    RECENT_UNLOCKS = "recent-unlocks"
    CRITICAL_ITEMS = "critical-items"
    RADICALS = "radicals"
    KANJI = "kanji"
    VOCABULARY = "vocabulary"


PAYLOAD_TYPES: Dict[Resource, Any] = {
    Resource.USER_INFORMATION: None,
    Resource.STUDY_QUEUE: StudyQueue,
    Resource.LEVEL_PROGRESSION: LevelProgression,
    Resource.SRS_DISTRIBUTION: SrsDistribution,
    Resource.RECENT_UNLOCKS: NullableList[RecentUnlock],
    Resource.CRITICAL_ITEMS: NullableList[CriticalItem],
    Resource.RADICALS: NullableList[Radical],
    Resource.KANJI: NullableList[Kanji],
    Resource.VOCABULARY: NullableList[Vocabulary],
}

# Resources whose payload differs in the legacy item encoding
LEGACY_PAYLOAD_TYPES: Dict[Resource, Any] = {
    Resource.RECENT_UNLOCKS: NullableList[LegacyRecentUnlock],
    Resource.CRITICAL_ITEMS: NullableList[LegacyCriticalItem],
    Resource.RADICALS: NullableList[LegacyRadical],
}


def payload_type_for(resource: Resource, item_shape: Union[ItemShape, str] = ItemShape.TAGGED) -> Any:
    """Return the ``requested_information`` type of ``resource`` for an item shape."""
    if ItemShape(item_shape) is ItemShape.LEGACY and resource in LEGACY_PAYLOAD_TYPES:
        return LEGACY_PAYLOAD_TYPES[resource]
    return PAYLOAD_TYPES[resource]
