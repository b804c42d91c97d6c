"""Typed models for WaniKani API responses."""

from .envelope import Envelope
from .fields import (
    Count,
    EpochSeconds,
    Level,
    NullableList,
    OptionalEpochSeconds,
    Percentage,
)
from .items import (
    CriticalItem,
    Item,
    Kanji,
    Radical,
    RadicalCharacter,
    RadicalImage,
    RecentUnlock,
    UserSpecific,
    Vocabulary,
)
from .legacy import (
    ItemShape,
    LegacyCriticalItem,
    LegacyItem,
    LegacyRadical,
    LegacyRecentUnlock,
)
from .progress import LevelProgression, SrsDistribution, SrsDistributionCounts, StudyQueue
from .user import ErrorBody, ErrorResponse, UserInformation

__all__ = [
    "Count",
    "CriticalItem",
    "Envelope",
    "EpochSeconds",
    "ErrorBody",
    "ErrorResponse",
    "Item",
    "ItemShape",
    "Kanji",
    "LegacyCriticalItem",
    "LegacyItem",
    "LegacyRadical",
    "LegacyRecentUnlock",
    "Level",
    "LevelProgression",
    "NullableList",
    "OptionalEpochSeconds",
    "Percentage",
    "Radical",
    "RadicalCharacter",
    "RadicalImage",
    "RecentUnlock",
    "SrsDistribution",
    "SrsDistributionCounts",
    "StudyQueue",
    "UserInformation",
    "UserSpecific",
    "Vocabulary",
]
