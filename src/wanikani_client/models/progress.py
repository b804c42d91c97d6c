"""Models for the aggregate progress resources."""

from .base import WaniKaniModel
from .fields import Count, OptionalEpochSeconds


class StudyQueue(WaniKaniModel):
    lessons_available: Count
    reviews_available: Count
    next_review_date: OptionalEpochSeconds = None
    reviews_available_next_hour: Count
    reviews_available_next_day: Count


class LevelProgression(WaniKaniModel):
    """Radical and kanji progress on the current level."""
    radicals_progress: Count
    radicals_total: Count
    kanji_progress: Count
    kanji_total: Count


class SrsDistributionCounts(WaniKaniModel):
    radicals: Count
    kanji: Count
    vocabulary: Count
    total: Count


class SrsDistribution(WaniKaniModel):
    """Item counts per SRS stage."""
    apprentice: SrsDistributionCounts
    guru: SrsDistributionCounts
    master: SrsDistributionCounts
    enlighten: SrsDistributionCounts
    burned: SrsDistributionCounts
