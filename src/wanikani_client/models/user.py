"""Account summary and API error envelope models."""

from typing import Optional

from .base import WaniKaniModel
from .fields import Count, EpochSeconds, Level, OptionalEpochSeconds


class UserInformation(WaniKaniModel):
    """Account summary attached to every successful response."""
    username: str
    gravatar: str
    level: Level
    title: str
    about: str
    website: Optional[str] = None
    twitter: Optional[str] = None
    topics_count: Count
    posts_count: Count
    creation_date: EpochSeconds
    vacation_date: OptionalEpochSeconds = None


class ErrorBody(WaniKaniModel):
    code: str
    message: str


class ErrorResponse(WaniKaniModel):
    """Error envelope returned instead of a resource, e.g. for an unknown API key."""
    error: ErrorBody
