"""
Reusable field types for WaniKani response models.

The API is loose about its encodings: timestamps are integer seconds where
``0`` means "unset", some lists arrive as ``null`` and critical item
percentages are sent as strings. These annotated types normalise all of that
at validation time so the models themselves stay declarative.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, List, Optional, TypeVar

from pydantic import BeforeValidator, Field, PlainSerializer

T = TypeVar("T")


def _from_epoch_seconds(value: Any) -> Any:
    """Convert integer seconds since the epoch into an aware UTC datetime."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected integer seconds since epoch, got {value!r}")
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise ValueError(f"timestamp {value!r} out of range") from e


def _to_epoch_seconds(value: datetime) -> int:
    return int(value.timestamp())


def _zero_as_unset(value: Any) -> Any:
    """
    Collapse the sentinel ``0`` to ``None``.

    Runs on the raw wire value, before it becomes a datetime, so that
    "present but zero" and "absent" both end up as ``None``.
    """
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool) and value == 0:
        return None
    return value


def null_as_empty_list(value: Any) -> Any:
    return [] if value is None else value


def parse_percentage(value: Any) -> int:
    """
    Parse a percentage sent as a string of digits, optionally prefixed with ``+``.

    Raises:
        ValueError: If the string is not numeric or falls outside 0-100
    """
    if isinstance(value, str):
        digits = value[1:] if value.startswith("+") else value
        if not (digits.isascii() and digits.isdigit()):
            raise ValueError(f"invalid percentage {value!r}, expected a numeric string")
        number = int(digits)
    elif isinstance(value, int) and not isinstance(value, bool):
        number = value
    else:
        raise ValueError(f"invalid percentage {value!r}, expected a numeric string")

    if not 0 <= number <= 100:
        raise ValueError(f"percentage {value!r} is out of range 0-100")
    return number


EpochSeconds = Annotated[
    datetime,
    BeforeValidator(_from_epoch_seconds),
    PlainSerializer(_to_epoch_seconds, return_type=int, when_used="json"),
]

OptionalEpochSeconds = Annotated[Optional[EpochSeconds], BeforeValidator(_zero_as_unset)]

NullableList = Annotated[List[T], BeforeValidator(null_as_empty_list)]

Level = Annotated[int, Field(ge=0, le=255)]

Count = Annotated[int, Field(ge=0)]

Percentage = Annotated[int, BeforeValidator(parse_percentage)]
