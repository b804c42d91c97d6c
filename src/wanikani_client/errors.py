"""
Exception hierarchy for the WaniKani client.

Every failure is raised to the caller unchanged; nothing here is retried.
"""

from typing import Any, Dict, List, Optional, Sequence


class WaniKaniError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class AddressError(WaniKaniError):
    """The assembled request address is not a valid URL."""

    def __init__(self, address: str, reason: Optional[str] = None):
        self.address = address
        self.reason = reason
        message = f"could not parse URI: `{address}`"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class TransportError(WaniKaniError):
    """The request could not be completed or returned a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class DecodeError(WaniKaniError):
    """
    The response body is not valid JSON or does not match the expected shape.

    ``raw`` keeps the undecoded bytes so the failure can be diagnosed without
    fetching again; ``errors`` holds the validation error details, if any.
    """

    def __init__(
        self,
        raw: bytes,
        errors: Optional[Sequence[Dict[str, Any]]] = None,
        reason: Optional[str] = None,
    ):
        self.raw = raw
        self.errors: List[Dict[str, Any]] = list(errors or [])
        self.reason = reason
        message = f"could not deserialize value `{raw.decode('utf-8', errors='replace')}`"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownItemTypeError(DecodeError):
    """An item's ``type`` discriminator is not kanji, radical or vocabulary."""

    def __init__(self, raw: bytes, item_type: Any, errors: Optional[Sequence[Dict[str, Any]]] = None):
        self.item_type = item_type
        super().__init__(raw, errors, reason=f"unrecognized item type {item_type!r}")


class ApiError(WaniKaniError):
    """The service answered with its error envelope instead of a resource."""

    def __init__(self, code: str, message: str, status_code: Optional[int] = None):
        self.code = code
        self.status_code = status_code
        super().__init__(f"{code}: {message}")
        self.api_message = message
