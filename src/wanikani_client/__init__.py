"""
WaniKani Client - typed access to the WaniKani user progress API.

Builds resource addresses, fetches them over HTTP and decodes the loosely
typed JSON responses into immutable pydantic models.

Log output is disabled until the application calls
``wanikani_client.utils.setup_logging``.
"""

from loguru import logger

from .api import AsyncWaniKaniClient, Resource, WaniKaniClient, build_address
from .decoding import decode_response, decode_value, encode_response
from .errors import (
    AddressError,
    ApiError,
    DecodeError,
    TransportError,
    UnknownItemTypeError,
    WaniKaniError,
)
from .models import Envelope

logger.disable("wanikani_client")

__version__ = "0.1.0"

__all__ = [
    "AddressError",
    "ApiError",
    "AsyncWaniKaniClient",
    "DecodeError",
    "Envelope",
    "Resource",
    "TransportError",
    "UnknownItemTypeError",
    "WaniKaniClient",
    "WaniKaniError",
    "build_address",
    "decode_response",
    "decode_value",
    "encode_response",
]
