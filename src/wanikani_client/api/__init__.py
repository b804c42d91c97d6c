from .address import build_address, render_option, validate_address
from .async_client import AsyncWaniKaniClient
from .client import WaniKaniClient
from .resources import Resource, payload_type_for

__all__ = [
    "AsyncWaniKaniClient",
    "Resource",
    "WaniKaniClient",
    "build_address",
    "payload_type_for",
    "render_option",
    "validate_address",
]
