"""
Response decoding for the WaniKani API.

Bytes are parsed once into a generic JSON tree, checked for the service's
error envelope and then validated against ``Envelope[T]`` for the requested
payload type. The custom rules (sentinel-zero timestamps, null lists, string
percentages, flattened item records) live on the models themselves; this
module owns parsing, error classification and the reverse encoding.

Decoding is pure: no I/O and no shared state, so it is safe to call from any
number of threads or tasks at once.
"""

import json
from functools import lru_cache
from typing import Any, Dict, List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from .errors import ApiError, DecodeError, UnknownItemTypeError
from .models.envelope import Envelope
from .models.user import ErrorResponse
from .utils.logging import get_logger

logger = get_logger(__name__)


def parse_document(raw: bytes) -> Any:
    """
    Parse raw response bytes into a JSON value tree.

    Raises:
        DecodeError: If the bytes are not valid JSON
    """
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(raw, reason=f"invalid JSON: {e}") from e


def raise_for_api_error(document: Any, status_code: Optional[int] = None) -> None:
    """
    Raise ``ApiError`` when ``document`` is the service's error envelope.

    Documents that merely contain an ``error`` key but not the documented
    ``{"error": {"code", "message"}}`` shape are left for resource decoding.
    """
    if not isinstance(document, dict) or "error" not in document or "user_information" in document:
        return
    try:
        response = ErrorResponse.model_validate(document)
    except ValidationError:
        return

    logger.warning(f"WaniKani API returned error {response.error.code}: {response.error.message}")
    raise ApiError(response.error.code, response.error.message, status_code)


def decode_response(raw: bytes, payload_type: Any) -> Envelope:
    """
    Decode a full API response into ``Envelope[payload_type]``.

    Args:
        raw: Response body
        payload_type: Type of ``requested_information``; ``None`` for the
            user-information resource, which carries no payload

    Returns:
        Envelope: The decoded response

    Raises:
        ApiError: If the body is the API error envelope
        DecodeError: If the body is not valid JSON or does not match the shape
    """
    document = parse_document(raw)
    raise_for_api_error(document)

    if payload_type is None and isinstance(document, dict) and "requested_information" not in document:
        document = {**document, "requested_information": None}

    try:
        return Envelope[payload_type].model_validate(document)
    except ValidationError as e:
        raise _decode_error(raw, e) from e


@lru_cache(maxsize=64)
def _cached_adapter(target_type: Any) -> TypeAdapter:
    return TypeAdapter(target_type)


def type_adapter_for(target_type: Any) -> TypeAdapter:
    """Return a ``TypeAdapter`` for ``target_type``, reusing one per hashable type."""
    try:
        return _cached_adapter(target_type)
    except TypeError:
        # unhashable annotation metadata
        return TypeAdapter(target_type)


def decode_value(raw: bytes, target_type: Any) -> Any:
    """Decode ``raw`` as a bare ``target_type`` value, without an envelope."""
    document = parse_document(raw)
    try:
        return type_adapter_for(target_type).validate_python(document)
    except ValidationError as e:
        raise _decode_error(raw, e) from e


def encode_response(envelope: Envelope) -> bytes:
    """
    Encode an envelope back into wire JSON.

    Unset timestamps are written as ``null``, not ``0``, so decoding and
    re-encoding a response is not byte-identical.
    """
    return envelope.model_dump_json(by_alias=True).encode("utf-8")


def _decode_error(raw: bytes, exc: ValidationError) -> DecodeError:
    errors = exc.errors(include_url=False)
    for error in errors:
        if error["type"] == "union_tag_invalid":
            offending = error.get("input")
            if isinstance(offending, dict):
                item_type = offending.get("type")
            else:
                item_type = error.get("ctx", {}).get("tag")
            logger.debug(f"Unrecognized item type {item_type!r} at {error['loc']}")
            return UnknownItemTypeError(raw, item_type, errors)

    return DecodeError(raw, errors, reason=_summarise(errors))


def _summarise(errors: Sequence[Dict[str, Any]], limit: int = 5) -> str:
    parts: List[str] = []
    for error in errors[:limit]:
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    if len(errors) > limit:
        parts.append(f"... and {len(errors) - limit} more")
    return "; ".join(parts)
