"""
Request address construction for the WaniKani API.

Addresses have the form::

    {base}/{api_version}/user/{api_key}/{resource}/{options}

where ``options`` is empty or a comma-joined list of rendered options. A level
list renders as ``1,2,3,``: every level is followed by a comma, including the
last, which is what the API has always been sent. Pass
``trailing_comma=False`` to drop it; the API accepts both.

The API key goes into the path verbatim. A key containing characters that are
not legal in a path segment makes the address invalid and raises
``AddressError`` instead of being escaped, unless ``quote_api_key`` is set.
"""

import re
from typing import Iterable, Sequence, Union
from urllib.parse import quote, urlsplit

from ..config import API_BASE_URL
from ..errors import AddressError

Option = Union[int, str, Sequence[int]]

# RFC 3986 pchar, plus "/" between segments
_PATH_PATTERN = re.compile(r"^(?:[A-Za-z0-9\-._~!$&'()*+,;=:@/]|%[0-9A-Fa-f]{2})*$")


def render_option(option: Option, trailing_comma: bool = True) -> str:
    """Render a scalar option as-is and a level list comma-separated."""
    if isinstance(option, (list, tuple)):
        if trailing_comma:
            return "".join(f"{value}," for value in option)
        return ",".join(str(value) for value in option)
    return str(option)


def validate_address(address: str) -> str:
    """
    Check that ``address`` is a syntactically valid http(s) URL.

    Raises:
        AddressError: If the address does not parse or has illegal characters
    """
    # urlsplit silently strips tabs and newlines
    if any(char.isspace() for char in address):
        raise AddressError(address, "whitespace in address")
    try:
        parts = urlsplit(address)
    except ValueError as e:
        raise AddressError(address, str(e)) from e

    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise AddressError(address, "expected an absolute http(s) URL")
    if parts.query or parts.fragment or "?" in address or "#" in address:
        raise AddressError(address, "unexpected query or fragment")
    if not _PATH_PATTERN.match(parts.path):
        raise AddressError(address, "illegal character in path")
    return address


def build_address(
    api_version: str,
    api_key: str,
    resource_name: str,
    options: Iterable[Option] = (),
    *,
    base_url: str = API_BASE_URL,
    trailing_comma: bool = True,
    quote_api_key: bool = False,
) -> str:
    """
    Build the address of a user resource.

    Args:
        api_version: Version segment, e.g. ``v1.4``
        api_key: The user's API key
        resource_name: Resource path segment, e.g. ``study-queue``
        options: Ordered options; scalars or lists of levels
        base_url: API base URL
        trailing_comma: Terminate every level in a level list with a comma
        quote_api_key: Percent-encode the key rather than reject it

    Returns:
        str: The validated address

    Raises:
        AddressError: If the assembled address is not a valid URL
    """
    if quote_api_key:
        api_key = quote(api_key, safe="")

    rendered = ",".join(render_option(option, trailing_comma) for option in options)
    address = f"{base_url.rstrip('/')}/{api_version}/user/{api_key}/{resource_name}/{rendered}"
    return validate_address(address)


def redact_address(address: str, api_key: str) -> str:
    """Mask the API key in ``address`` for logging."""
    if not api_key:
        return address
    return address.replace(api_key, "***").replace(quote(api_key, safe=""), "***")
