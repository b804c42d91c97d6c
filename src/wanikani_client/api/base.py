"""
Transport-independent parts of the WaniKani clients.

Settings resolution, address assembly, argument checks and response decoding
are shared here; subclasses only supply the HTTP GET.
"""

from typing import Iterable, List, Optional, Union

from ..config import get_settings
from ..decoding import decode_response, parse_document, raise_for_api_error
from ..errors import DecodeError, TransportError
from ..models import Envelope, ItemShape
from ..utils.logging import get_logger
from .address import Option, build_address, redact_address
from .resources import Resource, payload_type_for

logger = get_logger(__name__)

MAX_LEVEL = 255
MAX_LIMIT = 255
MAX_PERCENTAGE = 100


class BaseWaniKaniClient:
    """
    Common configuration and decoding for the sync and async clients.

    Every argument left as ``None`` falls back to the loaded ``Settings``.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_version: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        item_shape: Optional[Union[ItemShape, str]] = None,
        trailing_comma: Optional[bool] = None,
        quote_api_key: Optional[bool] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Personal WaniKani API key
            api_version: API version segment, e.g. ``v1.4``
            base_url: Base URL of the API
            timeout: Request timeout in seconds
            item_shape: Item encoding revision to decode
            trailing_comma: Terminate every level in a level list with a comma
            quote_api_key: Percent-encode the key instead of rejecting it

        Raises:
            ValueError: If no API key is given or configured
        """
        settings = get_settings()
        self.api_key = api_key or settings.api_key
        if not self.api_key:
            raise ValueError("A WaniKani API key is required (pass api_key or set WANIKANI_API_KEY)")

        self.api_version = api_version or settings.api_version
        self.base_url = base_url or settings.api_base_url
        self.timeout = timeout or settings.request_timeout
        self.item_shape = ItemShape(item_shape or settings.item_shape)
        self.trailing_comma = settings.trailing_comma if trailing_comma is None else trailing_comma
        self.quote_api_key = settings.quote_api_key if quote_api_key is None else quote_api_key

        logger.info(
            f"Initialized {type(self).__name__} for {self.base_url} "
            f"(version {self.api_version}, {self.item_shape.value} items)"
        )

    def _address(self, resource: Resource, options: Iterable[Option] = ()) -> str:
        return build_address(
            self.api_version,
            self.api_key,
            resource.value,
            options,
            base_url=self.base_url,
            trailing_comma=self.trailing_comma,
            quote_api_key=self.quote_api_key,
        )

    def _redact(self, text: str) -> str:
        return redact_address(text, self.api_key)

    def _decode(self, resource: Resource, raw: bytes) -> Envelope:
        try:
            return decode_response(raw, payload_type_for(resource, self.item_shape))
        except DecodeError as e:
            logger.error(f"Failed to decode {resource.value} response: {e.reason or e.message}")
            raise

    def _check_status(self, status_code: int, content: bytes, address: str) -> None:
        """
        Raise for a non-success HTTP status.

        The body is checked for the API error envelope first, so an invalid
        key surfaces as ``ApiError`` whatever status it came with.
        """
        if 200 <= status_code < 300:
            return

        try:
            document = parse_document(content)
        except DecodeError:
            document = None
        raise_for_api_error(document, status_code)

        logger.warning(f"HTTP {status_code} from {self._redact(address)}")
        raise TransportError(
            f"HTTP {status_code}: {content.decode('utf-8', errors='replace')}",
            status_code,
        )

    @staticmethod
    def _limit_options(limit: Optional[int]) -> List[Option]:
        if limit is None:
            return []
        if not 0 <= limit <= MAX_LIMIT:
            raise ValueError(f"limit must be between 0 and {MAX_LIMIT}, got {limit}")
        return [limit]

    @staticmethod
    def _percentage_options(max_percentage: Optional[int]) -> List[Option]:
        if max_percentage is None:
            return []
        if not 0 <= max_percentage <= MAX_PERCENTAGE:
            raise ValueError(f"max_percentage must be between 0 and {MAX_PERCENTAGE}, got {max_percentage}")
        return [max_percentage]

    @staticmethod
    def _level_options(levels: Optional[Iterable[int]]) -> List[Option]:
        if levels is None:
            return []
        levels = list(levels)
        for level in levels:
            if not 0 <= level <= MAX_LEVEL:
                raise ValueError(f"levels must be between 0 and {MAX_LEVEL}, got {level}")
        return [levels] if levels else []

