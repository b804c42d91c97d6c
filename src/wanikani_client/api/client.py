"""
HTTP client for the WaniKani user API.

Each resource method builds the request address, performs a single GET with
``requests`` and decodes the body into a typed ``Envelope``. There is no
caching, retrying or rate limiting; failures are raised to the caller.
"""

from typing import Iterable, List, Optional, Union

import requests

from ..errors import TransportError
from ..models import (
    CriticalItem,
    Envelope,
    ItemShape,
    Kanji,
    LevelProgression,
    Radical,
    RecentUnlock,
    SrsDistribution,
    StudyQueue,
    Vocabulary,
)
from ..utils.logging import get_logger
from .address import Option
from .base import BaseWaniKaniClient
from .resources import Resource

logger = get_logger(__name__)


class WaniKaniClient(BaseWaniKaniClient):
    """
    Synchronous WaniKani API client.

    Usable as a context manager; the underlying ``requests.Session`` is closed
    on exit unless it was supplied by the caller.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_version: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        item_shape: Optional[Union[ItemShape, str]] = None,
        session: Optional[requests.Session] = None,
        **address_options: bool,
    ):
        """
        Initialize the API client.

        Args:
            api_key: Personal WaniKani API key
            api_version: API version segment
            base_url: Base URL for the WaniKani API
            timeout: Request timeout in seconds
            item_shape: Item encoding revision to decode
            session: Optional pre-configured ``requests.Session``
            **address_options: ``trailing_comma`` / ``quote_api_key`` overrides
        """
        super().__init__(
            api_key=api_key,
            api_version=api_version,
            base_url=base_url,
            timeout=timeout,
            item_shape=item_shape,
            **address_options,
        )
        self._owns_session = session is None
        self.session = session or requests.Session()

    def __enter__(self) -> "WaniKaniClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def _fetch(self, address: str) -> bytes:
        """
        Perform a GET request and return the raw body.

        Raises:
            TransportError: If the request fails or returns a non-success status
            ApiError: If a non-success response carries the API error envelope
        """
        redacted = self._redact(address)
        logger.debug(f"Making GET request to {redacted}")

        try:
            response = self.session.get(address, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            message = self._redact(str(e))
            logger.error(f"Request to {redacted} failed: {message}")
            raise TransportError(f"Request failed: {message}") from e

        self._check_status(response.status_code, response.content, address)
        logger.debug(f"Request successful: GET {redacted}")
        return response.content

    def _get(self, resource: Resource, options: Iterable[Option] = ()) -> Envelope:
        address = self._address(resource, options)
        return self._decode(resource, self._fetch(address))

    def user_information(self) -> Envelope[None]:
        """
        Retrieve the account summary alone.

        Returns:
            Envelope[None]: Response whose payload is always ``None``
        """
        return self._get(Resource.USER_INFORMATION)

    def study_queue(self) -> Envelope[StudyQueue]:
        """Retrieve lesson and review counts and the next review date."""
        return self._get(Resource.STUDY_QUEUE)

    def level_progression(self) -> Envelope[LevelProgression]:
        return self._get(Resource.LEVEL_PROGRESSION)

    def srs_distribution(self) -> Envelope[SrsDistribution]:
        return self._get(Resource.SRS_DISTRIBUTION)

    def recent_unlocks(self, limit: Optional[int] = None) -> Envelope[List[RecentUnlock]]:
        """
        Retrieve recently unlocked items.

        Args:
            limit: Maximum number of items (0-255), or the API default

        Returns:
            Envelope[List[RecentUnlock]]: Unlocked items; ``LegacyRecentUnlock``
            records when the client decodes legacy item shapes

        Raises:
            ValueError: If ``limit`` is out of range
        """
        return self._get(Resource.RECENT_UNLOCKS, self._limit_options(limit))

    def critical_items(self, max_percentage: Optional[int] = None) -> Envelope[List[CriticalItem]]:
        """
        Retrieve items whose review accuracy is at or below a threshold.

        Args:
            max_percentage: Accuracy threshold (0-100), or the API default

        Returns:
            Envelope[List[CriticalItem]]: Critical items; ``LegacyCriticalItem``
            records when the client decodes legacy item shapes

        Raises:
            ValueError: If ``max_percentage`` is out of range
        """
        return self._get(Resource.CRITICAL_ITEMS, self._percentage_options(max_percentage))

    def radicals(self, levels: Optional[Iterable[int]] = None) -> Envelope[List[Radical]]:
        """Retrieve radicals, optionally restricted to ``levels``."""
        return self._get(Resource.RADICALS, self._level_options(levels))

    def kanji(self, levels: Optional[Iterable[int]] = None) -> Envelope[List[Kanji]]:
        """Retrieve kanji, optionally restricted to ``levels``."""
        return self._get(Resource.KANJI, self._level_options(levels))

    def vocabulary(self, levels: Optional[Iterable[int]] = None) -> Envelope[List[Vocabulary]]:
        """Retrieve vocabulary, optionally restricted to ``levels``."""
        return self._get(Resource.VOCABULARY, self._level_options(levels))
