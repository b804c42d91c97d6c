"""
Async HTTP client for the WaniKani user API.

Same resources and decoding as ``WaniKaniClient``, with the GET performed by
an ``httpx.AsyncClient`` so several requests can be awaited concurrently.
Connection pooling and timeouts are left to httpx.
"""

from typing import Iterable, List, Optional, Union

import httpx

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


class AsyncWaniKaniClient(BaseWaniKaniClient):
    """Asynchronous WaniKani API client; use ``async with`` or call ``close``."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_version: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        item_shape: Optional[Union[ItemShape, str]] = None,
        client: Optional[httpx.AsyncClient] = None,
        **address_options: bool,
    ):
        """
        Initialize the async client.

        Args:
            api_key: Personal WaniKani API key
            api_version: API version segment
            base_url: Base URL for the WaniKani API
            timeout: Request timeout in seconds
            item_shape: Item encoding revision to decode
            client: Optional pre-configured ``httpx.AsyncClient``
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
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
        )

    async def __aenter__(self) -> "AsyncWaniKaniClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()
            logger.debug("AsyncWaniKaniClient closed")

    async def _fetch(self, address: str) -> bytes:
        redacted = self._redact(address)
        logger.debug(f"Making GET request to {redacted}")

        try:
            response = await self.client.get(address)
        except httpx.HTTPError as e:
            message = self._redact(str(e))
            logger.error(f"Request to {redacted} failed: {type(e).__name__} {message}")
            raise TransportError(f"Request failed: {type(e).__name__} {message}") from e

        self._check_status(response.status_code, response.content, address)
        return response.content

    async def _get(self, resource: Resource, options: Iterable[Option] = ()) -> Envelope:
        address = self._address(resource, options)
        return self._decode(resource, await self._fetch(address))

    async def user_information(self) -> Envelope[None]:
        return await self._get(Resource.USER_INFORMATION)

    async def study_queue(self) -> Envelope[StudyQueue]:
        return await self._get(Resource.STUDY_QUEUE)

    async def level_progression(self) -> Envelope[LevelProgression]:
        return await self._get(Resource.LEVEL_PROGRESSION)

    async def srs_distribution(self) -> Envelope[SrsDistribution]:
        return await self._get(Resource.SRS_DISTRIBUTION)

    async def recent_unlocks(self, limit: Optional[int] = None) -> Envelope[List[RecentUnlock]]:
        return await self._get(Resource.RECENT_UNLOCKS, self._limit_options(limit))

    async def critical_items(self, max_percentage: Optional[int] = None) -> Envelope[List[CriticalItem]]:
        return await self._get(Resource.CRITICAL_ITEMS, self._percentage_options(max_percentage))

    async def radicals(self, levels: Optional[Iterable[int]] = None) -> Envelope[List[Radical]]:
        return await self._get(Resource.RADICALS, self._level_options(levels))

    async def kanji(self, levels: Optional[Iterable[int]] = None) -> Envelope[List[Kanji]]:
        return await self._get(Resource.KANJI, self._level_options(levels))

    async def vocabulary(self, levels: Optional[Iterable[int]] = None) -> Envelope[List[Vocabulary]]:
        return await self._get(Resource.VOCABULARY, self._level_options(levels))
