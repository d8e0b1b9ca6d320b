"""HTTP item source.

Client for the ``GET <endpoint>?category=<name>`` items API served by
spinwheel.server (or any compatible endpoint).
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from spinwheel.exceptions import ItemSourceError
from spinwheel.models import Item
from spinwheel.source.base import ItemSource, parse_items_payload

logger = logging.getLogger(__name__)


class HttpItemSource(ItemSource):
    """Fetches items from the items endpoint."""

    def __init__(self, endpoint: str, timeout: float = 15.0):
        """Initialize the HTTP source.

        Args:
            endpoint: Full URL of the items endpoint
            timeout: Total request timeout in seconds
        """
        self._endpoint = endpoint
        self._timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout),
                headers={"Accept": "application/json"},
            )
        return self._session

    async def fetch(self, category: str) -> list[Item]:
        try:
            session = await self._get_session()
            async with session.get(self._endpoint, params={"category": category}) as response:
                if response.status != 200:
                    raise ItemSourceError(f"HTTP error {response.status}", status=response.status)
                payload = await response.json(content_type=None)

        except asyncio.TimeoutError as e:
            raise ItemSourceError("Timeout fetching items") from e
        except aiohttp.ClientError as e:
            raise ItemSourceError(f"Network error fetching items: {e}") from e
        except ValueError as e:
            # Bad JSON or a body that is not valid UTF-8
            raise ItemSourceError(f"Malformed response body: {e}") from e

        items = parse_items_payload(payload)
        logger.debug(f"Fetched {len(items)} items for {category!r} from {self._endpoint}")
        return items

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
