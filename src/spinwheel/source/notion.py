"""Notion item source.

Queries a Notion database for pages whose multi-select category property
contains the requested category, following pagination cursors until the
result set is exhausted. Each page becomes one Item labelled with the
page's title property.
"""

import asyncio
import logging
from typing import Any, Optional

import aiohttp

from spinwheel.config.settings import NotionSettings
from spinwheel.exceptions import ItemSourceError, SourceConfigError
from spinwheel.models import UNTITLED_LABEL, Item
from spinwheel.source.base import ItemSource

logger = logging.getLogger(__name__)

# Hard stop for runaway cursors
MAX_PAGES = 100


def page_label(page: dict[str, Any], title_property: str) -> str:
    """Title text of a Notion page, or "Untitled".

    Only the first rich-text fragment of the title is used, trimmed.
    """
    prop = (page.get("properties") or {}).get(title_property)
    if not prop or prop.get("type") != "title":
        return UNTITLED_LABEL

    fragments = prop.get("title") or []
    if not fragments:
        return UNTITLED_LABEL

    text = (fragments[0].get("plain_text") or "").strip()
    return text or UNTITLED_LABEL


def page_to_item(page: dict[str, Any], title_property: str) -> Item:
    return Item(id=str(page["id"]), label=page_label(page, title_property))


class NotionItemSource(ItemSource):
    """Reads items straight from the Notion API."""

    def __init__(self, settings: NotionSettings):
        self._settings = settings
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def settings(self) -> NotionSettings:
        return self._settings

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._settings.timeout),
                headers={
                    "Authorization": f"Bearer {self._settings.secret}",
                    "Content-Type": "application/json",
                    "Notion-Version": self._settings.notion_version,
                },
            )
        return self._session

    def build_query(self, category: str, cursor: Optional[str] = None) -> dict[str, Any]:
        """Body for one databases/query call."""
        body: dict[str, Any] = {
            "page_size": self._settings.page_size,
            "filter": {
                "property": self._settings.category_property,
                "multi_select": {"contains": category},
            },
        }
        if cursor:
            body["start_cursor"] = cursor
        return body

    async def query_page(self, category: str, cursor: Optional[str] = None) -> dict[str, Any]:
        """Run one query request and return the raw response body."""
        session = await self._get_session()
        url = f"{self._settings.api_url}/databases/{self._settings.database_id}/query"

        try:
            async with session.post(url, json=self.build_query(category, cursor)) as response:
                data = await response.json(content_type=None)
                if response.status != 200:
                    message = data.get("message") if isinstance(data, dict) else None
                    raise ItemSourceError(
                        f"Notion query failed ({response.status}): {message or 'unknown error'}",
                        status=response.status,
                    )
        except asyncio.TimeoutError as e:
            raise ItemSourceError("Timeout querying Notion") from e
        except aiohttp.ClientError as e:
            raise ItemSourceError(f"Network error querying Notion: {e}") from e
        except ValueError as e:
            raise ItemSourceError(f"Malformed Notion response: {e}") from e

        if not isinstance(data, dict):
            raise ItemSourceError("Malformed Notion response: expected a JSON object")
        return data

    async def fetch(self, category: str) -> list[Item]:
        if not self._settings.is_configured:
            raise SourceConfigError("Notion secret or database id not configured")

        pages: list[dict[str, Any]] = []
        cursor: Optional[str] = None

        for _ in range(MAX_PAGES):
            data = await self.query_page(category, cursor)
            pages.extend(data.get("results") or [])

            cursor = data.get("next_cursor") if data.get("has_more") else None
            if not cursor:
                break
        else:
            logger.warning(f"Stopped paging Notion after {MAX_PAGES} pages for {category!r}")

        try:
            items = [page_to_item(page, self._settings.title_property) for page in pages]
        except (KeyError, AttributeError, TypeError) as e:
            raise ItemSourceError(f"Malformed Notion page: {e}") from e

        logger.info(f"Notion returned {len(items)} items for {category!r}")
        return items

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
