"""HTTP endpoint serving wheel items.

``GET /api/items?category=<name>`` answers ``{"items": [{"id", "label"}]}``
from the configured item source (Notion by default). Any other method on
the route gets a 405.
"""

import asyncio
import logging
from typing import Optional

from aiohttp import web

from spinwheel.config.settings import Settings
from spinwheel.exceptions import ItemSourceError, SourceConfigError
from spinwheel.source.base import ItemSource
from spinwheel.source.notion import NotionItemSource

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Sides"


class ItemServer:
    """aiohttp application wrapping an ItemSource."""

    def __init__(
        self,
        source: ItemSource,
        host: str = "0.0.0.0",
        port: int = 8080,
        default_category: str = DEFAULT_CATEGORY,
    ):
        self.source = source
        self.host = host
        self.port = port
        self.default_category = default_category
        self.app = web.Application()
        self._setup_routes()
        self._runner: Optional[web.AppRunner] = None

    def _setup_routes(self) -> None:
        """Setup HTTP routes."""
        self.app.router.add_route("*", "/api/items", self.handle_items)

    async def handle_items(self, request: web.Request) -> web.Response:
        """Return the items of the requested category."""
        if request.method != "GET":
            return web.json_response(
                {"error": "Method not allowed"},
                status=405,
                headers={"Allow": "GET"},
            )

        category = request.query.get("category") or self.default_category

        try:
            items = await self.source.fetch(category)
        except SourceConfigError as e:
            logger.error(f"Item source misconfigured: {e}")
            return web.json_response({"error": "Server missing Notion configuration"}, status=500)
        except ItemSourceError as e:
            logger.error(f"Error fetching Notion items: {e}")
            return web.json_response({"error": "Failed to fetch items from Notion"}, status=500)

        return web.json_response({"items": [item.to_dict() for item in items]})

    async def start(self) -> None:
        """Start the web server."""
        self._runner = web.AppRunner(self.app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, self.host, self.port)
        await site.start()
        logger.info(f"Item server started on http://{self.host}:{self.port}/api/items")

    async def stop(self) -> None:
        """Stop the web server and release the source."""
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
            logger.info("Item server stopped")
        await self.source.close()


def create_server(settings: Settings) -> ItemServer:
    """Build the server with a Notion source from settings."""
    if not settings.notion.is_configured:
        logger.warning("NOTION_SECRET / NOTION_DATABASE_ID not set; requests will fail")
    return ItemServer(
        NotionItemSource(settings.notion),
        host=settings.server.host,
        port=settings.server.port,
        default_category=settings.source.default_category,
    )


async def run_server(settings: Settings) -> None:
    """Serve until cancelled."""
    server = create_server(settings)
    await server.start()
    try:
        while True:
            await asyncio.sleep(1)
    except asyncio.CancelledError:
        pass
    finally:
        await server.stop()
