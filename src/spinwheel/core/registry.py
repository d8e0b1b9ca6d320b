"""Item registry.

Holds the wheel's current item list inside a WheelSession and reloads it
from an ItemSource when the category changes or a refresh is requested.
Source failures never escape a load: they leave an empty wheel and a
failure status.
"""

import logging
from typing import Optional

from spinwheel.config.settings import SourceSettings
from spinwheel.core.events import EventBus, EventType, items_event, status_event
from spinwheel.exceptions import ItemSourceError
from spinwheel.models import Item, SpinResult, WheelSession
from spinwheel.source.base import ItemSource

logger = logging.getLogger(__name__)


class ItemRegistry:
    """Loads items into a session and keeps its status line current."""

    def __init__(
        self,
        source: ItemSource,
        session: Optional[WheelSession] = None,
        settings: Optional[SourceSettings] = None,
        events: Optional[EventBus] = None,
    ) -> None:
        self.source = source
        self.session = session or WheelSession()
        self.settings = settings or SourceSettings()
        self.events = events

        if not self.session.category:
            self.session.category = self.settings.default_category
        if not self.session.status:
            self.session.status = self.settings.ready_text

    @property
    def items(self) -> tuple[Item, ...]:
        return self.session.items

    def set_status(self, message: str) -> None:
        self.session.status = message
        if self.events:
            self.events.emit(status_event(message))

    async def load(self, category: Optional[str] = None) -> tuple[Item, ...]:
        """Replace the item list with the items of category.

        Args:
            category: Category to load; defaults to the session's current one

        Returns:
            The new item list (empty on failure or when the category is empty)
        """
        session = self.session
        if session.is_spinning:
            logger.info("Reload skipped while the wheel is spinning")
            return session.items

        if category is not None:
            session.category = category
        category = session.category

        self.set_status(f"Loading {category}...")
        if self.events:
            self.events.emit(items_event(EventType.ITEMS_LOADING, category))

        try:
            items = tuple(await self.source.fetch(category))
        except ItemSourceError as e:
            logger.error(f"Failed to load items for {category!r}: {e}")
            self._replace(())
            self.set_status(self.settings.failed_text)
            if self.events:
                self.events.emit(items_event(EventType.ITEMS_FAILED, category, error=str(e)))
            return session.items

        self._replace(items)
        if items:
            self.set_status(f"Loaded {len(items)} items")
        else:
            self.set_status(self.settings.no_items_text)

        logger.info(f"Loaded {len(items)} items for {category!r}")
        if self.events:
            self.events.emit(items_event(EventType.ITEMS_LOADED, category, count=len(items)))
        return session.items

    async def refresh(self) -> tuple[Item, ...]:
        """Reload the current category."""
        return await self.load()

    def apply_result(self, result: SpinResult) -> None:
        """Fold a finished spin back into the session."""
        self.session.rotation_angle = result.final_angle
        self.session.selected = result.item
        self.set_status(self.settings.ready_text)

    def _replace(self, items: tuple[Item, ...]) -> None:
        """Swap in a new item list; the wheel starts again from angle 0."""
        self.session.items = items
        self.session.rotation_angle = 0.0
        self.session.selected = None
