"""
Abstract item source.

An item source turns a category name into an ordered list of items.
Implementations raise ItemSourceError for every failure they can
recognise (transport, HTTP status, payload shape).
"""

from abc import ABC, abstractmethod
from typing import Any

from spinwheel.exceptions import ItemSourceError
from spinwheel.models import Item


class ItemSource(ABC):
    """Supplies the items for a category."""

    @abstractmethod
    async def fetch(self, category: str) -> list[Item]:
        """
        Fetch all items in a category.

        Returns:
            Items in source order; an empty list means "no items"

        Raises:
            ItemSourceError: If the list could not be obtained
        """
        ...

    async def close(self) -> None:
        """Release network resources. Safe to call more than once."""


def parse_items_payload(payload: Any) -> list[Item]:
    """Validate an ``{"items": [{"id", "label"}, ...]}`` body.

    Raises:
        ItemSourceError: If the payload does not have that shape
    """
    if not isinstance(payload, dict):
        raise ItemSourceError("Malformed response: expected a JSON object")

    records = payload.get("items") or []
    if not isinstance(records, list):
        raise ItemSourceError("Malformed response: 'items' is not a list")

    items = []
    for record in records:
        if not isinstance(record, dict) or "id" not in record:
            raise ItemSourceError(f"Malformed item record: {record!r}")
        items.append(Item.from_dict(record))
    return items
