"""Item sources: where the wheel's entries come from."""

from spinwheel.source.base import ItemSource, parse_items_payload
from spinwheel.source.http import HttpItemSource
from spinwheel.source.notion import NotionItemSource

__all__ = [
    "HttpItemSource",
    "ItemSource",
    "NotionItemSource",
    "parse_items_payload",
]
