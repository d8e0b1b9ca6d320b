"""Data containers shared by the wheel core, the registry and the UI."""

from dataclasses import dataclass
from typing import Any, Optional

UNTITLED_LABEL = "Untitled"


@dataclass(frozen=True)
class Item:
    """A single wheel entry.

    Attributes:
        id: Opaque identifier, unique within one source
        label: Display text (blank labels become "Untitled")
    """
    id: str
    label: str = UNTITLED_LABEL

    def __post_init__(self) -> None:
        cleaned = (self.label or "").strip()
        object.__setattr__(self, "label", cleaned or UNTITLED_LABEL)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Item":
        """Build an item from an API record ({"id": ..., "label": ...})."""
        return cls(id=str(data["id"]), label=str(data.get("label") or ""))

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "label": self.label}


@dataclass(frozen=True)
class SpinResult:
    """Outcome of one completed spin."""
    target_index: int
    final_angle: float
    item: Item


@dataclass
class WheelSession:
    """Mutable state for one wheel on screen.

    Owned by the ItemRegistry / SpinController pair and mutated only from
    the event loop thread.
    """
    items: tuple[Item, ...] = ()
    rotation_angle: float = 0.0
    is_spinning: bool = False
    category: str = ""
    status: str = ""
    selected: Optional[Item] = None

    @property
    def has_items(self) -> bool:
        return len(self.items) > 0

    @property
    def can_spin(self) -> bool:
        """True when a spin request would be accepted."""
        return self.has_items and not self.is_spinning
