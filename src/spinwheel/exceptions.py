"""Exception types raised by SPINWHEEL components."""


class SpinwheelError(Exception):
    """Base class for all SPINWHEEL errors."""


class ItemSourceError(SpinwheelError):
    """The item source could not deliver a usable item list.

    Covers transport failures, non-success HTTP responses and malformed
    payloads alike; callers only need to know the list is unavailable.
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class SourceConfigError(ItemSourceError):
    """The item source is missing required configuration (keys, ids)."""
