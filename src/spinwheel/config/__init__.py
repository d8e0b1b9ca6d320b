"""Configuration for SPINWHEEL."""

from spinwheel.config.settings import (
    NotionSettings,
    ServerSettings,
    Settings,
    SourceSettings,
    WheelSettings,
    WindowSettings,
    get_settings,
)

__all__ = [
    "NotionSettings",
    "ServerSettings",
    "Settings",
    "SourceSettings",
    "WheelSettings",
    "WindowSettings",
    "get_settings",
]
