"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested sections read their own prefixes, e.g. SPINWHEEL_WHEEL_SPIN_DURATION_MS
or NOTION_SECRET.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WheelSettings(BaseSettings):
    """Wheel layout and spin timing."""

    model_config = SettingsConfigDict(env_prefix="SPINWHEEL_WHEEL_", extra="ignore")

    # Spin
    spin_duration_ms: float = Field(default=1800.0, gt=0)
    extra_spins: int = Field(default=3, ge=1)
    easing: str = "ease_out_cubic"

    # Geometry (pixels)
    hub_radius: int = 20
    outer_margin: int = 6
    label_margin_outer: int = 10
    label_margin_inner: int = 30
    label_min_width: int = 20
    pointer_size: int = 10

    # Slice colors (HSL, hue spread across the wheel)
    saturation: float = Field(default=70.0, ge=0.0, le=100.0)
    lightness: float = Field(default=55.0, ge=0.0, le=100.0)

    # Text
    font_name: str | None = None
    font_size: int = 14
    placeholder_text: str = "No items"


class SourceSettings(BaseSettings):
    """Where the client fetches its item list from."""

    model_config = SettingsConfigDict(env_prefix="SPINWHEEL_SOURCE_", extra="ignore")

    api_endpoint: str = "http://127.0.0.1:8080/api/items"
    request_timeout: float = 15.0

    categories: list[str] = Field(default=["Sides", "Mains", "Desserts", "Activities"])
    default_category: str = "Sides"

    # Status line texts
    ready_text: str = "Ready"
    no_items_text: str = "No items found for this category."
    failed_text: str = "Failed to load items"


class NotionSettings(BaseSettings):
    """Notion database backing the /api/items endpoint."""

    model_config = SettingsConfigDict(env_prefix="NOTION_", extra="ignore")

    # NOTION_SECRET, NOTION_DATABASE_ID
    secret: str = ""
    database_id: str = ""

    api_url: str = "https://api.notion.com/v1"
    notion_version: str = "2022-06-28"
    category_property: str = "Type"
    title_property: str = "Activity Name"
    page_size: int = Field(default=100, ge=1, le=100)
    timeout: float = 30.0

    @property
    def is_configured(self) -> bool:
        return bool(self.secret and self.database_id)


class WindowSettings(BaseSettings):
    """Desktop client window."""

    model_config = SettingsConfigDict(env_prefix="SPINWHEEL_WINDOW_", extra="ignore")

    width: int = 480
    height: int = 640
    max_wheel_size: int = 360
    title: str = "Spin the Wheel"
    fps: int = 60
    resizable: bool = True

    bg_color: tuple[int, int, int] = (24, 24, 32)
    panel_color: tuple[int, int, int] = (40, 40, 52)
    text_color: tuple[int, int, int] = (220, 220, 230)
    accent_color: tuple[int, int, int] = (255, 200, 80)


class ServerSettings(BaseSettings):
    """HTTP endpoint serving the item list."""

    model_config = SettingsConfigDict(env_prefix="SPINWHEEL_SERVER_", extra="ignore")

    host: str = "0.0.0.0"
    port: int = 8080


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SPINWHEEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    mode: Literal["client", "server"] = "client"
    debug: bool = False

    # Nested settings
    wheel: WheelSettings = Field(default_factory=WheelSettings)
    source: SourceSettings = Field(default_factory=SourceSettings)
    notion: NotionSettings = Field(default_factory=NotionSettings)
    window: WindowSettings = Field(default_factory=WindowSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
