"""Tests for settings, models and the command line."""

import pytest
from pydantic import ValidationError

from spinwheel.config.settings import (
    NotionSettings,
    Settings,
    SourceSettings,
    WheelSettings,
    get_settings,
)
from spinwheel.main import build_parser
from spinwheel.models import Item, WheelSession


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # Keep a developer's .env and shell out of the results
    monkeypatch.chdir(tmp_path)
    for name in ("NOTION_SECRET", "NOTION_DATABASE_ID", "SPINWHEEL_MODE", "SPINWHEEL_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = Settings()
    assert settings.mode == "client"
    assert settings.wheel.spin_duration_ms == 1800
    assert settings.wheel.extra_spins == 3
    assert settings.wheel.hub_radius == 20
    assert settings.source.default_category == "Sides"
    assert settings.notion.title_property == "Activity Name"
    assert not settings.notion.is_configured


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SPINWHEEL_MODE", "server")
    monkeypatch.setenv("SPINWHEEL_WHEEL_SPIN_DURATION_MS", "2500")
    monkeypatch.setenv("SPINWHEEL_SOURCE_CATEGORIES", '["Lunch", "Dinner"]')
    monkeypatch.setenv("NOTION_SECRET", "secret_abc")
    monkeypatch.setenv("NOTION_DATABASE_ID", "db1")

    settings = get_settings()

    assert settings.mode == "server"
    assert settings.wheel.spin_duration_ms == 2500
    assert settings.source.categories == ["Lunch", "Dinner"]
    assert settings.notion.is_configured
    assert get_settings() is settings


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("SPINWHEEL_DEBUG=true\n")
    assert Settings().debug is True


def test_validation():
    with pytest.raises(ValidationError):
        WheelSettings(extra_spins=0)
    with pytest.raises(ValidationError):
        WheelSettings(spin_duration_ms=0)
    with pytest.raises(ValidationError):
        NotionSettings(page_size=500)


def test_source_settings_texts():
    settings = SourceSettings()
    assert settings.no_items_text == "No items found for this category."
    assert settings.failed_text == "Failed to load items"


def test_item_labels_are_cleaned():
    assert Item("1", "  Pizza  ").label == "Pizza"
    assert Item("2", "   ").label == "Untitled"
    assert Item.from_dict({"id": 3, "label": None}) == Item("3", "Untitled")
    assert Item("4", "Tacos").to_dict() == {"id": "4", "label": "Tacos"}


def test_session_can_spin():
    assert not WheelSession().can_spin
    session = WheelSession(items=(Item("1", "Pizza"),))
    assert session.can_spin
    session.is_spinning = True
    assert not session.can_spin


def test_parser():
    args = build_parser().parse_args(["server", "--port", "9000", "--debug"])
    assert args.mode == "server"
    assert args.port == 9000
    assert args.debug

    args = build_parser().parse_args([])
    assert args.mode is None
