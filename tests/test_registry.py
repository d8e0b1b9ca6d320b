"""Tests for the item registry."""

import asyncio

from spinwheel.core.events import EventBus, EventType
from spinwheel.core.registry import ItemRegistry
from spinwheel.exceptions import ItemSourceError
from spinwheel.models import SpinResult, WheelSession

from conftest import ScriptedSource, make_items


def make_registry(source, session=None, settings=None):
    bus = EventBus()
    return ItemRegistry(source, session=session, settings=settings, events=bus), bus


def test_defaults_category_and_status():
    registry, _ = make_registry(ScriptedSource())
    assert registry.session.category == "Sides"
    assert registry.session.status == "Ready"


def test_load_replaces_items_and_resets_angle():
    source = ScriptedSource({"Mains": list(make_items("Pizza", "Tacos", "Sushi"))})
    session = WheelSession(items=make_items("Old"), rotation_angle=5.5, selected=make_items("Old")[0])
    registry, bus = make_registry(source, session)

    items = asyncio.run(registry.load("Mains"))

    assert [item.label for item in items] == ["Pizza", "Tacos", "Sushi"]
    assert session.items == items
    assert session.category == "Mains"
    assert session.rotation_angle == 0.0
    assert session.selected is None
    assert session.status == "Loaded 3 items"
    assert source.requests == ["Mains"]

    loaded = bus.get_history(EventType.ITEMS_LOADED)
    assert loaded[-1].data == {"category": "Mains", "count": 3}
    statuses = [e.data["status"] for e in bus.get_history(EventType.STATUS_CHANGED)]
    assert statuses == ["Loading Mains...", "Loaded 3 items"]


def test_empty_category():
    registry, _ = make_registry(ScriptedSource({"Desserts": []}))
    items = asyncio.run(registry.load("Desserts"))
    assert items == ()
    assert registry.session.status == "No items found for this category."


def test_failure_leaves_empty_wheel(failing_source):
    session = WheelSession(items=make_items("Stale"))
    registry, bus = make_registry(failing_source, session)

    items = asyncio.run(registry.load())

    assert items == ()
    assert session.items == ()
    assert session.status == "Failed to load items"
    failed = bus.get_history(EventType.ITEMS_FAILED)
    assert len(failed) == 1
    assert "500" in failed[0].data["error"]


def test_reload_skipped_while_spinning():
    source = ScriptedSource({"Sides": list(make_items("Fries"))})
    current = make_items("Pizza", "Tacos")
    session = WheelSession(items=current, is_spinning=True, rotation_angle=3.0)
    registry, _ = make_registry(source, session)

    items = asyncio.run(registry.load("Sides"))

    assert items == current
    assert session.rotation_angle == 3.0
    assert source.requests == []


def test_refresh_reloads_current_category():
    source = ScriptedSource({
        "Activities": list(make_items("Hike")),
    })
    registry, _ = make_registry(source, WheelSession(category="Activities"))

    asyncio.run(registry.refresh())
    asyncio.run(registry.refresh())

    assert source.requests == ["Activities", "Activities"]
    assert registry.items[0].label == "Hike"


def test_source_recovers_after_failure():
    source = ScriptedSource({"Sides": ItemSourceError("down")})
    registry, _ = make_registry(source)
    asyncio.run(registry.load())
    assert registry.session.status == "Failed to load items"

    source.results["Sides"] = list(make_items("Fries", "Slaw"))
    asyncio.run(registry.load())
    assert registry.session.status == "Loaded 2 items"


def test_apply_result():
    items = make_items("Pizza", "Tacos")
    registry, _ = make_registry(ScriptedSource(), WheelSession(items=items, status="Spinning..."))

    registry.apply_result(SpinResult(target_index=1, final_angle=42.0, item=items[1]))

    assert registry.session.rotation_angle == 42.0
    assert registry.session.selected == items[1]
    assert registry.session.status == "Ready"
