"""Tests for the items endpoint."""

import asyncio

from aiohttp.test_utils import TestClient, TestServer

from spinwheel.config.settings import NotionSettings, Settings
from spinwheel.exceptions import SourceConfigError
from spinwheel.server import ItemServer, create_server
from spinwheel.source.http import HttpItemSource
from spinwheel.source.notion import NotionItemSource

from conftest import ScriptedSource, make_items


async def call(server, method, path):
    async with TestClient(TestServer(server.app)) as client:
        response = await client.request(method, path)
        return response.status, dict(response.headers), await response.json()


def test_returns_items_for_category():
    source = ScriptedSource({"Mains": list(make_items("Pizza", "Tacos"))})
    status, _, body = asyncio.run(call(ItemServer(source), "GET", "/api/items?category=Mains"))

    assert status == 200
    assert body == {"items": [{"id": "id-0", "label": "Pizza"}, {"id": "id-1", "label": "Tacos"}]}
    assert source.requests == ["Mains"]


def test_category_defaults_to_sides():
    source = ScriptedSource()
    status, _, body = asyncio.run(call(ItemServer(source), "GET", "/api/items"))

    assert status == 200
    assert body == {"items": []}
    assert source.requests == ["Sides"]


def test_other_methods_not_allowed():
    source = ScriptedSource()
    status, headers, body = asyncio.run(call(ItemServer(source), "POST", "/api/items"))

    assert status == 405
    assert body == {"error": "Method not allowed"}
    assert headers["Allow"] == "GET"
    assert source.requests == []


def test_missing_configuration():
    source = ScriptedSource({"Sides": SourceConfigError("no secret")})
    status, _, body = asyncio.run(call(ItemServer(source), "GET", "/api/items"))

    assert status == 500
    assert body == {"error": "Server missing Notion configuration"}


def test_fetch_failure(failing_source):
    status, _, body = asyncio.run(call(ItemServer(failing_source), "GET", "/api/items"))

    assert status == 500
    assert body == {"error": "Failed to fetch items from Notion"}


def test_client_reads_server_end_to_end():
    source = ScriptedSource({"Desserts": list(make_items("Pie", "Flan"))})

    async def scenario():
        async with TestServer(ItemServer(source).app) as server:
            client = HttpItemSource(str(server.make_url("/api/items")))
            try:
                return await client.fetch("Desserts")
            finally:
                await client.close()

    items = asyncio.run(scenario())
    assert [item.label for item in items] == ["Pie", "Flan"]


def test_stop_closes_source():
    source = ScriptedSource()
    asyncio.run(ItemServer(source).stop())
    assert source.closed


def test_create_server_from_settings():
    settings = Settings(notion=NotionSettings(secret="s", database_id="db"))
    settings.server.port = 9123
    settings.source.default_category = "Activities"

    server = create_server(settings)

    assert isinstance(server.source, NotionItemSource)
    assert server.port == 9123
    assert server.default_category == "Activities"
