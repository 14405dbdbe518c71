"""Tests for the FastMCP db.* tools, via the in-process MCP client."""

import json

import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from campaign_vault.macros import CATALOG_MACROS
from campaign_vault.mcp_server import build_server


@pytest.fixture
def server(store):
    return build_server(store)


async def _call(server, tool: str, arguments: dict | None = None):
    """Call a tool and decode its single JSON text result."""
    async with create_connected_server_and_client_session(server._mcp_server) as client:
        result = await client.call_tool(tool, arguments or {})
    assert not result.isError, result.content
    return json.loads(result.content[0].text)


async def test_lists_every_db_tool(server):
    async with create_connected_server_and_client_session(server._mcp_server) as client:
        tools = await client.list_tools()
    assert sorted(t.name for t in tools.tools) == sorted(CATALOG_MACROS)


async def test_set_and_get_object(server, store):
    ok = await _call(server, "db.setObject", {
        "catalog_name": "party", "object_key": "1", "object_data": {"name": "Elara"},
    })
    assert ok is True
    assert store.get_object("party", "1") == {"name": "Elara"}
    got = await _call(server, "db.getObject", {"catalog_name": "party", "object_key": "1"})
    assert got == {"name": "Elara"}


async def test_bad_name_is_soft_failure(server, backend):
    ok = await _call(server, "db.setObject", {
        "catalog_name": "bad[name]", "object_key": "k", "object_data": {},
    })
    assert ok is False
    assert backend.calls == 0


async def test_find_objects_with_where(server, store):
    store.set_catalog("locations", {
        "1": {"type": "City"},
        "2": {"type": "Dungeon"},
    })
    found = await _call(server, "db.findObjects", {
        "catalog_name": "locations", "where_fields": {"type": "Dungeon"},
    })
    assert found == {"2": {"type": "Dungeon"}}


async def test_update_objects_with_changes(server, store):
    store.set_catalog("locations", {
        "1": {"type": "City", "discovered": True},
        "2": {"type": "Dungeon", "discovered": False},
    })
    ok = await _call(server, "db.updateObjects", {
        "catalog_name": "locations",
        "changes": {"discovered": True},
        "where_fields": {"type": "Dungeon"},
    })
    assert ok is True
    assert store.get_object("locations", "2") == {"type": "Dungeon", "discovered": True}


async def test_merge_and_count(server, store):
    store.set_catalog("source", {"a": 1, "b": 2})
    store.set_catalog("target", {"b": 3, "c": 4})
    ok = await _call(server, "db.mergeCatalogs", {
        "source_catalog": "source", "target_catalog": "target",
    })
    assert ok is True
    assert store.get_catalog("target") == {"b": 3, "c": 4, "a": 1}
    count = await _call(server, "db.getObjectCount", {"catalog_name": "target"})
    assert count == 3


async def test_set_catalog_and_backup(server, store):
    await _call(server, "db.setCatalog", {"catalog_name": "notes", "catalog_data": {"x": [1, 2]}})
    await _call(server, "db.backupCatalog", {"source_catalog": "notes", "backup_catalog": "notes_bak"})
    store.set_object("notes", "y", 1)
    catalog = await _call(server, "db.getCatalog", {"catalog_name": "notes_bak"})
    assert catalog == {"x": [1, 2]}
