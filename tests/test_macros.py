"""Tests for the db.* macro registry."""

import pytest

from campaign_vault.macros import (
    CATALOG_MACROS,
    MacroRegistry,
    UnknownMacroError,
    register_catalog_macros,
)


@pytest.fixture
def registry(store) -> MacroRegistry:
    return register_catalog_macros(MacroRegistry(), store)


def test_all_fifteen_names_registered(registry: MacroRegistry):
    assert registry.names() == sorted([
        "db.getObject", "db.setObject", "db.deleteObject", "db.hasObject",
        "db.findObjects", "db.updateObjects", "db.getCatalog", "db.setCatalog",
        "db.deleteCatalog", "db.backupCatalog", "db.mergeCatalogs",
        "db.getObjectKeys", "db.getObjectValues", "db.getObjectCount",
        "db.getCatalogNames",
    ])
    assert len(registry) == len(CATALOG_MACROS) == 15


def test_object_macros_positional(registry: MacroRegistry):
    assert registry.call("db.setObject", "party", "1", {"name": "Kael"}) is True
    assert registry.call("db.hasObject", "party", "1") is True
    assert registry.call("db.getObject", "party", "1") == {"name": "Kael"}
    assert registry.call("db.getObject", "party", "2", "none") == "none"
    assert registry.call("db.deleteObject", "party", "1") is True
    assert registry.call("db.getObjectCount", "party") == 0


def test_find_and_update_macros_take_callables(registry: MacroRegistry):
    registry.call("db.setCatalog", "hp", {"a": 5, "b": 0})
    assert registry.call("db.findObjects", "hp", lambda v, k: v > 0) == {"a": 5}
    assert registry.call("db.updateObjects", "hp", lambda v, k: v + 1, lambda v, k: k == "b")
    assert registry.call("db.getCatalog", "hp") == {"a": 5, "b": 1}


def test_catalog_macros(registry: MacroRegistry):
    registry.call("db.setCatalog", "src", {"a": 1, "b": 2})
    registry.call("db.setCatalog", "dst", {"b": 3})
    assert registry.call("db.mergeCatalogs", "src", "dst", True)
    assert registry.call("db.getCatalog", "dst") == {"b": 2, "a": 1}
    assert registry.call("db.backupCatalog", "dst", "dst_backup")
    assert registry.call("db.getObjectKeys", "dst_backup") == ["b", "a"]
    assert registry.call("db.getObjectValues", "dst_backup") == [2, 1]
    assert registry.call("db.deleteCatalog", "dst")
    assert sorted(registry.call("db.getCatalogNames")) == ["dst", "dst_backup", "src"]


def test_macro_soft_failure(registry: MacroRegistry):
    assert registry.call("db.setObject", "bad{name", "k", 1) is False


def test_unknown_macro(registry: MacroRegistry):
    with pytest.raises(UnknownMacroError):
        registry.call("db.dropEverything")
    assert "db.dropEverything" not in registry
    assert "db.getObject" in registry


def test_duplicate_registration_rejected(registry: MacroRegistry):
    with pytest.raises(ValueError, match="already registered"):
        registry.register("db.getObject", lambda *args: None)


def test_custom_macro():
    registry = MacroRegistry()
    registry.register("dice.roll", lambda sides, count: sides * count)
    assert registry.call("dice.roll", 6, 3) == 18
