"""Macro registry: store operations callable by stable name.

The host scripting environment calls operations by name with positional
arguments, e.g. `registry.call("db.setObject", "party", "1", member)`.
register_catalog_macros() binds the fifteen `db.*` names to a store instance.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from campaign_vault.storage import CatalogStore

logger = logging.getLogger(__name__)

# Macro name → CatalogStore method name
CATALOG_MACROS: dict[str, str] = {
    "db.getObject": "get_object",
    "db.setObject": "set_object",
    "db.deleteObject": "delete_object",
    "db.hasObject": "has_object",
    "db.findObjects": "find_objects",
    "db.updateObjects": "update_objects",
    "db.getCatalog": "get_catalog",
    "db.setCatalog": "set_catalog",
    "db.deleteCatalog": "delete_catalog",
    "db.backupCatalog": "backup_catalog",
    "db.mergeCatalogs": "merge_catalogs",
    "db.getObjectKeys": "get_object_keys",
    "db.getObjectValues": "get_object_values",
    "db.getObjectCount": "get_object_count",
    "db.getCatalogNames": "get_catalog_names",
}


class UnknownMacroError(KeyError):
    """Raised when calling a name nothing is registered under."""


class MacroRegistry:
    def __init__(self) -> None:
        self._macros: dict[str, Callable[..., Any]] = {}

    def register(self, name: str, func: Callable[..., Any]) -> None:
        if name in self._macros:
            raise ValueError(f"Macro {name!r} is already registered")
        self._macros[name] = func
        logger.debug("macro registered name=%s", name)

    def call(self, name: str, *args: Any) -> Any:
        try:
            func = self._macros[name]
        except KeyError:
            raise UnknownMacroError(name) from None
        return func(*args)

    def names(self) -> list[str]:
        return sorted(self._macros)

    def __contains__(self, name: object) -> bool:
        return name in self._macros

    def __len__(self) -> int:
        return len(self._macros)


def register_catalog_macros(registry: MacroRegistry, store: CatalogStore) -> MacroRegistry:
    """Register every `db.*` operation of `store` on `registry`."""
    for macro_name, method_name in CATALOG_MACROS.items():
        registry.register(macro_name, getattr(store, method_name))
    return registry
