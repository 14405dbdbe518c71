"""FastMCP server exposing the catalog store as `db.*` tools.

Tools mirror the macro names:
  - db.getObject / db.setObject / db.deleteObject / db.hasObject
  - db.findObjects(catalog_name, where)            — field-equality match
  - db.updateObjects(catalog_name, changes, where) — shallow field assignment
  - db.getCatalog / db.setCatalog / db.deleteCatalog
  - db.backupCatalog / db.mergeCatalogs
  - db.getObjectKeys / db.getObjectValues / db.getObjectCount / db.getCatalogNames

Predicates cannot travel over MCP, so find/update take JSON field maps (see
campaign_vault.storage.queries). The store is passed to build_server(); there
is no module-level store.

Usage:
    uv run python -m campaign_vault.mcp_server
"""

from typing import Any

from mcp.server.fastmcp import FastMCP

from campaign_vault.storage import CatalogStore, assign, where


def build_server(store: CatalogStore, name: str = "campaign-vault") -> FastMCP:
    mcp = FastMCP(name)

    @mcp.tool(name="db.getObject")
    def get_object(catalog_name: str, object_key: str, default: Any = None) -> Any:
        """Return one object from a catalog, or `default` if it is absent."""
        return store.get_object(catalog_name, object_key, default)

    @mcp.tool(name="db.setObject")
    def set_object(catalog_name: str, object_key: str, object_data: Any) -> bool:
        """Create or replace one object in a catalog."""
        return store.set_object(catalog_name, object_key, object_data)

    @mcp.tool(name="db.deleteObject")
    def delete_object(catalog_name: str, object_key: str) -> bool:
        """Remove one object. Succeeds if it is already gone."""
        return store.delete_object(catalog_name, object_key)

    @mcp.tool(name="db.hasObject")
    def has_object(catalog_name: str, object_key: str) -> bool:
        """Check whether a catalog holds an object under the key."""
        return store.has_object(catalog_name, object_key)

    @mcp.tool(name="db.findObjects")
    def find_objects(catalog_name: str, where_fields: dict[str, Any] | None = None) -> dict:
        """Return the objects whose fields equal every value in `where_fields`."""
        return store.find_objects(catalog_name, where(where_fields))

    @mcp.tool(name="db.updateObjects")
    def update_objects(
        catalog_name: str,
        changes: dict[str, Any],
        where_fields: dict[str, Any] | None = None,
    ) -> bool:
        """Set `changes` on every object matching `where_fields` (all when omitted)."""
        return store.update_objects(catalog_name, assign(changes), where(where_fields))

    @mcp.tool(name="db.getCatalog")
    def get_catalog(catalog_name: str) -> dict:
        """Return a whole catalog ({} if it does not exist)."""
        return store.get_catalog(catalog_name)

    @mcp.tool(name="db.setCatalog")
    def set_catalog(catalog_name: str, catalog_data: dict[str, Any]) -> bool:
        """Replace a whole catalog."""
        return store.set_catalog(catalog_name, catalog_data)

    @mcp.tool(name="db.deleteCatalog")
    def delete_catalog(catalog_name: str) -> bool:
        """Empty a catalog."""
        return store.delete_catalog(catalog_name)

    @mcp.tool(name="db.backupCatalog")
    def backup_catalog(source_catalog: str, backup_catalog: str) -> bool:
        """Copy a snapshot of one catalog into another."""
        return store.backup_catalog(source_catalog, backup_catalog)

    @mcp.tool(name="db.mergeCatalogs")
    def merge_catalogs(source_catalog: str, target_catalog: str, overwrite: bool = False) -> bool:
        """Copy objects from source into target, keeping target's keys unless overwrite."""
        return store.merge_catalogs(source_catalog, target_catalog, overwrite)

    @mcp.tool(name="db.getObjectKeys")
    def get_object_keys(catalog_name: str) -> list[str]:
        """List the object keys in a catalog."""
        return store.get_object_keys(catalog_name)

    @mcp.tool(name="db.getObjectValues")
    def get_object_values(catalog_name: str) -> list[Any]:
        """List the objects in a catalog."""
        return store.get_object_values(catalog_name)

    @mcp.tool(name="db.getObjectCount")
    def get_object_count(catalog_name: str) -> int:
        """Count the objects in a catalog."""
        return store.get_object_count(catalog_name)

    @mcp.tool(name="db.getCatalogNames")
    def get_catalog_names() -> list[str]:
        """List the catalogs in the current namespace."""
        return store.get_catalog_names()

    return mcp


if __name__ == "__main__":
    from campaign_vault.bootstrap import create_store
    from campaign_vault.config import load_settings

    build_server(create_store(load_settings())).run()
