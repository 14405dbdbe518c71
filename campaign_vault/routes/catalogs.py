"""Catalog and object endpoints over the store.

Store operations never raise; a False from a write becomes HTTP 400 (details
go to the diagnostics channel, not the response).
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from campaign_vault.storage import CatalogStore, where

from .deps import get_store
from .models import CopyCatalogBody, FindBody, MergeCatalogBody

router = APIRouter()


def _ok(result: bool, action: str) -> dict:
    if not result:
        raise HTTPException(400, f"Could not {action}")
    return {"ok": True}


@router.get("/catalogs")
async def list_catalogs(store: CatalogStore = Depends(get_store)):
    """List catalog names in the request's namespace."""
    return store.get_catalog_names()


@router.get("/catalogs/{name}")
async def get_catalog(name: str, store: CatalogStore = Depends(get_store)):
    """Get a whole catalog ({} if missing)."""
    return store.get_catalog(name)


@router.put("/catalogs/{name}")
async def set_catalog(
    name: str,
    body: dict[str, Any] = Body(...),
    store: CatalogStore = Depends(get_store),
):
    """Replace a whole catalog."""
    return _ok(store.set_catalog(name, body), "write catalog")


@router.delete("/catalogs/{name}")
async def delete_catalog(name: str, store: CatalogStore = Depends(get_store)):
    """Empty a catalog."""
    return _ok(store.delete_catalog(name), "delete catalog")


@router.post("/catalogs/{name}/backup")
async def backup_catalog(
    name: str, body: CopyCatalogBody, store: CatalogStore = Depends(get_store)
):
    """Snapshot a catalog into another catalog."""
    return _ok(store.backup_catalog(name, body.target), "back up catalog")


@router.post("/catalogs/{name}/merge")
async def merge_catalog(
    name: str, body: MergeCatalogBody, store: CatalogStore = Depends(get_store)
):
    """Merge this catalog's objects into the target catalog."""
    return _ok(store.merge_catalogs(name, body.target, body.overwrite), "merge catalogs")


@router.post("/catalogs/{name}/find")
async def find_objects(name: str, body: FindBody, store: CatalogStore = Depends(get_store)):
    """Return objects whose fields equal every value in `where`."""
    return store.find_objects(name, where(body.where))


@router.get("/catalogs/{name}/objects/{key}")
async def get_object(name: str, key: str, store: CatalogStore = Depends(get_store)):
    """Get one object."""
    if not store.has_object(name, key):
        raise HTTPException(404, "Object not found")
    return store.get_object(name, key)


@router.put("/catalogs/{name}/objects/{key}")
async def set_object(
    name: str, key: str, body: Any = Body(...), store: CatalogStore = Depends(get_store)
):
    """Create or replace one object."""
    return _ok(store.set_object(name, key, body), "write object")


@router.delete("/catalogs/{name}/objects/{key}")
async def delete_object(name: str, key: str, store: CatalogStore = Depends(get_store)):
    """Delete one object (succeeds if already absent)."""
    return _ok(store.delete_object(name, key), "delete object")
