"""Input checks run before any backend call."""

from __future__ import annotations

from typing import Any

from .errors import CatalogValidationError

# Characters that would corrupt the host's property encoding.
FORBIDDEN_NAME_CHARS = frozenset('[]{}"\'\\')


def validate_catalog_name(catalog_name: Any) -> str:
    if catalog_name is None:
        raise CatalogValidationError("Catalog name is required")
    if not isinstance(catalog_name, str):
        raise CatalogValidationError(
            f"Catalog name must be a string, got {type(catalog_name).__name__}"
        )
    if not catalog_name.strip():
        raise CatalogValidationError("Catalog name must not be blank")
    bad = sorted(FORBIDDEN_NAME_CHARS.intersection(catalog_name))
    if bad:
        raise CatalogValidationError(
            f"Catalog name {catalog_name!r} contains forbidden characters: {''.join(bad)}"
        )
    return catalog_name


def validate_object_key(object_key: Any) -> str:
    if object_key is None:
        raise CatalogValidationError("Object key is required")
    if not isinstance(object_key, str):
        raise CatalogValidationError(
            f"Object key must be a string, got {type(object_key).__name__}"
        )
    if not object_key.strip():
        raise CatalogValidationError("Object key must not be blank")
    return object_key


def validate_callable(func: Any, role: str, *, optional: bool = False) -> None:
    """Check that `func` can be called; `role` names it in the error message."""
    if func is None and optional:
        return
    if not callable(func):
        raise CatalogValidationError(
            f"{role} must be callable, got {type(func).__name__}"
        )


def validate_catalog_data(catalog_data: Any) -> dict[str, Any]:
    """A catalog is a plain mapping with string keys; arrays and scalars are rejected."""
    if catalog_data is None:
        raise CatalogValidationError("Catalog data is required")
    if not isinstance(catalog_data, dict):
        raise CatalogValidationError(
            f"Catalog data must be a mapping, got {type(catalog_data).__name__}"
        )
    for key in catalog_data:
        if not isinstance(key, str):
            raise CatalogValidationError(
                f"Catalog keys must be strings, got {type(key).__name__} ({key!r})"
            )
    return catalog_data
