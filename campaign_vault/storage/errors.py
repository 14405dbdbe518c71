"""Exceptions raised inside the catalog store.

They never leave a public CatalogStore operation: the operation boundary turns
them into a soft failure and hands them to the diagnostics channel.
"""


class StorageError(RuntimeError):
    """Base class for every catalog store failure."""


class CatalogValidationError(StorageError, ValueError):
    """Raised for a malformed catalog name, object key, payload or callable."""


class CatalogSizeError(StorageError):
    """Raised when a serialized catalog exceeds the size bound."""

    def __init__(self, catalog_name: str, size: int, limit: int) -> None:
        super().__init__(
            f"Catalog {catalog_name!r} serializes to {size} bytes, limit is {limit}"
        )
        self.catalog_name = catalog_name
        self.size = size
        self.limit = limit


class BackendError(StorageError):
    """Raised when a PropertyBackend call fails."""
