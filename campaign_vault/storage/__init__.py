"""Catalog storage on top of a host property store.

Layers, bottom-up:

  backends     PropertyBackend protocol + MemoryBackend / FileBackend.
               A slot is (name, namespace) → opaque UTF-8 string.
  namespace    NamespaceResolver protocol + StaticNamespace / ContextNamespace.
  validation   Name, key, payload and callable checks.
  catalog      CatalogStore: JSON framing, the size bound, object CRUD,
               find/update, backup and merge.

A catalog is a JSON object stored whole in one slot. There is no physical
delete: deleting a catalog writes {} to its slot.
"""

from .backends import FileBackend, MemoryBackend, PropertyBackend  # noqa: F401
from .catalog import MAX_CATALOG_BYTES, Catalog, CatalogStore  # noqa: F401
from .errors import (  # noqa: F401
    BackendError,
    CatalogSizeError,
    CatalogValidationError,
    StorageError,
)
from .namespace import (  # noqa: F401
    ContextNamespace,
    NamespaceResolver,
    StaticNamespace,
)
from .queries import assign, where  # noqa: F401
