"""Catalog store — schema-less JSON documents on a single-value slot store.

Each catalog is one JSON object persisted whole in one backend slot, addressed
by (catalog name, namespace). Object-level operations are read-whole-catalog,
mutate in memory, write-whole-catalog cycles; nothing is cached between calls.

Every public method is total: validation, size and backend errors are reported
to the Diagnostics channel and turned into a soft failure (False, {}, [], 0 or
the caller's default). Nothing raises to the caller.

Concurrency: there is no locking and no version token. Two writers racing on
the same catalog both read, both mutate, and the later write wins; the earlier
writer's change is lost. The backend write itself is the only atomic step.
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Callable
from typing import Any

from campaign_vault.diagnostics import Diagnostics

from .backends import PropertyBackend
from .errors import BackendError, CatalogSizeError, CatalogValidationError
from .namespace import NamespaceResolver
from .validation import (
    validate_callable,
    validate_catalog_data,
    validate_catalog_name,
    validate_object_key,
)

logger = logging.getLogger(__name__)

MAX_CATALOG_BYTES = 10 * 1024 * 1024

# Raw slot values that mean "nothing stored yet".
_EMPTY_MARKERS = frozenset({"", "{}", "[]"})

Catalog = dict[str, Any]
Predicate = Callable[[Any, str], Any]
Transformer = Callable[[Any, str], Any]


def canonical_json(value: Any) -> str:
    """Key-sorted JSON text; two values are the same document iff these match."""
    return json.dumps(value, sort_keys=True, ensure_ascii=False, allow_nan=False)


class CatalogStore:
    """Object-level CRUD, search, bulk update, backup and merge over catalogs.

    Args:
        backend:           The slot store catalogs are persisted to.
        namespace:         Resolver asked for the namespace on every call.
        diagnostics:       Receives a report for every soft failure.
                           Defaults to a Diagnostics with a LoggingSink.
        max_catalog_bytes: Upper bound on a serialized catalog (UTF-8 bytes).
    """

    def __init__(
        self,
        backend: PropertyBackend,
        namespace: NamespaceResolver,
        diagnostics: Diagnostics | None = None,
        max_catalog_bytes: int = MAX_CATALOG_BYTES,
    ) -> None:
        self._backend = backend
        self._namespace = namespace
        self._diagnostics = diagnostics or Diagnostics()
        self._max_bytes = max_catalog_bytes

    @property
    def backend(self) -> PropertyBackend:
        return self._backend

    @property
    def namespace(self) -> NamespaceResolver:
        return self._namespace

    @property
    def max_catalog_bytes(self) -> int:
        return self._max_bytes

    # ------------------------------------------------------------------
    # Internal load/store
    # ------------------------------------------------------------------

    def _fail(self, origin: str, error: BaseException) -> None:
        self._diagnostics.report(origin, error)

    def _decode(self, catalog_name: str, raw: str | None) -> Catalog:
        """Parse slot text. Corrupt or non-mapping data reads as an empty catalog."""
        if raw is None or raw.strip() in _EMPTY_MARKERS:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            self._fail(f"decoding catalog {catalog_name!r}", e)
            return {}
        if not isinstance(data, dict):
            self._fail(
                f"decoding catalog {catalog_name!r}",
                CatalogValidationError(
                    f"Stored catalog is a {type(data).__name__}, not a mapping"
                ),
            )
            return {}
        return data

    def _load(self, catalog_name: str) -> Catalog:
        validate_catalog_name(catalog_name)
        namespace = self._namespace.current_namespace()
        try:
            raw = self._backend.read(catalog_name, namespace)
        except Exception as e:
            raise BackendError(
                f"Cannot read catalog {catalog_name!r} in namespace {namespace!r}"
            ) from e
        logger.debug(
            "catalog read name=%s namespace=%s bytes=%d",
            catalog_name, namespace, len(raw or ""),
        )
        return self._decode(catalog_name, raw)

    def _encode(self, catalog_name: str, catalog_data: Catalog) -> str:
        try:
            text = json.dumps(
                catalog_data, separators=(",", ":"), ensure_ascii=False, allow_nan=False
            )
        except (TypeError, ValueError) as e:
            raise CatalogValidationError(
                f"Catalog {catalog_name!r} is not JSON-serializable: {e}"
            ) from e
        size = len(text.encode("utf-8"))
        if size > self._max_bytes:
            raise CatalogSizeError(catalog_name, size, self._max_bytes)
        return text

    def _store(self, catalog_name: str, catalog_data: Any) -> None:
        validate_catalog_name(catalog_name)
        validate_catalog_data(catalog_data)
        text = self._encode(catalog_name, catalog_data)
        namespace = self._namespace.current_namespace()
        try:
            self._backend.write(catalog_name, text, namespace)
        except Exception as e:
            raise BackendError(
                f"Cannot write catalog {catalog_name!r} in namespace {namespace!r}"
            ) from e
        logger.debug(
            "catalog written name=%s namespace=%s entries=%d",
            catalog_name, namespace, len(catalog_data),
        )

    # ------------------------------------------------------------------
    # Objects
    # ------------------------------------------------------------------

    def get_object(self, catalog_name: str, object_key: str, default: Any = None) -> Any:
        """Return a deep copy of one object, or `default` if absent or on failure."""
        try:
            validate_object_key(object_key)
            catalog = self._load(catalog_name)
            if object_key not in catalog:
                return default
            return copy.deepcopy(catalog[object_key])
        except Exception as e:
            self._fail(f"getObject({catalog_name!r}, {object_key!r})", e)
            return default

    def set_object(self, catalog_name: str, object_key: str, object_data: Any) -> bool:
        try:
            validate_catalog_name(catalog_name)
            validate_object_key(object_key)
            catalog = self._load(catalog_name)
            catalog[object_key] = object_data
            self._store(catalog_name, catalog)
            return True
        except Exception as e:
            self._fail(f"setObject({catalog_name!r}, {object_key!r})", e)
            return False

    def delete_object(self, catalog_name: str, object_key: str) -> bool:
        """Remove one object. Deleting an absent key succeeds without a write."""
        try:
            validate_catalog_name(catalog_name)
            validate_object_key(object_key)
            catalog = self._load(catalog_name)
            if object_key not in catalog:
                return True
            del catalog[object_key]
            self._store(catalog_name, catalog)
            return True
        except Exception as e:
            self._fail(f"deleteObject({catalog_name!r}, {object_key!r})", e)
            return False

    def has_object(self, catalog_name: str, object_key: str) -> bool:
        try:
            validate_object_key(object_key)
            return object_key in self._load(catalog_name)
        except Exception as e:
            self._fail(f"hasObject({catalog_name!r}, {object_key!r})", e)
            return False

    def find_objects(self, catalog_name: str, predicate: Predicate) -> Catalog:
        """Return the entries for which `predicate(value, key)` is truthy."""
        try:
            validate_callable(predicate, "predicate")
            catalog = self._load(catalog_name)
            return {
                key: copy.deepcopy(value)
                for key, value in catalog.items()
                if predicate(copy.deepcopy(value), key)
            }
        except Exception as e:
            self._fail(f"findObjects({catalog_name!r})", e)
            return {}

    def update_objects(
        self,
        catalog_name: str,
        transformer: Transformer,
        filter_fn: Predicate | None = None,
    ) -> bool:
        """Apply `transformer(value, key)` to every entry passing `filter_fn`.

        An entry counts as changed when its canonical JSON differs from the
        stored one. The catalog is written once, and only if something changed.
        """
        try:
            validate_callable(transformer, "transformer")
            validate_callable(filter_fn, "filter", optional=True)
            catalog = self._load(catalog_name)
            changed = 0
            for key, value in list(catalog.items()):
                if filter_fn is not None and not filter_fn(copy.deepcopy(value), key):
                    continue
                new_value = transformer(copy.deepcopy(value), key)
                if canonical_json(new_value) != canonical_json(value):
                    catalog[key] = new_value
                    changed += 1
            if not changed:
                return True
            logger.debug("updateObjects name=%s changed=%d", catalog_name, changed)
            self._store(catalog_name, catalog)
            return True
        except Exception as e:
            self._fail(f"updateObjects({catalog_name!r})", e)
            return False

    # ------------------------------------------------------------------
    # Catalogs
    # ------------------------------------------------------------------

    def get_catalog(self, catalog_name: str) -> Catalog:
        """Return the whole catalog; {} if missing, corrupt or unreadable."""
        try:
            return self._load(catalog_name)
        except Exception as e:
            self._fail(f"getCatalog({catalog_name!r})", e)
            return {}

    def set_catalog(self, catalog_name: str, catalog_data: Catalog) -> bool:
        """Replace a catalog wholesale. Oversized or invalid data writes nothing."""
        try:
            self._store(catalog_name, catalog_data)
            return True
        except Exception as e:
            self._fail(f"setCatalog({catalog_name!r})", e)
            return False

    def delete_catalog(self, catalog_name: str) -> bool:
        return self.set_catalog(catalog_name, {})

    def get_object_keys(self, catalog_name: str) -> list[str]:
        try:
            return list(self._load(catalog_name))
        except Exception as e:
            self._fail(f"getObjectKeys({catalog_name!r})", e)
            return []

    def get_object_values(self, catalog_name: str) -> list[Any]:
        try:
            return list(self._load(catalog_name).values())
        except Exception as e:
            self._fail(f"getObjectValues({catalog_name!r})", e)
            return []

    def get_object_count(self, catalog_name: str) -> int:
        try:
            return len(self._load(catalog_name))
        except Exception as e:
            self._fail(f"getObjectCount({catalog_name!r})", e)
            return 0

    def get_catalog_names(self) -> list[str]:
        """List the catalog slots that exist in the current namespace."""
        try:
            namespace = self._namespace.current_namespace()
            try:
                raw = self._backend.list_names(namespace, "json")
            except Exception as e:
                raise BackendError(
                    f"Cannot list catalogs in namespace {namespace!r}"
                ) from e
            if raw is None or raw.strip() in _EMPTY_MARKERS:
                return []
            names = json.loads(raw)
            if not isinstance(names, list):
                raise BackendError(f"Catalog listing is a {type(names).__name__}, not a list")
            return [name for name in names if isinstance(name, str)]
        except Exception as e:
            self._fail("getCatalogNames()", e)
            return []

    # ------------------------------------------------------------------
    # Backup & merge
    # ------------------------------------------------------------------

    def backup_catalog(self, source_catalog: str, backup_catalog: str) -> bool:
        """Copy a snapshot of `source_catalog` into `backup_catalog`."""
        try:
            validate_catalog_name(source_catalog)
            validate_catalog_name(backup_catalog)
            self._store(backup_catalog, self._load(source_catalog))
            return True
        except Exception as e:
            self._fail(f"backupCatalog({source_catalog!r}, {backup_catalog!r})", e)
            return False

    def merge_catalogs(
        self, source_catalog: str, target_catalog: str, overwrite: bool = False
    ) -> bool:
        """Copy entries key by key from source into target.

        Keys already in target are kept unless `overwrite` is set. Nested values
        are replaced wholesale, never deep-merged.
        """
        try:
            validate_catalog_name(source_catalog)
            validate_catalog_name(target_catalog)
            source = self._load(source_catalog)
            target = self._load(target_catalog)
            for key, value in source.items():
                if overwrite or key not in target:
                    target[key] = value
            self._store(target_catalog, target)
            return True
        except Exception as e:
            self._fail(
                f"mergeCatalogs({source_catalog!r}, {target_catalog!r}, overwrite={overwrite!r})",
                e,
            )
            return False
