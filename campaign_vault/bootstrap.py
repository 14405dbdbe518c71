"""Construct the single CatalogStore a process runs with."""

import logging

from campaign_vault.config import Settings
from campaign_vault.diagnostics import Diagnostics, LoggingSink, WebhookSink
from campaign_vault.storage import (
    CatalogStore,
    ContextNamespace,
    FileBackend,
    MemoryBackend,
    NamespaceResolver,
)

logger = logging.getLogger(__name__)


def create_diagnostics(settings: Settings) -> Diagnostics:
    sinks = [LoggingSink()]
    if settings.webhook_url:
        sinks.append(WebhookSink(settings.webhook_url))
    return Diagnostics(sinks)


def create_store(
    settings: Settings, namespace: NamespaceResolver | None = None
) -> CatalogStore:
    """Build a store from settings. The namespace defaults to a ContextNamespace."""
    if settings.backend == "memory":
        backend = MemoryBackend()
    else:
        backend = FileBackend(settings.data_dir)
    logger.info(
        "catalog store backend=%s namespace=%s max_bytes=%d",
        settings.backend, settings.namespace, settings.max_catalog_bytes,
    )
    return CatalogStore(
        backend,
        namespace or ContextNamespace(settings.namespace),
        diagnostics=create_diagnostics(settings),
        max_catalog_bytes=settings.max_catalog_bytes,
    )
