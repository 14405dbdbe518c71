"""Namespace resolvers.

The store asks a resolver for the caller's namespace on every operation and
passes the answer straight to the backend.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Protocol


class NamespaceResolver(Protocol):
    def current_namespace(self) -> str: ...


class StaticNamespace:
    """Always answers with the same namespace."""

    def __init__(self, namespace: str) -> None:
        self._namespace = namespace

    def current_namespace(self) -> str:
        return self._namespace


class ContextNamespace:
    """Namespace carried in a context variable.

    Callers bind a namespace around a unit of work (an HTTP request, an MCP
    call); outside any binding the default applies.

        resolver = ContextNamespace("campaign-vault")
        with resolver.bind("lib:gm-notes"):
            store.get_catalog("party")   # reads from lib:gm-notes
    """

    def __init__(self, default: str) -> None:
        self._var: ContextVar[str] = ContextVar("vault_namespace", default=default)

    def current_namespace(self) -> str:
        return self._var.get()

    @contextmanager
    def bind(self, namespace: str) -> Iterator[str]:
        token = self._var.set(namespace)
        try:
            yield namespace
        finally:
            self._var.reset(token)
