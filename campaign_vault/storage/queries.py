"""Declarative predicates and transformers for callers that cannot pass code.

The MCP tools and the HTTP API receive plain JSON, so find/update requests
arrive as field maps:

    where   {"type": "Dungeon", "discovered": False}
            matches mapping values whose fields equal every given value as
            JSON documents, so 1 does not match true and 1.0 does not match 1
    changes {"discovered": True}
            assigns fields on mapping values; other values pass through
"""

from __future__ import annotations

from typing import Any

from .catalog import Predicate, Transformer, canonical_json


def where(fields: dict[str, Any] | None) -> Predicate:
    """Predicate matching mapping values by field equality. Empty matches everything."""
    wanted = {name: canonical_json(expected) for name, expected in (fields or {}).items()}

    def match(value: Any, key: str) -> bool:
        if not wanted:
            return True
        if not isinstance(value, dict):
            return False
        return all(
            name in value and canonical_json(value[name]) == expected
            for name, expected in wanted.items()
        )

    return match


def assign(changes: dict[str, Any]) -> Transformer:
    """Transformer setting `changes` on mapping values (shallow)."""
    updates = dict(changes)

    def apply(value: Any, key: str) -> Any:
        if not isinstance(value, dict):
            return value
        value.update(updates)
        return value

    return apply
