"""PropertyBackend implementations.

A backend is the host's single-value slot store: every slot is addressed by
(name, namespace) and holds one opaque UTF-8 string. Backends know nothing about
JSON framing; the catalog store imposes that on top.

Two implementations are provided:

    MemoryBackend — slots in a process-local dict. Useful for tests and for
                    running the service without persistence.
    FileBackend   — one file per slot under a base directory:

        {base}/
          ns-{namespace}/
            {name}.json      ← raw slot text

                    Namespace and name are percent-encoded (dots included), so
                    any string maps to a single path component inside {base}.
                    A slot file that is not valid UTF-8 is read with
                    replacement characters, so the catalog store sees it as
                    corrupt data rather than as a failed read.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Protocol
from urllib.parse import quote, unquote

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Protocol: every backend must match these signatures
# ---------------------------------------------------------------------------

class PropertyBackend(Protocol):
    def read(self, name: str, namespace: str) -> str | None: ...

    def write(self, name: str, data: str, namespace: str) -> None: ...

    def list_names(self, namespace: str, fmt: str = "json") -> str | None: ...


def _format_names(names: list[str], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(names)
    return ",".join(names)


# ---------------------------------------------------------------------------
# MemoryBackend
# ---------------------------------------------------------------------------

class MemoryBackend:
    """Slots kept in a dict keyed by (namespace, name)."""

    def __init__(self) -> None:
        self._slots: dict[tuple[str, str], str] = {}

    def read(self, name: str, namespace: str) -> str | None:
        return self._slots.get((namespace, name))

    def write(self, name: str, data: str, namespace: str) -> None:
        self._slots[(namespace, name)] = data

    def list_names(self, namespace: str, fmt: str = "json") -> str | None:
        names = [name for ns, name in self._slots if ns == namespace]
        return _format_names(names, fmt)


# ---------------------------------------------------------------------------
# FileBackend
# ---------------------------------------------------------------------------

def _encode_part(text: str) -> str:
    return quote(text, safe="").replace(".", "%2E")


class FileBackend:
    """Slots stored as files under `base_path`.

    Writes go to a temp file in the slot directory and are moved into place
    with os.replace(), so a reader sees either the old or the new slot text.

    Args:
        base_path: Root directory. Created lazily on first write.
    """

    SUFFIX = ".json"

    def __init__(self, base_path: Path) -> None:
        self._base = base_path

    @property
    def base_path(self) -> Path:
        return self._base

    # ------------------------------------------------------------------
    # Internal path helpers
    # ------------------------------------------------------------------

    def _ns_dir(self, namespace: str) -> Path:
        return self._base / f"ns-{_encode_part(namespace)}"

    def _slot_file(self, name: str, namespace: str) -> Path:
        return self._ns_dir(namespace) / f"{_encode_part(name)}{self.SUFFIX}"

    # ------------------------------------------------------------------
    # PropertyBackend
    # ------------------------------------------------------------------

    def read(self, name: str, namespace: str) -> str | None:
        path = self._slot_file(name, namespace)
        if not path.is_file():
            return None
        raw = path.read_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            # Undecodable bytes are damaged slot content, not a failed read
            logger.warning(
                "Slot file %s is not valid UTF-8 (%s), decoding with replacement", path, e
            )
            return raw.decode("utf-8", errors="replace")

    def write(self, name: str, data: str, namespace: str) -> None:
        path = self._slot_file(name, namespace)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(f"{path.name}.{os.getpid()}.tmp")
        tmp.write_text(data, encoding="utf-8")
        os.replace(tmp, path)
        logger.debug("slot written path=%s bytes=%d", path, len(data.encode("utf-8")))

    def list_names(self, namespace: str, fmt: str = "json") -> str | None:
        ns_dir = self._ns_dir(namespace)
        if not ns_dir.is_dir():
            return None
        names = [
            unquote(path.name[: -len(self.SUFFIX)])
            for path in sorted(ns_dir.glob(f"*{self.SUFFIX}"))
        ]
        return _format_names(names, fmt)
