import pytest

from campaign_vault.diagnostics import Diagnostics
from campaign_vault.storage import CatalogStore, ContextNamespace, MemoryBackend

TEST_NAMESPACE = "lib:test-vault"


class RecordingBackend(MemoryBackend):
    """MemoryBackend that counts calls, so tests can assert on backend traffic."""

    def __init__(self) -> None:
        super().__init__()
        self.reads = 0
        self.writes = 0
        self.lists = 0

    def read(self, name, namespace):
        self.reads += 1
        return super().read(name, namespace)

    def write(self, name, data, namespace):
        self.writes += 1
        super().write(name, data, namespace)

    def list_names(self, namespace, fmt="json"):
        self.lists += 1
        return super().list_names(namespace, fmt)

    @property
    def calls(self) -> int:
        return self.reads + self.writes + self.lists


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def resolver() -> ContextNamespace:
    return ContextNamespace(TEST_NAMESPACE)


@pytest.fixture
def reports() -> list[str]:
    """Diagnostic messages emitted during the test."""
    return []


@pytest.fixture
def store(backend, resolver, reports) -> CatalogStore:
    return CatalogStore(backend, resolver, diagnostics=Diagnostics([reports.append]))
