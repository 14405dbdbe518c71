"""Tests for namespace resolvers."""

import asyncio

from campaign_vault.storage import ContextNamespace, StaticNamespace


def test_static_namespace():
    assert StaticNamespace("lib:vault").current_namespace() == "lib:vault"


def test_context_namespace_default():
    assert ContextNamespace("default").current_namespace() == "default"


def test_context_namespace_bind_and_restore():
    resolver = ContextNamespace("default")
    with resolver.bind("outer") as bound:
        assert bound == "outer"
        assert resolver.current_namespace() == "outer"
        with resolver.bind("inner"):
            assert resolver.current_namespace() == "inner"
        assert resolver.current_namespace() == "outer"
    assert resolver.current_namespace() == "default"


def test_context_namespace_restored_after_error():
    resolver = ContextNamespace("default")
    try:
        with resolver.bind("temp"):
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert resolver.current_namespace() == "default"


def test_resolvers_are_independent():
    a = ContextNamespace("a")
    b = ContextNamespace("b")
    with a.bind("a2"):
        assert b.current_namespace() == "b"


async def test_context_namespace_per_task():
    resolver = ContextNamespace("default")
    seen: dict[str, str] = {}

    async def work(ns: str) -> None:
        with resolver.bind(ns):
            await asyncio.sleep(0)
            seen[ns] = resolver.current_namespace()

    await asyncio.gather(work("one"), work("two"))
    assert seen == {"one": "one", "two": "two"}
    assert resolver.current_namespace() == "default"
