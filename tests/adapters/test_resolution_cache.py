from __future__ import annotations

import threading

import pytest

from pomstore.adapters.cache import InMemoryResolutionCache
from pomstore.domain.model import ProjectModel


def _model(artifact_id: str) -> ProjectModel:
    return ProjectModel(group_id="com.x", artifact_id=artifact_id, version="1.0")


def test_put_get_remove() -> None:
    cache = InMemoryResolutionCache()
    model = _model("foo")

    cache.put("com.x:foo:1.0", model)

    assert cache.has_key("com.x:foo:1.0")
    assert cache.get("com.x:foo:1.0") is model
    cache.remove("com.x:foo:1.0")
    assert not cache.has_key("com.x:foo:1.0")
    assert cache.get("com.x:foo:1.0") is None
    cache.remove("com.x:foo:1.0")


def test_least_recently_used_entry_is_dropped() -> None:
    cache = InMemoryResolutionCache(max_entries=2)
    cache.put("a", _model("a"))
    cache.put("b", _model("b"))
    cache.get("a")

    cache.put("c", _model("c"))

    assert len(cache) == 2
    assert cache.has_key("a")
    assert not cache.has_key("b")
    assert cache.has_key("c")


def test_clear() -> None:
    cache = InMemoryResolutionCache()
    cache.put("a", _model("a"))

    cache.clear()

    assert len(cache) == 0


def test_lock_is_reentrant_for_check_then_remove() -> None:
    cache = InMemoryResolutionCache()
    cache.put("a", _model("a"))

    with cache.lock:
        if cache.has_key("a"):
            cache.remove("a")

    assert not cache.has_key("a")


def test_lock_blocks_other_threads() -> None:
    cache = InMemoryResolutionCache()
    acquired: list[bool] = []

    def try_acquire() -> None:
        acquired.append(cache.lock.acquire(blocking=False))

    with cache.lock:
        worker = threading.Thread(target=try_acquire)
        worker.start()
        worker.join()

    assert acquired == [False]


def test_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError, match="positive"):
        InMemoryResolutionCache(max_entries=0)
