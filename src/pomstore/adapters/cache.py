"""In-process cache for effective project models."""

from __future__ import annotations

import threading
from collections import OrderedDict
from logging import getLogger
from typing import TYPE_CHECKING

from pomstore.config.cache import DEFAULT_CACHE_MAX_ENTRIES

if TYPE_CHECKING:
    from pomstore.domain.model import ProjectModel

log = getLogger(__name__)


class InMemoryResolutionCache:
    """Bounded least-recently-used mapping of project keys to effective models.

    Individual calls are thread-safe. ``lock`` is re-entrant so callers can hold it
    around a ``has_key``/``remove`` pair without deadlocking these methods.
    """

    def __init__(self, *, max_entries: int = DEFAULT_CACHE_MAX_ENTRIES) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self.max_entries = max_entries
        self._entries: OrderedDict[str, ProjectModel] = OrderedDict()
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def has_key(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def get(self, key: str) -> ProjectModel | None:
        with self._lock:
            model = self._entries.get(key)
            if model is not None:
                self._entries.move_to_end(key)
            return model

    def put(self, key: str, model: ProjectModel) -> None:
        with self._lock:
            self._entries[key] = model
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                log.debug("Cache full, dropped effective project model %s", evicted)

    def remove(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


if TYPE_CHECKING:
    from pomstore.domain.ports.cache import ResolutionCache

    _cache_check: ResolutionCache = InMemoryResolutionCache()
