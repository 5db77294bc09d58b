"""Effective project model cache settings."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_int

DEFAULT_CACHE_MAX_ENTRIES = 1000


@dataclass(frozen=True, slots=True)
class CacheConfig:
    max_entries: int = DEFAULT_CACHE_MAX_ENTRIES


def get_cache_config() -> CacheConfig:
    return CacheConfig(
        max_entries=env_int("POMSTORE_CACHE_MAX_ENTRIES", DEFAULT_CACHE_MAX_ENTRIES)
    )
