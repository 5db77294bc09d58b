"""Application configuration helpers."""

from __future__ import annotations

from .cache import CacheConfig, get_cache_config
from .env import env_int, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging
from .repositories import (
    ManagedRepositoryConfig,
    RepositoriesConfig,
    get_repositories_config,
    load_repositories_config,
)
from .storage import (
    DatabaseConfig,
    StorageConfig,
    get_database_config,
    get_database_uri,
    get_storage_config,
)

__all__ = [
    "CacheConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "ManagedRepositoryConfig",
    "MissingConfigurationError",
    "RepositoriesConfig",
    "StorageConfig",
    "configure_logging",
    "env_int",
    "get_cache_config",
    "get_database_config",
    "get_database_uri",
    "get_repositories_config",
    "get_storage_config",
    "load_repositories_config",
    "require_env_vars",
]
