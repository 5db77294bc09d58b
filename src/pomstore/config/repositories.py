"""Managed repository definitions loaded from a TOML file.

The file lists one ``[[repository]]`` table per managed repository::

    [[repository]]
    id = "internal"
    location = "/srv/repositories/internal"
    layout = "default"  # or "legacy"
    name = "Internal releases"
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, cast

from pomstore.domain.model import RepositoryLayout

from .errors import ConfigurationError
from .storage import StorageConfig, get_storage_config

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class ManagedRepositoryConfig:
    id: str
    location: Path
    layout: RepositoryLayout = RepositoryLayout.DEFAULT
    name: str | None = None


@dataclass(frozen=True, slots=True)
class RepositoriesConfig:
    repositories: tuple[ManagedRepositoryConfig, ...] = field(default_factory=tuple)

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(repository.id for repository in self.repositories)

    def get(self, repository_id: str) -> ManagedRepositoryConfig | None:
        for repository in self.repositories:
            if repository.id == repository_id:
                return repository
        return None


def _parse_repository(entry: Mapping[str, object], *, base_dir: Path) -> ManagedRepositoryConfig:
    repository_id = entry.get("id")
    location = entry.get("location")
    if not isinstance(repository_id, str) or not repository_id.strip():
        raise ConfigurationError("Repository entry is missing an 'id'")
    if not isinstance(location, str) or not location.strip():
        raise ConfigurationError(f"Repository {repository_id} is missing a 'location'")

    layout_value = entry.get("layout", RepositoryLayout.DEFAULT.value)
    try:
        layout = RepositoryLayout(str(layout_value))
    except ValueError as exc:
        raise ConfigurationError(
            f"Repository {repository_id} has unsupported layout {layout_value!r}"
        ) from exc

    name = entry.get("name")
    location_path = Path(location).expanduser()
    if not location_path.is_absolute():
        location_path = base_dir / location_path
    return ManagedRepositoryConfig(
        id=repository_id,
        location=location_path,
        layout=layout,
        name=name if isinstance(name, str) else None,
    )


def load_repositories_config(path: Path) -> RepositoriesConfig:
    """Parse the repositories file at ``path``; relative locations resolve against it."""

    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid repositories file {path}: {exc}") from exc

    raw_entries = document.get("repository", [])
    if not isinstance(raw_entries, list):
        raise ConfigurationError(f"'repository' in {path} must be an array of tables")

    repositories: list[ManagedRepositoryConfig] = []
    seen: set[str] = set()
    for raw_entry in cast(list[object], raw_entries):
        if not isinstance(raw_entry, dict):
            raise ConfigurationError(f"Invalid repository entry in {path}")
        repository = _parse_repository(
            cast(dict[str, object], raw_entry), base_dir=path.parent.resolve()
        )
        if repository.id in seen:
            raise ConfigurationError(f"Duplicate repository id {repository.id} in {path}")
        seen.add(repository.id)
        repositories.append(repository)
    return RepositoriesConfig(repositories=tuple(repositories))


def get_repositories_config(*, storage: StorageConfig | None = None) -> RepositoriesConfig:
    env_path = os.getenv("POMSTORE_REPOSITORIES_FILE")
    if env_path:
        path = Path(env_path).expanduser()
    else:
        path = (storage or get_storage_config()).repositories_path()
    if not path.exists():
        if env_path:
            raise ConfigurationError(f"Repositories file {path} does not exist")
        return RepositoriesConfig()
    return load_repositories_config(path)
