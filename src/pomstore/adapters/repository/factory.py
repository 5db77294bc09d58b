"""Resolve repository ids to managed repository content."""

from __future__ import annotations

import threading
from logging import getLogger
from typing import TYPE_CHECKING

from pomstore.adapters.repository.content import (
    DefaultRepositoryContent,
    LegacyRepositoryContent,
)
from pomstore.domain.errors import RepositoryError, RepositoryNotFoundError
from pomstore.domain.model import RepositoryLayout

if TYPE_CHECKING:
    from pomstore.config.repositories import ManagedRepositoryConfig, RepositoriesConfig
    from pomstore.domain.ports.content import ManagedRepositoryContent

log = getLogger(__name__)


def create_content(repository: ManagedRepositoryConfig) -> ManagedRepositoryContent:
    if repository.layout is RepositoryLayout.DEFAULT:
        return DefaultRepositoryContent(repository.id, repository.location)
    if repository.layout is RepositoryLayout.LEGACY:
        return LegacyRepositoryContent(repository.id, repository.location)
    raise RepositoryError(
        f"Unsupported layout {repository.layout!r} for repository {repository.id}"
    )


class RepositoryContentFactory:
    """Hand out one content instance per configured managed repository."""

    def __init__(self, config: RepositoriesConfig) -> None:
        self._config = config
        self._contents: dict[str, ManagedRepositoryContent] = {}
        self._lock = threading.Lock()

    @property
    def repository_ids(self) -> tuple[str, ...]:
        return self._config.ids

    def resolve(self, repository_id: str) -> ManagedRepositoryContent:
        with self._lock:
            content = self._contents.get(repository_id)
            if content is not None:
                return content

            repository = self._config.get(repository_id)
            if repository is None:
                raise RepositoryNotFoundError(
                    f"Unable to find managed repository configuration for id: {repository_id}"
                )
            content = create_content(repository)
            log.debug("Created %r", content)
            self._contents[repository_id] = content
            return content
