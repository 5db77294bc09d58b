"""Ports for accessing managed repository content."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from pomstore.domain.model import Artifact, RepositoryLayout


@runtime_checkable
class ManagedRepositoryContent(Protocol):
    """Maps artifacts to locations inside one managed repository."""

    @property
    def repository_id(self) -> str: ...

    @property
    def layout(self) -> RepositoryLayout: ...

    @property
    def root(self) -> Path: ...

    def to_path(self, artifact: Artifact) -> str:
        """Return the repository-relative path of ``artifact`` (``/`` separated)."""
        ...

    def to_file(self, artifact: Artifact) -> Path:
        """Return the absolute filesystem location of ``artifact``."""
        ...


@runtime_checkable
class RepositoryContentResolver(Protocol):
    def resolve(self, repository_id: str) -> ManagedRepositoryContent:
        """Return content for ``repository_id`` or raise ``RepositoryError``."""
        ...
