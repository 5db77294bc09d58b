"""Ports for persisting project models and repository problems."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pomstore.domain.model import ProjectModel, RepositoryProblem


@runtime_checkable
class ProjectModelRepository(Protocol):
    """Persistence contract for project models keyed by their coordinates."""

    def get(self, group_id: str, artifact_id: str, version: str) -> ProjectModel:
        """Return the stored model or raise ``ObjectNotFoundError``."""
        ...

    def save(self, model: ProjectModel) -> None:
        """Insert ``model`` or replace the model stored under the same coordinates."""
        ...

    def delete(self, model: ProjectModel) -> None: ...

    def query(self, *, group_id: str | None = None) -> Sequence[ProjectModel]: ...


@runtime_checkable
class RepositoryProblemRepository(Protocol):
    """Persistence contract for repository problems."""

    def add(self, problem: RepositoryProblem) -> None: ...

    def query(self, *, repository_id: str | None = None) -> Sequence[RepositoryProblem]: ...
