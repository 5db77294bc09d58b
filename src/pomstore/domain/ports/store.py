"""The coordinate store used by database consumers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pomstore.domain.model import ProjectModel, RepositoryProblem


@runtime_checkable
class CoordinateStore(Protocol):
    """Project model and problem persistence, one atomic operation per call.

    Calls are independent: no transaction spans two of them.
    """

    def get_project_model(self, group_id: str, artifact_id: str, version: str) -> ProjectModel:
        """Return the stored model or raise ``ObjectNotFoundError``."""
        ...

    def save_project_model(self, model: ProjectModel) -> None: ...

    def delete_project_model(self, model: ProjectModel) -> None: ...

    def save_problem(self, problem: RepositoryProblem) -> None: ...
