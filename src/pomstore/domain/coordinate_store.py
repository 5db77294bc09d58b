"""Coordinate store backed by short-lived units of work."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from collections.abc import Callable

    from pomstore.domain.model import ProjectModel, RepositoryProblem
    from pomstore.domain.ports.unit_of_work import ProjectModelUnitOfWork

log = getLogger(__name__)


class UnitOfWorkCoordinateStore:
    """Run every store call in its own unit of work and commit it immediately.

    Each call is atomic on its own; nothing here groups two calls into one transaction.
    """

    def __init__(self, unit_of_work_factory: Callable[[], ProjectModelUnitOfWork]) -> None:
        self._unit_of_work_factory = unit_of_work_factory

    def get_project_model(self, group_id: str, artifact_id: str, version: str) -> ProjectModel:
        with self._unit_of_work_factory() as uow:
            return uow.repositories.project_models.get(group_id, artifact_id, version)

    def save_project_model(self, model: ProjectModel) -> None:
        with self._unit_of_work_factory() as uow:
            uow.repositories.project_models.save(model)
            uow.commit()
        log.debug("Saved project model %s", model.key)

    def delete_project_model(self, model: ProjectModel) -> None:
        with self._unit_of_work_factory() as uow:
            uow.repositories.project_models.delete(model)
            uow.commit()
        log.debug("Deleted project model %s", model.key)

    def save_problem(self, problem: RepositoryProblem) -> None:
        with self._unit_of_work_factory() as uow:
            uow.repositories.problems.add(problem)
            uow.commit()


if TYPE_CHECKING:
    from pomstore.domain.ports.store import CoordinateStore

    _factory_stub = cast("Callable[[], ProjectModelUnitOfWork]", object())
    _store_check: CoordinateStore = UnitOfWorkCoordinateStore(_factory_stub)
