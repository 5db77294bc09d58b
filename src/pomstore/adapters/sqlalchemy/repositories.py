"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, cast

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from pomstore.adapters.sqlalchemy.mappings import project_model_table, repository_problem_table
from pomstore.domain.errors import ObjectNotFoundError, PersistenceError
from pomstore.domain.model import ProjectModel, RepositoryProblem

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from sqlalchemy.orm import Session


@contextmanager
def translate_errors(action: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as ``PersistenceError``."""

    try:
        yield
    except SQLAlchemyError as exc:
        raise PersistenceError(f"Unable to {action}: {exc}") from exc


class SqlAlchemyProjectModelRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, group_id: str, artifact_id: str, version: str) -> ProjectModel:
        with translate_errors(f"load project model {group_id}:{artifact_id}:{version}"):
            model = self.session.get(ProjectModel, (group_id, artifact_id, version))
        if model is None:
            raise ObjectNotFoundError(
                f"Unable to find project model [{group_id}:{artifact_id}:{version}]"
            )
        return model

    def save(self, model: ProjectModel) -> None:
        if not model.group_id or not model.version:
            raise PersistenceError(f"Refusing to store incomplete project model {model.key}")
        with translate_errors(f"save project model {model.key}"):
            self.session.merge(model)
            self.session.flush()

    def delete(self, model: ProjectModel) -> None:
        stmt = (
            delete(ProjectModel)
            .where(project_model_table.c.group_id == model.group_id)
            .where(project_model_table.c.artifact_id == model.artifact_id)
            .where(project_model_table.c.version == model.version)
        )
        with translate_errors(f"delete project model {model.key}"):
            self.session.execute(stmt)

    def query(self, *, group_id: str | None = None) -> Sequence[ProjectModel]:
        stmt = select(ProjectModel).order_by(
            project_model_table.c.group_id,
            project_model_table.c.artifact_id,
            project_model_table.c.version,
        )
        if group_id is not None:
            stmt = stmt.where(project_model_table.c.group_id == group_id)
        with translate_errors("query project models"):
            return self.session.scalars(stmt).all()


class SqlAlchemyRepositoryProblemRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, problem: RepositoryProblem) -> None:
        with translate_errors(f"add repository problem for {problem.path}"):
            self.session.add(problem)
            self.session.flush()

    def query(self, *, repository_id: str | None = None) -> Sequence[RepositoryProblem]:
        stmt = select(RepositoryProblem).order_by(repository_problem_table.c.created_at)
        if repository_id is not None:
            stmt = stmt.where(repository_problem_table.c.repository_id == repository_id)
        with translate_errors("query repository problems"):
            return self.session.scalars(stmt).all()


if TYPE_CHECKING:
    from pomstore.domain.ports.persistence import (
        ProjectModelRepository,
        RepositoryProblemRepository,
    )

    _session_stub = cast("Session", object())
    _model_repo: ProjectModelRepository = SqlAlchemyProjectModelRepository(_session_stub)
    _problem_repo: RepositoryProblemRepository = SqlAlchemyRepositoryProblemRepository(
        _session_stub
    )
