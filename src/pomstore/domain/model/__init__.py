"""Public domain model surface."""

from __future__ import annotations

from pomstore.domain.model.artifact import POM_TYPE, Artifact
from pomstore.domain.model.enums import ModelOrigin, ProblemType, RepositoryLayout
from pomstore.domain.model.problem import RepositoryProblem
from pomstore.domain.model.project import (
    DEFAULT_DEPENDENCY_TYPE,
    DEFAULT_PACKAGING,
    Dependency,
    ParentReference,
    ProjectModel,
    project_key,
)

__all__ = [  # noqa: RUF022
    # artifacts
    "Artifact",
    "POM_TYPE",
    # project models
    "ProjectModel",
    "ParentReference",
    "Dependency",
    "project_key",
    "DEFAULT_DEPENDENCY_TYPE",
    "DEFAULT_PACKAGING",
    # problems
    "RepositoryProblem",
    # enums
    "ModelOrigin",
    "ProblemType",
    "RepositoryLayout",
]
