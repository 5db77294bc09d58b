"""Domain port definitions for adapters."""

from __future__ import annotations

from .cache import ResolutionCache
from .consumers import ArtifactConsumer
from .content import ManagedRepositoryContent, RepositoryContentResolver
from .modelling import ProjectModelFilter, ProjectModelReader, ProjectModelResolver
from .persistence import ProjectModelRepository, RepositoryProblemRepository
from .store import CoordinateStore
from .unit_of_work import (
    ProjectModelRepositories,
    ProjectModelUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "ArtifactConsumer",
    "CoordinateStore",
    "ManagedRepositoryContent",
    "ProjectModelFilter",
    "ProjectModelReader",
    "ProjectModelRepositories",
    "ProjectModelRepository",
    "ProjectModelResolver",
    "ProjectModelUnitOfWork",
    "RepositoryCollection",
    "RepositoryContentResolver",
    "RepositoryProblemRepository",
    "ResolutionCache",
    "UnitOfWork",
]
