"""SQLAlchemy adapter package for pomstore."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import SqlAlchemyProjectModelRepository, SqlAlchemyRepositoryProblemRepository
from .unit_of_work import SqlAlchemyUnitOfWork, shutdown, startup

__all__ = [
    "SqlAlchemyProjectModelRepository",
    "SqlAlchemyRepositoryProblemRepository",
    "SqlAlchemyUnitOfWork",
    "create_all_tables",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]
