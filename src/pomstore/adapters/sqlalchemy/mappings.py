"""SQLAlchemy mapping metadata for the pomstore domain model."""

from __future__ import annotations

import json
import logging
import uuid
from datetime import UTC, datetime
from functools import cache
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import (
    Column,
    DateTime,
    Dialect,
    Index,
    String,
    Table,
    Text,
    TypeDecorator,
    Uuid,
    orm,
)
from sqlalchemy.orm import configure_mappers

from pomstore.domain.model import Dependency, ParentReference, ProjectModel, RepositoryProblem

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


class StringMapType(TypeDecorator[dict[str, str]]):
    impl = Text
    cache_ok = True

    def process_bind_param(self, value: dict[str, str] | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return json.dumps(value, sort_keys=True)

    def process_result_value(self, value: str | None, dialect: Dialect) -> dict[str, str]:
        _ = dialect
        if value is None:
            return {}
        loaded = json.loads(value)
        if not isinstance(loaded, dict):
            return {}
        items = cast(dict[Any, Any], loaded)
        return {str(key): str(item) for key, item in items.items()}


class StringListType(TypeDecorator[list[str]]):
    impl = Text
    cache_ok = True

    def process_bind_param(self, value: list[str] | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return json.dumps(list(value))

    def process_result_value(self, value: str | None, dialect: Dialect) -> list[str]:
        _ = dialect
        if value is None:
            return []
        loaded = json.loads(value)
        if not isinstance(loaded, list):
            return []
        return [str(item) for item in cast(list[Any], loaded)]


def _dependency_to_json(dependency: Dependency) -> dict[str, object]:
    return {
        "groupId": dependency.group_id,
        "artifactId": dependency.artifact_id,
        "version": dependency.version,
        "type": dependency.type,
        "classifier": dependency.classifier,
        "scope": dependency.scope,
        "optional": dependency.optional,
    }


def _dependency_from_json(item: dict[str, Any]) -> Dependency:
    return Dependency(
        group_id=str(item["groupId"]),
        artifact_id=str(item["artifactId"]),
        version=item.get("version"),
        type=str(item.get("type") or "jar"),
        classifier=item.get("classifier"),
        scope=item.get("scope"),
        optional=bool(item.get("optional", False)),
    )


class DependencyListType(TypeDecorator[list[Dependency]]):
    impl = Text
    cache_ok = True

    def process_bind_param(self, value: list[Dependency] | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return json.dumps([_dependency_to_json(dependency) for dependency in value])

    def process_result_value(self, value: str | None, dialect: Dialect) -> list[Dependency]:
        _ = dialect
        if value is None:
            return []
        loaded = json.loads(value)
        if not isinstance(loaded, list):
            return []
        return [
            _dependency_from_json(cast(dict[str, Any], item))
            for item in cast(list[Any], loaded)
            if isinstance(item, dict)
        ]


class ParentReferenceType(TypeDecorator[ParentReference]):
    impl = Text
    cache_ok = True

    def process_bind_param(self, value: ParentReference | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return json.dumps(
            {
                "groupId": value.group_id,
                "artifactId": value.artifact_id,
                "version": value.version,
                "relativePath": value.relative_path,
            }
        )

    def process_result_value(self, value: str | None, dialect: Dialect) -> ParentReference | None:
        _ = dialect
        if value is None:
            return None
        loaded = json.loads(value)
        if not isinstance(loaded, dict):
            return None
        item = cast(dict[str, Any], loaded)
        return ParentReference(
            group_id=str(item["groupId"]),
            artifact_id=str(item["artifactId"]),
            version=str(item["version"]),
            relative_path=item.get("relativePath"),
        )


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Tables ----------------------------------------------------------------------

project_model_table = Table(
    "project_model",
    mapper_registry.metadata,
    Column("group_id", String, primary_key=True),
    Column("artifact_id", String, primary_key=True),
    Column("version", String, primary_key=True),
    Column("packaging", String, nullable=False),
    Column("origin", String, nullable=True),
    Column("name", String, nullable=True),
    Column("description", Text, nullable=True),
    Column("url", String, nullable=True),
    Column("parent", ParentReferenceType, nullable=True),
    Column("properties", StringMapType, nullable=False),
    Column("dependencies", DependencyListType, nullable=False),
    Column("dependency_management", DependencyListType, nullable=False),
    Column("modules", StringListType, nullable=False),
)

repository_problem_table = Table(
    "repository_problem",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("repository_id", String, nullable=False),
    Column("path", String, nullable=False),
    Column("group_id", String, nullable=False),
    Column("artifact_id", String, nullable=False),
    Column("version", String, nullable=False),
    Column("type", String, nullable=False),
    Column("origin", String, nullable=False),
    Column("message", Text, nullable=False),
    Column("created_at", UTCDateTime, nullable=False),
    Index("ix_repository_problem_repository_id", "repository_id"),
)


@cache
def start_mappers() -> orm.registry:
    """Map the domain classes onto their tables (idempotent)."""

    mapper_registry.map_imperatively(ProjectModel, project_model_table)
    mapper_registry.map_imperatively(RepositoryProblem, repository_problem_table)

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
