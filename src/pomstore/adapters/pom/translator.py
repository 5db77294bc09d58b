"""Translate descriptor payloads into domain project models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pomstore.domain.model import (
    DEFAULT_DEPENDENCY_TYPE,
    DEFAULT_PACKAGING,
    Dependency,
    ParentReference,
    ProjectModel,
)

if TYPE_CHECKING:
    from .schema import (
        DependencyPayload,
        LegacyDependencyPayload,
        LegacyProjectPayload,
        ParentPayload,
        ProjectPayload,
    )


def _parent(payload: ParentPayload | None) -> ParentReference | None:
    if payload is None:
        return None
    return ParentReference(
        group_id=payload.group_id,
        artifact_id=payload.artifact_id,
        version=payload.version,
        relative_path=payload.relative_path,
    )


def _dependency(payload: DependencyPayload) -> Dependency:
    return Dependency(
        group_id=payload.group_id,
        artifact_id=payload.artifact_id,
        version=payload.version,
        type=payload.type or DEFAULT_DEPENDENCY_TYPE,
        classifier=payload.classifier,
        scope=payload.scope,
        optional=payload.optional,
    )


def model_from_payload(payload: ProjectPayload) -> ProjectModel:
    return ProjectModel(
        group_id=payload.group_id,
        artifact_id=payload.artifact_id,
        version=payload.version,
        packaging=payload.packaging or DEFAULT_PACKAGING,
        name=payload.name,
        description=payload.description,
        url=payload.url,
        parent=_parent(payload.parent),
        properties=dict(payload.properties),
        dependencies=[_dependency(dependency) for dependency in payload.dependencies],
        dependency_management=[
            _dependency(dependency) for dependency in payload.dependency_management
        ],
        modules=list(payload.modules),
    )


def _split_legacy_id(legacy_id: str) -> tuple[str, str]:
    # "group:artifact" or a bare id that doubles as group and artifact
    group_id, sep, artifact_id = legacy_id.partition(":")
    if sep:
        return group_id, artifact_id
    return legacy_id, legacy_id


def _legacy_dependency(payload: LegacyDependencyPayload) -> Dependency:
    id_group, id_artifact = _split_legacy_id(payload.id) if payload.id else (None, None)
    group_id = payload.group_id or id_group
    artifact_id = payload.artifact_id or id_artifact
    if group_id is None or artifact_id is None:
        raise ValueError("legacy dependency without identity")
    return Dependency(
        group_id=group_id,
        artifact_id=artifact_id,
        version=payload.version,
        type=payload.type or DEFAULT_DEPENDENCY_TYPE,
    )


def model_from_legacy_payload(payload: LegacyProjectPayload) -> ProjectModel:
    id_group, id_artifact = _split_legacy_id(payload.id) if payload.id else (None, None)
    artifact_id = payload.artifact_id or id_artifact
    if artifact_id is None:
        raise ValueError("legacy project without identity")
    return ProjectModel(
        group_id=payload.group_id or id_group,
        artifact_id=artifact_id,
        version=payload.current_version,
        packaging=DEFAULT_PACKAGING,
        name=payload.name,
        description=payload.description or payload.short_description,
        url=payload.url,
        dependencies=[_legacy_dependency(dependency) for dependency in payload.dependencies],
    )
