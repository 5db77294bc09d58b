"""Pydantic models describing descriptor documents once flattened from XML."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _strip(value: object) -> object:
    return value.strip() if isinstance(value, str) else value


class DescriptorBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ParentPayload(DescriptorBaseModel):
    group_id: str = Field(alias="groupId", min_length=1)
    artifact_id: str = Field(alias="artifactId", min_length=1)
    version: str = Field(min_length=1)
    relative_path: str | None = Field(default=None, alias="relativePath")

    _strip_coordinates = field_validator("group_id", "artifact_id", "version", mode="before")(
        _strip
    )
    _normalize_path = field_validator("relative_path", mode="before")(_blank_to_none)


class DependencyPayload(DescriptorBaseModel):
    group_id: str = Field(alias="groupId", min_length=1)
    artifact_id: str = Field(alias="artifactId", min_length=1)
    version: str | None = None
    type: str | None = None
    classifier: str | None = None
    scope: str | None = None
    optional: bool = False

    _strip_coordinates = field_validator("group_id", "artifact_id", mode="before")(_strip)
    _normalize_optionals = field_validator(
        "version", "type", "classifier", "scope", mode="before"
    )(_blank_to_none)


class ProjectPayload(DescriptorBaseModel):
    """A modern (model version 4.0.0) project descriptor."""

    model_version: str | None = Field(default=None, alias="modelVersion")
    group_id: str | None = Field(default=None, alias="groupId")
    artifact_id: str = Field(alias="artifactId", min_length=1)
    version: str | None = None
    packaging: str | None = None
    name: str | None = None
    description: str | None = None
    url: str | None = None
    parent: ParentPayload | None = None
    properties: dict[str, str] = Field(default_factory=dict[str, str])
    dependencies: list[DependencyPayload] = Field(default_factory=list[DependencyPayload])
    dependency_management: list[DependencyPayload] = Field(
        default_factory=list[DependencyPayload], alias="dependencyManagement"
    )
    modules: list[str] = Field(default_factory=list[str])

    _strip_artifact_id = field_validator("artifact_id", mode="before")(_strip)
    _normalize_optionals = field_validator(
        "model_version",
        "group_id",
        "version",
        "packaging",
        "name",
        "description",
        "url",
        mode="before",
    )(_blank_to_none)


class LegacyDependencyPayload(DescriptorBaseModel):
    id: str | None = None
    group_id: str | None = Field(default=None, alias="groupId")
    artifact_id: str | None = Field(default=None, alias="artifactId")
    version: str | None = None
    type: str | None = None

    _normalize = field_validator(
        "id", "group_id", "artifact_id", "version", "type", mode="before"
    )(_blank_to_none)

    @model_validator(mode="after")
    def _require_identity(self) -> Self:
        if self.artifact_id is None and self.id is None:
            raise ValueError("dependency declares neither artifactId nor id")
        if self.group_id is None and self.id is None:
            raise ValueError("dependency declares neither groupId nor id")
        return self


class LegacyProjectPayload(DescriptorBaseModel):
    """A legacy (POM version 3) ``project.xml`` descriptor."""

    pom_version: str | None = Field(default=None, alias="pomVersion")
    id: str | None = None
    group_id: str | None = Field(default=None, alias="groupId")
    artifact_id: str | None = Field(default=None, alias="artifactId")
    current_version: str | None = Field(default=None, alias="currentVersion")
    name: str | None = None
    short_description: str | None = Field(default=None, alias="shortDescription")
    description: str | None = None
    url: str | None = None
    dependencies: list[LegacyDependencyPayload] = Field(
        default_factory=list[LegacyDependencyPayload]
    )

    _normalize = field_validator(
        "pom_version",
        "id",
        "group_id",
        "artifact_id",
        "current_version",
        "name",
        "short_description",
        "description",
        "url",
        mode="before",
    )(_blank_to_none)

    @model_validator(mode="after")
    def _require_identity(self) -> Self:
        if self.artifact_id is None and self.id is None:
            raise ValueError("project declares neither artifactId nor id")
        return self
