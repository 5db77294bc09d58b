"""Builders for descriptor documents and artifacts used across tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pomstore.domain.model import Artifact

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from pomstore.domain.ports.content import ManagedRepositoryContent

POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"


def make_artifact(
    artifact_id: str = "foo",
    version: str = "1.0",
    *,
    group_id: str = "com.x",
    type_: str = "pom",
    repository_id: str = "internal",
) -> Artifact:
    return Artifact(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        type=type_,
        repository_id=repository_id,
    )


def _element(name: str, value: str | None) -> str:
    return "" if value is None else f"<{name}>{value}</{name}>"


def _dependencies(entries: Sequence[Mapping[str, str]]) -> str:
    rendered = "".join(
        "<dependency>" + "".join(_element(k, v) for k, v in entry.items()) + "</dependency>"
        for entry in entries
    )
    return f"<dependencies>{rendered}</dependencies>"


def pom_xml(
    *,
    group_id: str | None = "com.x",
    artifact_id: str = "foo",
    version: str | None = "1.0",
    packaging: str | None = None,
    name: str | None = None,
    parent: tuple[str, str, str] | None = None,
    properties: Mapping[str, str] | None = None,
    dependencies: Sequence[Mapping[str, str]] = (),
    dependency_management: Sequence[Mapping[str, str]] = (),
    modules: Sequence[str] = (),
) -> str:
    """Render a model 4.0.0 descriptor."""

    parts = [
        f'<?xml version="1.0" encoding="UTF-8"?><project xmlns="{POM_NAMESPACE}">',
        "<modelVersion>4.0.0</modelVersion>",
    ]
    if parent is not None:
        parent_group, parent_artifact, parent_version = parent
        parts.append(
            "<parent>"
            f"{_element('groupId', parent_group)}"
            f"{_element('artifactId', parent_artifact)}"
            f"{_element('version', parent_version)}"
            "</parent>"
        )
    parts.extend(
        [
            _element("groupId", group_id),
            _element("artifactId", artifact_id),
            _element("version", version),
            _element("packaging", packaging),
            _element("name", name),
        ]
    )
    if properties:
        rendered = "".join(_element(key, value) for key, value in properties.items())
        parts.append(f"<properties>{rendered}</properties>")
    if dependency_management:
        parts.append(
            f"<dependencyManagement>{_dependencies(dependency_management)}</dependencyManagement>"
        )
    if dependencies:
        parts.append(_dependencies(dependencies))
    if modules:
        parts.append("<modules>" + "".join(_element("module", m) for m in modules) + "</modules>")
    parts.append("</project>")
    return "".join(parts)


def legacy_project_xml(
    *,
    group_id: str | None = "com.x",
    artifact_id: str | None = "foo",
    current_version: str | None = "1.0",
    project_id: str | None = None,
    dependencies: Sequence[Mapping[str, str]] = (),
) -> str:
    """Render a POM version 3 ``project.xml`` document."""

    parts = [
        '<?xml version="1.0"?><project>',
        "<pomVersion>3</pomVersion>",
        _element("id", project_id),
        _element("groupId", group_id),
        _element("artifactId", artifact_id),
        _element("currentVersion", current_version),
        _element("shortDescription", "A legacy project"),
    ]
    if dependencies:
        parts.append(_dependencies(dependencies))
    parts.append("</project>")
    return "".join(parts)


def write_descriptor(content: ManagedRepositoryContent, artifact: Artifact, document: str) -> Path:
    """Write ``document`` where ``content`` expects the descriptor of ``artifact``."""

    path = content.to_file(artifact)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(document, encoding="utf-8")
    return path
