"""Artifact path mapping for managed repositories on the local filesystem."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Final

from pomstore.domain.model import RepositoryLayout
from pomstore.domain.versions import get_base_version

if TYPE_CHECKING:
    from pomstore.domain.model import Artifact

TYPE_EXTENSIONS: Final[dict[str, str]] = {
    "pom": "pom",
    "jar": "jar",
    "maven-plugin": "jar",
    "ejb": "jar",
    "ejb-client": "jar",
    "java-source": "jar",
    "javadoc": "jar",
    "test-jar": "jar",
    "distribution-tgz": "tar.gz",
    "distribution-zip": "zip",
}

LEGACY_TYPE_DIRECTORIES: Final[dict[str, str]] = {
    "java-source": "java-sources",
    "javadoc": "javadoc.jars",
    "ejb-client": "ejbs",
    "distribution-tgz": "distributions",
    "distribution-zip": "distributions",
}


def extension_for(artifact_type: str) -> str:
    return TYPE_EXTENSIONS.get(artifact_type, artifact_type)


def _filename(artifact: Artifact) -> str:
    classifier = f"-{artifact.classifier}" if artifact.classifier else ""
    return f"{artifact.artifact_id}-{artifact.version}{classifier}.{extension_for(artifact.type)}"


class _FilesystemRepositoryContent(ABC):
    layout: RepositoryLayout

    def __init__(self, repository_id: str, root: Path) -> None:
        self._repository_id = repository_id
        self._root = root

    @property
    def repository_id(self) -> str:
        return self._repository_id

    @property
    def root(self) -> Path:
        return self._root

    @abstractmethod
    def to_path(self, artifact: Artifact) -> str: ...

    def to_file(self, artifact: Artifact) -> Path:
        return self._root.joinpath(*self.to_path(artifact).split("/"))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(repository_id={self._repository_id!r}, root={self._root!r})"


class DefaultRepositoryContent(_FilesystemRepositoryContent):
    """Maven 2 layout: ``group/path/artifactId/baseVersion/artifactId-version.ext``."""

    layout = RepositoryLayout.DEFAULT

    def to_path(self, artifact: Artifact) -> str:
        group_path = artifact.group_id.replace(".", "/")
        base_version = get_base_version(artifact.version)
        return f"{group_path}/{artifact.artifact_id}/{base_version}/{_filename(artifact)}"


class LegacyRepositoryContent(_FilesystemRepositoryContent):
    """Maven 1 layout: ``groupId/<type>s/artifactId-version.ext``."""

    layout = RepositoryLayout.LEGACY

    def to_path(self, artifact: Artifact) -> str:
        directory = LEGACY_TYPE_DIRECTORIES.get(artifact.type, f"{artifact.type}s")
        return f"{artifact.group_id}/{directory}/{_filename(artifact)}"


if TYPE_CHECKING:
    from pomstore.domain.ports.content import ManagedRepositoryContent

    _default_check: ManagedRepositoryContent = DefaultRepositoryContent("stub", Path())
    _legacy_check: ManagedRepositoryContent = LegacyRepositoryContent("stub", Path())
