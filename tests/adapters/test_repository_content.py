from __future__ import annotations

from pathlib import Path

import pytest

from pomstore.adapters.repository import (
    DefaultRepositoryContent,
    LegacyRepositoryContent,
    RepositoryContentFactory,
    extension_for,
)
from pomstore.config import ManagedRepositoryConfig, RepositoriesConfig
from pomstore.domain.errors import RepositoryNotFoundError
from pomstore.domain.model import Artifact, RepositoryLayout
from tests.helpers.descriptors import make_artifact


def test_default_layout_paths() -> None:
    content = DefaultRepositoryContent("internal", Path("/srv/internal"))
    artifact = make_artifact(group_id="org.apache.maven", version="2.0")

    assert content.to_path(artifact) == "org/apache/maven/foo/2.0/foo-2.0.pom"
    assert content.to_file(artifact) == Path("/srv/internal/org/apache/maven/foo/2.0/foo-2.0.pom")
    assert content.layout is RepositoryLayout.DEFAULT


def test_default_layout_uses_base_version_directory() -> None:
    content = DefaultRepositoryContent("internal", Path("/srv/internal"))
    artifact = make_artifact(version="1.0-20090101.120000-1")

    assert content.to_path(artifact) == "com/x/foo/1.0-SNAPSHOT/foo-1.0-20090101.120000-1.pom"


def test_default_layout_with_classifier() -> None:
    content = DefaultRepositoryContent("internal", Path("/srv/internal"))
    artifact = Artifact(
        group_id="com.x",
        artifact_id="foo",
        version="1.0",
        type="java-source",
        repository_id="internal",
        classifier="sources",
    )

    assert content.to_path(artifact) == "com/x/foo/1.0/foo-1.0-sources.jar"


def test_legacy_layout_paths() -> None:
    content = LegacyRepositoryContent("legacy", Path("/srv/legacy"))

    assert content.to_path(make_artifact()) == "com.x/poms/foo-1.0.pom"
    assert content.to_path(make_artifact(type_="jar")) == "com.x/jars/foo-1.0.jar"
    assert content.to_path(make_artifact(type_="javadoc")) == "com.x/javadoc.jars/foo-1.0.jar"
    assert content.layout is RepositoryLayout.LEGACY


def test_extension_for_unknown_type_is_the_type() -> None:
    assert extension_for("pom") == "pom"
    assert extension_for("ear") == "ear"
    assert extension_for("distribution-tgz") == "tar.gz"


def test_factory_resolves_and_reuses_content(tmp_path: Path) -> None:
    config = RepositoriesConfig(
        repositories=(
            ManagedRepositoryConfig(id="internal", location=tmp_path / "internal"),
            ManagedRepositoryConfig(
                id="legacy", location=tmp_path / "legacy", layout=RepositoryLayout.LEGACY
            ),
        )
    )
    factory = RepositoryContentFactory(config)

    internal = factory.resolve("internal")
    legacy = factory.resolve("legacy")

    assert isinstance(internal, DefaultRepositoryContent)
    assert isinstance(legacy, LegacyRepositoryContent)
    assert internal.root == tmp_path / "internal"
    assert factory.resolve("internal") is internal
    assert factory.repository_ids == ("internal", "legacy")


def test_factory_rejects_unknown_repository() -> None:
    factory = RepositoryContentFactory(RepositoriesConfig())

    with pytest.raises(RepositoryNotFoundError, match="snapshots"):
        factory.resolve("snapshots")


def test_layout_base_requires_a_path_mapping() -> None:
    from pomstore.adapters.repository.content import _FilesystemRepositoryContent

    class Unmapped(_FilesystemRepositoryContent):
        layout = RepositoryLayout.DEFAULT

    with pytest.raises(TypeError, match="to_path"):
        Unmapped("internal", Path("/srv/internal"))  # type: ignore[abstract]
