from __future__ import annotations

from pomstore.domain.model import Artifact, Dependency, ModelOrigin, ProjectModel, project_key


def test_copy_is_independent() -> None:
    model = ProjectModel(
        group_id="com.x",
        artifact_id="foo",
        version="1.0",
        properties={"a": "1"},
        dependencies=[Dependency(group_id="g", artifact_id="a")],
        modules=["core"],
    )

    duplicate = model.copy()
    duplicate.properties["a"] = "2"
    duplicate.dependencies.clear()
    duplicate.modules.append("api")

    assert model.properties == {"a": "1"}
    assert len(model.dependencies) == 1
    assert model.modules == ["core"]
    assert duplicate.key == model.key == project_key(model) == "com.x:foo:1.0"


def test_mark_origin_stores_the_enum_value() -> None:
    model = ProjectModel(artifact_id="foo")

    model.mark_origin(ModelOrigin.FILESYSTEM)

    assert model.origin == "filesystem"


def test_dependency_management_key_includes_type_and_classifier() -> None:
    assert Dependency(group_id="g", artifact_id="a").management_key == "g:a:jar:"
    tests = Dependency(group_id="g", artifact_id="a", type="test-jar", classifier="tests")
    assert tests.management_key == "g:a:test-jar:tests"


def test_artifact_key_and_type() -> None:
    artifact = Artifact(
        group_id="com.x", artifact_id="foo", version="1.0", type="pom", repository_id="internal"
    )

    assert artifact.key == "com.x:foo:1.0"
    assert artifact.is_pom
