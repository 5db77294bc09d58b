from __future__ import annotations

import pytest

from pomstore.domain.errors import ProjectModelResolutionError
from pomstore.domain.model import Dependency, ParentReference, ProjectModel
from pomstore.domain.resolution import ExpressionProjectModelFilter


def test_properties_and_project_fields_are_interpolated() -> None:
    model = ProjectModel(
        group_id="com.x",
        artifact_id="foo",
        version="1.2",
        name="${project.artifactId} library",
        url="https://example.com/${artifactId}/${pom.version}",
        properties={"junit.version": "4.13", "lib.version": "${project.version}"},
        dependencies=[
            Dependency(group_id="junit", artifact_id="junit", version="${junit.version}"),
            Dependency(group_id="${project.groupId}", artifact_id="bar", version="${lib.version}"),
        ],
        modules=["${project.artifactId}-core"],
    )

    result = ExpressionProjectModelFilter().filter(model)

    assert result.name == "foo library"
    assert result.url == "https://example.com/foo/1.2"
    assert result.properties["lib.version"] == "1.2"
    assert [dep.version for dep in result.dependencies] == ["4.13", "1.2"]
    assert result.dependencies[1].group_id == "com.x"
    assert result.modules == ["foo-core"]


def test_parent_fields_are_available() -> None:
    model = ProjectModel(
        artifact_id="foo",
        version="${project.parent.version}",
        group_id="${parent.groupId}",
        parent=ParentReference(group_id="com.x", artifact_id="parent", version="3.0"),
    )

    result = ExpressionProjectModelFilter().filter(model)

    assert result.group_id == "com.x"
    assert result.version == "3.0"


def test_input_model_is_not_mutated() -> None:
    model = ProjectModel(
        group_id="com.x",
        artifact_id="foo",
        version="${rev}",
        properties={"rev": "7"},
    )

    result = ExpressionProjectModelFilter().filter(model)

    assert result is not model
    assert result.version == "7"
    assert model.version == "${rev}"


def test_unresolved_and_cyclic_expressions_are_left_in_place() -> None:
    model = ProjectModel(
        group_id="com.x",
        artifact_id="foo",
        version="1.0",
        description="${missing} and ${a}",
        properties={"a": "${b}", "b": "${a}"},
    )

    result = ExpressionProjectModelFilter().filter(model)

    assert result.description == "${missing} and ${a}"


def test_strict_mode_rejects_unresolved_identity() -> None:
    model = ProjectModel(group_id="com.x", artifact_id="foo", version="${revision}")

    with pytest.raises(ProjectModelResolutionError, match="version"):
        ExpressionProjectModelFilter(strict=True).filter(model)


def test_strict_mode_ignores_other_fields() -> None:
    model = ProjectModel(
        group_id="com.x", artifact_id="foo", version="1.0", description="${not.defined}"
    )

    result = ExpressionProjectModelFilter().strict_variant().filter(model)

    assert result.description == "${not.defined}"
