"""Interpolation of ``${...}`` expressions inside project models."""

from __future__ import annotations

import dataclasses
import re
from typing import TYPE_CHECKING, Final

from pomstore.domain.errors import ProjectModelResolutionError

if TYPE_CHECKING:
    from collections.abc import Callable

    from pomstore.domain.model import Dependency, ParentReference, ProjectModel

EXPRESSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$\{([^}]+)\}")
MAX_INTERPOLATION_DEPTH: Final[int] = 10

_PROJECT_PREFIXES: Final[tuple[str, ...]] = ("project.", "pom.")
_MODEL_FIELDS: Final[dict[str, str]] = {
    "groupId": "group_id",
    "artifactId": "artifact_id",
    "version": "version",
    "packaging": "packaging",
    "name": "name",
    "description": "description",
    "url": "url",
}
_PARENT_FIELDS: Final[dict[str, str]] = {
    "parent.groupId": "group_id",
    "parent.artifactId": "artifact_id",
    "parent.version": "version",
}
_IDENTITY_FIELDS: Final[tuple[str, ...]] = ("group_id", "artifact_id", "version")


def has_expression(value: str | None) -> bool:
    return value is not None and EXPRESSION_PATTERN.search(value) is not None


class _Interpolator:
    """Resolve expressions against one model's fields and properties."""

    def __init__(self, model: ProjectModel) -> None:
        self._model = model

    def lookup(self, name: str) -> str | None:
        bare = name
        for prefix in _PROJECT_PREFIXES:
            if name.startswith(prefix):
                bare = name.removeprefix(prefix)
                break

        if bare in _MODEL_FIELDS:
            value = getattr(self._model, _MODEL_FIELDS[bare])
            if value is not None:
                return value
        if bare in _PARENT_FIELDS and self._model.parent is not None:
            return getattr(self._model.parent, _PARENT_FIELDS[bare])
        return self._model.properties.get(name)

    def interpolate(self, value: str, *, stack: tuple[str, ...] = ()) -> str:
        if len(stack) > MAX_INTERPOLATION_DEPTH:
            return value

        def replace(match: re.Match[str]) -> str:
            name = match.group(1).strip()
            if name in stack:
                return match.group(0)
            resolved = self.lookup(name)
            if resolved is None:
                return match.group(0)
            return self.interpolate(resolved, stack=(*stack, name))

        return EXPRESSION_PATTERN.sub(replace, value)

    def optional(self, value: str | None) -> str | None:
        return None if value is None else self.interpolate(value)


class ExpressionProjectModelFilter:
    """Interpolate property and ``project.*`` expressions throughout a model.

    Unresolvable expressions are left in place. With ``strict=True`` an expression left
    in the group id, artifact id or version raises ``ProjectModelResolutionError``.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict

    def strict_variant(self) -> ExpressionProjectModelFilter:
        return ExpressionProjectModelFilter(strict=True)

    def filter(self, model: ProjectModel) -> ProjectModel:
        interpolator = _Interpolator(model)
        result = model.copy()

        result.group_id = interpolator.optional(model.group_id)
        result.artifact_id = interpolator.interpolate(model.artifact_id)
        result.version = interpolator.optional(model.version)
        result.packaging = interpolator.interpolate(model.packaging)
        result.name = interpolator.optional(model.name)
        result.description = interpolator.optional(model.description)
        result.url = interpolator.optional(model.url)
        result.parent = _interpolate_parent(model.parent, interpolator.interpolate)
        result.properties = {
            key: interpolator.interpolate(value) for key, value in model.properties.items()
        }
        result.dependencies = [
            _interpolate_dependency(dependency, interpolator) for dependency in model.dependencies
        ]
        result.dependency_management = [
            _interpolate_dependency(dependency, interpolator)
            for dependency in model.dependency_management
        ]
        result.modules = [interpolator.interpolate(module) for module in model.modules]

        if self.strict:
            for field_name in _IDENTITY_FIELDS:
                value = getattr(result, field_name)
                if has_expression(value):
                    raise ProjectModelResolutionError(
                        f"Unable to resolve expression in {field_name} [{value}] "
                        f"of project model {result.key}"
                    )
        return result


def _interpolate_parent(
    parent: ParentReference | None,
    interpolate: Callable[[str], str],
) -> ParentReference | None:
    if parent is None:
        return None
    return dataclasses.replace(
        parent,
        group_id=interpolate(parent.group_id),
        artifact_id=interpolate(parent.artifact_id),
        version=interpolate(parent.version),
    )


def _interpolate_dependency(dependency: Dependency, interpolator: _Interpolator) -> Dependency:
    return dataclasses.replace(
        dependency,
        group_id=interpolator.interpolate(dependency.group_id),
        artifact_id=interpolator.interpolate(dependency.artifact_id),
        version=interpolator.optional(dependency.version),
        type=interpolator.interpolate(dependency.type),
        classifier=interpolator.optional(dependency.classifier),
        scope=interpolator.optional(dependency.scope),
    )
