"""Resolve raw project models into their effective form."""

from __future__ import annotations

import dataclasses
from logging import getLogger
from typing import TYPE_CHECKING, Final

from pomstore.domain.errors import ProjectModelResolutionError
from pomstore.domain.model import project_key
from pomstore.domain.resolution.expression import ExpressionProjectModelFilter

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pomstore.domain.model import Dependency, ProjectModel
    from pomstore.domain.ports.cache import ResolutionCache
    from pomstore.domain.ports.modelling import ProjectModelResolver

log = getLogger(__name__)

MAX_PARENT_DEPTH: Final[int] = 64


def effective_key(model: ProjectModel) -> str:
    """Return the key ``model`` will have once group id and version are inherited."""

    group_id = model.group_id
    version = model.version
    if model.parent is not None:
        group_id = group_id or model.parent.group_id
        version = version or model.parent.version
    return f"{group_id}:{model.artifact_id}:{version}"


def merge_dependencies(
    inherited: Iterable[Dependency],
    declared: Iterable[Dependency],
) -> list[Dependency]:
    """Merge dependency lists, letting ``declared`` entries replace inherited ones."""

    declared_list = list(declared)
    declared_keys = {dependency.management_key for dependency in declared_list}
    merged = [dep for dep in inherited if dep.management_key not in declared_keys]
    merged.extend(declared_list)
    return merged


def merge_parent(child: ProjectModel, parent: ProjectModel) -> ProjectModel:
    """Return ``child`` with ``parent`` inherited into it; ``child`` values win."""

    merged = child.copy()
    merged.group_id = child.group_id or parent.group_id
    merged.version = child.version or parent.version
    merged.url = child.url or parent.url
    merged.properties = {**parent.properties, **child.properties}
    merged.dependencies = merge_dependencies(parent.dependencies, child.dependencies)
    merged.dependency_management = merge_dependencies(
        parent.dependency_management, child.dependency_management
    )
    return merged


def apply_dependency_management(model: ProjectModel) -> None:
    """Fill dependency versions and scopes from ``model.dependency_management``."""

    managed = {dependency.management_key: dependency for dependency in model.dependency_management}
    resolved: list[Dependency] = []
    for dependency in model.dependencies:
        entry = managed.get(dependency.management_key)
        if entry is None:
            resolved.append(dependency)
            continue
        resolved.append(
            dataclasses.replace(
                dependency,
                version=dependency.version or entry.version,
                scope=dependency.scope or entry.scope,
            )
        )
    model.dependencies = resolved


class EffectiveProjectModelFilter:
    """Resolve inheritance and interpolation, memoising results in ``cache``.

    Cached entries are keyed by ``groupId:artifactId:version``. Whoever replaces a
    stored model must evict its key; nothing here expires entries.
    """

    def __init__(
        self,
        *,
        resolver: ProjectModelResolver,
        cache: ResolutionCache,
        expression_filter: ExpressionProjectModelFilter | None = None,
    ) -> None:
        self._resolver = resolver
        self._cache = cache
        base_filter = expression_filter or ExpressionProjectModelFilter()
        self._expression_filter = base_filter.strict_variant()

    def filter(self, model: ProjectModel) -> ProjectModel:
        key = effective_key(model)
        with self._cache.lock:
            cached = self._cache.get(key)
        if cached is not None:
            log.debug("Using cached effective project model %s", key)
            return cached.copy()

        effective = self._resolve(model)
        with self._cache.lock:
            self._cache.put(project_key(effective), effective.copy())
        return effective

    def _resolve(self, model: ProjectModel) -> ProjectModel:
        key = effective_key(model)
        effective = model.copy()
        if model.parent is not None:
            effective.group_id = model.group_id or model.parent.group_id
            effective.version = model.version or model.parent.version

        seen = {key}
        reference = model.parent
        while reference is not None:
            if reference.key in seen or len(seen) > MAX_PARENT_DEPTH:
                raise ProjectModelResolutionError(
                    f"Cyclic parent reference {reference.key} while resolving {key}"
                )
            seen.add(reference.key)
            parent = self._resolver.resolve(reference)
            if parent is None:
                raise ProjectModelResolutionError(
                    f"Unable to find parent project model {reference.key} of {key}"
                )
            effective = merge_parent(effective, parent)
            reference = parent.parent

        apply_dependency_management(effective)
        effective = self._expression_filter.filter(effective)

        if not effective.group_id or not effective.version:
            raise ProjectModelResolutionError(
                f"Project model {effective.key} has no groupId or version after resolution"
            )
        return effective
