"""Locate parent project models for effective resolution."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pomstore.domain.errors import ObjectNotFoundError, PersistenceError, RepositoryError
from pomstore.domain.model import POM_TYPE, Artifact, ModelOrigin

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from pomstore.domain.model import ParentReference, ProjectModel, RepositoryLayout
    from pomstore.domain.ports.content import RepositoryContentResolver
    from pomstore.domain.ports.modelling import ProjectModelReader, ProjectModelResolver
    from pomstore.domain.ports.store import CoordinateStore

log = getLogger(__name__)


class StoreProjectModelResolver:
    """Find parents among the models already stored."""

    def __init__(self, store: CoordinateStore) -> None:
        self._store = store

    def resolve(self, reference: ParentReference) -> ProjectModel | None:
        try:
            return self._store.get_project_model(
                reference.group_id, reference.artifact_id, reference.version
            )
        except ObjectNotFoundError:
            return None


class RepositoryProjectModelResolver:
    """Read parent descriptors straight from the managed repositories."""

    def __init__(
        self,
        *,
        repositories: RepositoryContentResolver,
        repository_ids: Sequence[str],
        readers: Mapping[RepositoryLayout, ProjectModelReader],
    ) -> None:
        self._repositories = repositories
        self._repository_ids = tuple(repository_ids)
        self._readers = dict(readers)

    def resolve(self, reference: ParentReference) -> ProjectModel | None:
        for repository_id in self._repository_ids:
            try:
                content = self._repositories.resolve(repository_id)
            except RepositoryError as exc:
                log.warning("Skipping repository %s for parent lookup: %s", repository_id, exc)
                continue
            reader = self._readers.get(content.layout)
            if reader is None:
                continue
            artifact = Artifact(
                group_id=reference.group_id,
                artifact_id=reference.artifact_id,
                version=reference.version,
                type=POM_TYPE,
                repository_id=repository_id,
            )
            path = content.to_file(artifact)
            if not path.is_file():
                continue
            model = reader.read(path)
            model.mark_origin(ModelOrigin.REPOSITORY)
            log.debug("Resolved parent %s from repository %s", reference.key, repository_id)
            return model
        return None


class ProjectModelResolverStack:
    """Ask each resolver in turn; the first model found wins."""

    def __init__(self, resolvers: Sequence[ProjectModelResolver]) -> None:
        self._resolvers = tuple(resolvers)

    def resolve(self, reference: ParentReference) -> ProjectModel | None:
        for resolver in self._resolvers:
            try:
                model = resolver.resolve(reference)
            except PersistenceError as exc:
                log.warning(
                    "Resolver %s failed for %s: %s", type(resolver).__name__, reference.key, exc
                )
                continue
            if model is not None:
                return model
        return None
