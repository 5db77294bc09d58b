"""Recording repository problems for artifacts that fail ingestion."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pomstore.domain.errors import ConsumerError, PersistenceError, RepositoryError
from pomstore.domain.model import ProblemType, RepositoryProblem

if TYPE_CHECKING:
    from pomstore.domain.model import Artifact
    from pomstore.domain.ports.content import (
        ManagedRepositoryContent,
        RepositoryContentResolver,
    )
    from pomstore.domain.ports.store import CoordinateStore

log = getLogger(__name__)


def resolve_repository(
    resolver: RepositoryContentResolver, artifact: Artifact
) -> ManagedRepositoryContent:
    """Return the content of the repository ``artifact`` belongs to.

    Resolution failures are fatal for the artifact and surface as ``ConsumerError``.
    """

    try:
        return resolver.resolve(artifact.repository_id)
    except RepositoryError as exc:
        raise ConsumerError(f"Unable to process project model: {exc}") from exc


class ProblemRecorder:
    """Persist ``corrupt-artifact`` problems on behalf of a consumer.

    A store failure here is escalated as ``ConsumerError``: a problem that cannot be
    recorded would otherwise vanish without trace.
    """

    def __init__(
        self,
        *,
        origin: str,
        store: CoordinateStore,
        repositories: RepositoryContentResolver,
    ) -> None:
        self.origin = origin
        self._store = store
        self._repositories = repositories

    def record(self, artifact: Artifact, message: str) -> RepositoryProblem:
        content = resolve_repository(self._repositories, artifact)
        problem = RepositoryProblem(
            repository_id=artifact.repository_id,
            path=content.to_path(artifact),
            group_id=artifact.group_id,
            artifact_id=artifact.artifact_id,
            version=artifact.version,
            type=ProblemType.CORRUPT_ARTIFACT.value,
            origin=self.origin,
            message=message,
        )
        try:
            self._store.save_problem(problem)
        except PersistenceError as exc:
            emsg = f"Unable to save problem with artifact location to DB: {exc}"
            log.warning(emsg, exc_info=True)
            raise ConsumerError(emsg) from exc
        return problem
