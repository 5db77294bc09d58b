"""Database consumer that stores the effective project model of each POM artifact."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from pomstore.domain.errors import (
    ConsumerError,
    ObjectNotFoundError,
    PersistenceError,
    ProjectModelError,
)
from pomstore.domain.ingest_pipeline.problems import ProblemRecorder, resolve_repository
from pomstore.domain.ingest_pipeline.validation import ProjectModelValidator
from pomstore.domain.model import POM_TYPE, ModelOrigin, project_key
from pomstore.domain.versions import is_unique_snapshot

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pomstore.domain.model import Artifact, ProjectModel, RepositoryLayout
    from pomstore.domain.ports.cache import ResolutionCache
    from pomstore.domain.ports.content import (
        ManagedRepositoryContent,
        RepositoryContentResolver,
    )
    from pomstore.domain.ports.modelling import ProjectModelFilter, ProjectModelReader
    from pomstore.domain.ports.store import CoordinateStore

log = getLogger(__name__)

CONSUMER_ID: Final[str] = "update-db-project"
CONSUMER_DESCRIPTION: Final[str] = "Update database with project model information."


class ProjectModelToDatabaseConsumer:
    """Read, resolve, validate and store the project model of one POM artifact.

    Any model previously stored under the artifact's coordinates is removed first and
    its effective model is evicted from ``cache``. Descriptor, resolution and
    validation failures are recorded as repository problems. ``ConsumerError`` is raised
    when the repository cannot be resolved or has no reader for its layout, and when a
    problem cannot be recorded.
    """

    def __init__(
        self,
        *,
        store: CoordinateStore,
        repositories: RepositoryContentResolver,
        readers: Mapping[RepositoryLayout, ProjectModelReader],
        expression_filter: ProjectModelFilter,
        effective_filter: ProjectModelFilter,
        cache: ResolutionCache,
        consumer_id: str = CONSUMER_ID,
        description: str = CONSUMER_DESCRIPTION,
    ) -> None:
        self._store = store
        self._repositories = repositories
        self._readers = dict(readers)
        self._expression_filter = expression_filter
        self._effective_filter = effective_filter
        self._cache = cache
        self._id = consumer_id
        self._description = description
        self._recorder = ProblemRecorder(origin=consumer_id, store=store, repositories=repositories)
        self._validator = ProjectModelValidator(self._recorder)

    @property
    def id(self) -> str:
        return self._id

    @property
    def description(self) -> str:
        return self._description

    @property
    def included_types(self) -> tuple[str, ...]:
        return (POM_TYPE,)

    @property
    def is_permanent(self) -> bool:
        return True

    def begin_scan(self) -> None:
        """Nothing to prepare; the consumer keeps no state between artifacts."""

    def complete_scan(self) -> None:
        """Nothing to flush."""

    def process(self, artifact: Artifact) -> None:
        if artifact.type != POM_TYPE:
            return

        existing = self._find_stored_model(artifact)
        if existing is not None:
            self._remove_old_project_model(existing)

        content = resolve_repository(self._repositories, artifact)
        artifact_file = content.to_file(artifact)
        reader = self._reader_for(content)

        effective: ProjectModel | None = None
        stored = False
        try:
            model = reader.read(artifact_file)
            model.mark_origin(ModelOrigin.FILESYSTEM)

            # the filename carries the resolved timestamp the descriptor cannot know
            if is_unique_snapshot(artifact.version):
                model.version = artifact.version

            model = self._expression_filter.filter(model)
            model = effective = self._effective_filter.filter(model)

            if self._validator.is_valid(model, content, artifact):
                log.debug("Adding project model to database - %s", model.key)
                self._store.save_project_model(model)
                stored = True
            else:
                log.warning(
                    "Invalid or corrupt pom. Project model not added to database - %s",
                    model.key,
                )
        except ProjectModelError as exc:
            message = f"Unable to read project model {artifact_file} : {exc}"
            log.warning(message, exc_info=True)
            self._recorder.record(artifact, message)
        except ConsumerError:
            raise
        except PersistenceError as exc:
            log.warning(
                "Unable to save project model %s to the database : %s",
                artifact_file,
                exc,
                exc_info=True,
            )
        except Exception as exc:  # noqa: BLE001
            # one broken descriptor must not abort the rest of the scan
            log.error(
                "Unable to process model %s due to : %s : %s",
                artifact_file,
                type(exc).__name__,
                exc,
                exc_info=True,
            )
        finally:
            # the effective filter caches before validation; drop what never reached the store
            if effective is not None and not stored:
                self._evict(project_key(effective))

    def _reader_for(self, content: ManagedRepositoryContent) -> ProjectModelReader:
        try:
            return self._readers[content.layout]
        except KeyError:
            raise ConsumerError(
                f"No project model reader for {content.layout} repository {content.repository_id}"
            ) from None

    def _find_stored_model(self, artifact: Artifact) -> ProjectModel | None:
        try:
            return self._store.get_project_model(
                artifact.group_id, artifact.artifact_id, artifact.version
            )
        except ObjectNotFoundError:
            return None
        except PersistenceError as exc:
            log.warning("Unable to look up existing project model %s: %s", artifact.key, exc)
            return None

    def _remove_old_project_model(self, model: ProjectModel) -> None:
        try:
            self._store.delete_project_model(model)
        except PersistenceError as exc:
            log.error("Unable to delete existing project model %s: %s", model.key, exc)

        self._evict(project_key(model))

    def _evict(self, key: str) -> None:
        with self._cache.lock:
            if self._cache.has_key(key):
                self._cache.remove(key)
                log.debug("Evicted effective project model %s", key)


if TYPE_CHECKING:
    from pomstore.domain.ports.consumers import ArtifactConsumer

    def _consumer_check(consumer: ProjectModelToDatabaseConsumer) -> ArtifactConsumer:
        return consumer
