"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from pomstore.adapters.cache import InMemoryResolutionCache
from pomstore.adapters.pom import default_readers
from pomstore.adapters.repository import RepositoryContentFactory
from pomstore.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from pomstore.config import get_cache_config, get_repositories_config
from pomstore.domain.coordinate_store import UnitOfWorkCoordinateStore
from pomstore.domain.ingest_pipeline import ProjectModelToDatabaseConsumer, run_database_scan
from pomstore.domain.ports.unit_of_work import ProjectModelUnitOfWork
from pomstore.domain.resolution import (
    EffectiveProjectModelFilter,
    ExpressionProjectModelFilter,
    ProjectModelResolverStack,
    RepositoryProjectModelResolver,
    StoreProjectModelResolver,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from pomstore.config import RepositoriesConfig
    from pomstore.domain.ingest_pipeline import ScanResult
    from pomstore.domain.model import Artifact, ProjectModel, RepositoryLayout, RepositoryProblem
    from pomstore.domain.ports.cache import ResolutionCache
    from pomstore.domain.ports.modelling import ProjectModelReader

UnitOfWorkFactory = Callable[[], ProjectModelUnitOfWork]


log = getLogger(__name__)


def _resolve_unit_of_work_factory(factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    if factory is not None:
        return factory
    if not is_started():
        startup()
    return SqlAlchemyUnitOfWork


def build_project_model_consumer(
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    repositories: RepositoriesConfig | None = None,
    readers: Mapping[RepositoryLayout, ProjectModelReader] | None = None,
    cache: ResolutionCache | None = None,
) -> ProjectModelToDatabaseConsumer:
    """Wire the database consumer with the configured adapters.

    Parents are looked up in the database first and then read from the configured
    managed repositories, in configuration order.
    """

    store = UnitOfWorkCoordinateStore(_resolve_unit_of_work_factory(unit_of_work_factory))
    content_factory = RepositoryContentFactory(repositories or get_repositories_config())
    effective_readers = dict(readers) if readers is not None else default_readers()
    effective_cache = (
        cache
        if cache is not None
        else InMemoryResolutionCache(max_entries=get_cache_config().max_entries)
    )

    expression_filter = ExpressionProjectModelFilter()
    resolver = ProjectModelResolverStack(
        [
            StoreProjectModelResolver(store),
            RepositoryProjectModelResolver(
                repositories=content_factory,
                repository_ids=content_factory.repository_ids,
                readers=effective_readers,
            ),
        ]
    )
    effective_filter = EffectiveProjectModelFilter(
        resolver=resolver,
        cache=effective_cache,
        expression_filter=expression_filter,
    )
    return ProjectModelToDatabaseConsumer(
        store=store,
        repositories=content_factory,
        readers=effective_readers,
        expression_filter=expression_filter,
        effective_filter=effective_filter,
        cache=effective_cache,
    )


def process_artifacts(
    artifacts: Iterable[Artifact],
    *,
    consumer: ProjectModelToDatabaseConsumer | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    repositories: RepositoriesConfig | None = None,
) -> ScanResult:
    """Run the database consumer over ``artifacts``."""

    effective_consumer = consumer or build_project_model_consumer(
        unit_of_work_factory=unit_of_work_factory,
        repositories=repositories,
    )
    log.info("Starting database scan with consumer %s", effective_consumer.id)
    return run_database_scan([effective_consumer], artifacts)


def list_problems(
    repository_id: str | None = None,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[RepositoryProblem]:
    """Return recorded repository problems, oldest first."""

    factory = _resolve_unit_of_work_factory(unit_of_work_factory)
    with factory() as uow:
        return list(uow.repositories.problems.query(repository_id=repository_id))


def list_project_models(
    group_id: str | None = None,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[ProjectModel]:
    """Return stored project models ordered by coordinates."""

    factory = _resolve_unit_of_work_factory(unit_of_work_factory)
    with factory() as uow:
        return list(uow.repositories.project_models.query(group_id=group_id))
