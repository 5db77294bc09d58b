from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pomstore.domain.errors import ConsumerError
from pomstore.domain.ingest_pipeline import ProblemRecorder
from tests.helpers.descriptors import make_artifact
from tests.helpers.fakes import FakeContentResolver, FakeCoordinateStore

if TYPE_CHECKING:
    from pomstore.adapters.repository import DefaultRepositoryContent, LegacyRepositoryContent


def test_record_uses_repository_relative_path(
    default_content: DefaultRepositoryContent,
) -> None:
    store = FakeCoordinateStore()
    recorder = ProblemRecorder(
        origin="update-db-project",
        store=store,
        repositories=FakeContentResolver(default_content),
    )

    problem = recorder.record(make_artifact(group_id="org.example.tools"), "broken")

    assert store.problems == [problem]
    assert problem.path == "org/example/tools/foo/1.0/foo-1.0.pom"
    assert problem.repository_id == "internal"
    assert (problem.group_id, problem.artifact_id, problem.version) == (
        "org.example.tools",
        "foo",
        "1.0",
    )
    assert problem.message == "broken"


def test_record_in_legacy_repository(legacy_content: LegacyRepositoryContent) -> None:
    store = FakeCoordinateStore()
    recorder = ProblemRecorder(
        origin="update-db-project",
        store=store,
        repositories=FakeContentResolver(legacy_content),
    )

    problem = recorder.record(make_artifact(repository_id="legacy"), "broken")

    assert problem.path == "com.x/poms/foo-1.0.pom"


def test_store_failure_is_escalated(default_content: DefaultRepositoryContent) -> None:
    recorder = ProblemRecorder(
        origin="update-db-project",
        store=FakeCoordinateStore(fail_problem=True),
        repositories=FakeContentResolver(default_content),
    )

    with pytest.raises(ConsumerError, match="Unable to save problem with artifact location"):
        recorder.record(make_artifact(), "broken")


def test_unknown_repository_is_escalated() -> None:
    store = FakeCoordinateStore()
    recorder = ProblemRecorder(
        origin="update-db-project", store=store, repositories=FakeContentResolver()
    )

    with pytest.raises(ConsumerError, match="Unable to process project model"):
        recorder.record(make_artifact(), "broken")
    assert store.problems == []
