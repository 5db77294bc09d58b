from __future__ import annotations

from pomstore.domain.errors import ConsumerError
from pomstore.domain.ingest_pipeline import ScanResult, run_database_scan
from pomstore.domain.model import Artifact
from pomstore.domain.ports import ArtifactConsumer
from tests.helpers.descriptors import make_artifact


class RecordingConsumer(ArtifactConsumer):
    def __init__(
        self, consumer_id: str, types: tuple[str, ...], *, failing: frozenset[str] = frozenset()
    ) -> None:
        self._id = consumer_id
        self._types = types
        self.failing = failing
        self.events: list[str] = []

    @property
    def id(self) -> str:
        return self._id

    @property
    def description(self) -> str:
        return f"Recording consumer {self._id}"

    @property
    def included_types(self) -> tuple[str, ...]:
        return self._types

    @property
    def is_permanent(self) -> bool:
        return False

    def begin_scan(self) -> None:
        self.events.append("begin")

    def process(self, artifact: Artifact) -> None:
        self.events.append(artifact.key)
        if artifact.artifact_id in self.failing:
            raise ConsumerError(f"cannot process {artifact.key}")

    def complete_scan(self) -> None:
        self.events.append("complete")


def test_scan_dispatches_by_type_and_counts_outcomes() -> None:
    poms = RecordingConsumer("poms", ("pom",), failing=frozenset({"broken"}))
    jars = RecordingConsumer("jars", ("jar",))
    artifacts = [
        make_artifact("foo"),
        make_artifact("broken"),
        make_artifact("lib", type_="jar"),
        make_artifact("docs", type_="zip"),
        make_artifact("bar"),
    ]

    result = run_database_scan([poms, jars], artifacts)

    assert result == ScanResult(processed=3, skipped=1, failed=1)
    assert result.total == 5
    assert poms.events == [
        "begin",
        "com.x:foo:1.0",
        "com.x:broken:1.0",
        "com.x:bar:1.0",
        "complete",
    ]
    assert jars.events == ["begin", "com.x:lib:1.0", "complete"]


def test_scan_without_artifacts_still_runs_lifecycle() -> None:
    consumer = RecordingConsumer("poms", ("pom",))

    result = run_database_scan([consumer], [])

    assert result == ScanResult()
    assert consumer.events == ["begin", "complete"]
