from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pomstore.domain.ingest_pipeline import ScanResult
from pomstore.domain.model import ProjectModel, RepositoryProblem
from pomstore.ui import cli

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pomstore.domain.model import Artifact


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "load_dotenv", lambda: False)


def test_process_parses_coordinates(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: list[Artifact] = []

    def fake_process(artifacts: Iterable[Artifact]) -> ScanResult:
        captured.extend(artifacts)
        return ScanResult(processed=len(captured))

    monkeypatch.setattr(cli, "process_artifacts", fake_process)

    cli.main(["process", "internal", "com.x:foo:1.0", "com.x:foo-lib:2.0:jar"])

    assert [(a.key, a.type, a.repository_id) for a in captured] == [
        ("com.x:foo:1.0", "pom", "internal"),
        ("com.x:foo-lib:2.0", "jar", "internal"),
    ]


def test_invalid_coordinate_exits_with_2(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_process(artifacts: Iterable[Artifact]) -> ScanResult:
        raise AssertionError("should not be called")

    monkeypatch.setattr(cli, "process_artifacts", fake_process)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["process", "internal", "com.x:foo"])

    assert excinfo.value.code == 2


def test_missing_command_exits_with_2() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 2


def test_failed_artifacts_exit_with_1(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "process_artifacts", lambda artifacts: ScanResult(failed=1))

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["process", "internal", "com.x:foo:1.0"])

    assert excinfo.value.code == 1


def test_unexpected_errors_exit_with_1(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(repository_id: str | None) -> list[RepositoryProblem]:
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(cli, "list_problems", broken)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["problems"])

    assert excinfo.value.code == 1


def test_problems_lists_records(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    requested: list[str | None] = []

    def fake_list(repository_id: str | None) -> list[RepositoryProblem]:
        requested.append(repository_id)
        return [
            RepositoryProblem(
                repository_id="internal",
                path="com/x/foo/1.0/foo-1.0.pom",
                group_id="com.x",
                artifact_id="foo",
                version="1.0",
                type="corrupt-artifact",
                origin="update-db-project",
                message="broken",
            )
        ]

    monkeypatch.setattr(cli, "list_problems", fake_list)

    cli.main(["problems", "--repository", "internal"])

    assert requested == ["internal"]
    out = capsys.readouterr().out
    assert "internal\tcom/x/foo/1.0/foo-1.0.pom\tcorrupt-artifact\tbroken" in out


def test_models_lists_keys(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def fake_list(group_id: str | None) -> list[ProjectModel]:
        assert group_id == "com.x"
        return [ProjectModel(group_id="com.x", artifact_id="foo", version="1.0", name="Foo")]

    monkeypatch.setattr(cli, "list_project_models", fake_list)

    cli.main(["--verbose", "models", "--group", "com.x"])

    assert "com.x:foo:1.0\tjar\tFoo" in capsys.readouterr().out


@pytest.mark.parametrize("value", ["com.x:foo", "com.x::1.0", "a:b:c:d:e"])
def test_parse_coordinate_rejects_malformed_values(value: str) -> None:
    with pytest.raises(ValueError, match="Invalid coordinate"):
        cli.parse_coordinate(value, "internal")
