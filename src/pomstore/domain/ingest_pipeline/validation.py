"""Validate resolved project models against their artifact coordinates."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pomstore.domain.versions import get_base_version

if TYPE_CHECKING:
    from pomstore.domain.ingest_pipeline.problems import ProblemRecorder
    from pomstore.domain.model import Artifact, ProjectModel
    from pomstore.domain.ports.content import ManagedRepositoryContent

log = getLogger(__name__)


def describe_model(model: ProjectModel) -> str:
    return (
        f"groupId:{model.group_id}|artifactId:{model.artifact_id}"
        f"|version:{model.version}|packaging:{model.packaging}"
    )


def artifact_id_matches(model: ProjectModel, artifact: Artifact) -> bool:
    return artifact.artifact_id.casefold() == model.artifact_id.casefold()


def version_matches(model: ProjectModel, artifact: Artifact) -> bool:
    """Compare versions case-insensitively, accepting the artifact's base version.

    A descriptor declaring ``1.0-SNAPSHOT`` matches a file versioned
    ``1.0-20090101.120000-1``.
    """

    if model.version is None:
        return False
    declared = model.version.casefold()
    return artifact.version.casefold() == declared or (
        get_base_version(artifact.version).casefold() == declared
    )


class ProjectModelValidator:
    """Check that a model's declared coordinates match the file it was read from.

    Every rejection is logged and recorded as a repository problem carrying the same
    message.
    """

    def __init__(self, recorder: ProblemRecorder) -> None:
        self._recorder = recorder

    def is_valid(
        self,
        model: ProjectModel,
        content: ManagedRepositoryContent,
        artifact: Artifact,
    ) -> bool:
        filename = content.to_file(artifact).name

        if not artifact_id_matches(model, artifact):
            self._reject(
                artifact,
                f"File {filename} has an invalid project model [{describe_model(model)}]: "
                f"The model artifactId [{model.artifact_id}] does not match the artifactId "
                f"portion of the filename: {artifact.artifact_id}",
            )
            return False

        if not version_matches(model, artifact):
            self._reject(
                artifact,
                f"File {filename} has an invalid project model [{describe_model(model)}]; "
                f"The model version [{model.version}] does not match the version "
                f"portion of the filename: {artifact.version}",
            )
            return False

        return True

    def _reject(self, artifact: Artifact, message: str) -> None:
        log.warning(message)
        self._recorder.record(artifact, message)
