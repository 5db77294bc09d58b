"""Artifacts as seen by database consumers."""

from __future__ import annotations

from dataclasses import dataclass

POM_TYPE = "pom"


@dataclass(frozen=True, slots=True)
class Artifact:
    """A stored artifact, identified by its filename-derived coordinates.

    ``repository_id`` names the managed repository the artifact was found in.
    """

    group_id: str
    artifact_id: str
    version: str
    type: str
    repository_id: str
    classifier: str | None = None

    @property
    def key(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    @property
    def is_pom(self) -> bool:
        return self.type == POM_TYPE
