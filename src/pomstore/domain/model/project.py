"""Project models: the parsed (and later effective) form of a descriptor."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import ModelOrigin

DEFAULT_PACKAGING = "jar"
DEFAULT_DEPENDENCY_TYPE = "jar"


@dataclass(frozen=True, slots=True)
class ParentReference:
    group_id: str
    artifact_id: str
    version: str
    relative_path: str | None = None

    @property
    def key(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


@dataclass(frozen=True, slots=True)
class Dependency:
    group_id: str
    artifact_id: str
    version: str | None = None
    type: str = DEFAULT_DEPENDENCY_TYPE
    classifier: str | None = None
    scope: str | None = None
    optional: bool = False

    @property
    def management_key(self) -> str:
        """Key used to match a dependency against inherited or managed entries."""
        return f"{self.group_id}:{self.artifact_id}:{self.type}:{self.classifier or ''}"


@dataclass(eq=False, kw_only=True)
class ProjectModel:
    """A project model read from a descriptor file.

    ``group_id`` and ``version`` may be ``None`` on raw models that inherit them from
    their parent; an effective model always carries all three coordinates.
    """

    group_id: str | None = None
    artifact_id: str
    version: str | None = None
    packaging: str = DEFAULT_PACKAGING
    origin: str | None = None
    name: str | None = None
    description: str | None = None
    url: str | None = None
    parent: ParentReference | None = None
    properties: dict[str, str] = field(default_factory=dict[str, str])
    dependencies: list[Dependency] = field(default_factory=list[Dependency])
    dependency_management: list[Dependency] = field(default_factory=list[Dependency])
    modules: list[str] = field(default_factory=list[str])

    @property
    def key(self) -> str:
        return project_key(self)

    def mark_origin(self, origin: ModelOrigin) -> None:
        self.origin = origin.value

    def copy(self) -> ProjectModel:
        """Return a detached deep copy, safe to mutate independently of ``self``."""

        return ProjectModel(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            version=self.version,
            packaging=self.packaging,
            origin=self.origin,
            name=self.name,
            description=self.description,
            url=self.url,
            parent=self.parent,
            properties=dict(self.properties),
            dependencies=list(self.dependencies),
            dependency_management=list(self.dependency_management),
            modules=list(self.modules),
        )


def project_key(model: ProjectModel) -> str:
    """Return the ``groupId:artifactId:version`` key of ``model``."""

    return f"{model.group_id}:{model.artifact_id}:{model.version}"
