"""Ports for reading and transforming project models."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from pomstore.domain.model import ParentReference, ProjectModel


@runtime_checkable
class ProjectModelReader(Protocol):
    """Reads one descriptor schema version into a raw project model."""

    def read(self, path: Path) -> ProjectModel:
        """Return the parsed model or raise ``ProjectModelReadError``."""
        ...


@runtime_checkable
class ProjectModelFilter(Protocol):
    """One stage of the model filter chain."""

    def filter(self, model: ProjectModel) -> ProjectModel:
        """Return the transformed model or raise ``ProjectModelResolutionError``."""
        ...


@runtime_checkable
class ProjectModelResolver(Protocol):
    """Finds the project model a parent reference points at."""

    def resolve(self, reference: ParentReference) -> ProjectModel | None: ...
