"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class RepositoryLayout(StrEnum):
    """On-disk layout of a managed repository; selects the descriptor reader."""

    DEFAULT = "default"
    LEGACY = "legacy"


class ProblemType(StrEnum):
    CORRUPT_ARTIFACT = "corrupt-artifact"


class ModelOrigin(StrEnum):
    FILESYSTEM = "filesystem"
    REPOSITORY = "repository"
    DATABASE = "database"
