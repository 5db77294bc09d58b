"""Domain error definitions."""

from __future__ import annotations


class ConsumerError(RuntimeError):
    """Raised by a consumer when an artifact cannot be processed at all."""


class RepositoryError(RuntimeError):
    """Raised when a managed repository cannot be accessed."""


class RepositoryNotFoundError(RepositoryError):
    """Raised when a repository id does not name a configured managed repository."""


class ProjectModelError(RuntimeError):
    """Base class for descriptor read and resolution failures."""


class ProjectModelReadError(ProjectModelError):
    """Raised when a descriptor file is missing, malformed or unsupported."""


class ProjectModelResolutionError(ProjectModelError):
    """Raised when a model cannot be interpolated or resolved to its effective form."""


class PersistenceError(RuntimeError):
    """Raised when the coordinate store fails to read or write."""


class ObjectNotFoundError(PersistenceError):
    """Raised when a requested object does not exist in the store."""
