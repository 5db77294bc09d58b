"""Port for the effective project model cache."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from pomstore.domain.model import ProjectModel


@runtime_checkable
class ResolutionCache(Protocol):
    """Effective models keyed by ``groupId:artifactId:version``.

    ``lock`` guards the key space; callers hold it across check-then-act sequences.
    """

    @property
    def lock(self) -> AbstractContextManager[object]: ...

    def has_key(self, key: str) -> bool: ...

    def get(self, key: str) -> ProjectModel | None: ...

    def put(self, key: str, model: ProjectModel) -> None: ...

    def remove(self, key: str) -> None: ...

    def clear(self) -> None: ...
