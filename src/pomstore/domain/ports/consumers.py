"""Port for consumers driven by a database scan."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Collection

    from pomstore.domain.model import Artifact


@runtime_checkable
class ArtifactConsumer(Protocol):
    """Processes artifacts one at a time during a scan."""

    @property
    def id(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def included_types(self) -> Collection[str]: ...

    @property
    def is_permanent(self) -> bool:
        """Permanent consumers cannot be disabled by configuration."""
        ...

    def begin_scan(self) -> None: ...

    def process(self, artifact: Artifact) -> None:
        """Process one artifact; raise ``ConsumerError`` if it cannot be handled."""
        ...

    def complete_scan(self) -> None: ...
