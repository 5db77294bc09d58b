"""Repository problems recorded for rejected artifacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(eq=False, kw_only=True)
class RepositoryProblem:
    """Append-only record of an artifact that could not be ingested."""

    id: UUID = field(default_factory=uuid4)
    repository_id: str
    path: str
    group_id: str
    artifact_id: str
    version: str
    type: str
    origin: str
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
