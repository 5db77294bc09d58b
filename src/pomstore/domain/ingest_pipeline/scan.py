"""Drive database consumers over a batch of artifacts."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pomstore.domain.errors import ConsumerError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from pomstore.domain.model import Artifact
    from pomstore.domain.ports.consumers import ArtifactConsumer

log = getLogger(__name__)


@dataclass(slots=True)
class ScanResult:
    """Outcome of a database scan."""

    processed: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.processed + self.skipped + self.failed


def run_database_scan(
    consumers: Sequence[ArtifactConsumer],
    artifacts: Iterable[Artifact],
) -> ScanResult:
    """Feed every artifact to the consumers that include its type.

    An artifact counts as failed when any consumer raises ``ConsumerError`` for it;
    the scan carries on with the next artifact.
    """

    result = ScanResult()
    for consumer in consumers:
        log.debug("Beginning scan for consumer %s", consumer.id)
        consumer.begin_scan()

    for artifact in artifacts:
        interested = [c for c in consumers if artifact.type in c.included_types]
        if not interested:
            result.skipped += 1
            continue
        failed = False
        for consumer in interested:
            try:
                consumer.process(artifact)
            except ConsumerError as exc:
                failed = True
                log.error("Consumer %s failed on %s: %s", consumer.id, artifact.key, exc)
        if failed:
            result.failed += 1
        else:
            result.processed += 1

    for consumer in consumers:
        consumer.complete_scan()

    log.info(
        "Finished database scan: processed=%s, skipped=%s, failed=%s",
        result.processed,
        result.skipped,
        result.failed,
    )
    return result
