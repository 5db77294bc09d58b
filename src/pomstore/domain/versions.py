"""Version string helpers for snapshot handling."""

from __future__ import annotations

import re
from typing import Final

SNAPSHOT: Final[str] = "SNAPSHOT"

UNIQUE_SNAPSHOT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<base>.*)-(?P<timestamp>[0-9]{8}\.[0-9]{6})-(?P<build>[0-9]+)$"
)


def is_unique_snapshot(version: str) -> bool:
    """Return whether ``version`` carries a timestamped snapshot qualifier.

    ``1.0-20090101.120000-1`` is a unique snapshot, ``1.0-SNAPSHOT`` is not.
    """

    return UNIQUE_SNAPSHOT_PATTERN.match(version) is not None


def is_generic_snapshot(version: str) -> bool:
    return version.endswith(SNAPSHOT)


def is_snapshot(version: str) -> bool:
    return is_unique_snapshot(version) or is_generic_snapshot(version)


def get_base_version(version: str) -> str:
    """Collapse a unique snapshot version to its symbolic ``-SNAPSHOT`` form.

    Versions that are not unique snapshots are returned unchanged.
    """

    match = UNIQUE_SNAPSHOT_PATTERN.match(version)
    if match is None:
        return version
    return f"{match.group('base')}-{SNAPSHOT}"
