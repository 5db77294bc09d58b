"""Project model ingestion for database scans.

``ProjectModelToDatabaseConsumer`` turns one POM artifact into a stored effective
project model, validating its coordinates and recording repository problems for
descriptors it has to reject. ``run_database_scan`` drives consumers over a batch.
"""

from __future__ import annotations

from .consumer import CONSUMER_DESCRIPTION, CONSUMER_ID, ProjectModelToDatabaseConsumer
from .problems import ProblemRecorder, resolve_repository
from .scan import ScanResult, run_database_scan
from .validation import ProjectModelValidator

__all__ = [
    "CONSUMER_DESCRIPTION",
    "CONSUMER_ID",
    "ProblemRecorder",
    "ProjectModelToDatabaseConsumer",
    "ProjectModelValidator",
    "ScanResult",
    "resolve_repository",
    "run_database_scan",
]
