"""Public interface for the descriptor adapter."""

from __future__ import annotations

from .reader import Model300Reader, Model400Reader, default_readers
from .schema import LegacyProjectPayload, ProjectPayload
from .translator import model_from_legacy_payload, model_from_payload

__all__ = [
    "LegacyProjectPayload",
    "Model300Reader",
    "Model400Reader",
    "ProjectPayload",
    "default_readers",
    "model_from_legacy_payload",
    "model_from_payload",
]
