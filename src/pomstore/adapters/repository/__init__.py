"""Filesystem adapters for managed repositories."""

from __future__ import annotations

from .content import DefaultRepositoryContent, LegacyRepositoryContent, extension_for
from .factory import RepositoryContentFactory, create_content

__all__ = [
    "DefaultRepositoryContent",
    "LegacyRepositoryContent",
    "RepositoryContentFactory",
    "create_content",
    "extension_for",
]
