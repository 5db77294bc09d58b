"""Model filters that turn raw descriptors into effective project models."""

from __future__ import annotations

from .effective import (
    EffectiveProjectModelFilter,
    apply_dependency_management,
    effective_key,
    merge_parent,
)
from .expression import ExpressionProjectModelFilter
from .resolvers import (
    ProjectModelResolverStack,
    RepositoryProjectModelResolver,
    StoreProjectModelResolver,
)

__all__ = [
    "EffectiveProjectModelFilter",
    "ExpressionProjectModelFilter",
    "ProjectModelResolverStack",
    "RepositoryProjectModelResolver",
    "StoreProjectModelResolver",
    "apply_dependency_management",
    "effective_key",
    "merge_parent",
]
