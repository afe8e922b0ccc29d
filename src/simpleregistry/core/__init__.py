from __future__ import annotations

from .entry import Entry, RegistryItem, TypeSpec, values_equal
from .errors import (
    DuplicateKeyError,
    NotFoundError,
    RegistryError,
    RegistryRemovalWarning,
    TypeMismatchError,
)
from .registry import REGISTRY, Registry

__all__ = [
    "Registry",
    "REGISTRY",
    "Entry",
    "RegistryItem",
    "TypeSpec",
    "values_equal",
    "RegistryError",
    "DuplicateKeyError",
    "NotFoundError",
    "TypeMismatchError",
    "RegistryRemovalWarning",
]
