from __future__ import annotations

from .core.entry import Entry, RegistryItem, values_equal
from .core.errors import (
    DuplicateKeyError,
    NotFoundError,
    RegistryError,
    RegistryRemovalWarning,
    TypeMismatchError,
)
from .core.registry import REGISTRY, Registry

__version__ = "0.1.0"

__all__ = [
    "Registry",
    "REGISTRY",
    "Entry",
    "RegistryItem",
    "values_equal",
    "RegistryError",
    "DuplicateKeyError",
    "NotFoundError",
    "TypeMismatchError",
    "RegistryRemovalWarning",
    "__version__",
]
