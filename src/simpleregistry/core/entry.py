from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np


TypeSpec = type | tuple[type, ...]


class RegistryItem:
    """Empty marker base class.

    Pass it as `value_type` to a :class:`~simpleregistry.Registry` to only accept values that
    opt in by subclassing it.
    """

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Entry:
    """One key-to-value binding.

    `value_type` is the runtime type tag captured at store time.
    """

    key: str
    value: Any
    value_type: type = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value_type", type(self.value))

    def matches(self, value_type: TypeSpec, *, exact: bool = False) -> bool:
        if exact:
            if isinstance(value_type, tuple):
                return any(self.value_type is t for t in value_type)
            return self.value_type is value_type
        return isinstance(self.value, value_type)


def values_equal(a: Any, b: Any) -> bool:
    """Equality used by reverse lookup.

    Arrays compare by shape and elements, and never equal a non-array. Lists, tuples and dicts
    compare item by item under the same rule. Anything else falls back to `==`; a comparison
    that yields an array only counts when every element is equal, and one whose truth value
    cannot be decided (e.g. dataclasses holding arrays) counts as unequal.
    """

    if a is b:
        return True
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        if not (isinstance(a, np.ndarray) and isinstance(b, np.ndarray)):
            return False
        return bool(np.array_equal(a, b))
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if type(a) is not type(b) or len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict) and isinstance(b, dict):
        if a.keys() != b.keys():
            return False
        return all(values_equal(a[k], b[k]) for k in a)
    try:
        result = a == b
        if isinstance(result, np.ndarray):
            return bool(result.size > 0 and np.all(result))
        return bool(result)
    except (ValueError, TypeError):
        return False


__all__ = ["Entry", "RegistryItem", "TypeSpec", "values_equal"]
