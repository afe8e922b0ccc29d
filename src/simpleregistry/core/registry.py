from __future__ import annotations

import warnings
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, TypeVar, overload

from .entry import Entry, TypeSpec, values_equal
from .errors import (
    DuplicateKeyError,
    NotFoundError,
    RegistryRemovalWarning,
    TypeMismatchError,
)

T = TypeVar("T")

_REMOVAL_HAZARD = "Removing registry items can leave other components with dangling key lookups."


def _type_name(value_type: TypeSpec) -> str:
    if isinstance(value_type, tuple):
        return " | ".join(t.__name__ for t in value_type)
    return value_type.__name__


class Registry:
    """Flat, in-memory map from string keys to values of any type.

    Lookups are type-checked at runtime. The registry does no locking; share it between
    threads only behind a single external lock.

    Reverse lookups (:meth:`get_key`, :meth:`override_by_old`, :meth:`unregister`) scan in
    insertion order and resolve to the first equal value, so registering equal values under
    several keys makes them ambiguous.
    """

    def __init__(self, name: str = "registry", *, value_type: type = object) -> None:
        self._name = name
        self._value_type = value_type
        self._entries: dict[str, Entry] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def value_type(self) -> type:
        return self._value_type

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"Registry(name={self._name!r}, items={len(self._entries)})"

    def keys(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def _check_key(self, key: str) -> str:
        if not isinstance(key, str):
            raise TypeError(f"{self._name} registry: keys must be str, got {type(key).__name__}")
        return key

    def _check_value(self, key: str, value: Any) -> None:
        if not isinstance(value, self._value_type):
            raise TypeMismatchError(
                f"{self._name} registry: '{key}' must hold a {_type_name(self._value_type)}, "
                f"got {type(value).__name__}",
                key=key,
                expected=self._value_type,
                actual=type(value),
            )

    def _require_entry(self, key: str) -> Entry:
        entry = self._entries.get(self._check_key(key))
        if entry is None:
            available = ", ".join(self._entries) or "<empty>"
            raise NotFoundError(f"{self._name} registry: '{key}' not found. Available: {available}", key=key)
        return entry

    def _find_key(self, value: Any) -> str | None:
        for key, entry in self._entries.items():
            if values_equal(entry.value, value):
                return key
        return None

    def _require_key_for(self, value: Any) -> str:
        key = self._find_key(value)
        if key is None:
            raise NotFoundError(f"{self._name} registry: no key holds {value!r}")
        return key

    def _entries_of_type(self, value_type: TypeSpec, exact: bool) -> list[Entry]:
        return [e for e in self._entries.values() if e.matches(value_type, exact=exact)]

    def register(self, key: str, value: Any) -> None:
        """Store `value` under a new key. Raises DuplicateKeyError if the key is taken."""
        self._check_key(key)
        if key in self._entries:
            raise DuplicateKeyError(f"{self._name} registry: '{key}' already registered", key=key)
        self._check_value(key, value)
        self._entries[key] = Entry(key, value)

    @overload
    def get(self, key: str) -> Any: ...

    @overload
    def get(self, key: str, value_type: type[T]) -> T: ...

    def get(self, key: str, value_type: type[T] | None = None) -> Any:
        """Return the value under `key`, optionally checking it is a `value_type` instance."""
        entry = self._require_entry(key)
        if value_type is not None and not entry.matches(value_type):
            raise TypeMismatchError(
                f"{self._name} registry: '{key}' holds a {entry.value_type.__name__}, "
                f"not a {_type_name(value_type)}",
                key=key,
                expected=value_type,
                actual=entry.value_type,
            )
        return entry.value

    def get_key(self, value: Any) -> str | None:
        """Reverse lookup. Returns None when no entry holds an equal value."""
        return self._find_key(value)

    def override_at_key(self, key: str, value: Any) -> None:
        self._require_entry(key)
        self._check_value(key, value)
        self._entries[key] = Entry(key, value)

    def override_by_old(self, old: Any, new: Any) -> str:
        """Replace `old` with `new` under whichever key holds `old`, and return that key."""
        key = self._require_key_for(old)
        self._check_value(key, new)
        self._entries[key] = Entry(key, new)
        return key

    def all_items(self) -> Mapping[str, Any]:
        """Read-only snapshot of every key and value. Later registry changes do not show up in it."""
        return MappingProxyType({key: entry.value for key, entry in self._entries.items()})

    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._entries.values())

    def items_of_type(self, value_type: type[T], *, exact: bool = False) -> dict[str, T]:
        """Entries whose value is a `value_type` instance (or exactly of that type with `exact`)."""
        return {e.key: e.value for e in self._entries_of_type(value_type, exact)}

    def find_item(self, value_type: type[T], predicate: Callable[[T], bool], *, exact: bool = False) -> T:
        if not callable(predicate):
            raise TypeError("predicate must be callable")
        for entry in self._entries_of_type(value_type, exact):
            if predicate(entry.value):
                return entry.value
        raise NotFoundError(f"{self._name} registry: no {_type_name(value_type)} matches the predicate")

    def find_items(
        self,
        value_type: type[T],
        predicate: Callable[[T], bool],
        *,
        exact: bool = False,
    ) -> Iterator[T]:
        """Lazily yield every `value_type` value accepted by `predicate`.

        The candidates are fixed when this is called; the predicate runs as the caller iterates.
        """
        if not callable(predicate):
            raise TypeError("predicate must be callable")
        candidates = [entry.value for entry in self._entries_of_type(value_type, exact)]
        return (value for value in candidates if predicate(value))

    def unregister(self, value: Any) -> str:
        """Remove the entry holding `value` and return its key.

        Hazardous: components that still resolve the key will start failing.
        """
        warnings.warn(_REMOVAL_HAZARD, RegistryRemovalWarning, stacklevel=2)
        key = self._require_key_for(value)
        del self._entries[key]
        return key

    def unregister_key(self, key: str) -> None:
        """Remove the entry under `key`. Hazardous, see :meth:`unregister`."""
        warnings.warn(_REMOVAL_HAZARD, RegistryRemovalWarning, stacklevel=2)
        self._require_entry(key)
        del self._entries[key]

    def clear(self) -> None:
        """Remove every entry. Hazardous, see :meth:`unregister`."""
        warnings.warn(_REMOVAL_HAZARD, RegistryRemovalWarning, stacklevel=2)
        self._entries.clear()

    def clear_type(self, value_type: TypeSpec, *, exact: bool = False) -> int:
        """Remove every entry of `value_type` and return how many were removed. Hazardous."""
        warnings.warn(_REMOVAL_HAZARD, RegistryRemovalWarning, stacklevel=2)
        doomed = [e.key for e in self._entries_of_type(value_type, exact)]
        for key in doomed:
            del self._entries[key]
        return len(doomed)


REGISTRY = Registry("default")


__all__ = ["Registry", "REGISTRY"]
