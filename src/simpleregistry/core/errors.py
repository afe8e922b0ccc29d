from __future__ import annotations


class RegistryError(Exception):
    """Base class for every failure raised by a :class:`~simpleregistry.Registry`."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.key = key

    def __str__(self) -> str:
        # KeyError subclasses would otherwise repr-quote the message.
        return self.message


class DuplicateKeyError(RegistryError, KeyError):
    """Raised when registering under a key that is already taken."""


class NotFoundError(RegistryError, KeyError):
    """Raised when a key, a value, or a predicate match does not exist.

    `key` is None when the miss came from a reverse lookup or a predicate search.
    """


class TypeMismatchError(RegistryError, TypeError):
    """Raised when a stored (or incoming) value is not an instance of the requested type."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        expected: type | tuple[type, ...] | None = None,
        actual: type | None = None,
    ) -> None:
        super().__init__(message, key=key)
        self.expected = expected
        self.actual = actual


class RegistryRemovalWarning(UserWarning):
    """Emitted by removal operations.

    Other components may still resolve the removed keys, so their lookups will fail afterwards.
    """


__all__ = [
    "RegistryError",
    "DuplicateKeyError",
    "NotFoundError",
    "TypeMismatchError",
    "RegistryRemovalWarning",
]
