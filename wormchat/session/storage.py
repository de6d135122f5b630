"""Synchronous key-value storage for client-side session data."""

from collections.abc import MutableMapping
from typing import Any, Protocol


class KeyValueStore(Protocol):
    """Minimal persistence interface the session state relies on."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MappingStore:
    """KeyValueStore backed by any mutable mapping.

    Wraps NiceGUI's ``app.storage.user`` at runtime and a plain dict in tests.
    """

    def __init__(self, mapping: MutableMapping[str, Any] | None = None) -> None:
        self._mapping = mapping if mapping is not None else {}

    def get(self, key: str) -> str | None:
        value = self._mapping.get(key)
        return str(value) if value is not None else None

    def set(self, key: str, value: str) -> None:
        self._mapping[key] = value

    def remove(self, key: str) -> None:
        self._mapping.pop(key, None)
