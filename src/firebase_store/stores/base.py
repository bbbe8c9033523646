"""Database interface — keyed persistence for a client manager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Final

from firebase_store.exceptions import InvalidKeyError, NotAnArrayError
from firebase_store.paths import key_to_path, namespaced_path, sanitize_path


class _Absent:
    """Type of :data:`ABSENT`."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()
"""Returned by :meth:`Database.get` when there is no value to report."""


class Database(ABC):
    """Abstract base for all storage backends.

    Keys are dotted logical names (``"settings.volume"``) scoped under a
    namespace root derived from the manager's client id.  A disabled
    database performs no I/O: writes are skipped, ``get`` returns
    :data:`ABSENT` and ``delete`` returns ``False``.

    Parameters:
        client_id: Identifier the namespace root is derived from.
        disabled: Turn every operation into a no-op.
    """

    def __init__(self, *, client_id: object = "", disabled: bool = False) -> None:
        self._namespace = sanitize_path(client_id)
        self._disabled = disabled

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def disabled(self) -> bool:
        return self._disabled

    def path_for(self, key: str, *, operation: str = "get") -> str:
        """Return the store path for *key* under this database's namespace.

        Keys that name no node below the namespace (``""``, ``"."``) are
        rejected.
        """
        if not key or not key_to_path(key).strip("/"):
            raise InvalidKeyError(operation)
        return namespaced_path(self._namespace, key)

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Store *value* at *key*."""
        ...

    @abstractmethod
    async def get(self, key: str) -> Any:
        """Return the value at *key*, or :data:`ABSENT`."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove *key*.  Return ``True`` on success."""
        ...

    async def push(self, key: str, value: Any) -> None:
        """Append *value* to the list stored at *key*.

        A missing key starts a new list.  The read and the write are two
        separate operations, so concurrent pushes to one key can lose
        updates.

        Raises:
            InvalidKeyError: *key* is empty.
            NotAnArrayError: *key* holds something other than a list.
        """
        if self._disabled:
            return
        self.path_for(key, operation="push")
        current = await self.get(key)
        if current is ABSENT:
            current = []
        if not isinstance(current, list):
            raise NotAnArrayError(key)
        current.append(value)
        await self.set(key, current)

    def load_data(self) -> None:
        """Preload state from the backing store.  No-op unless overridden."""
        return None
