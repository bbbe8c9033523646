"""InMemoryDatabase — zero-config, dict-backed storage for development and testing."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from firebase_store.stores.base import ABSENT, Database
from firebase_store.transport import unwrap_value, wrap_value

if TYPE_CHECKING:
    from firebase_store.manager import ClientManager


class InMemoryDatabase(Database):
    """In-memory document tree.  Data is lost on process exit.

    Mirrors the remote store's shape: strings are kept as
    ``{"default": <string>}``, writing an object merges it into the
    existing node, anything else replaces the node, and reads resolve
    through nested objects (``"a.b"`` finds ``{"a": {"b": ...}}``).
    """

    def __init__(self, *, client_id: object = "", disabled: bool = False) -> None:
        super().__init__(client_id=client_id, disabled=disabled)
        self._data: dict[str, Any] = {}

    @classmethod
    def from_manager(cls, manager: ClientManager) -> InMemoryDatabase:
        options = manager.options
        return cls(client_id=options.client_id, disabled=options.database_disabled)

    async def set(self, key: str, value: Any) -> None:
        if self._disabled:
            return
        segments = self._segments(key, "set")
        value = wrap_value(value)
        if value is None:
            self._remove(segments)
            return
        parent = self._data
        for segment in segments[:-1]:
            child = parent.get(segment)
            if not isinstance(child, dict):
                child = parent[segment] = {}
            parent = child
        leaf = segments[-1]
        existing = parent.get(leaf)
        if isinstance(value, dict) and isinstance(existing, dict):
            existing.update(copy.deepcopy(value))
        else:
            parent[leaf] = copy.deepcopy(value)

    async def get(self, key: str) -> Any:
        if self._disabled:
            return ABSENT
        node: Any = self._data
        for segment in self._segments(key, "get"):
            if not isinstance(node, dict) or segment not in node:
                return ABSENT
            node = node[segment]
        return unwrap_value(copy.deepcopy(node))

    async def delete(self, key: str) -> bool:
        if self._disabled:
            return False
        self._remove(self._segments(key, "delete"))
        return True

    def _segments(self, key: str, operation: str) -> list[str]:
        return [s for s in self.path_for(key, operation=operation).split("/") if s]

    def _remove(self, segments: list[str]) -> None:
        trail: list[tuple[dict[str, Any], str]] = []
        node: Any = self._data
        for segment in segments:
            if not isinstance(node, dict) or segment not in node:
                return
            trail.append((node, segment))
            node = node[segment]
        parent, leaf = trail.pop()
        del parent[leaf]
        # Empty parents vanish, as they do remotely.
        while trail and not parent:
            grandparent, segment = trail.pop()
            del grandparent[segment]
            parent = grandparent
