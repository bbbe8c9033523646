"""FirebaseDatabase — keyed storage on a remote JSON document store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from firebase_store.exceptions import FirebaseStoreError
from firebase_store.stores.base import ABSENT, Database
from firebase_store.transport import DEFAULT_TIMEOUT, read_data, write_data

if TYPE_CHECKING:
    import httpx

    from firebase_store.manager import ClientManager

logger = logging.getLogger(__name__)


class FirebaseDatabase(Database):
    """Persists values under ``<database_url>/<client_id>/<key path>.json``.

    Every operation is one independent HTTP request; nothing is cached.

    ``set`` and ``push`` propagate store errors.  ``get`` and ``delete``
    log them and degrade to :data:`ABSENT` / ``False`` so callers probing
    for existing state are not interrupted by an unreachable store.

    Parameters:
        database_url: Base URL of the document store.
        client_id: Identifier the namespace root is derived from.
        disabled: Turn every operation into a no-op.
        client: Optional shared ``httpx.AsyncClient``.  It is never closed
            here; without one each request opens its own client.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        database_url: str,
        *,
        client_id: object = "",
        disabled: bool = False,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__(client_id=client_id, disabled=disabled)
        self._database_url = database_url.rstrip("/")
        self._client = client
        self._timeout = timeout

    @classmethod
    def from_manager(
        cls,
        manager: ClientManager,
        *,
        database_url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> FirebaseDatabase:
        """Build a database from *manager*'s client id and storage flags."""
        options = manager.options
        return cls(
            database_url,
            client_id=options.client_id,
            disabled=options.database_disabled,
            client=client,
            timeout=timeout,
        )

    @property
    def database_url(self) -> str:
        return self._database_url

    def url_for(self, key: str, *, operation: str = "get") -> str:
        """Return the full resource URL for *key*."""
        return f"{self._database_url}/{self.path_for(key, operation=operation)}.json"

    # ── Database protocol ────────────────────────────────────

    async def set(self, key: str, value: Any) -> None:
        if self._disabled:
            return
        url = self.url_for(key, operation="set")
        await write_data(url, value, client=self._client, timeout=self._timeout)

    async def get(self, key: str) -> Any:
        if self._disabled:
            return ABSENT
        url = self.url_for(key, operation="get")
        try:
            data = await read_data(url, client=self._client, timeout=self._timeout)
        except FirebaseStoreError as exc:
            logger.warning("Read of '%s' failed: %s", key, exc)
            return ABSENT
        # A missing node reads back as null.
        return ABSENT if data is None else data

    async def delete(self, key: str) -> bool:
        if self._disabled:
            return False
        url = self.url_for(key, operation="delete")
        try:
            await write_data(url, None, client=self._client, timeout=self._timeout)
        except FirebaseStoreError as exc:
            logger.warning("Delete of '%s' failed: %s", key, exc)
            return False
        return True
