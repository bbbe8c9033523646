"""Plugin contract and the Firebase storage plugin."""

from __future__ import annotations

import functools
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from firebase_store.exceptions import PluginConfigError
from firebase_store.registry import DATABASE
from firebase_store.schema import DATABASE_URL_ENV, FirebasePluginOptions
from firebase_store.stores.firebase import FirebaseDatabase

if TYPE_CHECKING:
    import httpx

    from firebase_store.manager import ClientManager

logger = logging.getLogger(__name__)


class Plugin(ABC):
    """Base class for host plugins.

    ``load`` is called once when the plugin is added to a manager and
    ``unload`` when it is removed.  Plugins change host behaviour by
    extending structures in ``manager.registry``.
    """

    name: ClassVar[str] = "plugin"
    version: ClassVar[str] = "0.0.0"
    description: ClassVar[str] = ""
    author: ClassVar[str] = ""

    @abstractmethod
    def load(self, manager: ClientManager) -> None:
        """Activate the plugin on *manager*."""
        ...

    def unload(self, manager: ClientManager) -> None:
        """Deactivate the plugin.  Default does nothing."""
        return None

    def info(self) -> dict[str, Any]:
        """Return a JSON-serializable description of this plugin."""
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "author": self.author,
        }


class FirebasePlugin(Plugin):
    """Replaces the manager's ``Database`` with :class:`FirebaseDatabase`.

    Parameters:
        database_url: Realtime Database URL.  Falls back to the
            ``FIREBASE_DATABASE_URL`` environment variable.
        timeout: Per-request timeout in seconds.
        client: Optional shared ``httpx.AsyncClient`` for every request.

    Example:
        >>> manager = ClientManager(ManagerOptions(client_id="bot-1"))
        >>> manager.use(FirebasePlugin("https://demo.firebaseio.com"))
        >>> await manager.database.set("settings.volume", 42)
    """

    name = "firebase-store"
    version = "1.0.0"
    description = "Firebase integration"
    author = "firebase-store contributors"

    def __init__(
        self,
        database_url: str | None = None,
        *,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        fields: dict[str, Any] = {}
        if database_url is not None:
            fields["database_url"] = database_url
        if timeout is not None:
            fields["timeout"] = timeout
        self.options = FirebasePluginOptions(**fields)
        self._client = client

    def load(self, manager: ClientManager) -> None:
        if not self.options.database_url:
            raise PluginConfigError(
                self.name,
                "Database URL is required. Please provide it in the plugin options "
                f"and store it in an environment variable ({DATABASE_URL_ENV}) "
                "for better security.",
            )
        factory = functools.partial(
            FirebaseDatabase.from_manager,
            database_url=self.options.database_url,
            client=self._client,
            timeout=self.options.timeout,
        )
        manager.registry.extend(DATABASE, factory)
        logger.info("Firebase storage enabled at %s", self.options.database_url)

    def unload(self, manager: ClientManager) -> None:
        manager.registry.restore(DATABASE)
        logger.info("Firebase storage disabled; default database restored")
