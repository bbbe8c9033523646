"""ClientManager — the host that owns options, plugins and storage."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from firebase_store.exceptions import PluginConfigError
from firebase_store.registry import DATABASE, StructureRegistry
from firebase_store.schema import ManagerOptions

if TYPE_CHECKING:
    from firebase_store.plugin import Plugin
    from firebase_store.stores.base import Database

logger = logging.getLogger(__name__)


class ClientManager:
    """Holds manager options, loaded plugins and the active database.

    The database is built from the registry's ``"Database"`` factory the
    first time it is accessed.  Loading or removing a plugin drops the
    cached instance so the next access picks up the new implementation.

    Parameters:
        options: Storage-related options.  Defaults to ``ManagerOptions()``.
        registry: Structure registry.  A fresh one is created when omitted.
    """

    def __init__(
        self,
        options: ManagerOptions | None = None,
        *,
        registry: StructureRegistry | None = None,
    ) -> None:
        self._options = options or ManagerOptions()
        self._registry = registry or StructureRegistry()
        self._plugins: dict[str, Plugin] = {}
        self._database: Database | None = None

    # ── plugins ──────────────────────────────────────────────

    def use(self, plugin: Plugin) -> None:
        """Load *plugin*.  Errors raised by ``load`` propagate unchanged."""
        if plugin.name in self._plugins:
            raise PluginConfigError(plugin.name, "plugin is already loaded")
        plugin.load(self)
        self._plugins[plugin.name] = plugin
        self._database = None
        logger.info("Loaded plugin %s %s", plugin.name, plugin.version)

    def remove(self, name: str) -> None:
        """Unload the plugin registered as *name*."""
        plugin = self._plugins.pop(name, None)
        if plugin is None:
            raise PluginConfigError(name, "plugin is not loaded")
        plugin.unload(self)
        self._database = None
        logger.info("Unloaded plugin %s", name)

    def get_plugin(self, name: str) -> Plugin | None:
        return self._plugins.get(name)

    def list_plugins(self) -> list[str]:
        """Return the names of loaded plugins in load order."""
        return list(self._plugins)

    # ── storage ──────────────────────────────────────────────

    @property
    def database(self) -> Database:
        if self._database is None:
            self._database = self._registry.get(DATABASE)(self)
            self._database.load_data()
        return self._database

    @property
    def options(self) -> ManagerOptions:
        return self._options

    @property
    def registry(self) -> StructureRegistry:
        return self._registry
