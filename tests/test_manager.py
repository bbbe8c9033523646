"""Tests for ClientManager."""

import pytest

from firebase_store import (
    ClientManager,
    InMemoryDatabase,
    ManagerOptions,
    Plugin,
    PluginConfigError,
    StructureRegistry,
)


class RecordingPlugin(Plugin):
    name = "recording"
    version = "0.1.0"

    def __init__(self):
        self.events = []

    def load(self, manager):
        self.events.append("load")

    def unload(self, manager):
        self.events.append("unload")


def test_defaults():
    manager = ClientManager()
    assert manager.options == ManagerOptions()
    assert isinstance(manager.database, InMemoryDatabase)
    assert manager.list_plugins() == []


def test_database_is_built_once(manager):
    assert manager.database is manager.database


def test_database_uses_client_id(manager):
    assert manager.database.namespace == "bot-1"


def test_use_and_remove(manager):
    plugin = RecordingPlugin()
    manager.use(plugin)
    assert manager.list_plugins() == ["recording"]
    assert manager.get_plugin("recording") is plugin

    manager.remove("recording")
    assert plugin.events == ["load", "unload"]
    assert manager.get_plugin("recording") is None


def test_duplicate_plugin_rejected(manager):
    manager.use(RecordingPlugin())
    with pytest.raises(PluginConfigError):
        manager.use(RecordingPlugin())


def test_remove_unknown_plugin(manager):
    with pytest.raises(PluginConfigError):
        manager.remove("missing")


def test_plugin_change_rebuilds_database(manager):
    first = manager.database
    manager.use(RecordingPlugin())
    assert manager.database is not first


def test_default_unload_is_noop(manager):
    class Minimal(Plugin):
        name = "minimal"

        def load(self, manager):
            pass

    manager.use(Minimal())
    manager.remove("minimal")
    assert Minimal().info()["name"] == "minimal"


def test_shared_registry():
    registry = StructureRegistry()
    manager = ClientManager(registry=registry)
    assert manager.registry is registry


def test_load_data_called_on_build():
    calls = []

    class Preloading(InMemoryDatabase):
        def load_data(self):
            calls.append(self.namespace)

    registry = StructureRegistry({"Database": lambda m: Preloading(client_id=m.options.client_id)})
    manager = ClientManager(ManagerOptions(client_id="p"), registry=registry)
    manager.database
    assert calls == ["p"]


@pytest.mark.parametrize(
    ("disable", "resume", "expected"),
    [(True, False, True), (True, True, False), (False, False, False)],
)
def test_database_disabled(disable, resume, expected):
    options = ManagerOptions(disable_database=disable, resume=resume)
    assert options.database_disabled is expected
    assert ClientManager(options).database.disabled is expected
