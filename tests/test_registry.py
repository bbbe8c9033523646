"""Tests for StructureRegistry."""

import pytest

from firebase_store import InMemoryDatabase, StructureRegistry, UnknownStructureError


def test_defaults_include_database():
    registry = StructureRegistry()
    assert registry.names() == ["Database"]
    assert registry.get("Database") == InMemoryDatabase.from_manager
    assert not registry.is_extended("Database")


def test_extend_and_restore():
    registry = StructureRegistry()

    def factory(manager):
        return "custom"

    registry.extend("Database", factory)
    assert registry.get("Database") is factory
    assert registry.is_extended("Database")

    registry.restore("Database")
    assert registry.get("Database") == InMemoryDatabase.from_manager
    assert not registry.is_extended("Database")


def test_custom_defaults():
    def default(manager):
        return "default"

    registry = StructureRegistry({"Queue": default})
    assert registry.get("Queue") is default


@pytest.mark.parametrize("method", ["get", "restore", "is_extended"])
def test_unknown_structure(method):
    registry = StructureRegistry()
    with pytest.raises(UnknownStructureError) as exc_info:
        getattr(registry, method)("Player")
    assert "Available structures: Database" in str(exc_info.value)


def test_extend_unknown_structure():
    with pytest.raises(UnknownStructureError):
        StructureRegistry().extend("Player", lambda manager: None)


def test_registries_are_independent():
    first = StructureRegistry()
    second = StructureRegistry()
    first.extend("Database", lambda manager: None)
    assert not second.is_extended("Database")
