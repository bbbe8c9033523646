"""Structure registry — swaps implementations of named host structures.

The host builds its structures (currently only ``"Database"``) through
factories looked up here by name.  A plugin *extends* a structure by
registering its own factory and *restores* the default when it unloads.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from firebase_store.exceptions import UnknownStructureError
from firebase_store.stores.memory import InMemoryDatabase

if TYPE_CHECKING:
    from firebase_store.manager import ClientManager

StructureFactory = Callable[["ClientManager"], Any]

DATABASE = "Database"


def default_structures() -> dict[str, StructureFactory]:
    """Return the built-in factories every registry starts from."""
    return {DATABASE: InMemoryDatabase.from_manager}


class StructureRegistry:
    """Maps structure names to the factory currently in effect.

    Parameters:
        defaults: Factories to start from and to restore to.  Defaults to
                  :func:`default_structures`.
    """

    def __init__(self, defaults: Mapping[str, StructureFactory] | None = None) -> None:
        self._defaults: dict[str, StructureFactory] = (
            dict(defaults) if defaults is not None else default_structures()
        )
        self._active: dict[str, StructureFactory] = dict(self._defaults)

    def get(self, name: str) -> StructureFactory:
        """Return the active factory for *name*."""
        self._check(name)
        return self._active[name]

    def extend(self, name: str, factory: StructureFactory) -> None:
        """Make *factory* the active implementation of *name*."""
        self._check(name)
        self._active[name] = factory

    def restore(self, name: str) -> None:
        """Revert *name* to its default factory."""
        self._check(name)
        self._active[name] = self._defaults[name]

    def is_extended(self, name: str) -> bool:
        self._check(name)
        return self._active[name] is not self._defaults[name]

    def names(self) -> list[str]:
        return list(self._defaults.keys())

    def _check(self, name: str) -> None:
        if name not in self._defaults:
            raise UnknownStructureError(name, self.names())
