"""firebase_store — Firebase Realtime Database storage for client managers.

A plugin swaps the manager's default in-memory ``Database`` for one that
persists dotted keys under ``<database_url>/<client_id>/...`` over the
REST API.
"""

from firebase_store.exceptions import (
    FirebaseStoreError,
    InvalidKeyError,
    NotAnArrayError,
    NotFoundError,
    PermissionDeniedError,
    PluginConfigError,
    StoreRequestError,
    UnknownStructureError,
)
from firebase_store.manager import ClientManager
from firebase_store.plugin import FirebasePlugin, Plugin
from firebase_store.registry import StructureRegistry
from firebase_store.schema import FirebasePluginOptions, ManagerOptions
from firebase_store.stores import ABSENT, Database, FirebaseDatabase, InMemoryDatabase

__all__ = [
    "ABSENT",
    "ClientManager",
    "Database",
    "FirebaseDatabase",
    "FirebasePlugin",
    "FirebasePluginOptions",
    "FirebaseStoreError",
    "InMemoryDatabase",
    "InvalidKeyError",
    "ManagerOptions",
    "NotAnArrayError",
    "NotFoundError",
    "PermissionDeniedError",
    "Plugin",
    "PluginConfigError",
    "StoreRequestError",
    "StructureRegistry",
    "UnknownStructureError",
]
