"""Storage backends for client manager state."""

from firebase_store.stores.base import ABSENT, Database
from firebase_store.stores.firebase import FirebaseDatabase
from firebase_store.stores.memory import InMemoryDatabase

__all__ = ["ABSENT", "Database", "FirebaseDatabase", "InMemoryDatabase"]
