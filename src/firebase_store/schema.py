"""Option models for the client manager and the Firebase plugin.

These Pydantic models validate the configuration the host hands over at
construction and plugin-load time.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

DATABASE_URL_ENV = "FIREBASE_DATABASE_URL"


class ManagerOptions(BaseModel):
    """Client manager options that affect storage.

    Attributes:
        client_id: Identifier of the client; becomes the namespace root.
        disable_database: Skip persistence entirely.
        resume: The manager is resuming prior state, which needs storage
            even when ``disable_database`` is set.
    """

    client_id: str | None = None
    disable_database: bool = False
    resume: bool = False

    @property
    def database_disabled(self) -> bool:
        return self.disable_database and not self.resume


class FirebasePluginOptions(BaseModel):
    """Options for :class:`~firebase_store.plugin.FirebasePlugin`.

    Attributes:
        database_url: Base URL of the Realtime Database.  Falls back to the
            ``FIREBASE_DATABASE_URL`` environment variable.
        timeout: Per-request timeout in seconds.
    """

    database_url: str = Field(default_factory=lambda: os.getenv(DATABASE_URL_ENV, ""))
    timeout: float = Field(default=30.0, gt=0)
