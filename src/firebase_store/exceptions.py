"""Custom exceptions for the firebase_store package."""

from __future__ import annotations

PERMISSION_DENIED_HELP = (
    "Permission denied. To allow access temporarily, follow these steps:\n"
    "1) Log in to your Firebase Console.\n"
    "2) Navigate to Realtime Database → Rules.\n"
    "3) Set both .read and .write rules to true, for example:\n"
    '{\n  "rules": {\n    ".read": true,\n    ".write": true\n  }\n}\n'
    "For security, store your database URL in an environment variable."
)


class FirebaseStoreError(Exception):
    """Base exception for all firebase_store errors."""


class InvalidKeyError(FirebaseStoreError):
    """Raised when an operation is given an empty key."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Key cannot be empty (operation '{operation}')")


class NotAnArrayError(FirebaseStoreError):
    """Raised when ``push`` targets a value that is not a list."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Key '{key}' does not point to an array")


class StoreRequestError(FirebaseStoreError):
    """Raised when the document store rejects or fails a request.

    ``status`` is ``None`` when no response was received at all.
    """

    def __init__(self, status: int | None, body: str = "") -> None:
        self.status = status
        self.body = body
        if status is None:
            msg = f"Request failed: {body}"
        else:
            msg = f"Error {status}: {body}"
        super().__init__(msg)


class NotFoundError(StoreRequestError):
    """Raised on a 404 response."""

    def __init__(self, body: str = "") -> None:
        self.status = 404
        self.body = body
        FirebaseStoreError.__init__(self, "404: Resource not found")


class PermissionDeniedError(StoreRequestError):
    """Raised on a 403 response.  The message carries the rules remediation."""

    def __init__(self, body: str = "") -> None:
        self.status = 403
        self.body = body
        FirebaseStoreError.__init__(self, PERMISSION_DENIED_HELP)


class PluginConfigError(FirebaseStoreError):
    """Raised when a plugin is loaded with missing or invalid options."""

    def __init__(self, plugin_name: str, message: str) -> None:
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}' misconfigured: {message}")


class UnknownStructureError(FirebaseStoreError):
    """Raised when the registry is asked for a structure it does not know."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        super().__init__(
            f"Unknown structure: '{name}'. Available structures: {', '.join(sorted(available))}"
        )
