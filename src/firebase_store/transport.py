"""Transport adapter — maps (resource URL, value) pairs onto REST calls.

The document store speaks plain JSON over HTTPS.  Every resource lives at
``<url>.json``:

* ``PATCH`` merges an object into the node (``PUT`` replaces the node when
  the value is not an object, since scalars and lists cannot be merged).
* ``DELETE`` removes the node.
* ``GET`` returns the node, or ``null`` when nothing is stored there.

Bare strings are stored as ``{"default": <string>}`` and unwrapped on read.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from firebase_store.exceptions import (
    NotFoundError,
    PermissionDeniedError,
    StoreRequestError,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Connection": "keep-alive",
}

_STRING_FIELD = "default"


def resource_url(url: str) -> str:
    """Return *url* with the ``.json`` suffix the REST API requires."""
    return url if url.endswith(".json") else f"{url}.json"


def wrap_value(value: Any) -> Any:
    """Wrap a bare string so it can be stored as an object node."""
    if isinstance(value, str):
        return {_STRING_FIELD: value}
    return value


def unwrap_value(data: Any) -> Any:
    """Reverse :func:`wrap_value` for a decoded response body."""
    if isinstance(data, dict) and len(data) == 1 and _STRING_FIELD in data:
        return data[_STRING_FIELD]
    return data


async def write_data(
    url: str,
    value: Any,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Any:
    """Write *value* at *url*, or delete the node when *value* is ``None``.

    Returns the decoded JSON response.

    Raises:
        NotFoundError: The store answered 404.
        PermissionDeniedError: The store answered 403.
        StoreRequestError: Any other failure.
    """
    payload = wrap_value(value)
    if payload is None:
        method = "DELETE"
    elif isinstance(payload, Mapping):
        method = "PATCH"
    else:
        method = "PUT"
    response = await _send(method, resource_url(url), payload, client=client, timeout=timeout)
    return _decode(response)


async def read_data(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Any:
    """Fetch the node at *url*, unwrapping stored strings.

    Raises the same errors as :func:`write_data`.
    """
    response = await _send("GET", resource_url(url), None, client=client, timeout=timeout)
    return unwrap_value(_decode(response))


# ── internals ────────────────────────────────────────────────


async def _send(
    method: str,
    url: str,
    payload: Any,
    *,
    client: httpx.AsyncClient | None,
    timeout: float,
) -> httpx.Response:
    logger.debug("%s %s", method, url)
    kwargs: dict[str, Any] = {"headers": DEFAULT_HEADERS, "timeout": timeout}
    if payload is not None:
        kwargs["json"] = payload
    try:
        if client is not None:
            response = await client.request(method, url, **kwargs)
        else:
            async with httpx.AsyncClient() as owned:
                response = await owned.request(method, url, **kwargs)
    except httpx.HTTPError as exc:
        raise StoreRequestError(None, str(exc) or type(exc).__name__) from exc

    _raise_for_status(response)
    return response


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    body = response.text
    if response.status_code == 404:
        raise NotFoundError(body)
    if response.status_code == 403:
        raise PermissionDeniedError(body)
    raise StoreRequestError(response.status_code, body)


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise StoreRequestError(response.status_code, response.text) from exc
