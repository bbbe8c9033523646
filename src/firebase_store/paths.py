"""Key and namespace path mapping."""

from __future__ import annotations

import re

_RESERVED = re.compile(r"[.$#\[\]/]")
_WHITESPACE = re.compile(r"\s+")
_UNSAFE = re.compile(r"[^\w\-]", re.ASCII)


def sanitize_path(segment: object) -> str:
    """Return *segment* as a single safe path component.

    Characters the store reserves (``. $ # [ ] /``) and anything outside
    ``[A-Za-z0-9_-]`` become ``_``; a whitespace run becomes one ``_``.
    ``None`` and ``""`` map to ``""``.
    """
    if segment is None or segment == "":
        return ""
    text = _RESERVED.sub("_", str(segment))
    text = _WHITESPACE.sub("_", text)
    return _UNSAFE.sub("_", text)


def key_to_path(key: str) -> str:
    """Translate a dotted logical key (``a.b.c``) into ``a/b/c``."""
    return key.replace(".", "/")


def namespaced_path(namespace: object, key: str) -> str:
    """Join the sanitized *namespace* root with the path for *key*."""
    return f"{sanitize_path(namespace)}/{key_to_path(key)}"
