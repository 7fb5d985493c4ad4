"""Thread-safe caches for interned strings and converted tag lists."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any

from tally.identity import string_string_map


class StringInterner:
    """Returns one shared instance for each distinct string."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()

    def intern(self, s: str) -> str:
        """Return the canonical instance of s."""
        existing = self._entries.get(s)
        if existing is not None:
            return existing
        with self._lock:
            return self._entries.setdefault(s, s)


class TagCache:
    """Caches converted tag lists by tag-map identity key."""

    def __init__(self) -> None:
        self._entries: dict[int, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: int) -> Any | None:
        """Return the cached tags for key, or None when absent."""
        return self._entries.get(key)

    def set(self, key: int, tags: Any) -> Any:
        """Store tags under key unless present; return the value now cached."""
        with self._lock:
            return self._entries.setdefault(key, tags)


def tag_map_key(tags: Mapping[str, str]) -> int:
    """Return the cache key for a tag mapping."""
    return string_string_map(tags)