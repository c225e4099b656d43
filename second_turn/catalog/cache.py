"""
Bounded in-memory cache for catalog API results.
"""

import threading
from typing import Any, Optional

import cachetools


class LRUCache:
    """
    Process-local least-recently-used cache.

    - No TTL.
    - Holds at most ``capacity`` entries; the least recently read or written
      key is dropped first.
    - Concurrent misses for one key are not coalesced, the last write wins.
    """

    def __init__(self, capacity: int) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
            raise ValueError(f"Cache capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity
        self._lock = threading.Lock()
        self._entries: cachetools.LRUCache = cachetools.LRUCache(maxsize=capacity)

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
