"""In-process implementation of CacheStore.

Used for local runs without Redis (``CACHE_BACKEND=memory``) and in tests.
Entries expire according to an injectable clock. Expired entries are
dropped when read and swept on every write.
"""

import copy
import threading
import time
from collections.abc import Callable
from typing import Any


class InMemoryCacheStore:
    """Dictionary-backed cache store with per-key expiry.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        store = InMemoryCacheStore()
        store.write("zip:10001", "New York, New York, US", ttl=86400)
        store.read("zip:10001")  # "New York, New York, US"
        ```
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        """Initialize the in-memory store.

        Args:
            clock: Returns the current time in seconds. Defaults to time.time.
        """
        self._clock = clock
        self._entries: dict[str, tuple[Any, float]] = {}
        self._lock = threading.Lock()

    def _live_entry(self, key: str) -> tuple[Any, float] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() >= entry[1]:
            del self._entries[key]
            return None
        return entry

    def exists(self, key: str) -> bool:
        with self._lock:
            return self._live_entry(key) is not None

    def read(self, key: str) -> Any | None:
        with self._lock:
            entry = self._live_entry(key)
            return copy.deepcopy(entry[0]) if entry else None

    def write(self, key: str, value: Any, ttl: int) -> None:
        with self._lock:
            now = self._clock()
            for stale_key in [k for k, (_, expires_at) in self._entries.items() if now >= expires_at]:
                del self._entries[stale_key]
            self._entries[key] = (copy.deepcopy(value), now + ttl)

    def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for key in list(self._entries) if self._live_entry(key) is not None)
