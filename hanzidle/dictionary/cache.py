"""
Process-wide mutable state owned by one DictionaryService.

- LookupCache:  key -> value store, safe to share across threads and tasks.
                Values are deterministic per key, so concurrent writers just
                overwrite each other with equal values (last write wins).
- ExclusionSet: words already handed out; clears itself once a pool is
                exhausted so targets recycle instead of running dry.
"""

from __future__ import annotations

import random
import threading
from typing import Dict, Generic, List, Optional, Sequence, TypeVar

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")


class LookupCache(Generic[K, V]):
    def __init__(self):
        self._data: Dict[K, V] = {}
        self._lock = threading.Lock()

    def get(self, key: K) -> Optional[V]:
        with self._lock:
            return self._data.get(key)

    def put(self, key: K, value: V) -> None:
        with self._lock:
            self._data[key] = value

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class ExclusionSet:
    """Insertion-ordered set of used keys with reset-on-exhaustion draws."""

    def __init__(self):
        self._used: Dict[str, None] = {}
        self._lock = threading.Lock()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._used

    def __len__(self) -> int:
        with self._lock:
            return len(self._used)

    def add(self, key: str) -> None:
        with self._lock:
            self._used[key] = None

    def recent(self, limit: int) -> List[str]:
        """First `limit` keys in the order they were used."""
        with self._lock:
            return list(self._used)[:limit]

    def clear(self) -> None:
        with self._lock:
            self._used.clear()

    def draw(self, pool: Sequence[T], key_of, rng: random.Random) -> T:
        """
        Pick a random item whose key is unused, and mark it used.
        If every item is used, forget the history and draw from the full pool.
        """
        if not pool:
            raise ValueError("cannot draw from an empty pool")
        with self._lock:
            available = [x for x in pool if key_of(x) not in self._used]
            if not available:
                self._used.clear()
                available = list(pool)
            item = available[rng.randrange(len(available))]
            self._used[key_of(item)] = None
            return item

