import threading
from typing import List, Optional, Tuple

from lrucache.lru_cache import (
    NOT_FOUND,
    CacheStats,
    EvictionCallback,
    LRUCache,
)


class ThreadSafeLRUCache(LRUCache):
    """LRUCache safe to share between threads.

    Every operation runs as a single critical section under one lock, since
    both reads and writes relink the shared recency list. The lock is
    reentrant so an eviction observer may call back into the cache.
    """

    def __init__(
        self, capacity: int, on_evict: Optional[EvictionCallback] = None
    ) -> None:
        super().__init__(capacity, on_evict=on_evict)
        self._lock = threading.RLock()

    def get(self, key, default=NOT_FOUND):
        with self._lock:
            return super().get(key, default)

    def peek(self, key, default=NOT_FOUND):
        with self._lock:
            return super().peek(key, default)

    def put(self, key, value) -> None:
        with self._lock:
            super().put(key, value)

    def remove(self, key, default=NOT_FOUND):
        with self._lock:
            return super().remove(key, default)

    def popitem(self) -> Tuple:
        with self._lock:
            return super().popitem()

    def clear(self) -> None:
        with self._lock:
            super().clear()

    def keys(self) -> List:
        with self._lock:
            return super().keys()

    def items(self) -> List[Tuple]:
        with self._lock:
            return super().items()

    def stats(self) -> CacheStats:
        with self._lock:
            return super().stats()

    def __len__(self) -> int:
        with self._lock:
            return super().__len__()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return super().__contains__(key)

    def __repr__(self) -> str:
        with self._lock:
            return super().__repr__()
