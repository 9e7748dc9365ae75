import dataclasses
import enum
import logging
from typing import (
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from lrucache.linked_list import Node, RecencyList

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class InvalidConfiguration(ValueError):
    """Raised when a cache is constructed with a non-positive capacity."""


class _Missing(enum.Enum):
    NOT_FOUND = "NOT_FOUND"

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __str__(self) -> str:
        return "NOT_FOUND"


# Returned by lookups on absent keys. Compare with `is`.
NOT_FOUND = _Missing.NOT_FOUND

EvictionCallback = Callable[[K, V], None]


@dataclasses.dataclass(frozen=True)
class CacheStats:
    """Point-in-time counters for a cache."""

    hits: int
    misses: int
    evictions: int
    size: int
    capacity: int

    @property
    def hit_rate(self) -> float:
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0


class LRUCache(Generic[K, V]):
    """Fixed-capacity key/value cache evicting the least recently used entry.

    Keys map to nodes of a RecencyList, so `get` and `put` both run in
    O(1) and both refresh the recency of the key they touch.

    Args:
        capacity: Maximum number of entries to hold. Must be a positive int.
        on_evict: Optional observer called with `(key, value)` for each
            entry dropped to make room for a new key.

    Raises:
        InvalidConfiguration: If `capacity` is not a positive integer.
    """

    def __init__(
        self, capacity: int, on_evict: Optional[EvictionCallback] = None
    ) -> None:
        if (
            isinstance(capacity, bool)
            or not isinstance(capacity, int)
            or capacity <= 0
        ):
            raise InvalidConfiguration(
                f"Cache capacity must be a positive integer, got {capacity!r}."
            )
        self._capacity = capacity
        self._on_evict = on_evict
        self._nodes: Dict[K, Node] = {}
        self._order = RecencyList()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        logger.info(f"Initialized LRU cache with capacity {capacity}")

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K, default=NOT_FOUND) -> Union[V, _Missing]:
        """Get item from cache, marking it most recently used.

        Args:
            key: Key to get.
            default: Returned when the key is absent.

        Returns: Value if exists, `default` (NOT_FOUND unless given) if missing.
        """
        node = self._nodes.get(key)
        if node is None:
            self._misses += 1
            return default
        self._hits += 1
        self._order.move_to_front(node)
        return node.value

    def peek(self, key: K, default=NOT_FOUND) -> Union[V, _Missing]:
        """Get item from cache without touching its recency."""
        node = self._nodes.get(key)
        if node is None:
            return default
        return node.value

    def put(self, key: K, value: V) -> None:
        """Add or update item, marking it most recently used.

        A new key arriving while the cache is full evicts the least
        recently used entry first. The eviction observer, if any, runs once
        the cache is consistent again.

        Args:
            key: Key to add.
            value: Value to add.
        """
        node = self._nodes.get(key)
        if node is not None:
            node.value = value
            self._order.move_to_front(node)
            return

        evicted = None
        if len(self._nodes) >= self._capacity:
            evicted = self._order.pop_back()
            del self._nodes[evicted.key]
            self._evictions += 1
            logger.debug(f"Evicted least recently used key {evicted.key!r}")

        node = Node(key, value)
        self._nodes[key] = node
        self._order.push_front(node)

        if evicted is not None and self._on_evict is not None:
            self._on_evict(evicted.key, evicted.value)

    def remove(self, key: K, default=NOT_FOUND) -> Union[V, _Missing]:
        """Remove item from cache.

        Args:
            key: Key to remove.
            default: Returned when the key is absent.

        Returns: Removed value if it existed, `default` otherwise.
        """
        node = self._nodes.pop(key, None)
        if node is None:
            return default
        self._order.unlink(node)
        logger.debug(f"Removed key {key!r}")
        return node.value

    def popitem(self) -> Tuple[K, V]:
        """Remove and return the least recently used `(key, value)` pair.

        Raises:
            KeyError: If the cache is empty.
        """
        if not self._nodes:
            raise KeyError("popitem(): cache is empty")
        node = self._order.pop_back()
        del self._nodes[node.key]
        return node.key, node.value

    def clear(self) -> None:
        """Drop every entry. Hit, miss and eviction counters are kept."""
        self._nodes.clear()
        self._order.clear()
        logger.debug("Cleared LRU cache")

    def keys(self) -> List[K]:
        """Keys from most to least recently used."""
        return [node.key for node in self._order]

    def items(self) -> List[Tuple[K, V]]:
        """`(key, value)` pairs from most to least recently used."""
        return [(node.key, node.value) for node in self._order]

    def stats(self) -> CacheStats:
        return CacheStats(
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions,
            size=len(self._nodes),
            capacity=self._capacity,
        )

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"size={len(self._nodes)})"
        )
