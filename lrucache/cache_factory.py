import logging
from typing import Optional

import pydantic

from lrucache import config
from lrucache.lru_cache import EvictionCallback, InvalidConfiguration, LRUCache
from lrucache.thread_safe import ThreadSafeLRUCache

logger = logging.getLogger(__name__)


def build_cache(
    capacity: Optional[int] = None,
    thread_safe: Optional[bool] = None,
    on_evict: Optional[EvictionCallback] = None,
) -> LRUCache:
    """Build a cache, taking unspecified options from the environment config.

    Args:
        capacity: Maximum number of entries. Defaults to LRU_CACHE_CAPACITY.
        thread_safe: Whether to guard operations with a lock. Defaults to
            LRU_CACHE_THREAD_SAFE.
        on_evict: Optional observer for capacity evictions.

    Returns: A new LRUCache, or ThreadSafeLRUCache if thread safety is on.

    Raises:
        InvalidConfiguration: If the configured values cannot be parsed or the
            resolved capacity is not a positive integer.
    """
    if config.Config.Constants is None:
        try:
            config.Config.init()
        except pydantic.ValidationError as e:
            raise InvalidConfiguration(f"Invalid cache configuration: {e}") from e
    constants = config.Config.Constants

    if capacity is None:
        capacity = constants.LRU_CACHE_CAPACITY
    if thread_safe is None:
        thread_safe = constants.LRU_CACHE_THREAD_SAFE

    cache_cls = ThreadSafeLRUCache if thread_safe else LRUCache
    logger.info(f"Building {cache_cls.__name__} with capacity {capacity}")
    return cache_cls(capacity, on_evict=on_evict)
