"""Factory for selecting the eviction policy implementation.

Exposes new_cache which returns an LruCache or FifoCache according to
CacheConfig.eviction_policy, validating the configuration first.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Type

from caches.base_cache import BaseCache
from caches.fifo_cache import FifoCache
from caches.lru_cache import LruCache
from core.config import config_from_env
from core.inputs import normalize_capacity, normalize_policy, normalize_seconds
from core.interfaces import Cache
from core.models import CacheConfig, EvictionPolicy

logger = logging.getLogger(__name__)


_POLICIES: Dict[EvictionPolicy, Type[BaseCache]] = {
    EvictionPolicy.LRU: LruCache,
    EvictionPolicy.FIFO: FifoCache,
}


def new_cache(config: Optional[CacheConfig] = None) -> Cache:
    """
    Factory that returns the cache implementation for the configured policy.

    A missing config is read from the environment (see core.config).
    Unknown policies are rejected with ValidationError rather than falling
    back to LRU.
    """
    if config is None:
        config = config_from_env()

    policy = normalize_policy(config.eviction_policy)
    capacity = normalize_capacity(config.capacity)
    expire = normalize_seconds(config.expire, name="expire")

    cache_cls = _POLICIES[policy]
    cache = cache_cls(capacity=capacity, expire=expire)
    logger.info(f"Created {cache_cls.__name__} (capacity={capacity}, expire={expire})")
    return cache
