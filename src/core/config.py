"""Configuration and environment helpers for the cache library.

Provides small helpers to read typed environment variables and builds
the default CacheConfig (capacity, expiry, eviction policy) used when
the host does not pass one explicitly.
"""

from __future__ import annotations

import os

from core.inputs import normalize_policy
from core.models import DEFAULT_CAPACITY, DEFAULT_EXPIRE, CacheConfig


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def config_from_env() -> CacheConfig:
    """Build a CacheConfig from HEAPCACHE_* variables.

    - HEAPCACHE_CAPACITY: maximum number of entries (default 100)
    - HEAPCACHE_EXPIRE: default TTL in seconds, -1 for never (default 1200)
    - HEAPCACHE_EVICTION_POLICY: "lru" or "fifo" (default "lru")

    An unknown policy name raises ValidationError.
    """
    return CacheConfig(
        capacity=_env_int("HEAPCACHE_CAPACITY", DEFAULT_CAPACITY),
        expire=_env_int("HEAPCACHE_EXPIRE", DEFAULT_EXPIRE),
        eviction_policy=normalize_policy(_env_str("HEAPCACHE_EVICTION_POLICY", "lru")),
    )
