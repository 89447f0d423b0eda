"""Immutable data model shared by every cache policy.

Defines the expiry sentinel and defaults, the eviction policy
enumeration, the stored Entry record and the CacheConfig record the
factory consumes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Union


# Sentinel for "never expires"; real expiry stamps are monotonic seconds
NO_EXPIRE = -1

DEFAULT_CAPACITY = 100
DEFAULT_EXPIRE = 1200  # 20 minutes

Seconds = Union[int, float]


class EvictionPolicy(IntEnum):
    LRU = 1
    FIFO = 2


@dataclass(frozen=True, slots=True)
class Entry:
    """A stored item.

    expire_at is either NO_EXPIRE or an absolute time.monotonic() stamp.
    """

    key: str
    value: Any
    expire_at: Seconds = NO_EXPIRE

    def is_expired(self, now: float) -> bool:
        return self.expire_at != NO_EXPIRE and now >= self.expire_at


@dataclass(frozen=True)
class CacheConfig:
    """Construction parameters for a cache.

    Field groups:
    - Size: capacity
    - Expiry: expire (seconds, or NO_EXPIRE)
    - Strategy: eviction_policy
    """

    capacity: int = DEFAULT_CAPACITY
    expire: Seconds = DEFAULT_EXPIRE
    eviction_policy: EvictionPolicy = EvictionPolicy.LRU
