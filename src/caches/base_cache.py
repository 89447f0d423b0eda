"""Shared engine behind every eviction policy.

Owns the recency index, the capacity and default expiry, and one
reader-writer lock guarding the index as a single unit. Policies only
decide whether a successful read reorders the index.

Expiry is lazy on reads (get/get_all report but never remove expired
entries) and active on delete_expired(), which the host calls as often as
it likes. Capacity eviction ignores expiry: the back entry goes first.
"""

from __future__ import annotations

import logging
import time
from contextlib import AbstractContextManager
from typing import Any, Dict

from core.errors import (
    ExpiredError,
    HeadNotAvailableError,
    NoExpiredItemsFoundError,
    NoItemsAvailableError,
    NotFoundError,
    TailNotAvailableError,
)
from core.inputs import normalize_capacity, normalize_key, normalize_seconds
from core.locks import ReadWriteLock
from core.models import DEFAULT_CAPACITY, DEFAULT_EXPIRE, NO_EXPIRE, Entry, Seconds
from core.recency_index import RecencyIndex

logger = logging.getLogger(__name__)


class BaseCache:
    # Subclasses set this; True means get() promotes and needs the write lock
    promote_on_read: bool = False

    def __init__(self, *, capacity: int = DEFAULT_CAPACITY, expire: Seconds = DEFAULT_EXPIRE) -> None:
        self._capacity = normalize_capacity(capacity)
        self._expire = normalize_seconds(expire, name="expire")
        self._index = RecencyIndex()
        self._lock = ReadWriteLock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def expire(self) -> Seconds:
        return self._expire

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"expire={self._expire}, count={len(self._index)})"
        )

    def _lock_for_get(self) -> AbstractContextManager:
        if self.promote_on_read:
            return self._lock.write_locked()
        return self._lock.read_locked()

    def get(self, key: str) -> Any:
        key = normalize_key(key)
        with self._lock_for_get():
            entry = self._index.lookup(key)
            if entry is None:
                raise NotFoundError()

            if entry.is_expired(time.monotonic()):
                # Lazy expiry: report, leave removal to delete_expired()
                raise ExpiredError()

            if self.promote_on_read:
                self._index.move_to_front(key)
            return entry.value

    def set(self, key: str, value: Any) -> None:
        self._set(normalize_key(key), value, self._expire_at(self._expire))

    def set_with_expire(self, key: str, value: Any, ttl: Seconds) -> None:
        ttl = normalize_seconds(ttl, name="ttl")
        self._set(normalize_key(key), value, self._expire_at(ttl))

    def get_all(self) -> Dict[str, Any]:
        with self._lock.read_locked():
            now = time.monotonic()
            return {e.key: e.value for e in self._index if not e.is_expired(now)}

    def count(self) -> int:
        # Includes expired entries that have not been swept yet
        with self._lock.read_locked():
            return len(self._index)

    def delete(self, key: str) -> None:
        key = normalize_key(key)
        with self._lock.write_locked():
            if key not in self._index:
                raise NotFoundError()
            self._index.remove(key)
        logger.debug(f"Deleted key: {key}")

    def delete_expired(self) -> int:
        with self._lock.write_locked():
            if len(self._index) == 0:
                raise NoItemsAvailableError()

            now = time.monotonic()
            expired = [e.key for e in self._index if e.is_expired(now)]
            for key in expired:
                self._index.remove(key)

        if not expired:
            raise NoExpiredItemsFoundError()

        logger.info(f"heapCache :: {len(expired)} item(s) are deleted")
        return len(expired)

    def head(self) -> Entry:
        with self._lock.read_locked():
            entry = self._index.front()
        if entry is None:
            raise HeadNotAvailableError()
        return entry

    def tail(self) -> Entry:
        with self._lock.read_locked():
            entry = self._index.back()
        if entry is None:
            raise TailNotAvailableError()
        return entry

    def _expire_at(self, seconds: Seconds) -> Seconds:
        if seconds == NO_EXPIRE:
            return NO_EXPIRE
        return time.monotonic() + seconds

    def _set(self, key: str, value: Any, expire_at: Seconds) -> None:
        entry = Entry(key=key, value=value, expire_at=expire_at)

        with self._lock.write_locked():
            if key in self._index:
                # Overwrite never changes size, so no capacity check
                self._index.replace(entry)
                self._index.move_to_front(key)
                return

            evicted = None
            if len(self._index) >= self._capacity:
                # Evict the back entry whether or not it has expired
                evicted = self._index.pop_back()
            self._index.push_front(entry)

        if evicted is not None:
            logger.debug(f"Evicted key: {evicted.key} (capacity={self._capacity})")
