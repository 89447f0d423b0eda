from __future__ import annotations

from caches.base_cache import BaseCache


class LruCache(BaseCache):
    """Least-recently-used cache.

    Every successful get, set and set_with_expire moves the entry to the
    front; when full, the entry touched longest ago is evicted.
    """

    promote_on_read = True
