from __future__ import annotations

from caches.base_cache import BaseCache


class FifoCache(BaseCache):
    """First-in-first-out cache.

    Reads never reorder entries, so get() only takes the shared lock. A
    write, including an overwrite of an existing key, counts as a fresh
    insertion and moves the entry to the front.
    """

    promote_on_read = False
