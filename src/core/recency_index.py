"""Recency-ordered key index.

Keeps the ordered sequence of entries and the key lookup as a single
OrderedDict: a hash map whose slots are threaded on a doubly linked list.
The end of the OrderedDict is the front of the sequence (most recently
touched); the beginning is the back (next eviction candidate).
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Iterator, Optional

from core.errors import IndexInconsistencyError
from core.models import Entry


class RecencyIndex:
    # Not thread-safe; the owning cache serializes access.
    def __init__(self) -> None:
        self._entries: "OrderedDict[str, Entry]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[Entry]:
        # Most recent first
        return reversed(self._entries.values())

    def lookup(self, key: str) -> Optional[Entry]:
        return self._entries.get(key)

    def push_front(self, entry: Entry) -> None:
        if entry.key in self._entries:
            raise IndexInconsistencyError(f"Key already indexed: {entry.key!r}")
        self._entries[entry.key] = entry

    def replace(self, entry: Entry) -> None:
        # Swap the stored record without changing its position
        if entry.key not in self._entries:
            raise IndexInconsistencyError(f"Key not indexed: {entry.key!r}")
        self._entries[entry.key] = entry

    def move_to_front(self, key: str) -> None:
        try:
            self._entries.move_to_end(key, last=True)
        except KeyError as e:
            raise IndexInconsistencyError(f"Key not indexed: {key!r}") from e

    def remove(self, key: str) -> Entry:
        try:
            return self._entries.pop(key)
        except KeyError as e:
            raise IndexInconsistencyError(f"Key not indexed: {key!r}") from e

    def pop_back(self) -> Entry:
        if not self._entries:
            raise IndexInconsistencyError("pop_back() on an empty index")
        _, entry = self._entries.popitem(last=False)
        return entry

    def front(self) -> Optional[Entry]:
        if not self._entries:
            return None
        return next(reversed(self._entries.values()))

    def back(self) -> Optional[Entry]:
        if not self._entries:
            return None
        return next(iter(self._entries.values()))
