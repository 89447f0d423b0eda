"""Core protocol and interface definitions.

Defines the Cache protocol every eviction policy implements, and the
narrower CacheInspector protocol for diagnostics that production
callers should not depend on.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol

from core.models import Entry, Seconds


class Cache(Protocol):
    """Contract for any eviction policy (LRU, FIFO, etc.)."""
    def get(self, key: str) -> Any:
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def set_with_expire(self, key: str, value: Any, ttl: Seconds) -> None:
        ...

    def get_all(self) -> Dict[str, Any]:
        ...

    def count(self) -> int:
        ...

    def delete(self, key: str) -> None:
        ...

    def delete_expired(self) -> int:
        ...


class CacheInspector(Protocol):
    """Diagnostics view: most and least recently ranked entries."""
    def head(self) -> Entry:
        ...

    def tail(self) -> Entry:
        ...
