from __future__ import annotations


class CacheError(Exception):
    """Base error for the cache library."""


class ValidationError(CacheError):
    """Raised when construction input is invalid."""


class NotFoundError(CacheError):
    """Raised when a key is not present in the cache."""

    def __init__(self, message: str = "heapCache :: Cache not found") -> None:
        super().__init__(message)


class ExpiredError(CacheError):
    """Raised when a key is present but its TTL has elapsed."""

    def __init__(self, message: str = "heapCache :: Cache expired") -> None:
        super().__init__(message)


class NoItemsAvailableError(CacheError):
    """Raised when a sweep runs against an empty cache."""

    def __init__(self, message: str = "heapCache :: No items available") -> None:
        super().__init__(message)


class NoExpiredItemsFoundError(CacheError):
    """Raised when a sweep finds nothing to remove."""

    def __init__(self, message: str = "heapCache :: No expired items are found") -> None:
        super().__init__(message)


class HeadNotAvailableError(CacheError):
    def __init__(self, message: str = "heapCache :: head node is not available") -> None:
        super().__init__(message)


class TailNotAvailableError(CacheError):
    def __init__(self, message: str = "heapCache :: tail node is not available") -> None:
        super().__init__(message)


class IndexInconsistencyError(RuntimeError):
    """Raised when the recency order and the key lookup disagree.

    This is a broken invariant, not a cache miss, so it is kept outside the
    CacheError hierarchy.
    """
