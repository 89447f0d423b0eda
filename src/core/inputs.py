from __future__ import annotations

import math
from typing import Union

from core.errors import ValidationError
from core.models import NO_EXPIRE, EvictionPolicy, Seconds


_POLICY_NAMES = {policy.name.lower(): policy for policy in EvictionPolicy}


def normalize_key(key: str) -> str:
    if not isinstance(key, str):
        raise ValidationError(f"key must be a string, got {type(key).__name__}")
    return key


def normalize_capacity(capacity: int) -> int:
    # bool is an int subclass; True is not a capacity
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ValidationError("capacity must be an integer")
    if capacity <= 0:
        raise ValidationError("capacity must be positive")
    return capacity


def normalize_seconds(seconds: Seconds, *, name: str = "expire") -> Seconds:
    # Accepts NO_EXPIRE or any finite non-negative duration
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise ValidationError(f"{name} must be a number of seconds")
    if seconds == NO_EXPIRE:
        return NO_EXPIRE
    try:
        as_float = float(seconds)
    except OverflowError as e:
        raise ValidationError(f"{name} is too large") from e
    if math.isnan(as_float) or math.isinf(as_float) or seconds < 0:
        raise ValidationError(f"{name} must be non-negative or NO_EXPIRE ({NO_EXPIRE})")
    return seconds


def normalize_policy(policy: Union[EvictionPolicy, int, str]) -> EvictionPolicy:
    if isinstance(policy, EvictionPolicy):
        return policy

    if isinstance(policy, str):
        raw = policy.strip().lower()
        if raw in _POLICY_NAMES:
            return _POLICY_NAMES[raw]
        if raw.isdigit():
            policy = int(raw)

    if isinstance(policy, int) and not isinstance(policy, bool):
        try:
            return EvictionPolicy(policy)
        except ValueError:
            pass

    raise ValidationError(f"Unknown eviction policy: {policy!r}")
