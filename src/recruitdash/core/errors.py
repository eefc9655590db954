"""Error types raised by the aggregation core."""

from __future__ import annotations


class InvalidConfigurationError(ValueError):
    """Raised when a caller passes an unusable limit or bucket width."""


def require_limit(limit: int, *, name: str = "limit") -> int:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidConfigurationError(f"{name} must be an integer, got {limit!r}")
    if limit < 0:
        raise InvalidConfigurationError(f"{name} must be >= 0, got {limit}")
    return limit
