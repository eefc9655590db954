"""Timestamp parsing and ordering helpers.

Records carry raw timestamps; they are parsed here so a malformed value only
degrades the record it belongs to. Anything that cannot be read resolves to
:data:`UNKNOWN`, which always orders after real timestamps.
"""

from __future__ import annotations

from datetime import datetime
from operator import attrgetter
from typing import Any, Callable, Final, Sequence

import pendulum
from pendulum.parsing.exceptions import ParserError


class _UnknownTimestamp:
    _instance: _UnknownTimestamp | None = None

    def __new__(cls) -> _UnknownTimestamp:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNKNOWN"

    def __bool__(self) -> bool:
        return False


UNKNOWN: Final = _UnknownTimestamp()

Accessor = Callable[[Any], Any]
ResolvedTimestamp = pendulum.DateTime | _UnknownTimestamp

# application_date is preferred, created_at is the fallback.
RECENCY_FALLBACKS: Final[tuple[Accessor, ...]] = (
    attrgetter("application_date"),
    attrgetter("created_at"),
)


def parse_timestamp(value: Any) -> ResolvedTimestamp:
    """Parse an ISO-8601 string or datetime, returning UNKNOWN on failure."""
    if value is None or value == "":
        return UNKNOWN
    if isinstance(value, pendulum.DateTime):
        return value
    if isinstance(value, datetime):
        return pendulum.instance(value)
    if not isinstance(value, str):
        return UNKNOWN
    text = value.strip()
    # "now" and time-only values resolve against the wall clock.
    if text.lower() == "now":
        return UNKNOWN
    try:
        parsed = pendulum.parse(text, exact=True)
    except (ValueError, TypeError, ParserError):
        return UNKNOWN
    if isinstance(parsed, pendulum.DateTime):
        return parsed
    if isinstance(parsed, pendulum.Date):
        return pendulum.datetime(parsed.year, parsed.month, parsed.day)
    return UNKNOWN


def resolve_timestamp(record: Any, accessors: Sequence[Accessor]) -> ResolvedTimestamp:
    """Return the first present timestamp along ``accessors``.

    Only absent values fall through; a present but malformed value resolves
    to UNKNOWN without consulting later accessors.
    """
    for accessor in accessors:
        raw = accessor(record)
        if raw is None or raw == "":
            continue
        return parse_timestamp(raw)
    return UNKNOWN


def newest_first_key(timestamp: ResolvedTimestamp) -> tuple[int, float]:
    """Sort key for descending sorts; UNKNOWN lands last."""
    if timestamp is UNKNOWN:
        return (0, 0.0)
    return (1, timestamp.timestamp())


def soonest_first_key(timestamp: ResolvedTimestamp) -> tuple[int, float]:
    """Sort key for ascending sorts; UNKNOWN lands last."""
    if timestamp is UNKNOWN:
        return (1, 0.0)
    return (0, timestamp.timestamp())
