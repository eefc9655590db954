"""Experience band grouping."""

from __future__ import annotations

import math
from typing import Mapping, Sequence

from ...schemas import Candidate
from ..errors import InvalidConfigurationError

DEFAULT_BUCKET_WIDTH = 2


def bucket_bounds(years: float, bucket_width: float) -> tuple[float, float]:
    lower = math.floor(years / bucket_width) * bucket_width
    return lower, lower + bucket_width


def bucket_label(lower: float, upper: float) -> str:
    return f"{_format_bound(lower)}-{_format_bound(upper)} years"


def _format_bound(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def bucketize_experience(
    candidates: Sequence[Candidate],
    bucket_width: float = DEFAULT_BUCKET_WIDTH,
) -> dict[str, list[Candidate]]:
    """Group candidates into ``"{lower}-{upper} years"`` bands.

    Keys appear in the order their first candidate appears. Fractional years
    floor into the containing band, so 3.9 years at width 2 is "2-4 years".
    """
    if isinstance(bucket_width, bool) or not isinstance(bucket_width, (int, float)):
        raise InvalidConfigurationError(f"bucket_width must be a number, got {bucket_width!r}")
    if not bucket_width > 0:
        raise InvalidConfigurationError(f"bucket_width must be > 0, got {bucket_width}")

    buckets: dict[str, list[Candidate]] = {}
    for candidate in candidates:
        years = max(candidate.years_experience, 0.0)
        label = bucket_label(*bucket_bounds(years, bucket_width))
        buckets.setdefault(label, []).append(candidate)
    return buckets


def experience_distribution(buckets: Mapping[str, Sequence[Candidate]]) -> dict[str, int]:
    """Candidate count per band, keeping band order."""
    return {label: len(members) for label, members in buckets.items()}
