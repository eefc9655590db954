"""Most recently submitted applications."""

from __future__ import annotations

from typing import Sequence

from ...schemas import Candidate
from ..errors import require_limit
from ..timeline import RECENCY_FALLBACKS, newest_first_key, resolve_timestamp


def recent_applications(candidates: Sequence[Candidate], limit: int) -> list[Candidate]:
    """Return up to ``limit`` candidates, newest application first.

    The recency timestamp is ``application_date``, falling back to
    ``created_at``. Candidates without a readable timestamp come last, and
    candidates sharing a timestamp keep their input order.
    """
    require_limit(limit)
    ranked = sorted(
        candidates,
        key=lambda candidate: newest_first_key(
            resolve_timestamp(candidate, RECENCY_FALLBACKS)
        ),
        reverse=True,
    )
    return ranked[:limit]
