"""Highest rated accepted candidates."""

from __future__ import annotations

from typing import Sequence

from ...schemas import Candidate, CandidateStatus
from ..errors import require_limit

DEFAULT_TOP_PERFORMERS = 3


def top_performers(
    candidates: Sequence[Candidate],
    limit: int = DEFAULT_TOP_PERFORMERS,
) -> list[Candidate]:
    """Accepted candidates by requirements match, best first.

    A missing ``requirements_match`` counts as 0; equal scores keep input order.
    """
    require_limit(limit)
    accepted = [c for c in candidates if c.status is CandidateStatus.ACCEPTED]
    accepted.sort(key=lambda candidate: candidate.match_score, reverse=True)
    return accepted[:limit]
