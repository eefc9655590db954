"""Headline counts for the candidate pool."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ...schemas import Candidate, CandidateStatus


@dataclass(slots=True, frozen=True)
class SummaryCounts:
    """Pool totals.

    ``avg_experience`` is ``nan`` for an empty pool; check ``has_average``
    before displaying it.
    """

    total: int
    pending: int
    accepted: int
    rejected: int
    avg_experience: float

    @property
    def has_average(self) -> bool:
        return not math.isnan(self.avg_experience)


def summarize(candidates: Sequence[Candidate]) -> SummaryCounts:
    total = len(candidates)
    pending = sum(1 for c in candidates if c.status is CandidateStatus.PENDING)
    accepted = sum(1 for c in candidates if c.status is CandidateStatus.ACCEPTED)
    rejected = sum(1 for c in candidates if c.status is CandidateStatus.REJECTED)
    if total:
        avg_experience = sum(c.years_experience for c in candidates) / total
    else:
        avg_experience = math.nan
    return SummaryCounts(
        total=total,
        pending=pending,
        accepted=accepted,
        rejected=rejected,
        avg_experience=avg_experience,
    )
