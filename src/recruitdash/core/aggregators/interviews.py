"""Upcoming interview listing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ...schemas import Candidate, Interview, InterviewStatus
from ..errors import require_limit
from ..timeline import parse_timestamp, soonest_first_key

UNKNOWN_CANDIDATE_LABEL = "Unknown candidate"


@dataclass(slots=True, frozen=True)
class InterviewEntry:
    """Interview paired with the name to display for its candidate."""

    interview: Interview
    candidate_name: str
    candidate_found: bool


def upcoming_interviews(interviews: Sequence[Interview], limit: int) -> list[Interview]:
    """Scheduled interviews, soonest first, truncated to ``limit``."""
    require_limit(limit)
    scheduled = [
        interview
        for interview in interviews
        if interview.status is InterviewStatus.SCHEDULED
    ]
    scheduled.sort(key=lambda interview: soonest_first_key(parse_timestamp(interview.scheduled_at)))
    return scheduled[:limit]


def label_interviews(
    interviews: Iterable[Interview],
    candidates: Iterable[Candidate],
) -> list[InterviewEntry]:
    names = {candidate.id: candidate.applicant_name for candidate in candidates}
    entries: list[InterviewEntry] = []
    for interview in interviews:
        name = names.get(interview.candidate_id)
        found = name is not None
        if name is None:
            name = interview.candidate_name or UNKNOWN_CANDIDATE_LABEL
        entries.append(
            InterviewEntry(interview=interview, candidate_name=name, candidate_found=found)
        )
    return entries
