"""Pydantic schema definitions for dashboard records."""

from __future__ import annotations

from .candidate import Candidate, CandidateStatus
from .interview import Interview, InterviewStatus
from .position import Position
from .snapshot import Snapshot

__all__ = [
    "Candidate",
    "CandidateStatus",
    "Interview",
    "InterviewStatus",
    "Position",
    "Snapshot",
]
