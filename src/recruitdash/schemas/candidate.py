from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

Timestamp = str | datetime | None


class CandidateStatus(str, Enum):
    """Application review status.

    Values the dashboard does not know yet map to ``OTHER``; matching is
    case-sensitive, so ``"Pending"`` is ``OTHER`` as well.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> CandidateStatus:
        return cls.OTHER


class Candidate(BaseModel):
    """Read-only CV record as stored by the data layer."""

    id: str
    applicant_name: str = Field(min_length=1)
    status: CandidateStatus
    years_experience: float = Field(ge=0, allow_inf_nan=False)
    skills: tuple[str, ...] = ()
    application_date: Timestamp = None
    created_at: Timestamp = None
    requirements_match: float | None = Field(default=None, allow_inf_nan=False)
    avatar_url: str | None = None
    current_job_title: str | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("skills", mode="before")
    @classmethod
    def _default_skills(cls, value: object) -> object:
        return () if value is None else value

    @property
    def match_score(self) -> float:
        """Requirements match percentage, absent treated as 0."""
        return self.requirements_match or 0.0
