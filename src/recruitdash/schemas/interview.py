from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .candidate import Timestamp


class InterviewStatus(str, Enum):
    """Interview lifecycle status; unknown values map to ``OTHER``."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> InterviewStatus:
        return cls.OTHER


class Interview(BaseModel):
    """Interview slot referencing a candidate by id."""

    id: str
    candidate_id: str
    status: InterviewStatus
    scheduled_at: Timestamp = None
    candidate_name: str | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _lift_joined_name(cls, data: Any) -> Any:
        # Rows joined with ``cvs(applicant_name)`` carry the name in a nested object.
        if isinstance(data, dict) and not data.get("candidate_name"):
            joined = data.get("cvs")
            if isinstance(joined, dict) and joined.get("applicant_name"):
                data = {**data, "candidate_name": joined["applicant_name"]}
        return data

    @field_validator("id", "candidate_id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        if isinstance(value, int):
            return str(value)
        return value
