from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .candidate import Candidate
from .interview import Interview
from .position import Position


class Snapshot(BaseModel):
    """Point-in-time copy of the three collections behind the dashboard."""

    candidates: tuple[Candidate, ...] = ()
    positions: tuple[Position, ...] = ()
    interviews: tuple[Interview, ...] = ()

    model_config = ConfigDict(frozen=True)
