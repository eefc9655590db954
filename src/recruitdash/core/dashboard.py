"""Dashboard view composition."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..schemas import Candidate, Snapshot
from .aggregators import (
    InterviewEntry,
    SkillGap,
    SummaryCounts,
    bucketize_experience,
    experience_distribution,
    label_interviews,
    recent_applications,
    skill_gaps,
    summarize,
    top_performers,
    upcoming_interviews,
)
from .errors import InvalidConfigurationError, require_limit


@dataclass
class AnalyticsConfig:
    """Display limits and bucketing for the dashboard views."""

    recent_limit: int = 4
    upcoming_limit: int = 4
    top_performers_limit: int = 3
    bucket_width: float = 2

    def __post_init__(self) -> None:
        require_limit(self.recent_limit, name="recent_limit")
        require_limit(self.upcoming_limit, name="upcoming_limit")
        require_limit(self.top_performers_limit, name="top_performers_limit")
        if not self.bucket_width > 0:
            raise InvalidConfigurationError(
                f"bucket_width must be > 0, got {self.bucket_width}"
            )


@dataclass(slots=True)
class DashboardView:
    """Every derived view for a single snapshot."""

    summary: SummaryCounts
    recent_applications: list[Candidate]
    upcoming_interviews: list[InterviewEntry]
    skill_gaps: list[SkillGap]
    experience_buckets: dict[str, list[Candidate]]
    experience_distribution: dict[str, int] = field(default_factory=dict)
    top_performers: list[Candidate] = field(default_factory=list)


class DashboardCore:
    """Computes the dashboard views from one snapshot."""

    def __init__(self, *, config: AnalyticsConfig | None = None) -> None:
        self._config = config or AnalyticsConfig()

    @property
    def config(self) -> AnalyticsConfig:
        return self._config

    def build(self, snapshot: Snapshot) -> DashboardView:
        candidates = snapshot.candidates
        buckets = bucketize_experience(candidates, self._config.bucket_width)
        upcoming = upcoming_interviews(snapshot.interviews, self._config.upcoming_limit)

        return DashboardView(
            summary=summarize(candidates),
            recent_applications=recent_applications(candidates, self._config.recent_limit),
            upcoming_interviews=label_interviews(upcoming, candidates),
            skill_gaps=skill_gaps(snapshot.positions, candidates),
            experience_buckets=buckets,
            experience_distribution=experience_distribution(buckets),
            top_performers=top_performers(candidates, self._config.top_performers_limit),
        )
