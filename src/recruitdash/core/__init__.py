"""Dashboard analytics core."""

from __future__ import annotations

from .aggregators import (
    InterviewEntry,
    SkillGap,
    SkillIndex,
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
from .dashboard import AnalyticsConfig, DashboardCore, DashboardView
from .errors import InvalidConfigurationError

__all__ = [
    "AnalyticsConfig",
    "DashboardCore",
    "DashboardView",
    "InterviewEntry",
    "InvalidConfigurationError",
    "SkillGap",
    "SkillIndex",
    "SummaryCounts",
    "bucketize_experience",
    "experience_distribution",
    "label_interviews",
    "recent_applications",
    "skill_gaps",
    "summarize",
    "top_performers",
    "upcoming_interviews",
]
