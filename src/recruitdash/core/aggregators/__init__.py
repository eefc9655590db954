"""Pure aggregation functions behind the dashboard views."""

from .experience import bucketize_experience, experience_distribution
from .interviews import InterviewEntry, label_interviews, upcoming_interviews
from .performers import top_performers
from .recency import recent_applications
from .skill_gaps import SkillGap, SkillIndex, skill_gaps
from .summary import SummaryCounts, summarize

__all__ = [
    "InterviewEntry",
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
