"""Skill gap analysis across the whole candidate pool."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from ...schemas import Candidate, Position


@dataclass(slots=True, frozen=True)
class SkillGap:
    """Coverage of one position's requirements by the candidate pool.

    ``match_rate`` is the share of the *pool* holding at least one required
    skill, in percent. Positions without requirements always report 0.
    """

    position: Position
    missing_skills: tuple[str, ...]
    matching_candidates: int
    match_rate: float


class SkillIndex:
    """Skill -> holder count index built once per candidate pool."""

    def __init__(self, candidates: Sequence[Candidate]) -> None:
        self._skill_sets = [frozenset(candidate.skills) for candidate in candidates]
        self._holders: Counter[str] = Counter()
        for skills in self._skill_sets:
            self._holders.update(skills)

    @property
    def pool_size(self) -> int:
        return len(self._skill_sets)

    def holders(self, skill: str) -> int:
        return self._holders.get(skill, 0)

    def count_matching(self, requirements: Sequence[str]) -> int:
        """Number of candidates holding at least one of ``requirements``."""
        required = frozenset(requirements)
        if not required:
            return 0
        return sum(1 for skills in self._skill_sets if not skills.isdisjoint(required))


def skill_gaps(positions: Sequence[Position], candidates: Sequence[Candidate]) -> list[SkillGap]:
    """Per position, list unheld skills and the pool match rate.

    Output follows ``positions`` order; requirement order and duplicates are
    kept in ``missing_skills``.
    """
    index = SkillIndex(candidates)
    results: list[SkillGap] = []
    for position in positions:
        requirements = position.requirements
        missing = tuple(skill for skill in requirements if index.holders(skill) == 0)
        matching = index.count_matching(requirements)
        if requirements and index.pool_size:
            match_rate = matching / index.pool_size * 100
        else:
            match_rate = 0.0
        results.append(
            SkillGap(
                position=position,
                missing_skills=missing,
                matching_candidates=matching,
                match_rate=match_rate,
            )
        )
    return results
