from __future__ import annotations

import math
from typing import Any

import pytest

from recruitdash.core import summarize
from recruitdash.schemas import Candidate


def build_candidate(**kwargs: Any) -> Candidate:
    defaults: dict[str, Any] = {
        "id": f"CV-{kwargs.get('years_experience', 0)}",
        "applicant_name": "Jordan Lee",
        "status": "pending",
        "years_experience": 2,
    }
    defaults.update(kwargs)
    return Candidate(**defaults)


def test_summarize_counts_statuses_and_average():
    candidates = [
        build_candidate(years_experience=1, status="accepted"),
        build_candidate(years_experience=5, status="pending"),
        build_candidate(years_experience=3, status="accepted"),
    ]

    summary = summarize(candidates)

    assert summary.total == 3
    assert summary.pending == 1
    assert summary.accepted == 2
    assert summary.rejected == 0
    assert summary.avg_experience == pytest.approx(3.0)
    assert summary.has_average is True


def test_summarize_empty_pool_has_no_average():
    summary = summarize([])

    assert summary.total == 0
    assert summary.pending == 0
    assert summary.accepted == 0
    assert math.isnan(summary.avg_experience)
    assert summary.has_average is False


def test_summarize_status_match_is_case_sensitive():
    candidates = [
        build_candidate(status="Pending"),
        build_candidate(status="ACCEPTED"),
        build_candidate(status="rejected"),
    ]

    summary = summarize(candidates)

    assert summary.total == 3
    assert summary.pending == 0
    assert summary.accepted == 0
    assert summary.rejected == 1
