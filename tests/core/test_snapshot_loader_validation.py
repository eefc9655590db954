from __future__ import annotations

import json
from pathlib import Path

import pytest

from recruitdash.core import DashboardCore
from recruitdash.pipeline import SnapshotLoadError, SnapshotLoader


def write_json(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


def write_jsonl(path: Path, lines: list[str]) -> Path:
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def candidate_row(candidate_id: str, **kwargs: object) -> dict:
    row: dict = {
        "id": candidate_id,
        "applicant_name": f"Applicant {candidate_id}",
        "status": "pending",
        "years_experience": 2,
    }
    row.update(kwargs)
    return row


def test_snapshot_loader_reads_json_and_jsonl(tmp_path: Path):
    candidates = write_jsonl(
        tmp_path / "cvs.jsonl",
        [
            json.dumps(candidate_row("CV-1", skills=["Go"])),
            "",
            json.dumps(candidate_row("CV-2", years_experience=4)),
        ],
    )
    positions = write_json(tmp_path / "positions.json", [{"id": "P-1", "title": "Eng", "requirements": ["Go"]}])
    interviews = write_json(tmp_path / "interviews.json", [])

    snapshot = SnapshotLoader().load(
        candidates_path=candidates,
        positions_path=positions,
        interviews_path=interviews,
    )

    assert [c.id for c in snapshot.candidates] == ["CV-1", "CV-2"]
    assert snapshot.positions[0].requirements == ("Go",)
    assert snapshot.interviews == ()


def test_snapshot_loader_skips_invalid_records_and_reports(tmp_path: Path):
    candidates = write_jsonl(
        tmp_path / "cvs.jsonl",
        [
            json.dumps(candidate_row("CV-1")),
            "{invalid",
            json.dumps(candidate_row("CV-3", years_experience=-2)),
        ],
    )
    positions = write_json(tmp_path / "positions.json", [{"title": "No id"}])
    interviews = write_json(
        tmp_path / "interviews.json",
        [{"id": "I-1", "candidate_id": "CV-404", "status": "scheduled", "scheduled_at": "2024-01-01"}],
    )

    with pytest.raises(SnapshotLoadError) as exc:
        SnapshotLoader().load(
            candidates_path=candidates,
            positions_path=positions,
            interviews_path=interviews,
        )

    error = exc.value
    assert len(error.errors) == 3
    assert "line 2: invalid JSON" in error.errors[0]
    assert "line 3: invalid Candidate" in error.errors[1]
    assert "item 1: invalid Position" in error.errors[2]
    assert [c.id for c in error.partial.candidates] == ["CV-1"]
    assert len(error.partial.interviews) == 1


def test_snapshot_loader_skips_infinite_numbers_and_still_builds(tmp_path: Path):
    candidates = write_jsonl(
        tmp_path / "cvs.jsonl",
        [
            json.dumps(candidate_row("CV-1", years_experience=3)),
            '{"id": "CV-2", "applicant_name": "Inf", "status": "accepted", "years_experience": Infinity}',
            json.dumps(candidate_row("CV-3", status="accepted", requirements_match=float("inf"))),
        ],
    )
    empty = write_json(tmp_path / "empty.json", [])

    with pytest.raises(SnapshotLoadError) as exc:
        SnapshotLoader().load(candidates_path=candidates, positions_path=empty, interviews_path=empty)

    error = exc.value
    assert len(error.errors) == 2
    assert "line 2: invalid Candidate" in error.errors[0]
    assert "line 3: invalid Candidate" in error.errors[1]

    view = DashboardCore().build(error.partial)
    assert view.summary.total == 1
    assert view.experience_distribution == {"2-4 years": 1}


def test_snapshot_loader_reports_records_missing_status_or_experience(tmp_path: Path):
    candidates = write_json(
        tmp_path / "cvs.json",
        [
            candidate_row("CV-1"),
            {"id": "CV-2", "applicant_name": "No status", "years_experience": 1},
            {"id": "CV-3", "applicant_name": "No experience", "status": "pending"},
        ],
    )
    positions = write_json(tmp_path / "positions.json", [])
    interviews = write_json(
        tmp_path / "interviews.json",
        [{"id": "I-1", "candidate_id": "CV-1", "scheduled_at": "2024-01-01"}],
    )

    with pytest.raises(SnapshotLoadError) as exc:
        SnapshotLoader().load(
            candidates_path=candidates,
            positions_path=positions,
            interviews_path=interviews,
        )

    error = exc.value
    assert len(error.errors) == 3
    assert "item 2: invalid Candidate" in error.errors[0]
    assert "status" in error.errors[0]
    assert "item 3: invalid Candidate" in error.errors[1]
    assert "years_experience" in error.errors[1]
    assert "item 1: invalid Interview" in error.errors[2]
    assert [c.id for c in error.partial.candidates] == ["CV-1"]
    assert error.partial.interviews == ()


@pytest.mark.parametrize("content", ["{invalid", '{"id": "CV-1"}'])
def test_snapshot_loader_rejects_unreadable_json_files(tmp_path: Path, content: str):
    bad = tmp_path / "cvs.json"
    bad.write_text(content, encoding="utf-8")
    empty = write_json(tmp_path / "empty.json", [])

    with pytest.raises(ValueError):
        SnapshotLoader().load(candidates_path=bad, positions_path=empty, interviews_path=empty)
