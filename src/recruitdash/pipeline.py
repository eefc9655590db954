"""Snapshot loading, dashboard assembly and report output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, TypeVar

import pendulum
import structlog
from pydantic import BaseModel, ValidationError

from .core import DashboardCore, DashboardView
from .schemas import Candidate, Interview, Position, Snapshot
from . import __version__

ModelT = TypeVar("ModelT", bound=BaseModel)


class SnapshotLoadError(ValueError):
    """Raised when some snapshot records fail validation."""

    def __init__(self, errors: list[str], partial: Snapshot):
        super().__init__("Snapshot loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Snapshot loading failed: {self.errors}"


class SnapshotLoader:
    """Load candidate, position and interview collections from disk.

    ``.jsonl`` files hold one record per line; anything else must be a JSON
    array. Invalid records are skipped and reported together.
    """

    def load(
        self,
        *,
        candidates_path: Path,
        positions_path: Path,
        interviews_path: Path,
    ) -> Snapshot:
        errors: list[str] = []
        candidates = self._load_records(candidates_path, Candidate, errors)
        positions = self._load_records(positions_path, Position, errors)
        interviews = self._load_records(interviews_path, Interview, errors)
        snapshot = Snapshot(
            candidates=tuple(candidates),
            positions=tuple(positions),
            interviews=tuple(interviews),
        )
        if errors:
            raise SnapshotLoadError(errors, snapshot)
        return snapshot

    def _load_records(
        self,
        path: Path,
        model: type[ModelT],
        errors: list[str],
    ) -> list[ModelT]:
        records: list[ModelT] = []
        for location, raw in self._read_raw(path, errors):
            try:
                records.append(model.model_validate(raw))
            except ValidationError as exc:
                errors.append(
                    f"{path.name} {location}: invalid {model.__name__} "
                    f"({exc.error_count()} errors: {_first_error(exc)})"
                )
        return records

    @staticmethod
    def _read_raw(path: Path, errors: list[str]) -> list[tuple[str, Any]]:
        if path.suffix == ".jsonl":
            items: list[tuple[str, Any]] = []
            with path.open("r", encoding="utf-8") as handle:
                for idx, line in enumerate(handle, start=1):
                    raw = line.strip()
                    if not raw:
                        continue
                    try:
                        items.append((f"line {idx}", json.loads(raw)))
                    except json.JSONDecodeError as exc:
                        errors.append(f"{path.name} line {idx}: invalid JSON ({exc})")
            return items

        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
        if not isinstance(data, list):
            raise ValueError(f"{path} must contain a JSON array of records")
        return [(f"item {idx}", item) for idx, item in enumerate(data, start=1)]


class OutputWriter:
    """Persist dashboard reports."""

    def write(self, path: Path, payload: dict) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, allow_nan=False),
            encoding="utf-8",
        )


class DashboardPipeline:
    """Load a snapshot, build every view and write the report."""

    def __init__(
        self,
        *,
        core: DashboardCore,
        loader: SnapshotLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._core = core
        self._loader = loader or SnapshotLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        candidates_path: Path,
        positions_path: Path,
        interviews_path: Path,
        output_path: Path,
    ) -> dict[str, Any]:
        with structlog.contextvars.bound_contextvars(
            candidates_path=str(candidates_path),
            positions_path=str(positions_path),
            interviews_path=str(interviews_path),
        ):
            return self._run(
                candidates_path=candidates_path,
                positions_path=positions_path,
                interviews_path=interviews_path,
                output_path=output_path,
            )

    def _run(
        self,
        *,
        candidates_path: Path,
        positions_path: Path,
        interviews_path: Path,
        output_path: Path,
    ) -> dict[str, Any]:
        load_errors: list[str] = []
        try:
            snapshot = self._loader.load(
                candidates_path=candidates_path,
                positions_path=positions_path,
                interviews_path=interviews_path,
            )
        except SnapshotLoadError as exc:
            snapshot = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("snapshot.partial_load", errors=exc.errors)

        view = self._core.build(snapshot)
        dashboard = serialize_dashboard(view)

        self._logger.info(
            "dashboard.built",
            candidates=len(snapshot.candidates),
            positions=len(snapshot.positions),
            interviews=len(snapshot.interviews),
            upcoming=len(view.upcoming_interviews),
            positions_with_gaps=sum(1 for gap in view.skill_gaps if gap.missing_skills),
        )

        payload = {
            "metadata": {
                "candidate_count": len(snapshot.candidates),
                "position_count": len(snapshot.positions),
                "interview_count": len(snapshot.interviews),
                "errors": load_errors,
                "timestamp": pendulum.now().to_iso8601_string(),
                "app_version": __version__,
            },
            "dashboard": dashboard,
        }
        self._writer.write(output_path, payload)
        return payload


def serialize_dashboard(view: DashboardView) -> dict[str, Any]:
    """Convert a view into JSON-ready primitives.

    Candidates inside experience buckets are referenced by id. An empty pool
    has no average, which is written as ``null``.
    """
    summary = view.summary
    return {
        "summary": {
            "total": summary.total,
            "pending": summary.pending,
            "accepted": summary.accepted,
            "rejected": summary.rejected,
            "avg_experience": summary.avg_experience if summary.has_average else None,
        },
        "recent_applications": [_dump(c) for c in view.recent_applications],
        "upcoming_interviews": [
            {
                **_dump(entry.interview),
                "candidate_name": entry.candidate_name,
                "candidate_found": entry.candidate_found,
            }
            for entry in view.upcoming_interviews
        ],
        "skill_gaps": [
            {
                "position_id": gap.position.id,
                "position": gap.position.title,
                "missing_skills": list(gap.missing_skills),
                "matching_candidates": gap.matching_candidates,
                "match_rate": gap.match_rate,
            }
            for gap in view.skill_gaps
        ],
        "experience_buckets": {
            label: [c.id for c in members]
            for label, members in view.experience_buckets.items()
        },
        "experience_distribution": dict(view.experience_distribution),
        "top_performers": [_dump(c) for c in view.top_performers],
    }


def _dump(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json")


def _first_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    loc = ".".join(str(part) for part in first.get("loc", ())) or "record"
    return f"{loc}: {first.get('msg', 'invalid')}"
