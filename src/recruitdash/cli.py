"""Typer CLI entrypoint for the dashboard report."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .logging import configure_logging
from .schemas.config import AppConfig, load_config

app = typer.Typer(help="Recruitment dashboard analytics CLI.")


@app.callback()
def _root() -> None:
    """Recruitment dashboard analytics CLI."""


@app.command()
def run(
    candidates: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Candidates JSON/JSONL path."),
    positions: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Positions JSON/JSONL path."),
    interviews: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Interviews JSON/JSONL path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    """Build the dashboard report for a snapshot."""
    app_config = AppConfig()
    if config:
        with config.open("r", encoding="utf-8") as handle:
            loaded: Any = yaml.safe_load(handle) or {}
        if not isinstance(loaded, dict):
            raise typer.BadParameter("Config file must be a YAML object", param_name="config")
        try:
            app_config = load_config(loaded)
        except ValidationError as exc:
            raise typer.BadParameter(str(exc), param_name="config") from exc

    configure_logging(log_level or app_config.log_level or "INFO")

    container = create_container(settings=app_config.to_settings())
    pipeline = container.pipeline()

    payload = pipeline.run(
        candidates_path=candidates,
        positions_path=positions,
        interviews_path=interviews,
        output_path=output,
    )
    summary = payload["dashboard"]["summary"]
    typer.echo(
        f"Summarized {summary['total']} candidates across "
        f"{payload['metadata']['position_count']} positions. Results saved to {output}."
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
