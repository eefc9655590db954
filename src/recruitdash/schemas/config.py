"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AnalyticsSettings(BaseModel):
    recent_limit: int | None = Field(default=None, ge=0)
    upcoming_limit: int | None = Field(default=None, ge=0)
    top_performers_limit: int | None = Field(default=None, ge=0)
    bucket_width: float | None = Field(default=None, gt=0)

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    analytics: AnalyticsSettings = Field(default_factory=AnalyticsSettings)
    log_level: str | None = None

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        analytics = self.analytics.model_dump(exclude_none=True)
        if analytics:
            settings["analytics"] = analytics
        return settings


def load_config(raw: Any) -> AppConfig:
    """Validate a raw YAML document; non-mappings fail as a ValidationError."""
    return AppConfig.model_validate(raw)
