from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class Position(BaseModel):
    """Open position listing with its required skills."""

    id: str
    title: str
    requirements: tuple[str, ...] = ()

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("requirements", mode="before")
    @classmethod
    def _default_requirements(cls, value: object) -> object:
        return () if value is None else value
