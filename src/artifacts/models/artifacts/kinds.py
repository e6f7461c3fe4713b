"""Kind table artifact model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from artifacts.models.artifacts.tags import TagKind


def _artifact_schema_version() -> int:
    from contract.artifacts import ARTIFACT_SCHEMA_VERSION

    return ARTIFACT_SCHEMA_VERSION


class KindEntry(BaseModel):
    letter: str = Field(min_length=1, max_length=1)
    name: TagKind
    description: str
    enabled: bool


class KindsArtifact(BaseModel):
    """Effective kind table and file routing for a generation run."""

    schema_version: int = Field(default_factory=_artifact_schema_version)
    parser: str
    extensions: list[str]
    kinds: list[KindEntry]


__all__ = ["KindEntry", "KindsArtifact"]
