"""Tag models for Elixir source artifacts.

This module contains models for representing tags extracted from Elixir
source files (macros, functions, modules, records, protocols and protocol
implementations).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


def _artifact_schema_version() -> int:
    from contract.artifacts import ARTIFACT_SCHEMA_VERSION

    return ARTIFACT_SCHEMA_VERSION


TagKind = Literal[
    "macro", "function", "module", "record", "protocol", "implementation"
]

ScopeKind = Literal["module"]


class TagScope(BaseModel):
    """The enclosing module a tag is attributed to."""

    model_config = ConfigDict(frozen=True)

    kind: ScopeKind = "module"
    name: str = Field(min_length=1)


class TagRecord(BaseModel):
    """A tag extracted from an Elixir source file."""

    schema_version: int = Field(default_factory=_artifact_schema_version)
    path: str
    name: str = Field(min_length=1)
    kind: TagKind
    line: int = Field(ge=1, description="1-based line of the directive")
    scope: TagScope | None = Field(
        default=None, description="Enclosing module (scope-aware scans only)"
    )


__all__ = ["ScopeKind", "TagKind", "TagRecord", "TagScope"]
