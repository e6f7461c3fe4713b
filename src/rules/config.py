from __future__ import annotations

from pathlib import Path
from typing import Any

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

from parse.charclass import IdentifierPolicy
from parse.directives import KeywordSet
from parse.kinds import KindDef, configure_kinds

CONFIG_FILENAME = "extags.toml"


class ScannerConfig(BaseModel):
    """Scanner variant selection."""

    model_config = ConfigDict(extra="forbid")

    identifier_policy: IdentifierPolicy = Field(
        default="predicate",
        description="'predicate' accepts ?/! in names, 'dotted' accepts '.'",
    )
    keyword_set: KeywordSet = Field(
        default="extended",
        description="'extended' adds defprotocol/defimpl to the baseline set",
    )
    scope_functions: bool = Field(
        default=True,
        description="Attribute functions to the most recent defmodule",
    )


class ExtagsConfig(BaseModel):
    """Configuration for extags artifact generation."""

    model_config = ConfigDict(extra="forbid")

    output_dir: str = Field(
        default=".extags",
        description="Output directory for generated artifacts",
    )
    include: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to include (empty = all Elixir files)",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to exclude",
    )
    nested_gitignore: bool = Field(
        default=False,
        description=(
            "Enable nested .gitignore composition (default: false for root-only)"
        ),
    )
    scanner: ScannerConfig = Field(
        default_factory=ScannerConfig,
        description="Scanner variant selection",
    )
    kinds: dict[str, bool] = Field(
        default_factory=dict,
        description="Enable/disable kinds by name or letter",
    )

    @field_validator("kinds", mode="before")
    @classmethod
    def validate_kinds(cls, v: Any) -> Any:
        """Validate that kind keys name a known kind.

        Note: this runs in `mode="before"` so we can report a clear error
        message using the raw TOML values.
        """

        if v is None:
            return {}

        if not isinstance(v, dict):
            msg = "kinds must be a mapping of kind -> bool"
            raise TypeError(msg)

        for key, flag in v.items():
            if not isinstance(key, str) or not isinstance(flag, bool):
                msg = "kinds must be a mapping of str -> bool"
                raise TypeError(msg)

        # Raises ValueError naming the valid kinds.
        configure_kinds(v)
        return v

    def kind_table(self) -> tuple[KindDef, ...]:
        """Build the effective kind table for a scan."""
        return configure_kinds(self.kinds)


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def resolve_output_dir(root: Path, output_dir: str) -> Path:
    """Resolve a config-provided output_dir safely within the repo root.

    The config output_dir must be a non-empty relative path that remains
    within the repository root after resolution. Absolute paths and paths
    that escape the root are rejected.
    """
    if not output_dir:
        msg = "output_dir must be a non-empty relative path"
        raise ConfigError(msg)

    if output_dir.startswith("~"):
        msg = "output_dir must be a relative path within the repo root"
        raise ConfigError(msg)

    output_path = Path(output_dir)
    if output_path.is_absolute():
        msg = "output_dir must be a relative path within the repo root"
        raise ConfigError(msg)

    try:
        resolved_root = root.resolve()
        resolved_output = (resolved_root / output_path).resolve()
    except OSError as exc:
        msg = f"Failed to resolve output_dir '{output_dir}': {exc}"
        raise ConfigError(msg) from exc

    try:
        resolved_output.relative_to(resolved_root)
    except ValueError as exc:
        msg = f"output_dir '{output_dir}' escapes the repository root"
        raise ConfigError(msg) from exc

    return resolved_output


def load_config(root: Path) -> ExtagsConfig:
    """Load configuration from extags.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return ExtagsConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return ExtagsConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
