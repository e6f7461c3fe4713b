"""Configuration rules for extags."""

from rules.config import (
    ConfigError,
    ExtagsConfig,
    ScannerConfig,
    load_config,
    resolve_output_dir,
)

__all__ = [
    "ConfigError",
    "ExtagsConfig",
    "ScannerConfig",
    "load_config",
    "resolve_output_dir",
]
