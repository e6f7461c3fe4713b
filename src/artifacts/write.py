from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from artifacts.generators import KindsGenerator, TagsGenerator
from contract.artifacts import KINDS_JSON, TAGS_FILE, TAGS_JSONL
from rules.config import load_config, resolve_output_dir

if TYPE_CHECKING:
    from pathlib import Path

    from rules.config import ExtagsConfig

logger = logging.getLogger(__name__)


def generate_all_artifacts(
    *,
    root: Path,
    out_dir: Path | None = None,
    config: ExtagsConfig | None = None,
) -> dict[str, object]:
    """Generate tag artifacts for a repository.

    Args:
        root: Root directory of the repository to scan
        out_dir: Optional output directory for generated artifacts
        config: Optional configuration; loaded from extags.toml when omitted

    Returns:
        Dictionary with counts and list of generated artifact paths.
    """
    if config is None:
        config = load_config(root)

    if out_dir is None:
        out_dir = resolve_output_dir(root, config.output_dir)

    kinds = config.kind_table()

    tags_gen = TagsGenerator()
    tag_dicts, tags_summary = tags_gen.generate(
        root=root,
        out_dir=out_dir,
        kinds=kinds,
        scanner_config=config.scanner,
        include_patterns=config.include,
        exclude_patterns=config.exclude,
        nested_gitignore=config.nested_gitignore,
    )

    kinds_gen = KindsGenerator()
    kinds_gen.generate(root=root, out_dir=out_dir, kinds=kinds)

    artifacts_list = [TAGS_JSONL, TAGS_FILE, KINDS_JSON]
    logger.debug("Wrote %s to %s", ", ".join(artifacts_list), out_dir)

    return {
        "tag_count": len(tag_dicts),
        "file_count": tags_summary["file_count"],
        "kind_counts": tags_summary["kind_counts"],
        "skipped": tags_summary["skipped"],
        "artifacts": [str(out_dir / name) for name in artifacts_list],
    }
