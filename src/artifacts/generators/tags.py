"""Tags artifact generator."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from artifacts.utils import (
    _relative_output_dir,
    _write_jsonl,
    _write_tags_file,
    is_tags_file_safe,
)
from contract.artifacts import TAGS_FILE, TAGS_JSONL
from parse.kinds import ELIXIR_KINDS
from parse.registration import ELIXIR_PARSER
from scan.files import find_source_files

if TYPE_CHECKING:
    from pathlib import Path

    from artifacts.models.artifacts.tags import TagRecord
    from parse.kinds import KindDef
    from rules.config import ScannerConfig

logger = logging.getLogger(__name__)


class TagsGenerator:
    """Generates tags.jsonl and the ctags-format tags file from Elixir sources."""

    @property
    def name(self) -> str:
        """Generator name for logging and identification."""
        return "tags"

    def generate(
        self,
        root: Path,
        out_dir: Path,
        **kwargs: Any,
    ) -> tuple[list[dict[str, Any]], dict[str, Any]]:
        """Generate tags artifacts."""
        kinds: tuple[KindDef, ...] = kwargs.get("kinds") or ELIXIR_KINDS
        scanner_config: ScannerConfig | None = kwargs.get("scanner_config")
        include_patterns: list[str] | None = kwargs.get("include_patterns")
        exclude_patterns: list[str] | None = kwargs.get("exclude_patterns")
        nested_gitignore: bool = kwargs.get("nested_gitignore", False)

        scanner_options: dict[str, Any] = (
            scanner_config.model_dump() if scanner_config is not None else {}
        )

        out_dir.mkdir(parents=True, exist_ok=True)

        out_dir_rel = _relative_output_dir(out_dir, root)

        all_tags: list[TagRecord] = []
        file_count = 0
        skipped: list[str] = []

        for file_path in find_source_files(
            root,
            handles=ELIXIR_PARSER.handles,
            output_dir=out_dir_rel,
            include_patterns=include_patterns,
            exclude_patterns=exclude_patterns,
            nested_gitignore=nested_gitignore,
        ):
            relative_path = file_path.relative_to(root).as_posix()
            if not is_tags_file_safe(relative_path):
                logger.warning(
                    "Skipping %r: tab or newline in path cannot be tagged",
                    relative_path,
                )
                skipped.append(relative_path)
                continue
            try:
                tags = ELIXIR_PARSER.scanner(
                    file_path, relative_path, kinds=kinds, **scanner_options
                )
            except OSError as exc:
                logger.warning("Skipping unreadable file %s: %s", relative_path, exc)
                skipped.append(relative_path)
                continue
            file_count += 1
            all_tags.extend(tags)

        # Stable sort keeps file order for tags on the same line.
        all_tags.sort(key=lambda t: (t.path, t.line))

        _write_jsonl(out_dir / TAGS_JSONL, all_tags)
        _write_tags_file(
            out_dir / TAGS_FILE,
            all_tags,
            {kind.name: kind.letter for kind in kinds},
        )

        kind_counts: dict[str, int] = {}
        for tag in all_tags:
            kind_counts[tag.kind] = kind_counts.get(tag.kind, 0) + 1

        logger.info(
            "%s: %d tags from %d files (%d skipped)",
            self.name,
            len(all_tags),
            file_count,
            len(skipped),
        )

        return [t.model_dump() for t in all_tags], {
            "file_count": file_count,
            "kind_counts": dict(sorted(kind_counts.items())),
            "skipped": skipped,
        }
