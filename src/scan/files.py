"""Source file discovery for tag generation."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from fnmatch import fnmatch
from pathlib import Path
from typing import TYPE_CHECKING, cast

from gitignore_parser import parse_gitignore  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@dataclass(frozen=True)
class SourceFilter:
    """Decides which walked paths reach the scanner.

    ``output_dir`` is the artifacts directory relative to the scanned root
    (POSIX form, empty when it lies outside the root); the whole subtree is
    pruned, however deeply it is nested.
    """

    handles: Callable[[str], bool]
    output_dir: str = ""
    include_patterns: list[str] = field(default_factory=list)
    exclude_patterns: list[str] = field(default_factory=list)
    ignored: Callable[[str], bool] | None = None

    def prunes_dir(self, rel_dir: str) -> bool:
        if not self.output_dir:
            return False
        return rel_dir == self.output_dir or rel_dir.startswith(
            f"{self.output_dir}/"
        )

    def accepts(self, abs_path: Path, rel_path: str) -> bool:
        if not self.handles(abs_path.name) or abs_path.is_symlink():
            return False
        if self.ignored is not None and self.ignored(str(abs_path)):
            return False
        if self.include_patterns and not any(
            fnmatch(rel_path, pat) for pat in self.include_patterns
        ):
            return False
        return not any(fnmatch(rel_path, pat) for pat in self.exclude_patterns)


def _build_gitignore_matcher(
    root: Path,
    *,
    nested_gitignore: bool,
) -> Callable[[str], bool] | None:
    """Compose the root .gitignore, or every regular .gitignore under root."""
    if nested_gitignore:
        candidates = sorted(
            (p for p in root.rglob(".gitignore") if p.is_file() and not p.is_symlink()),
            key=lambda p: p.relative_to(root).as_posix(),
        )
    else:
        root_file = root / ".gitignore"
        candidates = [root_file] if root_file.is_file() else []

    if not candidates:
        return None
    if len(candidates) == 1:
        return cast("Callable[[str], bool]", parse_gitignore(candidates[0]))

    matchers = [parse_gitignore(path) for path in candidates]

    def matches(path_str: str) -> bool:
        for matcher in matchers:
            try:
                if matcher(path_str):
                    return True
            except ValueError:
                # Path lies outside this .gitignore's base directory.
                continue
        return False

    return matches


def find_source_files(
    directory: Path,
    *,
    handles: Callable[[str], bool],
    output_dir: str = ".extags",
    include_patterns: list[str] | None = None,
    exclude_patterns: list[str] | None = None,
    nested_gitignore: bool = False,
) -> Iterator[Path]:
    """Walk ``directory`` and yield the files a parser claims.

    Symlinked directories are never entered and symlinked files are
    skipped, so nothing outside ``directory`` is scanned.

    Args:
        directory: Directory to search
        handles: Routing predicate on the file name (``ParserDefinition.handles``)
        output_dir: Artifacts directory relative to ``directory`` to prune
        include_patterns: fnmatch patterns a relative path must match
        exclude_patterns: fnmatch patterns that drop a relative path
        nested_gitignore: Honour every .gitignore under directory, not
            only the root one

    Yields:
        Paths sorted by relative POSIX path for deterministic ordering.
    """
    source_filter = SourceFilter(
        handles=handles,
        output_dir=output_dir.strip("/"),
        include_patterns=include_patterns or [],
        exclude_patterns=exclude_patterns or [],
        ignored=_build_gitignore_matcher(directory, nested_gitignore=nested_gitignore),
    )

    found: list[tuple[str, Path]] = []
    for dirpath, dirnames, filenames in os.walk(directory):
        current = Path(dirpath)
        rel_dir = current.relative_to(directory).as_posix()
        prefix = "" if rel_dir == "." else f"{rel_dir}/"
        dirnames[:] = [
            name
            for name in dirnames
            if not (current / name).is_symlink()
            and not source_filter.prunes_dir(prefix + name)
        ]
        for name in filenames:
            rel_path = prefix + name
            if source_filter.accepts(current / name, rel_path):
                found.append((rel_path, current / name))

    found.sort(key=lambda item: item[0])
    for _, path in found:
        yield path


__all__ = ["SourceFilter", "find_source_files"]
