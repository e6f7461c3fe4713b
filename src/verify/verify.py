"""Determinism verification for extags artifacts."""

from __future__ import annotations

import filecmp
import logging
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from artifacts.write import generate_all_artifacts

if TYPE_CHECKING:
    from rules.config import ExtagsConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeterminismResult:
    ok: bool
    mismatches: tuple[str, ...] = field(default_factory=tuple)
    missing: tuple[str, ...] = field(default_factory=tuple)
    extra: tuple[str, ...] = field(default_factory=tuple)

    def problems(self) -> list[tuple[str, str]]:
        """Return (label, relative path) pairs in reporting order."""
        return [
            (label, path)
            for label, paths in (
                ("missing", self.missing),
                ("extra", self.extra),
                ("mismatches", self.mismatches),
            )
            for path in paths
        ]


def _relative_files(root: Path) -> set[str]:
    return {
        path.relative_to(root).as_posix()
        for path in root.rglob("*")
        if path.is_file()
    }


def verify_determinism(
    *,
    root: Path,
    artifacts_dir: Path,
    config: ExtagsConfig | None = None,
) -> DeterminismResult:
    """Verify that tag artifacts are deterministic.

    Rescans the repository into a temporary directory and compares the
    result byte-for-byte against ``artifacts_dir``. Scanning the same files
    twice must produce the same records in the same order, so any
    difference means the artifacts are stale or the scan is unstable.

    Args:
        root: Repository root to scan.
        artifacts_dir: Directory containing existing artifacts to verify.
        config: Optional configuration; loaded from extags.toml when omitted.

    Returns:
        DeterminismResult with ok status and sorted relative paths of
        missing, extra, and mismatched files.

    Raises:
        FileNotFoundError: If artifacts_dir does not exist.
        NotADirectoryError: If artifacts_dir is not a directory.
    """
    if not artifacts_dir.exists():
        msg = f"Artifacts directory does not exist: {artifacts_dir}"
        raise FileNotFoundError(msg)
    if not artifacts_dir.is_dir():
        msg = f"Artifacts path is not a directory: {artifacts_dir}"
        raise NotADirectoryError(msg)

    with tempfile.TemporaryDirectory() as temp_dir:
        regenerated_dir = Path(temp_dir)
        if config is None:
            generate_all_artifacts(root=root, out_dir=regenerated_dir)
        else:
            generate_all_artifacts(root=root, out_dir=regenerated_dir, config=config)

        existing = _relative_files(artifacts_dir)
        regenerated = _relative_files(regenerated_dir)

        mismatches = [
            rel
            for rel in sorted(existing & regenerated)
            if not filecmp.cmp(
                artifacts_dir / rel, regenerated_dir / rel, shallow=False
            )
        ]

    missing = sorted(existing - regenerated)
    extra = sorted(regenerated - existing)
    result = DeterminismResult(
        ok=not (missing or extra or mismatches),
        mismatches=tuple(mismatches),
        missing=tuple(missing),
        extra=tuple(extra),
    )
    logger.debug("Determinism check for %s: ok=%s", artifacts_dir, result.ok)
    return result
