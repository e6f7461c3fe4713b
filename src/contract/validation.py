"""Validation helpers for tag artifacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import orjson
from pydantic import ValidationError

from contract.artifacts import ARTIFACT_SCHEMA_VERSION, ARTIFACT_SPECS
from contract.models import KindsArtifact, TagRecord
from parse.kinds import KIND_LETTERS

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class ValidationMessage:
    artifact: str
    path: Path
    message: str
    line: int | None = None

    def location(self) -> str:
        return str(self.path) if self.line is None else f"{self.path}:{self.line}"

    def to_dict(self) -> dict[str, object]:
        return {
            "artifact": self.artifact,
            "path": str(self.path),
            "line": self.line,
            "message": self.message,
        }


@dataclass
class ValidationResult:
    errors: list[ValidationMessage] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class _Checker:
    """Collects errors for one artifact file."""

    artifact: str
    path: Path
    result: ValidationResult

    def error(self, message: str, line: int | None = None) -> None:
        self.result.errors.append(
            ValidationMessage(self.artifact, self.path, message, line)
        )

    def read_bytes(self) -> bytes | None:
        try:
            return self.path.read_bytes()
        except OSError as exc:
            self.error(f"Failed to read file: {exc}.")
            return None

    def schema(self, data: dict[str, Any], line: int | None = None) -> None:
        version = data.get("schema_version")
        if version is None:
            self.error("Missing schema_version.", line)
        elif version != ARTIFACT_SCHEMA_VERSION:
            self.error(
                "Schema version mismatch: "
                f"expected {ARTIFACT_SCHEMA_VERSION}, got {version}.",
                line,
            )


def validate_artifacts(artifacts_dir: Path) -> ValidationResult:
    """Check that every contract artifact exists and is well formed."""
    result = ValidationResult()

    if not artifacts_dir.exists():
        _Checker("artifacts_dir", artifacts_dir, result).error(
            "Artifacts directory does not exist."
        )
        return result
    if not artifacts_dir.is_dir():
        _Checker("artifacts_dir", artifacts_dir, result).error(
            "Artifacts path is not a directory."
        )
        return result

    checks = {
        "jsonl": _check_tag_records,
        "json": _check_kinds,
        "ctags": _check_tags_file,
    }
    for artifact_name, spec in ARTIFACT_SPECS.items():
        checker = _Checker(artifact_name, artifacts_dir / spec.filename, result)
        if not checker.path.exists():
            checker.error("Required artifact file is missing.")
            continue
        checks[spec.format](checker)

    return result


def _check_tag_records(checker: _Checker) -> None:
    raw = checker.read_bytes()
    if raw is None:
        return

    previous: tuple[str, int] | None = None
    for line_number, line in enumerate(raw.splitlines(), 1):
        if not line.strip():
            continue
        try:
            data = orjson.loads(line)
            record = TagRecord.model_validate(data)
        except orjson.JSONDecodeError as exc:
            checker.error(f"Invalid JSON: {exc}.", line_number)
            continue
        except ValidationError as exc:
            checker.error(f"Schema validation failed: {exc}.", line_number)
            continue

        checker.schema(data, line_number)
        position = (record.path, record.line)
        if previous is not None and position < previous:
            checker.error("Tags are not ordered by (path, line).", line_number)
        previous = position


def _check_kinds(checker: _Checker) -> None:
    raw = checker.read_bytes()
    if raw is None:
        return
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        checker.error(f"Invalid JSON: {exc}.")
        return
    if not isinstance(data, dict):
        checker.error(f"Expected JSON object for {checker.path.name}.")
        return
    try:
        KindsArtifact.model_validate(data)
    except ValidationError as exc:
        checker.error(f"Schema validation failed: {exc}.")
        return
    checker.schema(data)


def _tags_line_problem(fields: list[str]) -> str | None:
    """Describe what is wrong with one tags-file entry, if anything."""
    if len(fields) not in (4, 5) or not all(fields):
        return "Malformed tags line (expected name, path, address, kind[, scope])."
    address = fields[2]
    if not (address.endswith(';"') and address[:-2].isdigit()):
        return f"Malformed line address: {address!r}."
    if fields[3] not in KIND_LETTERS:
        return f"Unknown kind letter: {fields[3]!r}."
    if len(fields) == 5:
        scope_kind, _, scope_name = fields[4].partition(":")
        if scope_kind != "module" or not scope_name:
            return f"Malformed scope field: {fields[4]!r}."
    return None


def _check_tags_file(checker: _Checker) -> None:
    raw = checker.read_bytes()
    if raw is None:
        return
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        checker.error(f"Failed to read file: invalid UTF-8 ({exc}).")
        return

    previous: tuple[str, str, int] | None = None
    for line_number, line in enumerate(text.split("\n"), 1):
        if not line or line.startswith("!_TAG_"):
            continue
        fields = line.split("\t")
        problem = _tags_line_problem(fields)
        if problem is not None:
            checker.error(problem, line_number)
            continue
        key = (fields[0], fields[1], int(fields[2][:-2]))
        if previous is not None and key < previous:
            checker.error("Tags file is not sorted by (name, path, line).", line_number)
        previous = key


__all__ = [
    "ValidationMessage",
    "ValidationResult",
    "validate_artifacts",
]
