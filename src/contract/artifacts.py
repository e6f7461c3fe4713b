"""Artifact contract definitions.

This module defines the stable filenames and formats of generated tag
artifacts.
"""

from __future__ import annotations

from dataclasses import dataclass

# Artifact schema version for tag artifacts.
ARTIFACT_SCHEMA_VERSION = 1

# Artifact filename constants (stable contract identifiers).
TAGS_JSONL = "tags.jsonl"
TAGS_FILE = "tags"
KINDS_JSON = "kinds.json"

# ctags extended-format header; the tags file is sorted by name.
TAGS_FILE_HEADER = (
    "!_TAG_FILE_FORMAT\t2\t/extended format/",
    "!_TAG_FILE_SORTED\t1\t/0=unsorted, 1=sorted, 2=foldcase/",
    "!_TAG_PROGRAM_NAME\textags\t//",
)


@dataclass(frozen=True)
class ArtifactSpec:
    """Specification for a contract artifact."""

    filename: str
    format: str
    required_fields_note: str


ARTIFACT_SPECS: dict[str, ArtifactSpec] = {
    "tags": ArtifactSpec(
        filename=TAGS_JSONL,
        format="jsonl",
        required_fields_note="TagRecord fields required by contract.",
    ),
    "tags_file": ArtifactSpec(
        filename=TAGS_FILE,
        format="ctags",
        required_fields_note="name, path and line address, tab separated.",
    ),
    "kinds": ArtifactSpec(
        filename=KINDS_JSON,
        format="json",
        required_fields_note="KindsArtifact fields required by contract.",
    ),
}
