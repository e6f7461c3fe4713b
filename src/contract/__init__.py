"""Stable contract surface for extags artifacts."""

from contract.artifacts import (
    ARTIFACT_SCHEMA_VERSION,
    ARTIFACT_SPECS,
    KINDS_JSON,
    TAGS_FILE,
    TAGS_JSONL,
    ArtifactSpec,
)


def __getattr__(name: str) -> object:
    if name in {"KindsArtifact", "TagRecord"}:
        from contract.models import KindsArtifact, TagRecord

        return {"KindsArtifact": KindsArtifact, "TagRecord": TagRecord}[name]

    if name in {"ValidationMessage", "ValidationResult", "validate_artifacts"}:
        from contract.validation import (
            ValidationMessage,
            ValidationResult,
            validate_artifacts,
        )

        return {
            "ValidationMessage": ValidationMessage,
            "ValidationResult": ValidationResult,
            "validate_artifacts": validate_artifacts,
        }[name]

    msg = f"module 'contract' has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "ARTIFACT_SCHEMA_VERSION",
    "ARTIFACT_SPECS",
    "KINDS_JSON",
    "TAGS_FILE",
    "TAGS_JSONL",
    "ArtifactSpec",
    "KindsArtifact",
    "TagRecord",
    "ValidationMessage",
    "ValidationResult",
    "validate_artifacts",
]
