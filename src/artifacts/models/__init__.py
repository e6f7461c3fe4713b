"""Model namespace for extags artifact schemas."""

from artifacts.models.artifacts.kinds import KindEntry, KindsArtifact
from artifacts.models.artifacts.tags import TagKind, TagRecord, TagScope

__all__ = [
    "KindEntry",
    "KindsArtifact",
    "TagKind",
    "TagRecord",
    "TagScope",
]
