"""Artifact models exposed at the contract boundary."""

from artifacts.models.artifacts.kinds import KindsArtifact
from artifacts.models.artifacts.tags import TagRecord

__all__ = ["KindsArtifact", "TagRecord"]
