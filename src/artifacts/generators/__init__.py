"""Artifact generators for extags."""

from artifacts.generators.kinds import KindsGenerator
from artifacts.generators.tags import TagsGenerator

__all__ = [
    "KindsGenerator",
    "TagsGenerator",
]
