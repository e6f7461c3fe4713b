"""Parser registration consumed by the file router."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from parse.elixir_tags import extract_tags_from_file
from parse.kinds import ELIXIR_KINDS, KindDef

if TYPE_CHECKING:
    from collections.abc import Callable

    from artifacts.models.artifacts.tags import TagRecord


@dataclass(frozen=True)
class ParserDefinition:
    name: str
    kinds: tuple[KindDef, ...]
    extensions: tuple[str, ...]
    scanner: Callable[..., list[TagRecord]]

    def handles(self, filename: str) -> bool:
        """Return True if ``filename`` carries one of the registered suffixes."""
        _, dot, suffix = filename.rpartition(".")
        return bool(dot) and suffix in self.extensions


ELIXIR_PARSER = ParserDefinition(
    name="Elixir",
    kinds=ELIXIR_KINDS,
    extensions=("ex", "exs"),
    scanner=extract_tags_from_file,
)


__all__ = ["ELIXIR_PARSER", "ParserDefinition"]
