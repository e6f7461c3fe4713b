"""Kind table artifact generator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from artifacts.models.artifacts.kinds import KindEntry, KindsArtifact
from artifacts.utils import _write_json
from contract.artifacts import KINDS_JSON
from parse.kinds import ELIXIR_KINDS
from parse.registration import ELIXIR_PARSER

if TYPE_CHECKING:
    from pathlib import Path

    from parse.kinds import KindDef


def build_kinds_artifact(kinds: tuple[KindDef, ...] = ELIXIR_KINDS) -> KindsArtifact:
    return KindsArtifact(
        parser=ELIXIR_PARSER.name,
        extensions=list(ELIXIR_PARSER.extensions),
        kinds=[
            KindEntry(
                letter=kind.letter,
                name=kind.name,
                description=kind.description,
                enabled=kind.enabled,
            )
            for kind in kinds
        ],
    )


class KindsGenerator:
    """Generates kinds.json describing the effective kind table."""

    @property
    def name(self) -> str:
        """Generator name for logging and identification."""
        return "kinds"

    def generate(
        self,
        root: Path,
        out_dir: Path,
        **kwargs: Any,
    ) -> tuple[list[dict[str, Any]], dict[str, Any]]:
        """Generate kinds artifact."""
        kinds: tuple[KindDef, ...] = kwargs.get("kinds") or ELIXIR_KINDS

        out_dir.mkdir(parents=True, exist_ok=True)

        artifact = build_kinds_artifact(kinds)
        _write_json(out_dir / KINDS_JSON, artifact)

        return [entry.model_dump() for entry in artifact.kinds], {}
