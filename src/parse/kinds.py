"""Static kind table for Elixir tags."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, get_args

from artifacts.models.artifacts.tags import TagKind

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class KindDef:
    """One row of the kind table."""

    letter: str
    name: TagKind
    description: str
    enabled: bool = True


ELIXIR_KINDS: tuple[KindDef, ...] = (
    KindDef("d", "macro", "macro definitions"),
    KindDef("f", "function", "functions"),
    KindDef("m", "module", "modules"),
    KindDef("r", "record", "record definitions"),
    KindDef("p", "protocol", "protocol definitions"),
    KindDef("l", "implementation", "protocol implementations"),
)

KIND_NAMES: frozenset[str] = frozenset(get_args(TagKind))
KIND_LETTERS: dict[str, TagKind] = {kind.letter: kind.name for kind in ELIXIR_KINDS}


def resolve_kind(key: str) -> TagKind | None:
    """Resolve a kind name or single-letter code to its kind name."""
    if key in KIND_NAMES:
        return key  # type: ignore[return-value]
    return KIND_LETTERS.get(key)


def configure_kinds(
    overrides: Mapping[str, bool] | None = None,
) -> tuple[KindDef, ...]:
    """Return a copy of the kind table with enabled flags overridden.

    Keys may be kind names or letters. Unknown keys raise ValueError.
    """
    if not overrides:
        return ELIXIR_KINDS

    enabled: dict[TagKind, bool] = {}
    for key, flag in overrides.items():
        name = resolve_kind(key)
        if name is None:
            msg = (
                f"Unknown kind '{key}'. "
                f"Valid kinds: {', '.join(sorted(KIND_NAMES))} "
                f"(or letters {''.join(sorted(KIND_LETTERS))})"
            )
            raise ValueError(msg)
        enabled[name] = flag

    return tuple(
        replace(kind, enabled=enabled.get(kind.name, kind.enabled))
        for kind in ELIXIR_KINDS
    )


def kind_by_name(kinds: tuple[KindDef, ...]) -> dict[TagKind, KindDef]:
    return {kind.name: kind for kind in kinds}


__all__ = [
    "ELIXIR_KINDS",
    "KIND_LETTERS",
    "KIND_NAMES",
    "KindDef",
    "configure_kinds",
    "kind_by_name",
    "resolve_kind",
]
