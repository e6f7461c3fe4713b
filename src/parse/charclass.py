"""Identifier character classes for Elixir source lines."""

from __future__ import annotations

from typing import Literal

IdentifierPolicy = Literal["predicate", "dotted"]

# "predicate" keeps trailing ?/! (valid?, save!); "dotted" keeps
# namespaced names whole (Foo.Bar.Baz).
_EXTRA_CHARS: dict[IdentifierPolicy, frozenset[str]] = {
    "predicate": frozenset("_?!"),
    "dotted": frozenset("_."),
}


def is_identifier_char(c: str, policy: IdentifierPolicy = "predicate") -> bool:
    """Return True if ``c`` may appear inside an identifier.

    Only ASCII letters and digits count as alphanumeric.
    """
    if not c:
        return False
    return (c.isascii() and c.isalnum()) or c in _EXTRA_CHARS[policy]


def is_identifier_start(c: str) -> bool:
    return bool(c) and c.isascii() and c.isalpha()


__all__ = ["IdentifierPolicy", "is_identifier_char", "is_identifier_start"]
