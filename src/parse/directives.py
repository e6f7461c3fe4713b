"""Directive keyword classification.

Directives are of the form::

    def defp
    defmacro defmacrop
    defrecord
    defmodule
    defprotocol
    defimpl
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from artifacts.models.artifacts.tags import TagKind

KeywordSet = Literal["extended", "baseline"]

# Every directive starts with this character.
DIRECTIVE_LEAD = "d"

_BASELINE_DIRECTIVES: dict[str, TagKind] = {
    "def": "function",
    "defp": "function",
    "defmacro": "macro",
    "defmacrop": "macro",
    "defrecord": "record",
    "defmodule": "module",
}

_EXTENDED_DIRECTIVES: dict[str, TagKind] = {
    **_BASELINE_DIRECTIVES,
    "defprotocol": "protocol",
    "defimpl": "implementation",
}

DIRECTIVES: dict[KeywordSet, dict[str, TagKind]] = {
    "baseline": _BASELINE_DIRECTIVES,
    "extended": _EXTENDED_DIRECTIVES,
}


def classify_directive(
    keyword: str, keyword_set: KeywordSet = "extended"
) -> TagKind | None:
    """Map a leading keyword to its tag kind.

    Matching is exact and case-sensitive. Anything else (``import``,
    ``require``, ``alias``, plain expressions) yields None.
    """
    return DIRECTIVES[keyword_set].get(keyword)


__all__ = ["DIRECTIVES", "DIRECTIVE_LEAD", "KeywordSet", "classify_directive"]
