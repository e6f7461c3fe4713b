"""Cursor helpers for scanning a single source line."""

from __future__ import annotations

from parse.charclass import IdentifierPolicy, is_identifier_char

# C isspace() in the default locale.
WHITESPACE = frozenset(" \t\n\v\f\r")


def skip_whitespace(line: str, pos: int) -> int:
    """Advance ``pos`` past any whitespace; return it unchanged if there is none."""
    end = len(line)
    while pos < end and line[pos] in WHITESPACE:
        pos += 1
    return pos


def parse_identifier(
    line: str, pos: int, policy: IdentifierPolicy = "predicate"
) -> tuple[str, int]:
    """Consume the longest identifier starting at ``pos``.

    Returns the token and the position just past it. An empty token means
    no identifier starts at ``pos``; the position is then unchanged.
    """
    start = pos
    end = len(line)
    while pos < end and is_identifier_char(line[pos], policy):
        pos += 1
    return line[start:pos], pos


__all__ = ["WHITESPACE", "parse_identifier", "skip_whitespace"]
