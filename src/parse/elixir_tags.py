"""Line-oriented tag extraction for Elixir source files.

This is a lexical scanner, not a parser. Each line is inspected once; only
lines that start (after indentation) with a definition keyword produce
tags. Comments (``#``) and attribute or doc lines (``@``) are skipped
without further inspection, so heredoc bodies can still yield false
positives.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from artifacts.models.artifacts.tags import TagRecord, TagScope
from parse.directives import DIRECTIVE_LEAD, KeywordSet, classify_directive
from parse.kinds import ELIXIR_KINDS, KindDef, kind_by_name
from parse.lexer import parse_identifier, skip_whitespace

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator
    from pathlib import Path

    from artifacts.models.artifacts.tags import TagKind
    from parse.charclass import IdentifierPolicy

logger = logging.getLogger(__name__)

# First characters that end inspection of a line.
COMMENT_MARKER = "#"
ATTRIBUTE_MARKER = "@"


class ModuleScope:
    """The most recent ``defmodule`` name in the current file.

    A single slot: a later module overwrites the earlier one and the end of
    a module body is never detected.
    """

    def __init__(self) -> None:
        self._name: str | None = None

    def on_module_directive(self, name: str) -> None:
        self._name = name

    def current(self) -> str | None:
        return self._name or None


class TagEmitter:
    """Builds tag records and hands them to a sink."""

    def __init__(
        self,
        path: str,
        sink: Callable[[TagRecord], None],
        kinds: tuple[KindDef, ...] = ELIXIR_KINDS,
    ) -> None:
        self.path = path
        self.sink = sink
        self._kinds = kind_by_name(kinds)

    def _enabled(self, kind: TagKind) -> bool:
        return self._kinds[kind].enabled

    def emit(self, name: str, kind: TagKind, line: int) -> None:
        self.emit_scoped(name, kind, line, None)

    def emit_scoped(
        self, name: str, kind: TagKind, line: int, scope: str | None
    ) -> None:
        if not name or not self._enabled(kind):
            return
        self.sink(
            TagRecord(
                path=self.path,
                name=name,
                kind=kind,
                line=line,
                scope=TagScope(name=scope) if scope else None,
            )
        )


class ElixirTagScanner:
    """Scans one file's lines and emits a tag per recognised directive."""

    def __init__(
        self,
        emitter: TagEmitter,
        *,
        identifier_policy: IdentifierPolicy = "predicate",
        keyword_set: KeywordSet = "extended",
        scope_functions: bool = True,
    ) -> None:
        self.emitter = emitter
        self.identifier_policy = identifier_policy
        self.keyword_set = keyword_set
        self.scope_functions = scope_functions
        self.scope = ModuleScope()

    def scan(self, lines: Iterable[str]) -> None:
        for line_number, line in enumerate(lines, 1):
            self.scan_line(line, line_number)

    def scan_line(self, line: str, line_number: int) -> None:
        pos = skip_whitespace(line, 0)
        if pos >= len(line):
            return

        first = line[pos]
        if first in (COMMENT_MARKER, ATTRIBUTE_MARKER):
            return
        if first == DIRECTIVE_LEAD:
            self._parse_directive(line, pos, line_number)

    def _parse_directive(self, line: str, pos: int, line_number: int) -> None:
        keyword, pos = parse_identifier(line, pos, self.identifier_policy)
        pos = skip_whitespace(line, pos)
        name, _ = parse_identifier(line, pos, self.identifier_policy)

        kind = classify_directive(keyword, self.keyword_set)
        if kind is None:
            # import, require, alias, a call to a def* function...
            return

        if kind == "module":
            self.emitter.emit(name, kind, line_number)
            self.scope.on_module_directive(name)
        elif kind == "function" and self.scope_functions:
            self.emitter.emit_scoped(name, kind, line_number, self.scope.current())
        else:
            self.emitter.emit(name, kind, line_number)


def iter_source_lines(file_path: Path) -> Iterator[str]:
    """Yield the lines of ``file_path`` without line terminators.

    Undecodable bytes are replaced; ``\\r\\n`` and ``\\r`` endings are
    normalised.
    """
    with file_path.open(encoding="utf-8", errors="replace", newline=None) as handle:
        for line in handle:
            yield line.rstrip("\n")


def extract_tags(
    lines: Iterable[str],
    relative_path: str,
    *,
    kinds: tuple[KindDef, ...] = ELIXIR_KINDS,
    identifier_policy: IdentifierPolicy = "predicate",
    keyword_set: KeywordSet = "extended",
    scope_functions: bool = True,
) -> list[TagRecord]:
    """Extract tags from already-split source lines, in line order."""
    tags: list[TagRecord] = []
    scanner = ElixirTagScanner(
        TagEmitter(relative_path, tags.append, kinds),
        identifier_policy=identifier_policy,
        keyword_set=keyword_set,
        scope_functions=scope_functions,
    )
    scanner.scan(lines)
    return tags


def extract_tags_from_file(
    file_path: Path,
    relative_path: str,
    *,
    kinds: tuple[KindDef, ...] = ELIXIR_KINDS,
    identifier_policy: IdentifierPolicy = "predicate",
    keyword_set: KeywordSet = "extended",
    scope_functions: bool = True,
) -> list[TagRecord]:
    """Extract tags from an Elixir source file.

    Raises:
        OSError: If the file cannot be read.
    """
    tags = extract_tags(
        iter_source_lines(file_path),
        relative_path,
        kinds=kinds,
        identifier_policy=identifier_policy,
        keyword_set=keyword_set,
        scope_functions=scope_functions,
    )
    logger.debug("Extracted %d tags from %s", len(tags), relative_path)
    return tags


__all__ = [
    "ElixirTagScanner",
    "ModuleScope",
    "TagEmitter",
    "extract_tags",
    "extract_tags_from_file",
    "iter_source_lines",
]
