"""Parsing utilities for Elixir tag extraction."""

from parse.charclass import is_identifier_char, is_identifier_start
from parse.directives import classify_directive
from parse.elixir_tags import (
    ElixirTagScanner,
    ModuleScope,
    TagEmitter,
    extract_tags,
    extract_tags_from_file,
    iter_source_lines,
)
from parse.kinds import ELIXIR_KINDS, KindDef, configure_kinds
from parse.lexer import parse_identifier, skip_whitespace
from parse.registration import ELIXIR_PARSER, ParserDefinition

__all__ = [
    "ELIXIR_KINDS",
    "ELIXIR_PARSER",
    "ElixirTagScanner",
    "KindDef",
    "ModuleScope",
    "ParserDefinition",
    "TagEmitter",
    "classify_directive",
    "configure_kinds",
    "extract_tags",
    "extract_tags_from_file",
    "is_identifier_char",
    "is_identifier_start",
    "iter_source_lines",
    "parse_identifier",
    "skip_whitespace",
]
