"""Utility functions for artifact generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import orjson

from contract.artifacts import TAGS_FILE_HEADER

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from pydantic import BaseModel

    from artifacts.models.artifacts.tags import TagRecord

# Characters that would break a tab-separated tags line.
TAGS_FILE_UNSAFE = frozenset("\t\n\r")


def _write_jsonl(path: Path, records: Sequence[BaseModel]) -> None:
    with path.open("wb") as f:
        for rec in records:
            f.write(orjson.dumps(rec.model_dump(), option=orjson.OPT_SORT_KEYS))
            f.write(b"\n")


def _write_json(path: Path, obj: BaseModel) -> None:
    opts = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE
    path.write_bytes(orjson.dumps(obj.model_dump(), option=opts))


def is_tags_file_safe(text: str) -> bool:
    return not TAGS_FILE_UNSAFE.intersection(text)


def _format_tag_line(tag: TagRecord, letter: str) -> str:
    fields = [tag.name, tag.path, f'{tag.line};"', letter]
    if tag.scope is not None:
        fields.append(f"{tag.scope.kind}:{tag.scope.name}")
    return "\t".join(fields)


def _write_tags_file(
    path: Path, tags: Sequence[TagRecord], letters: dict[str, str]
) -> None:
    """Write a ctags extended-format file with line-number addresses.

    Callers must drop records whose path is not ``is_tags_file_safe``.
    """
    ordered = sorted(tags, key=lambda t: (t.name, t.path, t.line))
    lines = list(TAGS_FILE_HEADER)
    lines.extend(_format_tag_line(tag, letters[tag.kind]) for tag in ordered)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def _relative_output_dir(out_dir: Path, root: Path) -> str:
    """Return out_dir relative to root in POSIX form, or "" if it lies outside."""
    try:
        rel = out_dir.resolve().relative_to(root.resolve())
    except (OSError, ValueError):
        return ""
    posix = rel.as_posix()
    return "" if posix == "." else posix
