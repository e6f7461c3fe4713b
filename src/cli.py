"""Command-line interface for extags."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import orjson

from artifacts.write import generate_all_artifacts
from contract.validation import validate_artifacts
from parse.registration import ELIXIR_PARSER
from rules.config import ConfigError, load_config
from verify.verify import verify_determinism


def _add_common_paths(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Repository root (default: .)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="extags")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Generate tag artifacts")
    _add_common_paths(generate_parser)
    generate_parser.add_argument(
        "--out-dir",
        default=None,
        help="Output directory for generated artifacts (default: config output dir)",
    )

    validate_parser = subparsers.add_parser("validate", help="Validate artifacts")
    _add_common_paths(validate_parser)
    validate_parser.add_argument(
        "--artifacts-dir",
        default=None,
        help="Artifacts directory (default: config output dir)",
    )

    verify_parser = subparsers.add_parser(
        "verify", help="Verify determinism of artifacts"
    )
    _add_common_paths(verify_parser)
    verify_parser.add_argument(
        "--artifacts-dir",
        default=None,
        help="Artifacts directory (default: config output dir)",
    )

    scan_parser = subparsers.add_parser(
        "scan", help="Print tags for individual files as JSON lines"
    )
    scan_parser.add_argument("files", nargs="+", help="Elixir source files")
    scan_parser.add_argument(
        "--config-root",
        default=".",
        help="Directory holding extags.toml (default: .)",
    )

    kinds_parser = subparsers.add_parser("kinds", help="List the kind table")
    _add_common_paths(kinds_parser)

    return parser


def _resolve_output_dir(out_dir: str | None) -> Path | None:
    if out_dir is None:
        return None
    return Path(out_dir).expanduser().resolve()


def _resolve_artifacts_dir(root: Path, artifacts_dir: str | None) -> Path:
    if artifacts_dir is None:
        config = load_config(root)
        return (root / config.output_dir).resolve()
    return Path(artifacts_dir).expanduser().resolve()


def _handle_generate(root: Path, out_dir: str | None) -> int:
    summary = generate_all_artifacts(root=root, out_dir=_resolve_output_dir(out_dir))
    for path in summary["skipped"]:  # type: ignore[attr-defined]
        sys.stderr.write(f"skipped: {path}\n")
    return 0


def _handle_validate(root: Path, artifacts_dir: str | None) -> int:
    resolved_artifacts_dir = _resolve_artifacts_dir(root, artifacts_dir)
    result = validate_artifacts(resolved_artifacts_dir)
    if result.errors:
        for error in result.errors:
            sys.stderr.write(f"{error.location()}: {error.message}\n")
        return 1
    return 0


def _handle_verify(root: Path, artifacts_dir: str | None) -> int:
    resolved_artifacts_dir = _resolve_artifacts_dir(root, artifacts_dir)
    try:
        result = verify_determinism(root=root, artifacts_dir=resolved_artifacts_dir)
    except (FileNotFoundError, NotADirectoryError) as exc:
        sys.stderr.write(f"artifacts-dir: {resolved_artifacts_dir}\n")
        sys.stderr.write(f"error: {exc}\n")
        return 2
    if not result.ok:
        for label, path in result.problems():
            sys.stderr.write(f"{label}: {path}\n")
        return 1
    return 0


def _handle_scan(files: list[str], config_root: Path) -> int:
    config = load_config(config_root)
    kinds = config.kind_table()
    options = config.scanner.model_dump()
    status = 0
    for name in files:
        file_path = Path(name)
        try:
            tags = ELIXIR_PARSER.scanner(file_path, name, kinds=kinds, **options)
        except OSError as exc:
            sys.stderr.write(f"{name}: {exc}\n")
            status = 1
            continue
        for tag in tags:
            sys.stdout.write(
                orjson.dumps(tag.model_dump(), option=orjson.OPT_SORT_KEYS).decode()
            )
            sys.stdout.write("\n")
    return status


def _handle_kinds(root: Path) -> int:
    config = load_config(root)
    for kind in config.kind_table():
        state = "on" if kind.enabled else "off"
        sys.stdout.write(
            f"{kind.letter}  {kind.name:<15} {kind.description} [{state}]\n"
        )
    extensions = " ".join(f".{ext}" for ext in ELIXIR_PARSER.extensions)
    sys.stdout.write(f"{ELIXIR_PARSER.name}: {extensions}\n")
    return 0


def _dispatch(args: argparse.Namespace) -> int:
    if args.command == "scan":
        return _handle_scan(args.files, Path(args.config_root).expanduser().resolve())

    root = Path(args.root).expanduser().resolve()

    if args.command == "generate":
        return _handle_generate(root, args.out_dir)

    if args.command == "validate":
        return _handle_validate(root, args.artifacts_dir)

    if args.command == "verify":
        return _handle_verify(root, args.artifacts_dir)

    if args.command == "kinds":
        return _handle_kinds(root)

    raise AssertionError


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _dispatch(args)
    except ConfigError as exc:
        sys.stderr.write(f"config error: {exc}\n")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
