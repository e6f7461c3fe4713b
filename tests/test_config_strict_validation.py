from __future__ import annotations

from pathlib import Path

import pytest

from rules.config import ConfigError, load_config, resolve_output_dir


def _write_config(repo_root: Path, toml_content: str) -> None:
    (repo_root / "extags.toml").write_text(toml_content, encoding="utf-8")


def test_unknown_top_level_key_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "bogus_key = true")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_unknown_scanner_key_rejected(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
[scanner]
track_end = true
""".strip(),
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_identifier_policy_rejected(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
[scanner]
identifier_policy = "unicode"
""".strip(),
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_unknown_kind_rejected_with_valid_names(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
[kinds]
class = false
""".strip(),
    )

    with pytest.raises(ConfigError, match="Valid kinds: "):
        load_config(tmp_path)


def test_invalid_toml_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "[scanner")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


def test_valid_config_accepted(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
exclude = ["deps/**"]

[scanner]
identifier_policy = "dotted"
keyword_set = "baseline"
scope_functions = false

[kinds]
macro = false
r = false
""".strip(),
    )

    config = load_config(tmp_path)

    assert config.exclude == ["deps/**"]
    assert config.scanner.identifier_policy == "dotted"
    assert config.scanner.keyword_set == "baseline"
    assert config.scanner.scope_functions is False
    enabled = {k.name: k.enabled for k in config.kind_table()}
    assert enabled == {
        "macro": False,
        "function": True,
        "module": True,
        "record": False,
        "protocol": True,
        "implementation": True,
    }


def test_empty_config_accepted(tmp_path: Path) -> None:
    _write_config(tmp_path, "")

    config = load_config(tmp_path)

    assert config.output_dir == ".extags"
    assert config.include == []
    assert config.exclude == []
    assert config.scanner.identifier_policy == "predicate"
    assert config.scanner.keyword_set == "extended"
    assert config.scanner.scope_functions is True
    assert all(k.enabled for k in config.kind_table())


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path).output_dir == ".extags"


@pytest.mark.parametrize("output_dir", ["", "~/tags", "/tmp/tags", "../outside"])
def test_resolve_output_dir_rejects_unsafe_paths(
    tmp_path: Path, output_dir: str
) -> None:
    with pytest.raises(ConfigError):
        resolve_output_dir(tmp_path, output_dir)


def test_resolve_output_dir_within_root(tmp_path: Path) -> None:
    assert resolve_output_dir(tmp_path, ".extags") == (tmp_path / ".extags").resolve()
