from __future__ import annotations

import pytest

from parse.kinds import ELIXIR_KINDS, configure_kinds, resolve_kind
from parse.registration import ELIXIR_PARSER


def test_kind_table_letters_and_defaults() -> None:
    assert [(k.letter, k.name) for k in ELIXIR_KINDS] == [
        ("d", "macro"),
        ("f", "function"),
        ("m", "module"),
        ("r", "record"),
        ("p", "protocol"),
        ("l", "implementation"),
    ]
    assert all(k.enabled for k in ELIXIR_KINDS)


def test_configure_kinds_by_name_and_letter() -> None:
    kinds = configure_kinds({"macro": False, "l": False})

    enabled = {k.name: k.enabled for k in kinds}
    assert enabled["macro"] is False
    assert enabled["implementation"] is False
    assert enabled["function"] is True
    # The static table is untouched.
    assert all(k.enabled for k in ELIXIR_KINDS)


def test_configure_kinds_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown kind 'class'"):
        configure_kinds({"class": True})


def test_resolve_kind() -> None:
    assert resolve_kind("f") == "function"
    assert resolve_kind("protocol") == "protocol"
    assert resolve_kind("x") is None


def test_parser_registration_routes_extensions() -> None:
    assert ELIXIR_PARSER.name == "Elixir"
    assert ELIXIR_PARSER.extensions == ("ex", "exs")
    assert ELIXIR_PARSER.handles("lib/foo.ex")
    assert ELIXIR_PARSER.handles("test/test_helper.exs")
    assert not ELIXIR_PARSER.handles("mix.lock")
    assert not ELIXIR_PARSER.handles("ex")
