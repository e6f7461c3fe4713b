from __future__ import annotations

import pytest

from parse.directives import classify_directive


@pytest.mark.parametrize(
    ("keyword", "kind"),
    [
        ("def", "function"),
        ("defp", "function"),
        ("defmacro", "macro"),
        ("defmacrop", "macro"),
        ("defrecord", "record"),
        ("defmodule", "module"),
        ("defprotocol", "protocol"),
        ("defimpl", "implementation"),
    ],
)
def test_extended_keywords(keyword: str, kind: str) -> None:
    assert classify_directive(keyword, "extended") == kind


def test_baseline_drops_protocol_and_impl() -> None:
    assert classify_directive("defprotocol", "baseline") is None
    assert classify_directive("defimpl", "baseline") is None
    assert classify_directive("defmodule", "baseline") == "module"


@pytest.mark.parametrize(
    "keyword", ["", "de", "define", "defmodules", "Def", "DEFMODULE", "defdelegate"]
)
def test_no_prefix_or_case_insensitive_matches(keyword: str) -> None:
    assert classify_directive(keyword) is None
