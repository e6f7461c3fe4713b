from __future__ import annotations

from typing import TYPE_CHECKING

from artifacts.models.artifacts.tags import TagRecord, TagScope
from parse.elixir_tags import (
    ElixirTagScanner,
    ModuleScope,
    TagEmitter,
    extract_tags,
    extract_tags_from_file,
)
from parse.kinds import configure_kinds

if TYPE_CHECKING:
    from pathlib import Path


def _scan(source: str, **kwargs: object) -> list[tuple[str, str, str | None]]:
    tags = extract_tags(source.splitlines(), "lib/sample.ex", **kwargs)  # type: ignore[arg-type]
    return [(t.kind, t.name, t.scope.name if t.scope else None) for t in tags]


def test_module_then_scoped_function() -> None:
    source = "defmodule Foo do\n  def bar(x) do\n    x + 1\n  end\nend\n"

    assert _scan(source) == [("module", "Foo", None), ("function", "bar", "Foo")]


def test_module_then_unscoped_function_when_scope_disabled() -> None:
    source = "defmodule Foo do\n  def bar(x) do\n    x + 1\n  end\nend\n"

    assert _scan(source, scope_functions=False) == [
        ("module", "Foo", None),
        ("function", "bar", None),
    ]


def test_indented_private_function() -> None:
    assert _scan("  defp helper do\nend\n") == [("function", "helper", None)]


def test_comment_line_produces_nothing() -> None:
    assert _scan("# def fake\n") == []


def test_attribute_and_indented_comment_lines_produce_nothing() -> None:
    source = '  @doc "def documented"\n\t# defmodule Hidden\n@defmacro x\n'

    assert _scan(source) == []


def test_protocol_depends_on_keyword_set() -> None:
    source = "defprotocol Enumerable do\nend\n"

    assert _scan(source) == [("protocol", "Enumerable", None)]
    assert _scan(source, keyword_set="baseline") == []


def test_impl_record_and_macro_are_never_scoped() -> None:
    source = (
        "defmodule Outer do\n"
        "  defrecord Point, x: 0\n"
        "  defmacro unless!(cond) do\n"
        "  defmacrop hidden do\n"
        "  defimpl String.Chars, for: Outer do\n"
    )

    assert _scan(source) == [
        ("module", "Outer", None),
        ("record", "Point", None),
        ("macro", "unless!", None),
        ("macro", "hidden", None),
        ("implementation", "String", None),
    ]


def test_later_module_overwrites_scope() -> None:
    source = (
        "defmodule A do\n"
        "  def one, do: 1\n"
        "  defmodule B do\n"
        "    def two, do: 2\n"
        "  end\n"
        "  def three, do: 3\n"
        "end\n"
    )

    assert _scan(source) == [
        ("module", "A", None),
        ("function", "one", "A"),
        ("module", "B", None),
        ("function", "two", "B"),
        # Leaving B is not detected.
        ("function", "three", "B"),
    ]


def test_dotted_policy_keeps_namespaced_module() -> None:
    source = "defmodule MyApp.Repo do\n  def get(id), do: id\nend\n"

    assert _scan(source, identifier_policy="dotted") == [
        ("module", "MyApp.Repo", None),
        ("function", "get", "MyApp.Repo"),
    ]
    assert _scan(source) == [("module", "MyApp", None), ("function", "get", "MyApp")]


def test_non_directive_lines_produce_nothing() -> None:
    source = (
        "import Enum\n"
        "alias Foo.Bar\n"
        "x = def_value()\n"
        "do_something()\n"
        "defdelegate size(x), to: Other\n"
        "   \n"
        "\n"
        "end\n"
    )

    assert _scan(source) == []


def test_keyword_without_name_produces_nothing() -> None:
    assert _scan("def (a) do\ndefmodule\n") == []


def test_keyword_glued_to_paren_is_not_a_directive() -> None:
    # The keyword token stops at '(' so the name is empty.
    assert _scan("def(foo)\n") == []


def test_only_first_directive_per_line() -> None:
    assert _scan("def a, do: 1; def b, do: 2\n") == [("function", "a", None)]


def test_disabled_kind_is_silent() -> None:
    kinds = configure_kinds({"function": False})
    source = "defmodule Foo do\n  def bar, do: 1\nend\n"

    assert _scan(source, kinds=kinds) == [("module", "Foo", None)]


def test_disabled_module_kind_still_tracks_scope() -> None:
    kinds = configure_kinds({"m": False})
    source = "defmodule Foo do\n  def bar, do: 1\nend\n"

    assert _scan(source, kinds=kinds) == [("function", "bar", "Foo")]


def test_records_carry_path_and_line_numbers() -> None:
    tags = extract_tags(
        ["defmodule Foo do", "", "  def bar, do: 1", "end"], "lib/foo.ex"
    )

    assert tags == [
        TagRecord(path="lib/foo.ex", name="Foo", kind="module", line=1),
        TagRecord(
            path="lib/foo.ex",
            name="bar",
            kind="function",
            line=3,
            scope=TagScope(name="Foo"),
        ),
    ]


def test_independent_scans_are_identical() -> None:
    source = "defmodule Foo do\n  def a, do: 1\n  defp b?, do: true\nend\n"

    assert extract_tags(source.splitlines(), "x.ex") == extract_tags(
        source.splitlines(), "x.ex"
    )


def test_scanner_state_is_per_instance() -> None:
    collected: list[TagRecord] = []
    first = ElixirTagScanner(TagEmitter("a.ex", collected.append))
    first.scan(["defmodule First do"])
    second = ElixirTagScanner(TagEmitter("b.ex", collected.append))
    second.scan(["def orphan, do: 1"])

    assert collected[-1].scope is None
    assert first.scope.current() == "First"


def test_module_scope_slot() -> None:
    scope = ModuleScope()
    assert scope.current() is None

    scope.on_module_directive("Foo")
    scope.on_module_directive("Bar")
    assert scope.current() == "Bar"


def test_emitter_skips_empty_name_and_attaches_scope() -> None:
    collected: list[TagRecord] = []
    emitter = TagEmitter("a.ex", collected.append)

    emitter.emit("", "function", 1)
    emitter.emit_scoped("f", "function", 2, "")
    emitter.emit_scoped("g", "function", 3, "Mod")

    assert [(t.name, t.scope) for t in collected] == [
        ("f", None),
        ("g", TagScope(kind="module", name="Mod")),
    ]


def test_extract_from_file_handles_crlf_and_bad_bytes(tmp_path: Path) -> None:
    source = tmp_path / "crlf.ex"
    source.write_bytes(
        b"defmodule Win do\r\n  def caf\xe9, do: 1\r\n  def ok, do: 2\r\nend\r\n"
    )

    tags = extract_tags_from_file(source, "crlf.ex")

    assert [(t.name, t.line) for t in tags] == [("Win", 1), ("caf", 2), ("ok", 3)]
