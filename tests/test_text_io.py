from __future__ import annotations

import io
from pathlib import Path

import pytest

from onegin_sort.text import (
    BYTE_ORDER_MARK,
    LineTable,
    LoadError,
    Renderer,
    Rendering,
    ShortReadError,
    byte_length,
    capture_renderings,
    load_file,
    read_exact,
)


def encode(text: str) -> bytes:
    return text.encode("utf-16-le")


def write_poem(tmp_path: Path, text: str, name: str = "poem.txt") -> Path:
    path = tmp_path / name
    path.write_bytes(encode(text))
    return path


def test_byte_length_reports_size_or_zero(tmp_path: Path) -> None:
    path = write_poem(tmp_path, "abc")

    assert byte_length(path) == 6
    assert byte_length(tmp_path / "missing.txt") == 0


def test_read_exact_returns_requested_units(tmp_path: Path) -> None:
    path = write_poem(tmp_path, "abcd")

    assert read_exact(path, 2) == encode("ab")


def test_read_exact_short_read(tmp_path: Path) -> None:
    path = write_poem(tmp_path, "ab")

    with pytest.raises(ShortReadError) as excinfo:
        read_exact(path, 4)

    assert excinfo.value.expected == 4
    assert excinfo.value.actual == 2
    assert excinfo.value.path == path


def test_load_file_missing_source_raises(tmp_path: Path) -> None:
    with pytest.raises(LoadError):
        load_file(tmp_path / "missing.txt")


def test_load_file_splits_and_trims(tmp_path: Path) -> None:
    path = write_poem(tmp_path, BYTE_ORDER_MARK + "beta\nalpha\n\n")

    table = load_file(path)

    assert table.header == BYTE_ORDER_MARK
    assert table.lines() == ["beta", "alpha"]
    assert table.name == str(path)


def test_render_writes_marker_then_lines_with_separators() -> None:
    table = LineTable.load(encode(BYTE_ORDER_MARK + "beta\nalpha"))

    assert Renderer().render(table) == encode(BYTE_ORDER_MARK + "beta\nalpha\n")

    table.sort()
    assert Renderer().render(table) == encode(BYTE_ORDER_MARK + "alpha\nbeta\n")


def test_render_adds_marker_when_source_had_none() -> None:
    table = LineTable.from_text("one")

    assert Renderer().render(table) == encode(BYTE_ORDER_MARK + "one\n")


def test_render_empty_table_is_marker_only() -> None:
    table = LineTable.from_text("\n")

    assert Renderer().render(table) == encode(BYTE_ORDER_MARK)


def test_emit_writes_one_full_rendering_per_call() -> None:
    table = LineTable.from_text("b\na\n")
    sink = io.BytesIO()
    renderer = Renderer()

    first = renderer.emit(table, sink)
    table.sort()
    second = renderer.emit(table, sink)

    assert first == second == len(sink.getvalue()) // 2
    assert sink.getvalue() == encode(
        BYTE_ORDER_MARK + "b\na\n" + BYTE_ORDER_MARK + "a\nb\n"
    )


def test_custom_separator_is_used() -> None:
    table = LineTable.from_text("x\ny")

    assert Renderer(separator=" ").render(table) == encode(
        BYTE_ORDER_MARK + "x y "
    )


def test_renderer_rejects_multi_unit_framing() -> None:
    with pytest.raises(ValueError):
        Renderer(separator="\r\n")


def test_rendering_round_trips_through_reload(tmp_path: Path) -> None:
    source = write_poem(tmp_path, BYTE_ORDER_MARK + "one\n\ntwo")
    table = load_file(source)
    copy = tmp_path / "copy.txt"
    copy.write_bytes(Renderer().render(table))

    reloaded = load_file(copy)

    assert reloaded.lines() == table.lines() == ["one", "", "two"]
    assert reloaded.header == BYTE_ORDER_MARK


def test_capture_renderings_leaves_table_in_original_order() -> None:
    table = LineTable.from_text("act\nbat\n.cat")

    captured = capture_renderings(table)

    assert captured[Rendering.SORTED].texts() == ["act", "bat", ".cat"]
    assert captured[Rendering.REVERSED].texts() == ["bat", ".cat", "act"]
    assert captured[Rendering.ORIGINAL].texts() == ["act", "bat", ".cat"]
    assert table.lines() == ["act", "bat", ".cat"]
