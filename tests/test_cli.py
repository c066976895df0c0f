from __future__ import annotations

from pathlib import Path

import pytest

from onegin_sort.cli import main, resolve_ignore_set
from onegin_sort.text import BYTE_ORDER_MARK, DEFAULT_IGNORE_SET

POEM = "act\nbat\n.cat\n"


def encode(text: str) -> bytes:
    return text.encode("utf-16-le")


def write_poem(tmp_path: Path) -> Path:
    path = tmp_path / "poem.txt"
    path.write_bytes(encode(BYTE_ORDER_MARK + POEM))
    return path


def rendering(*lines: str) -> str:
    return BYTE_ORDER_MARK + "".join(f"{line}\n" for line in lines)


def test_default_writes_all_three_renderings(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = write_poem(tmp_path)
    output = tmp_path / "out.txt"

    code = main(["-i", str(source), "--output", str(output)])

    assert code == 0
    assert output.read_bytes() == encode(
        rendering("act", "bat", ".cat")
        + rendering("bat", ".cat", "act")
        + rendering("act", "bat", ".cat")
    )
    assert f"Asked versions written to {output}" in capsys.readouterr().out


def test_selected_renderings_only(tmp_path: Path) -> None:
    source = write_poem(tmp_path)
    output = tmp_path / "out.txt"

    code = main(["-i", str(source), "-r", "--output", str(output)])

    assert code == 0
    assert output.read_bytes() == encode(rendering("bat", ".cat", "act"))


def test_original_and_sorted_keep_output_order(tmp_path: Path) -> None:
    source = tmp_path / "poem.txt"
    source.write_bytes(encode(BYTE_ORDER_MARK + "b\na\n"))
    output = tmp_path / "out.txt"

    main(["-i", str(source), "-o", "-s", "--output", str(output)])

    assert output.read_bytes() == encode(rendering("a", "b") + rendering("b", "a"))


def test_output_defaults_from_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    source = write_poem(tmp_path)
    output = tmp_path / "env-out.txt"
    monkeypatch.setenv("ONEGIN_SORT_OUTPUT", str(output))

    assert main(["-i", str(source), "-s"]) == 0
    assert output.exists()


def test_missing_input_reports_failure(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing = tmp_path / "missing.txt"

    code = main(["-i", str(missing), "--output", str(tmp_path / "out.txt")])

    assert code == 1
    assert str(missing) in capsys.readouterr().err
    assert not (tmp_path / "out.txt").exists()


def test_unwritable_output_reports_failure(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = write_poem(tmp_path)
    output = tmp_path / "no-such-dir" / "out.txt"

    code = main(["-i", str(source), "--output", str(output)])

    assert code == 1
    assert f"Unable to open file {output} for output" in capsys.readouterr().err


def test_ignore_option_changes_sort(tmp_path: Path) -> None:
    source = tmp_path / "poem.txt"
    source.write_bytes(encode("b\nxa\n"))
    output = tmp_path / "out.txt"

    main(["-i", str(source), "-s", "--ignore", "x", "--output", str(output)])

    assert output.read_bytes() == encode(rendering("xa", "b"))


def test_resolve_ignore_set_sources(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ONEGIN_SORT_IGNORE", raising=False)
    assert resolve_ignore_set(None) is DEFAULT_IGNORE_SET

    monkeypatch.setenv("ONEGIN_SORT_IGNORE", "#")
    assert "#" in resolve_ignore_set(None)
    assert "." not in resolve_ignore_set(None)
    assert "@" in resolve_ignore_set("@")
