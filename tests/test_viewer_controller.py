from __future__ import annotations

from typing import List, Sequence

import pytest

from onegin_sort.adapters.textual import RenderingBrowser, ViewerHooks
from onegin_sort.text import IgnoreSet, LineTable, Rendering


def make_browser(
    text: str = "act\nbat\n.cat\n", **kwargs
) -> tuple[RenderingBrowser, List[List[str]], List[str]]:
    pages: List[List[str]] = []
    statuses: List[str] = []

    def update_lines(lines: Sequence[str]) -> None:
        pages.append(list(lines))

    hooks = ViewerHooks(update_lines=update_lines, update_status=statuses.append)
    browser = RenderingBrowser(LineTable.from_text(text, name="poem"), hooks, **kwargs)
    return browser, pages, statuses


def test_browser_starts_on_original_order() -> None:
    browser, pages, statuses = make_browser()

    assert browser.current is Rendering.ORIGINAL
    assert pages[-1] == ["act", "bat", ".cat"]
    assert statuses[-1] == "poem | original | 3 lines"


def test_browser_shows_requested_rendering() -> None:
    browser, pages, statuses = make_browser()

    browser.show("reversed")

    assert browser.current is Rendering.REVERSED
    assert pages[-1] == ["bat", ".cat", "act"]
    assert "reversed" in statuses[-1]


def test_browser_cycles_in_both_directions() -> None:
    browser, pages, _ = make_browser("b\na\n")

    assert browser.cycle() is Rendering.SORTED
    assert pages[-1] == ["a", "b"]
    assert browser.cycle(-1) is Rendering.ORIGINAL
    assert browser.cycle(-1) is Rendering.REVERSED


def test_browser_uses_custom_ignore_set() -> None:
    browser, pages, _ = make_browser("b\nxa\n", ignore=IgnoreSet.of("x"))

    browser.show(Rendering.SORTED)

    assert pages[-1] == ["xa", "b"]


def test_browser_rejects_unknown_rendering() -> None:
    browser, _, _ = make_browser()

    with pytest.raises(ValueError):
        browser.show("shuffled")
    assert browser.current is Rendering.ORIGINAL


def test_browser_logs_switches() -> None:
    lines: List[str] = []
    hooks = ViewerHooks(update_lines=lambda _lines: None, log=lines.append)
    browser = RenderingBrowser(LineTable.from_text("b\na"), hooks)

    browser.show(Rendering.SORTED)

    assert lines == ["show -> sorted lines=2"]
