"""Executable Textual app for browsing a table's renderings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the viewer is run
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use onegin_sort.adapters.textual.app"
    ) from exc

from onegin_sort.runtime import telemetry
from onegin_sort.text import IgnoreSet, LineTable

from .controller import RenderingBrowser, ViewerHooks


@dataclass
class UIState:
    lines_text: str = ""
    status_text: str = ""


class OneginViewerApp(App[None]):
    """Shows one rendering at a time; s/r/o pick one, tab cycles."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#lines-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("s", "show('sorted')", "Sorted"),
        ("r", "show('reversed')", "By endings"),
        ("o", "show('original')", "Original"),
        ("tab", "cycle(1)", "Next"),
        ("shift+tab", "cycle(-1)", "Previous"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self, table: LineTable, *, ignore: Optional[IgnoreSet] = None
    ) -> None:
        super().__init__()
        self._table = table
        self._ignore = ignore
        self._state = UIState()
        self.browser: RenderingBrowser | None = None
        self._lines_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="lines-area"):
            self._lines_widget = Static("", id="lines-view", markup=False)
            yield self._lines_widget
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = ViewerHooks(
            update_lines=self._update_lines,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.browser = RenderingBrowser(self._table, hooks, ignore=self._ignore)

    def action_show(self, rendering: str) -> None:
        if self.browser:
            self.browser.show(rendering)

    def action_cycle(self, step: int) -> None:
        if self.browser:
            self.browser.cycle(step)

    def _update_lines(self, lines: Sequence[str]) -> None:
        self._state.lines_text = "\n".join(lines)
        if self._lines_widget:
            self._lines_widget.update(self._state.lines_text)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        telemetry.get_logger("onegin_sort.viewer").debug(line)


def run_viewer(table: LineTable, *, ignore: Optional[IgnoreSet] = None) -> None:
    OneginViewerApp(table, ignore=ignore).run()


__all__ = ["OneginViewerApp", "run_viewer"]
