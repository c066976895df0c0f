"""UI-agnostic controller that flips a line table between its renderings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from onegin_sort.text import IgnoreSet, LineOrder, LineTable, Rendering
from onegin_sort.text.render import capture_renderings


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class ViewerHooks:
    """Callbacks invoked by the browser to update Textual widgets."""

    update_lines: Callable[[Sequence[str]], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class RenderingBrowser:
    """Computes every rendering once and switches between them by restore."""

    def __init__(
        self,
        table: LineTable,
        hooks: ViewerHooks,
        *,
        ignore: Optional[IgnoreSet] = None,
    ) -> None:
        self.table = table
        self.hooks = hooks
        self._snapshots: Dict[Rendering, LineOrder] = capture_renderings(
            table, ignore=ignore
        )
        self.current = Rendering.ORIGINAL
        self._refresh()

    def show(self, rendering: Rendering | str) -> Rendering:
        target = Rendering(rendering)
        self.table.restore(self._snapshots[target])
        self.current = target
        self.hooks.log(f"show -> {target.value} lines={len(self.table)}")
        self._refresh()
        return target

    def cycle(self, step: int = 1) -> Rendering:
        order = list(Rendering)
        index = (order.index(self.current) + step) % len(order)
        return self.show(order[index])

    def _refresh(self) -> None:
        self.hooks.update_lines(self.table.lines())
        self.hooks.update_status(
            f"{self.table.name} | {self.current.value} | {len(self.table)} lines"
        )


__all__ = ["RenderingBrowser", "ViewerHooks"]
