"""Serialize a line table's current order back to UTF-16 bytes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Dict, Iterator, Optional

from onegin_sort.runtime import telemetry

from .codec import BYTE_ORDER_MARK, LINE_SEPARATOR, IgnoreSet, encode_units
from .compare import Direction
from .table import LineOrder, LineTable


@dataclass(frozen=True, slots=True)
class Renderer:
    """Writes one rendering per call: a marker unit, then each line + separator.

    The marker is the table's own header when it has one, ``marker`` otherwise.
    """

    marker: str = BYTE_ORDER_MARK
    separator: str = LINE_SEPARATOR

    def __post_init__(self) -> None:
        if len(self.marker) != 1 or len(self.separator) != 1:
            raise ValueError("marker and separator must be single code units")

    def chunks(self, table: LineTable) -> Iterator[bytes]:
        yield encode_units(table.header or self.marker)
        separator = encode_units(self.separator)
        for line in table.current_order():
            yield encode_units(line.text)
            yield separator

    def render(self, table: LineTable) -> bytes:
        return b"".join(self.chunks(table))

    def emit(self, table: LineTable, sink: BinaryIO) -> int:
        """Write the full rendering to ``sink`` and return the byte count."""

        written = 0
        with telemetry.span(
            "render::emit",
            component="renderer",
            metadata={"table": table.name, "lines": len(table)},
        ):
            for chunk in self.chunks(table):
                sink.write(chunk)
                written += len(chunk)
        return written


class Rendering(str, Enum):
    """The three line orders a table can be rendered in."""

    SORTED = "sorted"
    REVERSED = "reversed"
    ORIGINAL = "original"


def arrange(
    table: LineTable, rendering: Rendering, *, ignore: Optional[IgnoreSet] = None
) -> None:
    """Put ``table`` into the line order ``rendering`` asks for."""

    if rendering is Rendering.SORTED:
        table.sort(Direction.FORWARD, ignore=ignore)
    elif rendering is Rendering.REVERSED:
        table.sort(Direction.BACKWARD, ignore=ignore)
    else:
        table.restore_original()


def capture_renderings(
    table: LineTable, *, ignore: Optional[IgnoreSet] = None
) -> Dict[Rendering, LineOrder]:
    """Sort once per rendering and keep each result as a snapshot.

    The table is left in its original order.
    """

    captured: Dict[Rendering, LineOrder] = {}
    for rendering in Rendering:
        arrange(table, rendering, ignore=ignore)
        captured[rendering] = table.snapshot()
    return captured


__all__ = ["Renderer", "Rendering", "arrange", "capture_renderings"]
