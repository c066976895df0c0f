"""Line tables: one buffer, its current line order, and the original order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from onegin_sort.runtime import telemetry

from .codec import CODE_UNIT_BYTES, LINE_SEPARATOR, SWAPPED_BYTE_ORDER_MARK, IgnoreSet
from .compare import Direction, LessPredicate, make_less
from .errors import (
    ForeignSnapshotError,
    LoadError,
    ShortReadError,
    SizeMismatchError,
)
from .view import CodeUnitBuffer, LineView


@dataclass(frozen=True, slots=True)
class LineOrder:
    """Detached copy of a table's line order, restorable later."""

    lines: Tuple[LineView, ...]

    def __len__(self) -> int:
        return len(self.lines)

    def texts(self) -> List[str]:
        return [line.text for line in self.lines]


class _LessKey:
    """Sort key that only answers ``<``, which is all ``list.sort`` asks."""

    __slots__ = ("view", "less")

    def __init__(self, view: LineView, less: LessPredicate) -> None:
        self.view = view
        self.less = less

    def __lt__(self, other: "_LessKey") -> bool:
        return self.less(self.view, other.view)


def _trim_trailing_empty(lines: List[LineView]) -> int:
    trimmed = 0
    while lines and len(lines[-1]) == 0:
        lines.pop()
        trimmed += 1
    return trimmed


class LineTable:
    """Owns a code-unit buffer and the order its lines are rendered in."""

    def __init__(self, buffer: CodeUnitBuffer, *, name: str = "default") -> None:
        self.name = name
        self.buffer = buffer
        lines = buffer.split(LINE_SEPARATOR)
        self.trimmed = _trim_trailing_empty(lines)
        self._order: List[LineView] = lines
        self._original: Tuple[LineView, ...] = tuple(lines)

    @classmethod
    def load(
        cls,
        data: bytes,
        *,
        declared_units: Optional[int] = None,
        name: str = "default",
    ) -> "LineTable":
        """Build a table from little-endian UTF-16 bytes.

        ``declared_units`` is the size the caller expected to read; a mismatch
        with the bytes actually present fails the load. A dangling odd byte is
        dropped.
        """

        available = len(data) // CODE_UNIT_BYTES
        if declared_units is not None:
            if available < declared_units:
                raise ShortReadError(declared_units, available, path=name)
            if available > declared_units:
                raise LoadError(
                    f"{name}: {available} code units present, "
                    f"{declared_units} declared",
                    path=name,
                )
        if len(data) % CODE_UNIT_BYTES:
            telemetry.record_event(
                "table.odd_byte_dropped", level="warning", data={"table": name}
            )
            data = data[: available * CODE_UNIT_BYTES]

        with telemetry.span(
            "table::load", component="table", metadata={"table": name}
        ) as handle:
            buffer = CodeUnitBuffer.from_bytes(data)
            if buffer.units.startswith(SWAPPED_BYTE_ORDER_MARK):
                raise LoadError(
                    f"{name}: big-endian input is not supported", path=name
                )
            table = cls(buffer, name=name)
            handle.add_metadata("lines", len(table))
            handle.add_metadata("trimmed", table.trimmed)
        return table

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "LineTable":
        return cls(CodeUnitBuffer.from_text(text), name=name)

    @property
    def header(self) -> str:
        return self.buffer.header

    def __len__(self) -> int:
        return len(self._order)

    def current_order(self) -> Sequence[LineView]:
        return tuple(self._order)

    def original_order(self) -> Sequence[LineView]:
        return self._original

    def lines(self) -> List[str]:
        return [line.text for line in self._order]

    def reorder(self, less: LessPredicate) -> None:
        """Stable in-place sort driven only by the ``less`` predicate."""

        with telemetry.span(
            "table::reorder",
            component="table",
            metadata={"table": self.name, "lines": len(self._order)},
        ):
            self._order.sort(key=lambda view: _LessKey(view, less))

    def sort(
        self,
        direction: Direction = Direction.FORWARD,
        *,
        ignore: Optional[IgnoreSet] = None,
    ) -> None:
        self.reorder(make_less(direction, ignore))

    def snapshot(self) -> LineOrder:
        return LineOrder(lines=tuple(self._order))

    def restore(self, snapshot: LineOrder) -> None:
        """Reinstate a saved order; the current order is untouched on failure."""

        if len(snapshot) != len(self._order):
            telemetry.record_event(
                "table.restore_rejected",
                level="error",
                data={"table": self.name, "size": len(snapshot)},
            )
            raise SizeMismatchError(len(self._order), len(snapshot))
        if any(line.source is not self.buffer for line in snapshot.lines):
            telemetry.record_event(
                "table.restore_rejected",
                level="error",
                data={"table": self.name, "reason": "foreign buffer"},
            )
            raise ForeignSnapshotError(self.name)
        self._order[:] = snapshot.lines

    def restore_original(self) -> None:
        self._order[:] = self._original


__all__ = ["LineOrder", "LineTable"]
