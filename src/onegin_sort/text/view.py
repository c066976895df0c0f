"""Shared code-unit buffer and the non-owning line views addressing it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .codec import (
    BYTE_ORDER_MARK,
    LINE_SEPARATOR,
    decode_units,
    units_from_text,
)


def _header_length(units: str) -> int:
    return 1 if units.startswith(BYTE_ORDER_MARK) else 0


@dataclass(frozen=True, slots=True)
class CodeUnitBuffer:
    """Immutable text storage where every character is exactly one code unit.

    ``header`` is the optional byte-order mark that preceded the body in the
    source; line views only ever address ``units[body_start:]``.
    """

    units: str
    body_start: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "CodeUnitBuffer":
        units = decode_units(data)
        return cls(units=units, body_start=_header_length(units))

    @classmethod
    def from_text(cls, text: str) -> "CodeUnitBuffer":
        units = units_from_text(text)
        return cls(units=units, body_start=_header_length(units))

    @property
    def header(self) -> str:
        return self.units[: self.body_start]

    def __len__(self) -> int:
        return len(self.units)

    def split(self, separator: str = LINE_SEPARATOR) -> List["LineView"]:
        """Cut the body into views on ``separator``; n separators give n+1 views."""

        views: List[LineView] = []
        start = self.body_start
        while True:
            end = self.units.find(separator, start)
            if end < 0:
                views.append(LineView(self, start, len(self.units) - start))
                return views
            views.append(LineView(self, start, end - start))
            start = end + 1


@dataclass(frozen=True, slots=True, eq=False)
class LineView:
    """One logical line: an ``(start, length)`` range over a shared buffer."""

    source: CodeUnitBuffer
    start: int
    length: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.length < 0:
            raise ValueError("line view bounds must be non-negative")
        if self.start + self.length > len(self.source):
            raise ValueError(
                f"line view [{self.start}, {self.start + self.length}) exceeds "
                f"buffer of {len(self.source)} code units"
            )

    @classmethod
    def of(cls, text: str) -> "LineView":
        """Build a standalone view over its own buffer; handy for ad-hoc lines."""

        units = units_from_text(text)
        return cls(CodeUnitBuffer(units=units), 0, len(units))

    @property
    def text(self) -> str:
        return self.source.units[self.start : self.start + self.length]

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index: int) -> str:
        if not 0 <= index < self.length:
            raise IndexError("line view index out of range")
        return self.source.units[self.start + index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineView):
            return NotImplemented
        return self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __repr__(self) -> str:
        return f"LineView({self.text!r}, start={self.start})"

    def reversed(self) -> "LineView":
        """Return a standalone view holding this line's units back to front."""

        units = self.text[::-1]
        return LineView(CodeUnitBuffer(units=units), 0, len(units))


__all__ = ["CodeUnitBuffer", "LineView"]
