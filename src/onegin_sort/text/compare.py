"""Directional line comparison that skips ignorable punctuation.

A single scan routine serves both directions: ``Direction`` carries the signed
step and the starting offset, so forward and backward ordering cannot drift
apart. The scan compares only significant code units and, once either side
runs out, decides by exhaustion: the left line is less exactly when it ran out
of significant units while the right one still has some.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from functools import partial
from typing import Callable, Optional

from .codec import DEFAULT_IGNORE_SET, IgnoreSet, code_unit_order
from .view import LineView

LessPredicate = Callable[[LineView, LineView], bool]


class Direction(Enum):
    FORWARD = 1
    BACKWARD = -1

    @property
    def step(self) -> int:
        return self.value

    def origin(self, length: int) -> int:
        """Offset of the first unit visited in a view of ``length`` units."""

        return 0 if self is Direction.FORWARD else length - 1


class Ordering(IntEnum):
    """Three-way comparison result; ``GREATER`` covers every "not less" case."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class _Cursor:
    __slots__ = ("view", "offset", "step", "taken")

    def __init__(self, view: LineView, direction: Direction) -> None:
        self.view = view
        self.offset = direction.origin(len(view))
        self.step = direction.step
        self.taken = 0

    @property
    def exhausted(self) -> bool:
        return self.taken >= len(self.view)

    @property
    def unit(self) -> str:
        return self.view[self.offset]

    def advance(self) -> None:
        self.offset += self.step
        self.taken += 1

    def skip(self, ignore: IgnoreSet) -> None:
        while not self.exhausted and self.unit in ignore:
            self.advance()


def directional_compare(
    lhs: LineView,
    rhs: LineView,
    direction: Direction = Direction.FORWARD,
    *,
    ignore: IgnoreSet = DEFAULT_IGNORE_SET,
) -> Ordering:
    left = _Cursor(lhs, direction)
    right = _Cursor(rhs, direction)

    while not left.exhausted and not right.exhausted:
        if left.unit in ignore:
            left.advance()
            continue
        if right.unit in ignore:
            right.advance()
            continue

        order = code_unit_order(left.unit, right.unit)
        left.advance()
        right.advance()
        if order < 0:
            return Ordering.LESS
        if order > 0:
            return Ordering.GREATER

    left.skip(ignore)
    right.skip(ignore)

    if left.exhausted and not right.exhausted:
        return Ordering.LESS
    if left.exhausted and right.exhausted:
        return Ordering.EQUAL
    return Ordering.GREATER


def _is_less(
    lhs: LineView,
    rhs: LineView,
    *,
    direction: Direction,
    ignore: IgnoreSet,
) -> bool:
    return directional_compare(lhs, rhs, direction, ignore=ignore) is Ordering.LESS


def make_less(
    direction: Direction = Direction.FORWARD,
    ignore: Optional[IgnoreSet] = None,
) -> LessPredicate:
    """Build a two-argument "less than" predicate for ``LineTable.reorder``."""

    return partial(
        _is_less,
        direction=direction,
        ignore=ignore if ignore is not None else DEFAULT_IGNORE_SET,
    )


def forward_less(lhs: LineView, rhs: LineView) -> bool:
    return _is_less(lhs, rhs, direction=Direction.FORWARD, ignore=DEFAULT_IGNORE_SET)


def backward_less(lhs: LineView, rhs: LineView) -> bool:
    """Compare from the line ends, i.e. order lines by their endings."""

    return _is_less(lhs, rhs, direction=Direction.BACKWARD, ignore=DEFAULT_IGNORE_SET)


__all__ = [
    "Direction",
    "LessPredicate",
    "Ordering",
    "backward_less",
    "directional_compare",
    "forward_less",
    "make_less",
]
