"""Code-unit primitives shared by the buffer, comparator, and renderer."""

from __future__ import annotations

import sys
from array import array
from dataclasses import dataclass
from typing import Iterable

ENCODING = "utf-16-le"
CODE_UNIT_BYTES = 2

BYTE_ORDER_MARK = "\ufeff"
SWAPPED_BYTE_ORDER_MARK = "\ufffe"
LINE_SEPARATOR = "\n"

DEFAULT_IGNORABLE = '.,!:;"?-() '


def code_unit_order(left: str, right: str) -> int:
    """Three-way order of two code units: -1, 0, or 1."""

    a, b = ord(left), ord(right)
    if a < b:
        return -1
    if a == b:
        return 0
    return 1


def decode_units(data: bytes) -> str:
    """Turn little-endian bytes into a string holding one char per code unit.

    ``bytes.decode`` would merge surrogate pairs into a single code point, so the
    units are unpacked one by one and kept as lone surrogates where they occur.
    """

    if len(data) % CODE_UNIT_BYTES:
        raise ValueError("byte count is not a multiple of the code unit width")
    units = array("H", data)
    if sys.byteorder == "big":
        units.byteswap()
    return "".join(map(chr, units))


def encode_units(text: str) -> bytes:
    return text.encode(ENCODING, "surrogatepass")


def units_from_text(text: str) -> str:
    """Split astral characters of a Python string into their surrogate units."""

    return decode_units(encode_units(text))


@dataclass(frozen=True, slots=True)
class IgnoreSet:
    """Fixed alphabet of characters skipped during comparison."""

    members: frozenset[str]

    @classmethod
    def of(cls, chars: Iterable[str]) -> "IgnoreSet":
        return cls(members=frozenset(chars))

    def is_ignorable(self, unit: str) -> bool:
        return unit in self.members

    def __contains__(self, unit: object) -> bool:
        return unit in self.members


DEFAULT_IGNORE_SET = IgnoreSet.of(DEFAULT_IGNORABLE)

__all__ = [
    "BYTE_ORDER_MARK",
    "CODE_UNIT_BYTES",
    "DEFAULT_IGNORABLE",
    "DEFAULT_IGNORE_SET",
    "ENCODING",
    "IgnoreSet",
    "LINE_SEPARATOR",
    "SWAPPED_BYTE_ORDER_MARK",
    "code_unit_order",
    "decode_units",
    "encode_units",
    "units_from_text",
]
