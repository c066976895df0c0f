"""File access for line tables."""

from __future__ import annotations

import os

from onegin_sort.runtime import telemetry

from .codec import CODE_UNIT_BYTES
from .errors import LoadError, PathLike, ShortReadError
from .table import LineTable


def byte_length(path: PathLike) -> int:
    """Size of ``path`` in bytes, or 0 when it cannot be stat'ed."""

    try:
        return os.stat(path).st_size
    except OSError:
        return 0


def read_exact(path: PathLike, capacity_units: int) -> bytes:
    """Read exactly ``capacity_units`` code units from ``path``."""

    wanted = capacity_units * CODE_UNIT_BYTES
    try:
        with open(path, "rb") as source:
            data = source.read(wanted)
    except OSError as exc:
        raise LoadError(f"Unable to read file: {path}", path=path) from exc
    if len(data) < wanted:
        raise ShortReadError(capacity_units, len(data) // CODE_UNIT_BYTES, path=path)
    return data


def load_file(path: PathLike) -> LineTable:
    units = byte_length(path) // CODE_UNIT_BYTES
    try:
        data = read_exact(path, units)
        return LineTable.load(data, declared_units=units, name=os.fspath(path))
    except LoadError as exc:
        telemetry.record_event(
            "loader.failed", level="error", data={"path": path, "reason": str(exc)}
        )
        raise


__all__ = ["byte_length", "load_file", "read_exact"]
