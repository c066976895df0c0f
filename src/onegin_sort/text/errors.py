"""Exceptions raised by line tables and their loaders."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class LoadError(RuntimeError):
    """Raised when a source cannot be read into a line table."""

    def __init__(self, message: str, *, path: Optional[PathLike] = None) -> None:
        super().__init__(message)
        self.path = path


class ShortReadError(LoadError):
    """Raised when fewer code units are available than were declared."""

    def __init__(
        self,
        expected: int,
        actual: int,
        *,
        path: Optional[PathLike] = None,
    ) -> None:
        where = f" from {path}" if path is not None else ""
        super().__init__(
            f"Short read{where}: expected {expected} code units, got {actual}",
            path=path,
        )
        self.expected = expected
        self.actual = actual


class SizeMismatchError(RuntimeError):
    """Raised when a snapshot is restored into a table of another size."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Snapshot holds {actual} lines but the table has {expected}"
        )
        self.expected = expected
        self.actual = actual


class ForeignSnapshotError(RuntimeError):
    """Raised when a snapshot holds lines from another table's buffer."""

    def __init__(self, table: str) -> None:
        super().__init__(f"Snapshot was not taken from table {table!r}")
        self.table = table


__all__ = [
    "ForeignSnapshotError",
    "LoadError",
    "ShortReadError",
    "SizeMismatchError",
]
