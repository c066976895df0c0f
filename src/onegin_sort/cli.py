"""Command line entry point: write the requested renderings of a text file."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from onegin_sort.runtime import telemetry
from onegin_sort.text import (
    DEFAULT_IGNORE_SET,
    IgnoreSet,
    LineTable,
    LoadError,
    Renderer,
    Rendering,
    arrange,
    load_file,
)

DEFAULT_OUTPUT = "output.txt"


def requested_renderings(args: argparse.Namespace) -> List[Rendering]:
    """Renderings in output order; all of them when none was asked for."""

    flags = {
        Rendering.SORTED: args.sorted,
        Rendering.REVERSED: args.rev,
        Rendering.ORIGINAL: args.original,
    }
    chosen = [rendering for rendering, wanted in flags.items() if wanted]
    return chosen or list(Rendering)


def resolve_ignore_set(raw: Optional[str]) -> IgnoreSet:
    value = raw if raw is not None else telemetry.env("IGNORE")
    if value is None:
        return DEFAULT_IGNORE_SET
    return IgnoreSet.of(value)


def write_renderings(
    table: LineTable,
    path: str,
    renderings: Sequence[Rendering],
    *,
    ignore: IgnoreSet = DEFAULT_IGNORE_SET,
    renderer: Optional[Renderer] = None,
) -> int:
    renderer = renderer or Renderer()
    written = 0
    with open(path, "wb") as sink:
        for rendering in renderings:
            arrange(table, rendering, ignore=ignore)
            written += renderer.emit(table, sink)
    return written


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="onegin-sort",
        description=(
            "Sort the lines of a UTF-16 text forward and by their endings, "
            "skipping punctuation."
        ),
    )
    parser.add_argument("-i", "--input", required=True, help="UTF-16 LE source file")
    parser.add_argument(
        "-s", "--sorted", action="store_true", help="Write the sorted rendering"
    )
    parser.add_argument(
        "-r",
        "--rev",
        action="store_true",
        help="Write the rendering sorted by line endings",
    )
    parser.add_argument(
        "-o", "--original", action="store_true", help="Write the original order"
    )
    parser.add_argument(
        "--output",
        default=telemetry.env("OUTPUT", DEFAULT_OUTPUT),
        help=f"Destination file (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--ignore",
        default=None,
        help="Characters skipped while comparing (default: .,!:;\"?-() and space)",
    )
    parser.add_argument(
        "--view",
        action="store_true",
        help="Browse the renderings in a terminal UI instead of writing them",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    ignore = resolve_ignore_set(args.ignore)

    try:
        table = load_file(args.input)
    except LoadError as exc:
        print(exc, file=sys.stderr)
        return 1

    if args.view:  # pragma: no cover - interactive
        from onegin_sort.adapters.textual.app import run_viewer

        run_viewer(table, ignore=ignore)
        return 0

    output = args.output
    renderings = requested_renderings(args)
    try:
        written = write_renderings(table, output, renderings, ignore=ignore)
    except OSError as exc:
        telemetry.record_event(
            "cli.output_failed",
            level="error",
            data={"output": output, "reason": str(exc)},
        )
        print(f"Unable to open file {output} for output: {exc}", file=sys.stderr)
        return 1
    telemetry.record_event(
        "cli.written",
        data={
            "output": output,
            "bytes": written,
            "renderings": [rendering.value for rendering in renderings],
        },
    )
    print(f"Asked versions written to {output}")
    return 0


__all__ = ["main", "requested_renderings", "resolve_ignore_set", "write_renderings"]
