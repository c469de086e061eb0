"""--debug resolution trace to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from xc.pattern import UNBOUNDED, Resolution


def dump_resolution(
    result: Resolution, input_size: int, quota: int, *, file: TextIO = sys.stderr
) -> None:
    """Print a human-readable summary of *result* to *file*."""
    limit = "unbounded" if quota == UNBOUNDED else str(quota)
    file.write(f"Input {input_size} bytes, limit {limit}\n")
    _dump_classes(result, file)
    _dump_literals(result, file)
    file.write(f"Output {len(result.output)} bytes\n")


def _describe(b: int) -> str:
    if 0x21 <= b <= 0x7E:
        return repr(chr(b))
    return f"0x{b:02X}"


def _dump_classes(result: Resolution, f: TextIO) -> None:
    if not result.classes:
        f.write("  Classes: none\n")
        return
    f.write(f"  Classes: {' '.join(result.classes)}\n")
    f.write(f"    removed {result.class_removed}\n")


def _dump_literals(result: Resolution, f: TextIO) -> None:
    if not result.literals:
        f.write("  Literals: none\n")
        return
    f.write("  Literals:\n")
    for b in result.literals:
        f.write(f"    {_describe(b)} removed {result.literal_removed.get(b, 0)}\n")
