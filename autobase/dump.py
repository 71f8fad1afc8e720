"""Print the baseline and MinMax content of a font's BASE table."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from . import base_table
from . import console as cs
from . import errors
from . import font_io
from . import validation


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="autobase-dump", description="Dump a font's BASE table"
    )
    parser.add_argument("font_path", type=Path, help="Font to inspect")
    args = parser.parse_args(argv)

    try:
        font = font_io._read_ttfont(str(args.font_path))
    except errors.FontReadError as exc:
        cs.status("error", str(exc))
        return 2
    try:
        if "BASE" not in font:
            cs.status("error", f"{args.font_path.name} has no BASE table")
            return 1
        horizontal, vertical = base_table.read_base_table(font)
    finally:
        font.close()

    out = Console(highlight=False)
    validation.report_entries("Horizontal", horizontal, out)
    validation.report_entries("Vertical", vertical, out)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
